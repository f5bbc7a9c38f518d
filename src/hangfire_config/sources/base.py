"""Configuration source protocol — the contract all providers implement."""

from __future__ import annotations

from typing import Protocol


class ConfigurationSource(Protocol):
    """Protocol for configuration providers (JSON file, environment, etc.)."""

    def load(self) -> dict[str, str | None]:
        """Return a flat table of colon-delimited keys to text values."""
        ...
