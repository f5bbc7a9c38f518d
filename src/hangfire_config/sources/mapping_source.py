"""In-memory provider for nested mappings."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from hangfire_config.core.configuration import flatten


class MappingSource:
    """Flatten a nested mapping such as ``{"Hangfire": {"Server": {...}}}``."""

    def __init__(self, data: Mapping[str, Any]) -> None:
        self._data = data

    def load(self) -> dict[str, str | None]:
        return flatten(self._data)

    def __repr__(self) -> str:
        return f"MappingSource({len(self._data)} top-level keys)"
