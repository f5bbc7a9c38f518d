"""JSON file provider — the ``appsettings.json`` convention."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from hangfire_config.core.configuration import flatten

logger = logging.getLogger(__name__)


class JsonFileSource:
    """Read a JSON object from disk and flatten it.

    A missing file yields no keys when ``optional`` is true and raises
    ``FileNotFoundError`` otherwise. Malformed JSON always raises.
    """

    def __init__(self, path: str | Path, *, optional: bool = True) -> None:
        self._path = Path(path)
        self._optional = optional

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, str | None]:
        if not self._path.exists():
            if self._optional:
                logger.info("Optional config file not found: %s", self._path)
                return {}
            raise FileNotFoundError(f"Config file not found: {self._path}")

        with self._path.open("r", encoding="utf-8-sig") as f:
            document = json.load(f)

        if not isinstance(document, dict):
            raise ValueError(
                f"Config file {self._path} must contain a JSON object, "
                f"got {type(document).__name__}"
            )

        flat = flatten(document)
        logger.info("Loaded %d keys from %s", len(flat), self._path)
        return flat

    def __repr__(self) -> str:
        return f"JsonFileSource({str(self._path)!r})"
