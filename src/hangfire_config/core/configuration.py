"""Hierarchical key/value configuration with section navigation.

Values live in one flat table of colon-delimited keys
(``Hangfire:Server:Queues:0``). A ``Configuration`` is a view on that table
rooted at a path: the root has an empty path, every section returned by
``get_section`` shares the same table. Keys compare case-insensitively.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import TYPE_CHECKING, Any

from hangfire_config.config.defaults import KEY_DELIMITER

if TYPE_CHECKING:
    from hangfire_config.sources.base import ConfigurationSource

logger = logging.getLogger(__name__)

ConfigData = Mapping[str, str | None] | Iterable[tuple[str, str | None]]


class Configuration:
    """Read-only view over a flat configuration table."""

    def __init__(self, data: ConfigData | Mapping[str, Any] | None = None) -> None:
        pairs = data.items() if isinstance(data, Mapping) else (data or ())
        self._values: dict[str, str | None] = {}
        self._keys: dict[str, str] = {}
        for entry_key, entry_value in pairs:
            # Nested mappings and sequences are accepted alongside flat keys.
            for key, value in flatten({entry_key: entry_value}).items():
                folded = key.casefold()
                # Later entries win; the first spelling seen is kept for display.
                self._keys.setdefault(folded, key)
                self._values[folded] = value
        self._path = ""

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Configuration:
        """Build a configuration from a nested mapping (e.g. parsed JSON)."""
        return cls(flatten(data))

    @classmethod
    def from_sources(cls, sources: Iterable[ConfigurationSource]) -> Configuration:
        """Merge providers in order; later providers override earlier keys."""
        pairs: list[tuple[str, str | None]] = []
        for source in sources:
            loaded = source.load()
            logger.debug("Loaded %d keys from %r", len(loaded), source)
            pairs.extend(loaded.items())
        return cls(pairs)

    def _child(self, name: str) -> Configuration:
        section = object.__new__(type(self))
        section._values = self._values
        section._keys = self._keys
        # Empty segments are kept so a child never shares its parent's path.
        section._path = f"{self._path}{KEY_DELIMITER}{name}" if self._path else name
        return section

    # ------------------------------------------------------------------
    # Section view
    # ------------------------------------------------------------------

    @property
    def path(self) -> str:
        """Full path of this section; empty for the root."""
        return self._path

    @property
    def key(self) -> str:
        """Last segment of ``path``."""
        return self._path.rsplit(KEY_DELIMITER, 1)[-1]

    @property
    def value(self) -> str | None:
        """Text stored at exactly this path, if any."""
        if not self._path:
            return None
        return self._values.get(self._path.casefold())

    def exists(self) -> bool:
        """True when anything is stored at or below this path."""
        if not self._path:
            return bool(self._values)
        folded = self._path.casefold()
        if folded in self._values:
            return True
        prefix = folded + KEY_DELIMITER
        return any(key.startswith(prefix) for key in self._values)

    def get_section(self, key: str) -> Configuration | None:
        """Return the child section at *key*, or ``None`` when it is absent.

        *key* may itself contain ``:`` to descend several levels at once.
        """
        if not key:
            return None
        section = self._child(key)
        return section if section.exists() else None

    def get_children(self) -> list[Configuration]:
        """Immediate child sections, numeric keys first in numeric order."""
        depth = len(self._path.split(KEY_DELIMITER)) if self._path else 0
        prefix = self._path.casefold() + KEY_DELIMITER if self._path else ""
        names: dict[str, str] = {}
        for folded, original in self._keys.items():
            if not folded.startswith(prefix):
                continue
            segments = original.split(KEY_DELIMITER)
            if len(segments) <= depth:
                continue
            if not segments[depth] and not self._path:
                # An empty first segment would name the root itself.
                continue
            names.setdefault(segments[depth].casefold(), segments[depth])
        return [self._child(name) for name in sorted(names.values(), key=_child_sort_key)]

    def get(self, key: str, default: str | None = None) -> str | None:
        """Value at the relative *key*, or *default* when nothing is stored."""
        section = self.get_section(key)
        value = section.value if section is not None else None
        return default if value is None else value

    def __getitem__(self, key: str) -> str | None:
        section = self.get_section(key)
        if section is None:
            raise KeyError(key)
        return section.value

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get_section(key) is not None

    def __iter__(self) -> Iterator[Configuration]:
        return iter(self.get_children())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self._path!r})"


def join_path(*segments: str) -> str:
    """Join non-empty path segments with ``:``."""
    return KEY_DELIMITER.join(segment for segment in segments if segment)


def flatten(data: Mapping[str, Any], prefix: str = "") -> dict[str, str | None]:
    """Flatten nested mappings and sequences into colon-delimited keys.

    Sequences become index-keyed children; booleans are written as
    ``"true"``/``"false"``; ``None`` is kept as ``None``.
    """
    flat: dict[str, str | None] = {}
    for key, value in data.items():
        path = join_path(prefix, str(key))
        if isinstance(value, Mapping):
            flat.update(flatten(value, path))
        elif isinstance(value, (list, tuple)):
            flat.update(flatten({str(i): item for i, item in enumerate(value)}, path))
        else:
            flat[path] = _to_text(value)
    return flat


def _to_text(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _child_sort_key(name: str) -> tuple[int, int, str]:
    if name.isdecimal():
        return (0, int(name), "")
    return (1, 0, name.casefold())
