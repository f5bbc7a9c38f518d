"""Environment variable providers.

Variable names map to keys by stripping an optional prefix and replacing
the nested delimiter with ``:`` — ``HANGFIRE__SERVER__WORKERCOUNT=5`` becomes
``HANGFIRE:SERVER:WORKERCOUNT``. Key lookups are case-insensitive, so the
upper-case spelling still binds to ``Hangfire:Server:WorkerCount``.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from dotenv import dotenv_values

from hangfire_config.config.defaults import ENV_NESTED_DELIMITER, KEY_DELIMITER

logger = logging.getLogger(__name__)


def translate_env(
    variables: Mapping[str, str | None],
    *,
    prefix: str = "",
    delimiter: str = ENV_NESTED_DELIMITER,
) -> dict[str, str | None]:
    """Filter *variables* by *prefix* and convert names to config keys."""
    prefix_folded = prefix.casefold()
    translated: dict[str, str | None] = {}
    for name, value in variables.items():
        if not name.casefold().startswith(prefix_folded):
            continue
        key = name[len(prefix):].replace(delimiter, KEY_DELIMITER)
        if key:
            translated[key] = value
    return translated


class EnvironmentSource:
    """Read process environment variables (or an explicit mapping)."""

    def __init__(
        self,
        prefix: str = "",
        delimiter: str = ENV_NESTED_DELIMITER,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._prefix = prefix
        self._delimiter = delimiter
        self._environ = environ

    def load(self) -> dict[str, str | None]:
        environ = os.environ if self._environ is None else self._environ
        return translate_env(environ, prefix=self._prefix, delimiter=self._delimiter)

    def __repr__(self) -> str:
        return f"EnvironmentSource(prefix={self._prefix!r})"


class DotEnvSource:
    """Read a ``.env`` file with the same name translation as the environment."""

    def __init__(
        self,
        path: str | Path,
        prefix: str = "",
        delimiter: str = ENV_NESTED_DELIMITER,
        *,
        optional: bool = True,
    ) -> None:
        self._path = Path(path)
        self._prefix = prefix
        self._delimiter = delimiter
        self._optional = optional

    def load(self) -> dict[str, str | None]:
        if not self._path.exists():
            if self._optional:
                logger.info("Optional .env file not found: %s", self._path)
                return {}
            raise FileNotFoundError(f".env file not found: {self._path}")

        values = dotenv_values(self._path, encoding="utf-8")
        logger.info("Loaded %d variables from %s", len(values), self._path)
        return translate_env(values, prefix=self._prefix, delimiter=self._delimiter)

    def __repr__(self) -> str:
        return f"DotEnvSource({str(self._path)!r})"
