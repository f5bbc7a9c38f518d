"""Pydantic-based settings describing where configuration is read from.

Every field maps to a ``HANGFIRE_CONFIG_*`` env var (or ``.env`` entry).
These settings only choose the providers that ``build_configuration``
layers; the options themselves come from the resulting configuration.

Usage::

    from hangfire_config.config import get_settings
    settings = get_settings()
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hangfire_config.config.defaults import DEFAULT_CONFIG_FILE, ENV_NESTED_DELIMITER


class Settings(BaseSettings):
    """Provider selection for the hosting process."""

    model_config = SettingsConfigDict(
        env_prefix="HANGFIRE_CONFIG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        env_ignore_empty=True,
    )

    # -- JSON file ----------------------------------------------------------
    config_file: str = DEFAULT_CONFIG_FILE
    config_file_optional: bool = True

    # -- .env file ----------------------------------------------------------
    env_file: str = ""

    # -- Process environment ------------------------------------------------
    include_environment: bool = True
    env_prefix: str = ""
    env_nested_delimiter: str = ENV_NESTED_DELIMITER

    @field_validator("env_nested_delimiter")
    @classmethod
    def reject_empty_delimiter(cls, value: str) -> str:
        """An empty delimiter would split every character."""
        if not value:
            raise ValueError("env_nested_delimiter must not be empty")
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached singleton Settings instance.

    Call ``get_settings.cache_clear()`` in tests to reset.
    """
    return Settings()
