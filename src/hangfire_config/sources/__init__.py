"""Sources package — providers and the layered configuration factory."""

from __future__ import annotations

import logging

from hangfire_config.config.settings import Settings, get_settings
from hangfire_config.core.configuration import Configuration
from hangfire_config.sources.base import ConfigurationSource
from hangfire_config.sources.env_source import DotEnvSource, EnvironmentSource
from hangfire_config.sources.json_source import JsonFileSource
from hangfire_config.sources.mapping_source import MappingSource

logger = logging.getLogger(__name__)

__all__ = [
    "ConfigurationSource",
    "DotEnvSource",
    "EnvironmentSource",
    "JsonFileSource",
    "MappingSource",
    "build_configuration",
]


def build_configuration(settings: Settings | None = None) -> Configuration:
    """Layer the providers selected by *settings* into one configuration.

    Order is JSON file, then ``.env`` file, then process environment; later
    layers override earlier keys.
    """
    settings = settings or get_settings()
    sources: list[ConfigurationSource] = []

    if settings.config_file:
        sources.append(
            JsonFileSource(settings.config_file, optional=settings.config_file_optional)
        )
    if settings.env_file:
        sources.append(
            DotEnvSource(
                settings.env_file,
                prefix=settings.env_prefix,
                delimiter=settings.env_nested_delimiter,
            )
        )
    if settings.include_environment:
        sources.append(
            EnvironmentSource(
                prefix=settings.env_prefix,
                delimiter=settings.env_nested_delimiter,
            )
        )

    logger.info("Building configuration from %d sources", len(sources))
    return Configuration.from_sources(sources)
