"""Configuration module — package constants and ENV-driven settings."""

from hangfire_config.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
