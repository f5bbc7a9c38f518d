"""hangfire-config — read Hangfire dashboard and server options from configuration."""

from hangfire_config.core import (
    Configuration,
    DashboardOptions,
    ServerOptions,
    bind,
    get_dashboard_options,
    get_server_options,
    load_options,
)
from hangfire_config.errors import InvalidArgumentError
from hangfire_config.sources import build_configuration

__all__ = [
    "Configuration",
    "DashboardOptions",
    "InvalidArgumentError",
    "ServerOptions",
    "bind",
    "build_configuration",
    "get_dashboard_options",
    "get_server_options",
    "load_options",
]
