"""Core option loading: configuration tree, binding and the loaders."""

from hangfire_config.core.binder import bind
from hangfire_config.core.configuration import Configuration
from hangfire_config.core.loader import (
    get_dashboard_options,
    get_server_options,
    load_options,
)
from hangfire_config.core.options import DashboardOptions, ServerOptions

__all__ = [
    "Configuration",
    "DashboardOptions",
    "ServerOptions",
    "bind",
    "get_dashboard_options",
    "get_server_options",
    "load_options",
]
