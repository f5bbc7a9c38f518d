"""Option models populated from configuration.

Attributes are snake_case; aliases are the PascalCase names used in
configuration files (``AppPath``, ``ServerName``, ``Queues``). Assignment is
validated, so the binder can set fields one at a time and keep the previous
value when a configured value does not convert.
"""

from __future__ import annotations

from datetime import timedelta

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_pascal

from hangfire_config.config.defaults import (
    DEFAULT_APP_PATH,
    DEFAULT_CANCELLATION_CHECK_INTERVAL,
    DEFAULT_DASHBOARD_TITLE,
    DEFAULT_HEARTBEAT_INTERVAL,
    DEFAULT_QUEUE,
    DEFAULT_SCHEDULE_POLLING_INTERVAL,
    DEFAULT_SERVER_CHECK_INTERVAL,
    DEFAULT_SERVER_TIMEOUT,
    DEFAULT_SHUTDOWN_TIMEOUT,
    DEFAULT_STATS_POLLING_INTERVAL_MS,
    DEFAULT_STOP_TIMEOUT,
    default_worker_count,
)
from hangfire_config.utils.text_utils import split_csv
from hangfire_config.utils.time_utils import parse_timespan

_OPTIONS_CONFIG = ConfigDict(
    alias_generator=to_pascal,
    populate_by_name=True,
    validate_assignment=True,
    extra="ignore",
)


class DashboardOptions(BaseModel):
    """Settings for the job-monitoring dashboard."""

    model_config = _OPTIONS_CONFIG

    app_path: str | None = DEFAULT_APP_PATH
    prefix_path: str = ""
    stats_polling_interval: int = Field(default=DEFAULT_STATS_POLLING_INTERVAL_MS, gt=0)
    display_storage_connection_string: bool = True
    dashboard_title: str = DEFAULT_DASHBOARD_TITLE
    ignore_antiforgery_token: bool = False
    dark_mode_enabled: bool = True


class ServerOptions(BaseModel):
    """Settings for a background job server process."""

    model_config = _OPTIONS_CONFIG

    # -- Identity -----------------------------------------------------------
    server_name: str | None = None
    is_lightweight_server: bool = False

    # -- Work ---------------------------------------------------------------
    queues: list[str] = Field(default_factory=lambda: [DEFAULT_QUEUE], min_length=1)
    worker_count: int = Field(default_factory=default_worker_count, gt=0)

    # -- Timing -------------------------------------------------------------
    shutdown_timeout: timedelta = DEFAULT_SHUTDOWN_TIMEOUT
    stop_timeout: timedelta = DEFAULT_STOP_TIMEOUT
    schedule_polling_interval: timedelta = DEFAULT_SCHEDULE_POLLING_INTERVAL
    heartbeat_interval: timedelta = DEFAULT_HEARTBEAT_INTERVAL
    server_check_interval: timedelta = DEFAULT_SERVER_CHECK_INTERVAL
    server_timeout: timedelta = DEFAULT_SERVER_TIMEOUT
    cancellation_check_interval: timedelta = DEFAULT_CANCELLATION_CHECK_INTERVAL

    @field_validator("queues", mode="before")
    @classmethod
    def split_queue_list(cls, value: object) -> object:
        """Accept ``"critical, default"`` as well as a list of names."""
        if isinstance(value, str):
            return split_csv(value)
        return value

    @field_validator(
        "shutdown_timeout",
        "stop_timeout",
        "schedule_polling_interval",
        "heartbeat_interval",
        "server_check_interval",
        "server_timeout",
        "cancellation_check_interval",
        mode="before",
    )
    @classmethod
    def parse_durations(cls, value: object) -> object:
        """Accept plain seconds and ``d.HH:MM:SS`` text."""
        return parse_timespan(value)
