"""Default constants for hangfire-config.

Section names, key delimiters and the built-in option values used when a
configuration source says nothing about a field.
"""

from __future__ import annotations

import os
from datetime import timedelta

# ---------------------------------------------------------------------------
# Section paths
# Options are looked up at <section>:<sub-section>, e.g. Hangfire:Server.
# ---------------------------------------------------------------------------
DEFAULT_SECTION_NAME: str = "Hangfire"
DEFAULT_DASHBOARD_SUB_SECTION_NAME: str = "Dashboard"
DEFAULT_SERVER_SUB_SECTION_NAME: str = "Server"

# ---------------------------------------------------------------------------
# Key layout
# Flat keys join path segments with ":"; environment variable names use "__"
# because ":" is not portable there.
# ---------------------------------------------------------------------------
KEY_DELIMITER: str = ":"
ENV_NESTED_DELIMITER: str = "__"
DEFAULT_CONFIG_FILE: str = "appsettings.json"

# ---------------------------------------------------------------------------
# Dashboard defaults
# ---------------------------------------------------------------------------
DEFAULT_APP_PATH: str = "/"
DEFAULT_DASHBOARD_TITLE: str = "Hangfire Dashboard"
DEFAULT_STATS_POLLING_INTERVAL_MS: int = 2000

# ---------------------------------------------------------------------------
# Server defaults
# ---------------------------------------------------------------------------
DEFAULT_QUEUE: str = "default"
MAX_DEFAULT_WORKER_COUNT: int = 20
WORKERS_PER_PROCESSOR: int = 5

DEFAULT_SHUTDOWN_TIMEOUT: timedelta = timedelta(seconds=15)
DEFAULT_STOP_TIMEOUT: timedelta = timedelta(0)
DEFAULT_SCHEDULE_POLLING_INTERVAL: timedelta = timedelta(seconds=15)
DEFAULT_HEARTBEAT_INTERVAL: timedelta = timedelta(seconds=30)
DEFAULT_SERVER_CHECK_INTERVAL: timedelta = timedelta(minutes=5)
DEFAULT_SERVER_TIMEOUT: timedelta = timedelta(minutes=5)
DEFAULT_CANCELLATION_CHECK_INTERVAL: timedelta = timedelta(seconds=5)


def default_worker_count() -> int:
    """Five workers per processor, capped at ``MAX_DEFAULT_WORKER_COUNT``."""
    return min((os.cpu_count() or 1) * WORKERS_PER_PROCESSOR, MAX_DEFAULT_WORKER_COUNT)
