"""Shared pytest fixtures for hangfire-config tests."""

from __future__ import annotations

import os
from typing import Generator

import pytest

from hangfire_config.config.settings import Settings, get_settings
from hangfire_config.core.configuration import Configuration


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop any real ``HANGFIRE_CONFIG_*`` variables so they never leak in."""
    for name in list(os.environ):
        if name.upper().startswith("HANGFIRE_CONFIG_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def settings(tmp_path) -> Generator[Settings, None, None]:
    """Return fresh ``Settings`` pointing at files under ``tmp_path``.

    The process environment is excluded so tests see only their own files.
    Clears the ``get_settings`` LRU cache before and after the test.
    """
    get_settings.cache_clear()
    yield Settings(
        _env_file=None,
        config_file=str(tmp_path / "appsettings.json"),
        include_environment=False,
    )
    get_settings.cache_clear()


@pytest.fixture()
def hangfire_configuration() -> Configuration:
    """A configuration holding both a dashboard and a server section."""
    return Configuration(
        {
            "Hangfire:Dashboard:AppPath": "/jobs",
            "Hangfire:Dashboard:DashboardTitle": "Jobs",
            "Hangfire:Dashboard:StatsPollingInterval": "5000",
            "Hangfire:Server:ServerName": "worker-1",
            "Hangfire:Server:WorkerCount": "4",
            "Hangfire:Server:Queues:0": "default",
            "Hangfire:Server:Queues:1": "critical",
            "Hangfire:Server:Queues:2": "reports",
            "Hangfire:Server:HeartbeatInterval": "00:01:00",
        }
    )
