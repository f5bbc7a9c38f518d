"""Tests for the config layer (defaults + settings)."""

from __future__ import annotations

from datetime import timedelta

import pytest

from hangfire_config.config import defaults
from hangfire_config.config.defaults import (
    DEFAULT_DASHBOARD_SUB_SECTION_NAME,
    DEFAULT_QUEUE,
    DEFAULT_SECTION_NAME,
    DEFAULT_SERVER_SUB_SECTION_NAME,
    MAX_DEFAULT_WORKER_COUNT,
    default_worker_count,
)
from hangfire_config.config.settings import Settings, get_settings
from hangfire_config.core.options import DashboardOptions, ServerOptions


# ===================================================================
# defaults.py
# ===================================================================


class TestDefaults:
    """Verify built-in defaults have expected values."""

    def test_section_names(self) -> None:
        assert DEFAULT_SECTION_NAME == "Hangfire"
        assert DEFAULT_DASHBOARD_SUB_SECTION_NAME == "Dashboard"
        assert DEFAULT_SERVER_SUB_SECTION_NAME == "Server"

    def test_default_queue(self) -> None:
        assert DEFAULT_QUEUE == "default"

    def test_worker_count_capped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(defaults.os, "cpu_count", lambda: 64)
        assert default_worker_count() == MAX_DEFAULT_WORKER_COUNT

    def test_worker_count_scales_with_cpus(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(defaults.os, "cpu_count", lambda: 2)
        assert default_worker_count() == 10

    def test_worker_count_unknown_cpus(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(defaults.os, "cpu_count", lambda: None)
        assert default_worker_count() == 5


# ===================================================================
# Option model defaults
# ===================================================================


class TestOptionDefaults:
    """Default-constructed option objects."""

    def test_dashboard_defaults(self) -> None:
        options = DashboardOptions()
        assert options.app_path == "/"
        assert options.stats_polling_interval == 2000
        assert options.dashboard_title == "Hangfire Dashboard"
        assert options.display_storage_connection_string is True

    def test_server_defaults(self) -> None:
        options = ServerOptions()
        assert options.server_name is None
        assert options.queues == ["default"]
        assert 1 <= options.worker_count <= MAX_DEFAULT_WORKER_COUNT
        assert options.shutdown_timeout == timedelta(seconds=15)
        assert options.stop_timeout == timedelta(0)
        assert options.server_timeout == timedelta(minutes=5)

    def test_queue_lists_not_shared(self) -> None:
        first = ServerOptions()
        first.queues.append("extra")
        assert ServerOptions().queues == ["default"]

    def test_aliases_are_pascal_case(self) -> None:
        dumped = ServerOptions(server_name="s").model_dump(by_alias=True)
        assert dumped["ServerName"] == "s"
        assert "Queues" in dumped
        assert "WorkerCount" in dumped

    def test_populate_by_alias(self) -> None:
        assert DashboardOptions(AppPath="/x").app_path == "/x"


# ===================================================================
# settings.py — loading from env
# ===================================================================


class TestSettingsFromEnv:
    """Settings correctly load from HANGFIRE_CONFIG_* variables."""

    def test_defaults(self) -> None:
        s = Settings(_env_file=None)
        assert s.config_file == "appsettings.json"
        assert s.config_file_optional is True
        assert s.env_file == ""
        assert s.include_environment is True
        assert s.env_prefix == ""
        assert s.env_nested_delimiter == "__"

    def test_loads_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HANGFIRE_CONFIG_CONFIG_FILE", "conf/app.json")
        monkeypatch.setenv("HANGFIRE_CONFIG_ENV_PREFIX", "MYAPP_")
        monkeypatch.setenv("HANGFIRE_CONFIG_INCLUDE_ENVIRONMENT", "false")
        s = Settings(_env_file=None)
        assert s.config_file == "conf/app.json"
        assert s.env_prefix == "MYAPP_"
        assert s.include_environment is False

    def test_env_names_case_insensitive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("hangfire_config_env_file", "local.env")
        assert Settings(_env_file=None).env_file == "local.env"

    def test_empty_env_value_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HANGFIRE_CONFIG_ENV_NESTED_DELIMITER", "")
        assert Settings(_env_file=None).env_nested_delimiter == "__"

    def test_empty_delimiter_rejected(self) -> None:
        with pytest.raises(Exception):  # noqa: B017 — ValidationError
            Settings(_env_file=None, env_nested_delimiter="")

    def test_reads_dotenv_file(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("HANGFIRE_CONFIG_CONFIG_FILE=from-dotenv.json\n", encoding="utf-8")
        assert Settings(_env_file=env_file).config_file == "from-dotenv.json"


# ===================================================================
# Singleton (get_settings)
# ===================================================================


class TestGetSettingsSingleton:
    """The get_settings() function should return a cached singleton."""

    def test_same_instance_returned(self) -> None:
        get_settings.cache_clear()
        s1 = get_settings()
        s2 = get_settings()
        assert s1 is s2
        get_settings.cache_clear()

    def test_cache_clear_creates_new_instance(self) -> None:
        get_settings.cache_clear()
        s1 = get_settings()
        get_settings.cache_clear()
        s2 = get_settings()
        assert s1 is not s2
        get_settings.cache_clear()
