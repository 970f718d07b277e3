"""Settings and logging configuration tests."""

import logging

import structlog

from issue_engine.config import Settings, get_settings, reset_settings
from issue_engine.logging_config import setup_logging
from issue_engine.tracker import GroupBy, SortDirection, SortField


class TestSettings:
    """Environment-driven settings."""

    def test_defaults(self):
        settings = Settings()
        assert settings.log_level == "INFO"
        assert settings.log_format == "console"
        assert settings.snapshot_path == "issues.json"
        assert settings.default_sort_field == SortField.CREATED
        assert settings.default_sort_direction == SortDirection.DESC
        assert settings.default_group_by == GroupBy.NONE

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("ISSUE_ENGINE_LOG_FORMAT", "json")
        monkeypatch.setenv("ISSUE_ENGINE_DEFAULT_SORT_FIELD", "priority")
        settings = Settings()
        assert settings.log_format == "json"
        assert settings.default_sort_field == SortField.PRIORITY

    def test_get_settings_is_cached_until_reset(self, monkeypatch):
        first = get_settings()
        assert get_settings() is first
        monkeypatch.setenv("ISSUE_ENGINE_LOG_LEVEL", "DEBUG")
        reset_settings()
        assert get_settings().log_level == "DEBUG"


class TestLogging:
    """setup_logging configures structlog over stdlib logging."""

    def test_level_applied(self):
        setup_logging(level="warning", json_logs=True)
        assert logging.getLogger().level == logging.WARNING
        assert structlog.is_configured()

    def test_defaults_from_settings(self, monkeypatch):
        monkeypatch.setenv("ISSUE_ENGINE_LOG_LEVEL", "DEBUG")
        setup_logging()
        assert logging.getLogger().level == logging.DEBUG
