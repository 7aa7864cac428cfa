"""Tests for settings and logging configuration"""
import logging

import pytest
import structlog
from pydantic import ValidationError

from doc_prototypes import LogFormat, Settings, configure_logging, get_settings


class TestSettings:
    """Tests for Settings"""

    def test_defaults(self):
        settings = Settings()

        assert settings.log_level == "INFO"
        assert settings.log_format == LogFormat.CONSOLE
        assert settings.load_default_catalog is True

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("DOC_PROTOTYPES_LOG_LEVEL", "debug")
        monkeypatch.setenv("DOC_PROTOTYPES_LOG_FORMAT", "json")
        monkeypatch.setenv("DOC_PROTOTYPES_LOAD_DEFAULT_CATALOG", "0")

        settings = Settings()

        assert settings.log_level == "DEBUG"
        assert settings.log_level_value == logging.DEBUG
        assert settings.log_format == LogFormat.JSON
        assert settings.load_default_catalog is False

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestConfigureLogging:
    """Tests for configure_logging"""

    def teardown_method(self):
        structlog.reset_defaults()

    def test_json_renderer(self):
        configure_logging(Settings(log_format="json"))

        processors = structlog.get_config()["processors"]

        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_renderer(self):
        configure_logging(Settings(log_format="console", log_level="WARNING"))

        processors = structlog.get_config()["processors"]

        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
