"""
Unit Tests for Logging Configuration
====================================

Tests for the stdlib logging dictionary and structlog logger factory.
"""

import json
import logging

import structlog

from positronic.config.logging import get_logger, get_logging_config
from positronic.config.settings import Settings


def build_formatter(config, name):
    """Instantiate a formatter the way logging.config.dictConfig does."""
    formatter_config = dict(config["formatters"][name])
    factory = formatter_config.pop("()")
    return factory(**formatter_config)


def make_record(name="uvicorn.error", message="Application startup complete."):
    return logging.LogRecord(name, logging.INFO, __file__, 1, message, None, None)


class TestLoggingConfig:
    """Test logging configuration per environment."""

    def test_testing_environment_logs_to_console_only(self, tmp_path):
        """Test the testing environment skips file handlers."""
        config = get_logging_config(Settings(environment="testing", storage_path=tmp_path))

        assert config["loggers"][""]["handlers"] == ["console"]
        assert config["handlers"]["console"]["formatter"] == "console"

    def test_production_uses_json_console_and_files(self, tmp_path):
        """Test production logs JSON to the console and writes log files."""
        config = get_logging_config(Settings(environment="production", storage_path=tmp_path))

        assert config["handlers"]["console"]["formatter"] == "json"
        assert config["handlers"]["file"]["formatter"] == "json"
        assert config["loggers"][""]["handlers"] == ["console", "file", "error_file"]
        assert config["handlers"]["file"]["filename"] == str(tmp_path / "logs" / "app.log")
        assert config["handlers"]["error_file"]["level"] == "ERROR"

    def test_development_files_are_plain(self, tmp_path):
        """Test log files never receive ANSI colour codes."""
        config = get_logging_config(Settings(environment="development", storage_path=tmp_path))

        assert config["handlers"]["file"]["formatter"] == "plain"
        assert config["handlers"]["error_file"]["formatter"] == "plain"

    def test_log_level_is_applied(self, tmp_path):
        """Test the configured level reaches handlers and the root logger."""
        config = get_logging_config(Settings(log_level="warning", storage_path=tmp_path))

        assert config["handlers"]["console"]["level"] == "WARNING"
        assert config["loggers"][""]["level"] == "WARNING"

    def test_formatters_are_processor_formatters(self, tmp_path):
        """Test every formatter is rendered by structlog."""
        config = get_logging_config(Settings(storage_path=tmp_path))

        for name in ("console", "plain", "json"):
            assert config["formatters"][name]["()"] is structlog.stdlib.ProcessorFormatter


class TestForeignRecordRendering:
    """Test stdlib records (uvicorn, fastapi) are rendered a single time."""

    def test_plain_formatter_renders_once(self, tmp_path):
        config = get_logging_config(Settings(storage_path=tmp_path))
        formatter = build_formatter(config, "plain")

        output = formatter.format(make_record())

        assert output.count("Application startup complete.") == 1
        assert "uvicorn.error" in output
        assert "\x1b[" not in output
        assert "[INFO]" not in output

    def test_json_formatter_emits_one_json_object(self, tmp_path):
        config = get_logging_config(Settings(environment="production", storage_path=tmp_path))
        formatter = build_formatter(config, "json")

        data = json.loads(formatter.format(make_record()))

        assert data["event"] == "Application startup complete."
        assert data["logger"] == "uvicorn.error"
        assert data["level"] == "info"
        assert "timestamp" in data


class TestGetLogger:
    """Test the structured logger factory."""

    def test_get_logger(self):
        """Test structured loggers expose the standard methods."""
        logger = get_logger("positronic.tests")

        assert hasattr(logger, "info")
        assert hasattr(logger, "error")
        assert hasattr(logger, "bind")
