"""
Unit tests for the logging configuration helpers.
"""

import logging

import pytest

from docformat.utils.logging_config import LogConfig, LogLevel, get_logger, log_performance


class TestLogConfig:
    """Test cases for environment-driven settings."""

    @pytest.mark.parametrize("value, expected", [
        ("debug", logging.DEBUG),
        ("WARN", logging.WARNING),
        ("fatal", logging.CRITICAL),
        ("nonsense", logging.INFO),
    ])
    def test_level_from_string(self, value, expected):
        assert LogLevel.from_string(value) == expected

    def test_level_defaults_to_warning_under_pytest(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("LOGLEVEL", raising=False)
        assert LogConfig.get_log_level() == logging.WARNING

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "error")
        assert LogConfig.get_log_level() == logging.ERROR

    @pytest.mark.parametrize("value, expected", [
        ("dev", LogConfig.DEV_FORMAT),
        ("json", LogConfig.JSON_FORMAT),
        ("standard", LogConfig.DEFAULT_FORMAT),
    ])
    def test_format_from_environment(self, monkeypatch, value, expected):
        monkeypatch.setenv("LOG_FORMAT", value)
        assert LogConfig.get_log_format() == expected

    def test_log_file_settings(self, monkeypatch, tmp_path):
        monkeypatch.setenv("LOG_TO_FILE", "yes")
        monkeypatch.setenv("LOG_FILE", str(tmp_path / "format.log"))
        assert LogConfig.should_log_to_file() is True
        assert LogConfig.get_log_file_path() == tmp_path / "format.log"


class TestLoggers:
    """Test cases for logger lookup and the timing decorator."""

    def test_module_logger_uses_caller_name(self):
        assert get_logger().name == __name__

    def test_named_logger_is_cached(self):
        assert get_logger("docformat.test") is get_logger("docformat.test")

    def test_log_performance(self, caplog):
        logger = get_logger("docformat.test.timing")

        @log_performance(logger, level=logging.WARNING)
        def stage(value):
            return value * 2

        with caplog.at_level(logging.WARNING, logger="docformat.test.timing"):
            assert stage(21) == 42

        assert "Starting stage" in caplog.text
        assert "Completed stage" in caplog.text

    def test_log_performance_reraises(self, caplog):
        logger = get_logger("docformat.test.timing")

        @log_performance(logger, level=logging.WARNING)
        def stage():
            raise ValueError("broken")

        with caplog.at_level(logging.WARNING, logger="docformat.test.timing"):
            with pytest.raises(ValueError):
                stage()

        assert "Failed stage" in caplog.text
