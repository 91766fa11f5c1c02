"""
Unit Tests for Centralized Logging.

Tests the logging configuration loading, overrides and handler setup.
"""

import logging
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def _reset(clear_config_cache, monkeypatch):
    """Start every test with empty caches and no env overrides."""
    monkeypatch.delenv("TODONOTES_LOG_LEVEL", raising=False)
    monkeypatch.delenv("TODONOTES_LOG_FORMAT", raising=False)
    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        if handler not in saved_handlers:
            handler.close()
    for handler in saved_handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(saved_level)


@pytest.fixture
def mock_logging_config():
    """A complete logging configuration."""
    return {
        "level": "INFO",
        "format": "json",
        "handlers": {
            "console": {"enabled": True},
            "file": {
                "enabled": False,
                "path": "logs/system.jsonl",
                "max_bytes": 10485760,
                "backup_count": 5,
            },
        },
    }


class TestLoggingConfigLoading:
    """Tests for logging configuration loading from YAML."""

    def test_load_logging_config_reads_yaml_file(self, mock_logging_config):
        """Should load configuration from logging.yaml."""
        from todonotes.core import logging as logging_module

        with patch("todonotes.core.logging.load_yaml_config", return_value=mock_logging_config) as mock_load:
            config = logging_module._load_logging_config()

        mock_load.assert_called_once_with("logging.yaml")
        assert config["handlers"]["file"]["backup_count"] == 5

    def test_config_is_cached(self, mock_logging_config):
        """Should cache the configuration after first load."""
        from todonotes.core import logging as logging_module

        with patch("todonotes.core.logging.load_yaml_config", return_value=mock_logging_config) as mock_load:
            first = logging_module._load_logging_config()
            second = logging_module._load_logging_config()

        assert first is second
        mock_load.assert_called_once()

    def test_load_logging_config_raises_if_file_missing(self):
        """Should raise FileNotFoundError if logging.yaml doesn't exist."""
        from todonotes.core import logging as logging_module

        with patch(
            "todonotes.core.logging.load_yaml_config",
            side_effect=FileNotFoundError("Configuration file not found: logging.yaml"),
        ):
            with pytest.raises(FileNotFoundError, match="logging.yaml"):
                logging_module._load_logging_config()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_uses_config_defaults(self, mock_logging_config):
        """Should use values from logging.yaml when not overridden."""
        from todonotes.core.logging import setup_logging

        with patch("todonotes.core.logging._load_logging_config", return_value=mock_logging_config):
            setup_logging()

        assert logging.getLogger().level == logging.INFO

    def test_argument_overrides_config(self, mock_logging_config):
        """Explicit parameters should override config values."""
        from todonotes.core.logging import setup_logging

        with patch("todonotes.core.logging._load_logging_config", return_value=mock_logging_config):
            setup_logging(level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_environment_overrides_config(self, mock_logging_config, monkeypatch):
        """TODONOTES_LOG_LEVEL should override logging.yaml."""
        from todonotes.core.logging import setup_logging

        monkeypatch.setenv("TODONOTES_LOG_LEVEL", "warning")

        with patch("todonotes.core.logging._load_logging_config", return_value=mock_logging_config):
            setup_logging()

        assert logging.getLogger().level == logging.WARNING

    def test_console_handler(self, mock_logging_config):
        """Should install a single stream handler."""
        from todonotes.core.logging import setup_logging

        with patch("todonotes.core.logging._load_logging_config", return_value=mock_logging_config):
            setup_logging(format_type="console")

        handler_types = [type(h).__name__ for h in logging.getLogger().handlers]
        assert handler_types == ["StreamHandler"]

    def test_console_disabled(self, mock_logging_config):
        from todonotes.core.logging import setup_logging

        with patch("todonotes.core.logging._load_logging_config", return_value=mock_logging_config):
            setup_logging(enable_console=False)

        assert logging.getLogger().handlers == []

    def test_file_logging_enabled(self, tmp_path, mock_logging_config):
        """Should create a RotatingFileHandler for the JSONL file."""
        from todonotes.core.logging import setup_logging

        log_file = tmp_path / "logs" / "system.jsonl"

        with patch("todonotes.core.logging._load_logging_config", return_value=mock_logging_config), \
             patch("todonotes.core.logging._resolve_log_path", return_value=log_file):
            setup_logging(enable_console=False, enable_file_logging=True)

        handler_types = [type(h).__name__ for h in logging.getLogger().handlers]
        assert handler_types == ["RotatingFileHandler"]
        assert log_file.parent.is_dir()


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger_returns_structlog_logger(self):
        """Should return a structlog logger."""
        from todonotes.core.logging import get_logger

        logger = get_logger("test.module")
        assert hasattr(logger, "bind")
        assert hasattr(logger, "info")
        assert hasattr(logger, "debug")
