# ABOUTME: Tests for logging configuration module
# ABOUTME: Validates dual-mode logging setup, third-party suppression and structlog forwarding

import logging
import os
from pathlib import Path
from unittest.mock import patch

import structlog
from loguru import logger

from lexicon_harvest.utils.logging import get_logger
from lexicon_harvest.utils.logging.config import (
    WARNING_LOGGERS,
    InterceptHandler,
    LoggingMode,
    configure_logging,
    detect_logging_mode,
    get_logging_status,
)


def _reset_logging():
    for logger_name in ["", *WARNING_LOGGERS, "py.warnings"]:
        std_logger = logging.getLogger(logger_name)
        std_logger.handlers.clear()
        std_logger.setLevel(logging.NOTSET)
    logging.captureWarnings(False)
    structlog.reset_defaults()
    logger.remove()


class TestLoggingMode:
    """Test the LoggingMode constants."""

    def test_logging_mode_constants(self):
        assert LoggingMode.INTERACTIVE == "interactive"
        assert LoggingMode.PRODUCTION == "production"


class TestDetectLoggingMode:
    """Test logging mode detection logic."""

    def test_detect_mode_from_env_production(self):
        with patch.dict(os.environ, {"LEXICON_HARVEST_LOG_MODE": "production"}):
            assert detect_logging_mode() == LoggingMode.PRODUCTION

    def test_detect_mode_from_env_is_case_insensitive(self):
        with patch.dict(os.environ, {"LEXICON_HARVEST_LOG_MODE": "Interactive"}):
            assert detect_logging_mode() == LoggingMode.INTERACTIVE

    def test_detect_mode_from_env_invalid(self):
        """Test fallback to TTY detection when the environment value is unknown."""
        with (
            patch.dict(os.environ, {"LEXICON_HARVEST_LOG_MODE": "invalid"}),
            patch("sys.stdout.isatty", return_value=True),
        ):
            assert detect_logging_mode() == LoggingMode.INTERACTIVE

    def test_detect_mode_from_tty_production(self):
        with patch.dict(os.environ, {}, clear=True), patch("sys.stdout.isatty", return_value=False):
            assert detect_logging_mode() == LoggingMode.PRODUCTION


class TestConfigureLogging:
    """Test logging configuration functionality."""

    def teardown_method(self):
        _reset_logging()

    def test_configure_interactive_mode(self):
        configure_logging(mode=LoggingMode.INTERACTIVE, log_level="INFO")

        assert Path("logs").exists()
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_interactive_mode_writes_log_files(self):
        configure_logging(mode=LoggingMode.INTERACTIVE, log_level="INFO")

        get_logger("lexicon_harvest.tests").info("Harvest started", count=3)
        logger.remove()

        assert "Harvest started" in Path("logs/lexicon-harvest.log").read_text(encoding="utf-8")
        assert Path("logs/lexicon-harvest.json").exists()

    def test_configure_custom_log_file(self, tmp_path):
        custom_log_file = tmp_path / "custom.log"

        configure_logging(mode=LoggingMode.INTERACTIVE, log_level="INFO", log_file=str(custom_log_file))
        get_logger("lexicon_harvest.tests").warning("Custom destination")
        logger.remove()

        assert "Custom destination" in custom_log_file.read_text(encoding="utf-8")

    def test_configure_production_mode(self):
        configure_logging(mode=LoggingMode.PRODUCTION, log_level="INFO")

        assert not Path("logs").exists()
        assert logging.getLogger("httpcore").level == logging.WARNING

    def test_configure_custom_log_level(self):
        configure_logging(mode=LoggingMode.PRODUCTION, log_level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_warnings_captured(self):
        configure_logging(mode=LoggingMode.PRODUCTION)

        assert logging.getLogger("py.warnings").level == logging.ERROR


class TestInterceptHandler:
    """Test forwarding of structlog events into loguru."""

    def teardown_method(self):
        _reset_logging()

    def test_structlog_event_reaches_loguru(self):
        configure_logging(mode=LoggingMode.PRODUCTION, log_level="INFO")
        messages = []
        logger.add(messages.append, format="{message}")

        get_logger("lexicon_harvest.tests").info("hello", word="gato")

        assert any("event='hello'" in message and "word='gato'" in message for message in messages)

    def test_level_filtering(self):
        configure_logging(mode=LoggingMode.PRODUCTION, log_level="WARNING")
        messages = []
        logger.add(messages.append, format="{message}")

        get_logger("lexicon_harvest.tests").info("too quiet")

        assert messages == []

    def test_stdlib_records_are_forwarded(self):
        logging.getLogger().handlers = [InterceptHandler()]
        logging.getLogger().setLevel(logging.INFO)
        records = []
        logger.add(lambda message: records.append(message.record), format="{message}")

        logging.getLogger("lexicon_harvest.tests").warning("plain %s", "record")

        assert records[0]["message"] == "plain record"
        assert records[0]["level"].name == "WARNING"
        assert records[0]["extra"]["logger_name"] == "lexicon_harvest.tests"


class TestGetLoggingStatus:
    """Test logging status reporting."""

    def test_get_status_interactive_mode(self):
        with patch("lexicon_harvest.utils.logging.config.detect_logging_mode") as mock_detect:
            mock_detect.return_value = LoggingMode.INTERACTIVE
            Path("logs").mkdir()

            status = get_logging_status()

            assert status["mode"] == LoggingMode.INTERACTIVE
            assert status["log_directory"] is not None
            assert set(status["log_files"]) == {"main", "json", "errors"}
            assert "httpx" in status["third_party_suppressed"]

    def test_get_status_production_mode(self):
        with patch("lexicon_harvest.utils.logging.config.detect_logging_mode") as mock_detect:
            mock_detect.return_value = LoggingMode.PRODUCTION

            status = get_logging_status()

            assert status["mode"] == LoggingMode.PRODUCTION
            assert status["log_directory"] is None
            assert all(path is None for path in status["log_files"].values())
