"""Tests for structured logging functionality."""

import json
import logging
import sys

import pytest

from auth0kit.utils.logging_utils import (
    ColoredFormatter,
    DetailedFormatter,
    StructuredFormatter,
    configure_default_logging,
    configure_from_env,
    configure_from_yaml,
    default_yaml_path,
    get_logger,
    setup_logging,
)


def _record(msg="Test message", level=logging.INFO):
    return logging.LogRecord(
        name="auth0kit.test",
        level=level,
        pathname="test.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestStructuredFormatter:
    """Test structured JSON formatter."""

    def test_basic_formatting(self):
        log_data = json.loads(StructuredFormatter().format(_record()))

        assert log_data["level"] == "INFO"
        assert log_data["logger"] == "auth0kit.test"
        assert log_data["message"] == "Test message"
        assert log_data["line"] == 42
        assert "timestamp" in log_data

    def test_request_context_fields(self):
        """Request extras end up as JSON keys."""
        record = _record()
        record.method = "GET"
        record.endpoint = "/users"
        record.status_code = 200
        record.duration = 0.123
        record.attempt = 0

        log_data = json.loads(StructuredFormatter().format(record))

        assert log_data["method"] == "GET"
        assert log_data["endpoint"] == "/users"
        assert log_data["status_code"] == 200
        assert log_data["duration"] == 0.123
        assert log_data["attempt"] == 0

    def test_exception_info(self):
        try:
            raise ValueError("bad")
        except ValueError:
            record = logging.LogRecord(
                "auth0kit", logging.ERROR, "t.py", 1, "failed", (), sys.exc_info()
            )

        log_data = json.loads(StructuredFormatter().format(record))
        assert "ValueError: bad" in log_data["exception"]


class TestDetailedFormatter:
    """Test detailed formatter with context."""

    def test_without_context(self):
        formatter = DetailedFormatter(fmt="%(levelname)s - %(message)s")
        assert formatter.format(_record()) == "INFO - Test message"

    def test_with_context(self):
        formatter = DetailedFormatter(fmt="%(levelname)s - %(message)s")
        record = _record()
        record.operation = "get_token"
        record.status_code = 429
        record.duration = 1.5

        assert formatter.format(record) == (
            "INFO - Test message [op=get_token, status=429, duration=1.500s]"
        )


class TestColoredFormatter:
    def test_disabled_colors(self):
        formatter = ColoredFormatter(fmt="%(levelname)s %(message)s", disable_colors=True)
        assert formatter.format(_record()) == "INFO Test message"


class TestLoggerSetup:
    """Test logger configuration helpers."""

    def test_get_logger_namespace(self):
        assert get_logger("auth0kit.core.http_client").name == "auth0kit.core.http_client"
        assert get_logger("scripts.sync").name == "auth0kit.scripts.sync"

    def test_setup_logging_json_with_file(self, tmp_path):
        log_file = tmp_path / "logs" / "auth0kit.log"

        logger = setup_logging(level="DEBUG", log_file=str(log_file), log_format="json")
        get_logger("auth0kit.test").debug("written", extra={"operation": "test"})
        for handler in logger.handlers:
            handler.flush()

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2
        entry = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert entry["message"] == "written"
        assert entry["operation"] == "test"

        for handler in logger.handlers:
            handler.close()

    def test_configure_from_env(self, monkeypatch):
        monkeypatch.setenv("AUTH0KIT_LOG_LEVEL", "WARNING")
        monkeypatch.setenv("AUTH0KIT_LOG_FORMAT", "detailed")
        monkeypatch.delenv("AUTH0KIT_LOG_FILE", raising=False)

        logger = configure_from_env()

        assert logger.level == logging.WARNING
        assert isinstance(logger.handlers[0].formatter, DetailedFormatter)

    def test_bundled_yaml(self):
        logger = configure_from_yaml(default_yaml_path())

        assert logger.name == "auth0kit"
        assert logger.level == logging.INFO
        assert isinstance(logger.handlers[0].formatter, ColoredFormatter)

    def test_default_logging_prefers_env(self, monkeypatch):
        monkeypatch.setenv("AUTH0KIT_LOG_FORMAT", "json")

        logger = configure_default_logging()

        assert isinstance(logger.handlers[0].formatter, StructuredFormatter)

    def test_yaml_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            configure_from_yaml(tmp_path / "missing.yaml")

    def test_yaml_invalid(self, tmp_path):
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("version: 1\nhandlers:\n  h:\n    class: no.such.Handler\n")

        with pytest.raises(ValueError, match="Invalid logging configuration"):
            configure_from_yaml(config_file)
