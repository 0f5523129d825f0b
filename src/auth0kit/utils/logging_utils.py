"""Structured logging utilities for the auth0kit SDK.

The library itself only attaches a ``NullHandler`` to the ``auth0kit``
logger. Applications (and the bundled CLI) call :func:`setup_logging`,
:func:`configure_from_env` or :func:`configure_from_yaml` to get output.

Request logging passes its context through ``extra=``; the formatters below
know how to render those fields.
"""

import json
import logging
import logging.config
import os
import sys
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import yaml

ROOT_LOGGER_NAME = "auth0kit"

CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Extra fields copied from log records into structured output, with the
# short label DetailedFormatter uses for each
CONTEXT_FIELDS = (
    "operation",
    "endpoint",
    "method",
    "status_code",
    "duration",
    "attempt",
    "error_code",
)
CONTEXT_LABELS = {
    "operation": "op",
    "method": "method",
    "endpoint": "endpoint",
    "status_code": "status",
    "attempt": "attempt",
    "duration": "duration",
}

LEVEL_COLORS = {
    "DEBUG": "\033[36m",
    "INFO": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
}
RESET_COLOR = "\033[0m"


def request_context(record: logging.LogRecord) -> dict[str, Any]:
    """Return the request context fields present on a record."""
    return {
        name: getattr(record, name) for name in CONTEXT_FIELDS if hasattr(record, name)
    }


class ColoredFormatter(logging.Formatter):
    """Console formatter that colors the level name on a TTY."""

    def __init__(self, *args: Any, disable_colors: bool = False, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.disable_colors = disable_colors

    def _use_colors(self) -> bool:
        if self.disable_colors:
            return False
        isatty = getattr(sys.stderr, "isatty", None)
        return bool(isatty and isatty())

    def format(self, record: logging.LogRecord) -> str:
        color = LEVEL_COLORS.get(record.levelname)
        if color and self._use_colors():
            # Color a copy; other handlers share the record
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = f"{color}{record.levelname}{RESET_COLOR}"
        return super().format(record)


class StructuredFormatter(logging.Formatter):
    """One JSON object per record, for log files and log shippers."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        entry.update(request_context(record))
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class DetailedFormatter(logging.Formatter):
    """Plain text formatter with the request context appended in brackets.

    Example output::

        2024-01-15 10:30:00 | DEBUG | auth0kit.core.http_client | GET /users -> 200 [method=GET, endpoint=/users, status=200, attempt=0, duration=0.120s]
    """

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = request_context(record)

        parts = []
        for name, label in CONTEXT_LABELS.items():
            if name not in context:
                continue
            value = context[name]
            if name == "duration":
                parts.append(f"{label}={value:.3f}s")
            else:
                parts.append(f"{label}={value}")

        if not parts:
            return message
        return f"{message} [{', '.join(parts)}]"


def _console_formatter(log_format: str, disable_colors: bool) -> logging.Formatter:
    if log_format == "json":
        return StructuredFormatter()
    if log_format == "detailed":
        return DetailedFormatter(fmt=CONSOLE_FORMAT, datefmt=DATE_FORMAT)
    return ColoredFormatter(
        fmt=CONSOLE_FORMAT, datefmt=DATE_FORMAT, disable_colors=disable_colors
    )


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    log_format: str = "console",
    disable_colors: bool = False,
) -> logging.Logger:
    """Configure handlers on the ``auth0kit`` logger.

    Replaces any handlers configured earlier, so it is safe to call again
    with different settings.

    Args:
        level: Log level name; unknown names fall back to INFO
        log_file: Optional log file path; files always get JSON records
        log_format: Console format (console, json, detailed)
        disable_colors: Never color the console output

    Returns:
        logging.Logger: Configured ``auth0kit`` logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.handlers.clear()

    log_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(log_level)

    handlers: list[logging.Handler] = []

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(_console_formatter(log_format, disable_colors))
    handlers.append(console)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(StructuredFormatter())
        handlers.append(file_handler)

    for handler in handlers:
        handler.setLevel(log_level)
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``auth0kit`` namespace.

    Module names inside the package (``auth0kit.core.http_client``) are used
    as is; anything else is prefixed.
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_from_env() -> logging.Logger:
    """Configure logging from ``AUTH0KIT_LOG_*`` environment variables.

    Environment variables:
        AUTH0KIT_LOG_LEVEL: Log level (default: INFO)
        AUTH0KIT_LOG_FILE: JSON log file path (optional)
        AUTH0KIT_LOG_FORMAT: console, json or detailed (default: console)
        AUTH0KIT_LOG_DISABLE_COLORS: true to disable colors (default: false)
    """
    disable_colors = os.getenv("AUTH0KIT_LOG_DISABLE_COLORS", "false")
    return setup_logging(
        level=os.getenv("AUTH0KIT_LOG_LEVEL", "INFO"),
        log_file=os.getenv("AUTH0KIT_LOG_FILE"),
        log_format=os.getenv("AUTH0KIT_LOG_FORMAT", "console"),
        disable_colors=disable_colors.lower() == "true",
    )


def configure_from_yaml(config_path: str | Path) -> logging.Logger:
    """Apply a ``logging.config.dictConfig`` schema stored as YAML.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a valid logging configuration
    """
    path = Path(config_path)
    if not path.is_file():
        raise FileNotFoundError(f"Logging config file not found: {path}")

    try:
        config = yaml.safe_load(path.read_text(encoding="utf-8"))
        logging.config.dictConfig(config)
    except (yaml.YAMLError, ValueError, TypeError, AttributeError) as e:
        raise ValueError(f"Invalid logging configuration in {path}: {e}") from e

    return logging.getLogger(ROOT_LOGGER_NAME)


def default_yaml_path() -> Path:
    """Location of the bundled logging.yaml."""
    return Path(__file__).parent.parent / "config" / "logging.yaml"


def configure_default_logging() -> logging.Logger:
    """Configure logging for command line use.

    ``AUTH0KIT_LOG_*`` variables win over the bundled YAML file so users can
    switch formats without editing package data.
    """
    if any(key.startswith("AUTH0KIT_LOG_") for key in os.environ):
        return configure_from_env()

    bundled = default_yaml_path()
    if bundled.is_file():
        return configure_from_yaml(bundled)
    return configure_from_env()
