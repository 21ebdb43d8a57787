"""Logging configuration with JSON formatting."""

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

from src.config import settings

# AWS SDK loggers that flood the output below WARNING
_NOISY_LOGGERS = ("botocore", "aiobotocore", "aioboto3", "boto3", "urllib3")


class JSONFormatter(logging.Formatter):
    """
    Render each record as one JSON line.

    The line starts with timestamp (UTC, taken from the record), level,
    logger and message. ``correlation_id`` and the keys of the ``context``
    dict passed through ``extra`` are merged in at the top level. DEBUG
    records also carry their source location.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        correlation_id = getattr(record, "correlation_id", None)
        if correlation_id is not None:
            payload["correlation_id"] = correlation_id

        payload.update(getattr(record, "context", None) or {})

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        if record.levelno <= logging.DEBUG:
            payload.update(
                file=record.pathname, line=record.lineno, function=record.funcName
            )

        # DynamoDB items hold Decimal numbers and dates
        return json.dumps(payload, default=str)


def configure_logging(level: str | None = None) -> None:
    """
    Configure the root logger to emit JSON lines on stdout.

    Args:
        level: Log level name; defaults to the LOG_LEVEL setting
    """
    level_name = (level or settings.log_level).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(JSONFormatter())
    root_logger.addHandler(console_handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))

    root_logger.info(
        "Logging configured",
        extra={"context": {"log_level": level_name}},
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the specified name.

    Args:
        name: The name of the logger (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
