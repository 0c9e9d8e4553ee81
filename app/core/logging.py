"""Logging configuration for the application."""
import json
import logging
import sys
from datetime import datetime, timezone

from app.core.config import LogFormatEnum, Settings

LOGGER_NAME = "app"

SIMPLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JsonFormatter(logging.Formatter):
    """Render each record as a single JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def setup_logging(settings: Settings) -> logging.Logger:
    """Configure the ``app`` logger namespace from settings.

    Safe to call more than once; the handler is replaced rather than stacked.
    """
    level = getattr(logging, settings.log_level.value)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    if settings.log_format == LogFormatEnum.json:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(SIMPLE_FORMAT, datefmt=DATE_FORMAT))

    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)

    # Prevent duplicate logs
    logger.propagate = False
    return logger


__all__ = ["setup_logging", "JsonFormatter", "LOGGER_NAME"]
