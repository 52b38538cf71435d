"""
PayCycle logging setup.

Structured JSON log lines for the API service and CLI. Library modules
only create module loggers; handlers are attached here, by the outermost
caller.
"""
from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone

LOGGER_NAME = "paycycle"

# Extra record attributes copied into the JSON line when present.
EXTRA_FIELDS = (
    "request_id",
    "payroll_id",
    "periods",
    "error_code",
    "duration_ms",
    "path",
)


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in EXTRA_FIELDS:
            if hasattr(record, name):
                log_entry[name] = getattr(record, name)
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry)


def configure_logging(level: str | None = None, json_format: bool = True) -> logging.Logger:
    """
    Attach a single stream handler to the paycycle logger.

    Args:
        level: Level name; defaults to PAYCYCLE_LOG_LEVEL or INFO
        json_format: False for plain text lines (CLI use)

    Returns:
        The configured package logger
    """
    level = level or os.getenv("PAYCYCLE_LOG_LEVEL", "INFO")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for existing in list(logger.handlers):
        if getattr(existing, "_paycycle_handler", False):
            logger.removeHandler(existing)

    handler = logging.StreamHandler()
    handler._paycycle_handler = True
    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    return logger
