"""Structured logging setup for the fleetacl logger tree."""

import json
import logging
import sys
import traceback
from datetime import UTC, datetime
from typing import Any

# Attributes every LogRecord carries; anything else came in through `extra`.
_RECORD_ATTRS = set(vars(logging.makeLogRecord({}))) | {"message", "asctime", "taskName"}


class JSONFormatter(logging.Formatter):
    """One JSON object per line, with `extra` fields merged in."""

    def format(self, record: logging.LogRecord) -> str:
        log_obj: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRS:
                log_obj[key] = value
        if record.exc_info:
            log_obj["exception"] = "".join(traceback.format_exception(*record.exc_info))
        return json.dumps(log_obj, default=str)


def configure_logging(level: str = "INFO", name: str = "fleetacl") -> logging.Logger:
    """Attach a stdout JSON handler to the package logger. Safe to call twice."""
    log = logging.getLogger(name)
    log.setLevel(level.upper())
    if not log.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JSONFormatter())
        log.addHandler(handler)
    return log
