"""
Logging setup for the HR web application.

JSON lines in production, a plain readable format everywhere else.
"""

import json
import logging
import sys
import traceback
from datetime import datetime, timezone
from typing import Optional

from hrapp.core.config import settings

# Attributes every LogRecord carries; anything else came in through `extra=`.
_RESERVED_ATTRS = {
    "name", "msg", "args", "created", "filename", "funcName",
    "levelname", "levelno", "lineno", "module", "msecs",
    "pathname", "process", "processName", "relativeCreated",
    "stack_info", "exc_info", "exc_text", "thread", "threadName",
    "message", "taskName",
}


class JSONFormatter(logging.Formatter):
    """One JSON object per line, for log aggregators."""

    def __init__(self, service_name: str = "hrapp"):
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service_name,
            "environment": settings.APP_ENV,
        }

        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": traceback.format_exception(*record.exc_info),
            }

        extra_fields = {
            key: value for key, value in record.__dict__.items() if key not in _RESERVED_ATTRS
        }
        if extra_fields:
            log_data["extra"] = extra_fields

        return json.dumps(log_data, default=str)


class ConsoleFormatter(logging.Formatter):
    """`timestamp | LEVEL | logger | message` for local development."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")
        message = f"{timestamp} | {record.levelname:8} | {record.name} | {record.getMessage()}"
        if record.exc_info:
            message += "\n" + "".join(traceback.format_exception(*record.exc_info)).rstrip()
        return message


def setup_logging(
    service_name: str = "hrapp",
    log_level: Optional[str] = None,
    json_logs: Optional[bool] = None,
) -> None:
    """
    Configure the root logger.

    Args:
        service_name: Name reported in JSON logs
        log_level: Override LOG_LEVEL (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Override the JSON/console choice made from settings
    """
    level = (log_level or settings.LOG_LEVEL).upper()
    use_json = json_logs if json_logs is not None else settings.use_json_logs

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level, logging.INFO))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    if use_json:
        console_handler.setFormatter(JSONFormatter(service_name))
    else:
        console_handler.setFormatter(ConsoleFormatter())
    root_logger.addHandler(console_handler)

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    logging.getLogger("hrapp.logging").info(
        "Logging configured: level=%s, format=%s, environment=%s",
        level,
        "JSON" if use_json else "console",
        settings.APP_ENV,
    )
