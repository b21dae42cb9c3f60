"""Logging setup shared by the service and the scripts.

Usage:
    from ultimate_ttt.logging_config import setup_logging, get_logger

    setup_logging(level="DEBUG", json_logs=False)
    logger = get_logger(__name__)
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class JsonFormatter(logging.Formatter):
    """One JSON object per log line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def setup_logging(
    level: str | int = "INFO",
    json_logs: bool = False,
    script_name: Optional[str] = None,
) -> logging.Logger:
    """Configure the root logger and return the logger for ``script_name``.

    Replaces any handlers installed earlier so repeated calls (tests, the
    service reloading) do not duplicate output.
    """
    handler = logging.StreamHandler(sys.stderr)
    if json_logs:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level.upper() if isinstance(level, str) else level)

    return logging.getLogger(script_name or "ultimate_ttt")


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
