"""Logging setup for the refcheck CLI.

Logs go to stderr so that stdout carries only results.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class JsonFormatter(logging.Formatter):
    """One JSON object per log record."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "thread": record.threadName,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def setup_logging(level: str = "info", log_format: str = "text") -> logging.Logger:
    """Configure the ``refcheck`` logger, replacing any previous handlers."""
    logger = logging.getLogger("refcheck")
    logger.setLevel(_LEVELS.get(level.lower(), logging.INFO))
    logger.handlers.clear()
    logger.propagate = False

    handler: logging.Handler
    if log_format == "json":
        handler = logging.StreamHandler()  # stderr
        handler.setFormatter(JsonFormatter())
    else:
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger
