"""
Logging Utility for the Recurrence Engine.

Each record is a single JSON object carrying the component name and any
keyword fields passed by the caller.
"""

import json
import logging
import sys
from datetime import datetime, timezone

from ..config import LOG_LEVEL

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class StructuredLogger:
    """Thin JSON front end over a stdlib logger."""

    def __init__(self, name: str, level: int = None):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level if level is not None else logging.getLevelName(LOG_LEVEL))

        # One stdout handler per component, however often it is requested
        if not self.logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self.logger.addHandler(handler)

    def log(self, level: int, message: str, **fields):
        """
        Emit ``message`` with ``fields`` as a JSON record.

        Dates, enums and other non-JSON values are rendered with str().
        """
        if not self.logger.isEnabledFor(level):
            return
        record = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "component": self.logger.name,
            "message": message,
            **fields,
        }
        self.logger.log(level, json.dumps(record, default=str))

    def debug(self, message: str, **fields):
        self.log(logging.DEBUG, message, **fields)

    def info(self, message: str, **fields):
        self.log(logging.INFO, message, **fields)

    def warning(self, message: str, **fields):
        self.log(logging.WARNING, message, **fields)


def get_logger(name: str) -> StructuredLogger:
    """Structured logger for the named component."""
    return StructuredLogger(name)
