"""
Logging for the blackboard package.

Records may carry ``agent_id``, ``operation`` and ``error`` extras. The
``blackboard`` logger owns its handler and does not propagate to root.
"""

import json
import logging
import sys
from datetime import datetime
from typing import Any, Dict, Optional

from blackboard.config import settings


_EXTRA_FIELDS = ("agent_id", "operation", "error")


class StructuredFormatter(logging.Formatter):
    """JSON formatter emitting one object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.utcnow().isoformat() + "Z",
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in _EXTRA_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class HumanReadableFormatter(logging.Formatter):
    """Single-line formatter for development."""

    def format(self, record: logging.LogRecord) -> str:
        parts = [f"[{record.levelname:8s}]", record.name]

        if hasattr(record, "agent_id"):
            parts.append(f"agent:{str(record.agent_id)[:12]}")

        if hasattr(record, "operation"):
            parts.append(f"op:{record.operation}")

        parts.append(record.getMessage())

        if record.exc_info:
            parts.append(f"\n{self.formatException(record.exc_info)}")

        return " | ".join(parts)


def setup_logging(use_json: Optional[bool] = None) -> logging.Logger:
    """
    Configure the ``blackboard`` logger.

    Args:
        use_json: If True, use JSON formatting. If None, follow settings.log_format.

    Returns:
        The configured package logger
    """
    if use_json is None:
        use_json = settings.log_format == "json"

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(StructuredFormatter() if use_json else HumanReadableFormatter())

    package_logger = logging.getLogger("blackboard")
    package_logger.setLevel(getattr(logging, settings.log_level, logging.INFO))
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    # Root handlers would print every line a second time
    package_logger.propagate = False
    return package_logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


setup_logging()
