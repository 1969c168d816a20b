"""
Central logging configuration that emits JSON lines for better observability.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict, Optional

from .config import get_settings

PLAIN_FORMAT = "%(levelname)s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """Render log records as JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }

        status_code: Optional[Any] = getattr(record, "status_code", None)
        if status_code is not None:
            payload["status_code"] = int(status_code)

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        if record.stack_info:
            payload["stack_info"] = record.stack_info

        return json.dumps(payload, ensure_ascii=False)


def configure_logging() -> None:
    """Configure root logger for JSON structured output."""

    settings = get_settings()
    root = logging.getLogger()
    root.setLevel(settings.log_level.upper())

    handler = logging.StreamHandler(sys.stdout)
    if settings.log_json:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))

    # Remove existing handlers so reconfiguration is idempotent.
    for existing in list(root.handlers):
        root.removeHandler(existing)

    root.addHandler(handler)
