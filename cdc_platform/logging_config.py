"""Opt-in logging setup for applications embedding the client."""

from __future__ import annotations

import json
import logging
from typing import Optional

from cdc_platform.config import HttpSettings, default_settings

LOG_EXTRA_KEYS = ("operation", "request_id", "error", "status_code")


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "message": record.getMessage(),
            "name": record.name,
        }
        for key in LOG_EXTRA_KEYS:
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        return json.dumps(payload)


def configure_logging(settings: Optional[HttpSettings] = None) -> None:
    """Install a root handler using the configured level and format."""
    settings = settings or default_settings
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    if settings.log_format.lower() == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter())
        logging.basicConfig(level=level, handlers=[handler], force=True)
    else:
        logging.basicConfig(level=level, force=True)
