"""JSON log lines for the pet store API process."""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict

# Attributes passed through `extra=` by the request middleware and the store.
REQUEST_FIELDS = ("request_path", "method", "status_code", "latency_ms", "client")
STORE_FIELDS = ("pet_id",)

# The request middleware already logs one line per call.
QUIET_LOGGERS = {"uvicorn.access": logging.WARNING}


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        payload: Dict[str, Any] = {
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for attr in REQUEST_FIELDS + STORE_FIELDS:
            value = getattr(record, attr, None)
            if value is not None:
                payload[attr] = value
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True)


class JsonStreamHandler(logging.StreamHandler):
    """Stream handler installed by `setup_logging`; other handlers are left alone."""

    def __init__(self, stream=None):
        super().__init__(stream)
        self.setFormatter(JsonFormatter())


def _resolve_level(default_level: str | int) -> str | int:
    level = os.environ.get("LOG_LEVEL", "").strip().upper()
    return level or default_level


def setup_logging(default_level: str | int = logging.INFO) -> None:
    """Install one JSON handler on the root logger; LOG_LEVEL overrides the level."""
    root = logging.getLogger()
    root.setLevel(_resolve_level(default_level))

    for name, level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(level)

    if not any(isinstance(handler, JsonStreamHandler) for handler in root.handlers):
        root.addHandler(JsonStreamHandler())
