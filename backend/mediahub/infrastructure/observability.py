"""Logging setup: one root handler, JSON lines or plain text.

Invariants:
    - Each JSON line has timestamp, level, logger and message
    - entity / entity_id / error_code / path appear only when the caller set them
    - setup_logging replaces earlier root handlers, so calling it twice
      (reload, tests) never duplicates output
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_FIELDS = ("entity", "entity_id", "error_code", "path")
_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(entity)s] %(message)s"


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (key, getattr(record, key)) for key in _EXTRA_FIELDS
            if getattr(record, key, None) is not None
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


class _EntityDefaultFilter(logging.Filter):
    """Plain-text lines reference %(entity)s; fill it when absent."""

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "entity", None) is None:
            record.entity = "-"
        return True


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT))
        handler.addFilter(_EntityDefaultFilter())

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
