"""Logging Setup — JSON lines for deployments, key=value text for local runs.

Invariants:
    - Every record carries timestamp, level, logger and message
    - Running-order context (production, segment, title, shift size) is attached
      from `extra=` in both formats, and only when present
    - setup_logging is idempotent: calling it again swaps our handler, never stacks one

Design Decisions:
    - stdlib logging with a small formatter pair instead of a logging library:
      services already log through logging.getLogger(__name__) with extra=
    - SQLAlchemy engine chatter stays at WARNING unless LOG_LEVEL=DEBUG
"""

import json
import logging
from datetime import datetime, timezone

CONTEXT_FIELDS = (
    "production_id", "segment_id", "title_id", "position", "shifted",
    "error_code", "path",
)

_HANDLER_NAME = "korfbal-stream"


def record_context(record: logging.LogRecord) -> dict:
    """Running-order context passed through `extra=`, None values dropped."""
    return {
        key: getattr(record, key)
        for key in CONTEXT_FIELDS
        if getattr(record, key, None) is not None
    }


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **record_context(record),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


class ContextTextFormatter(logging.Formatter):
    """Plain text line, followed by `key=value` pairs for the context fields."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = record_context(record)
        if context:
            line += " " + " ".join(f"{k}={v}" for k, v in context.items())
        return line


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the service handler on the root logger and return it."""
    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else ContextTextFormatter())
    root.addHandler(handler)

    numeric = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if numeric <= logging.DEBUG else logging.WARNING,
    )
    return handler
