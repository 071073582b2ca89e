"""Structured Logging — JSON and text formatters carrying the Folio log extras.

Invariants:
    - Every line has timestamp (the record's creation time, UTC), level, logger, message
    - Extras the services attach (portfolio_id, resource_id, error_code, path,
      operation) are surfaced by both formats when set, omitted when None
    - setup_logging is idempotent: repeated calls replace its handler, never stack

Design Decisions:
    - stdlib logging only: the formatters are the whole logging stack
    - text format for local development, json everywhere else (LOG_FORMAT)
"""

import json
import logging
from datetime import datetime, timezone

EXTRA_FIELDS = ("portfolio_id", "resource_id", "error_code", "path", "operation")


def record_extras(record: logging.LogRecord) -> dict:
    """Known extras set on the record, in EXTRA_FIELDS order."""
    return {
        key: record.__dict__[key]
        for key in EXTRA_FIELDS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **record_extras(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable line with extras appended as key=value."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def formatMessage(self, record: logging.LogRecord) -> str:
        line = super().formatMessage(record)
        extras = record_extras(record)
        if extras:
            line += " [" + " ".join(f"{k}={v}" for k, v in extras.items()) + "]"
        return line


_handler: logging.Handler | None = None


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Install the app's root handler at `level`."""
    global _handler
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    if _handler is not None:
        logging.root.removeHandler(_handler)
    _handler = handler
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
