"""Structured Logging - JSON formatter and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (dialog_code, locale, error_code, ...) surfaced when present
    - JSON format in production, human-readable in development

Design Decisions:
    - JSONFormatter on stdlib logging: no extra dependency for log shipping
    - setup_logging called once on startup via lifespan
"""

import logging
import json
from datetime import datetime, timezone

_EXTRA_FIELDS = (
    "warning_type", "dialog_code", "locale", "translation_key",
    "entity_identifier", "warning_count", "error_code", "path",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


_HANDLER_NAME = "business_warnings"


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure logging for the application.

    Re-running (a second lifespan in the same process) replaces the previous
    handler instead of stacking duplicates.
    """
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
