"""Structured Logging — JSON formatter and setup for test-run observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (session_id, event_kind, error_code, block_height) surfaced when present
    - JSON format for CI log collectors, human-readable text by default

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging called explicitly (conftest or CI entry point): importing the
      package never touches the root logger
    - Level and format come from Settings unless the caller overrides them
"""

import logging
import json
from datetime import datetime, timezone

from clarity_testkit.config import get_settings

_EXTRA_KEYS = ("session_id", "event_kind", "error_code", "block_height")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in CI."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str | None = None, fmt: str | None = None) -> logging.Handler:
    """Configure the package logger. Returns the installed handler.

    level and fmt default to Settings.log_level / Settings.log_format
    (CLARITY_LOG_LEVEL, CLARITY_LOG_FORMAT).
    """
    settings = get_settings()
    level = level or settings.log_level
    fmt = fmt or settings.log_format
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    package_logger = logging.getLogger("clarity_testkit")
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
