"""Logging setup: text or single-line JSON output, tagged with request IDs."""

from __future__ import annotations

import json
import logging
import sys
import traceback
from datetime import datetime, timezone

from villageinfo.services.request_context import get_request_id

# Attributes every LogRecord carries; anything else came in via ``extra=``.
_RESERVED_ATTRS: frozenset[str] = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None))
) | {"message", "asctime", "taskName"}

# uvicorn installs its own handlers; route them through ours instead.
_UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _timestamp(record: logging.LogRecord) -> datetime:
    return datetime.fromtimestamp(record.created, tz=timezone.utc)


def _format_exc(record: logging.LogRecord) -> str | None:
    if record.exc_info and record.exc_info[0] is not None:
        return "".join(traceback.format_exception(*record.exc_info))
    return None


class JSONFormatter(logging.Formatter):
    """One JSON object per line, for log shippers."""

    def format(self, record: logging.LogRecord) -> str:
        record.message = record.getMessage()
        entry: dict = {
            "timestamp": _timestamp(record).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.message,
        }

        request_id = get_request_id()
        if request_id:
            entry["request_id"] = request_id

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                entry[key] = value

        exc_text = _format_exc(record)
        if exc_text:
            entry["exception"] = exc_text

        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """``2024-01-01 12:00:00 INFO     [reqid] logger - message``"""

    def format(self, record: logging.LogRecord) -> str:
        record.message = record.getMessage()
        ts = _timestamp(record).strftime("%Y-%m-%d %H:%M:%S")

        request_id = get_request_id()
        rid_prefix = f"[{request_id[:12]}] " if request_id else ""

        line = f"{ts} {record.levelname:<8} {rid_prefix}{record.name} - {record.message}"

        exc_text = _format_exc(record)
        if exc_text:
            line += "\n" + exc_text

        return line


def setup_logging(log_level: str = "INFO", log_format: str = "text") -> None:
    """Configure the root logger. Safe to call more than once."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    if log_format.lower() == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(TextFormatter())
    root.addHandler(handler)

    for name in _UVICORN_LOGGERS:
        uv_logger = logging.getLogger(name)
        uv_logger.handlers.clear()
        uv_logger.propagate = True
