"""Log formatters for command-line use (JSON and text).

The library itself only emits records; handlers are installed by
:func:`setup_logging`, which the ``ramaris`` CLI calls at startup.
"""

from __future__ import annotations

import json
import logging
import sys
import traceback
from datetime import datetime, timezone

from ramaris.request_context import get_request_id

# Fields the client attaches to its records through ``extra=``.
_CALL_FIELDS: tuple[str, ...] = ("url", "status")


def _call_context(record: logging.LogRecord) -> dict:
    """Request ID and per-call fields of *record*, omitting unset ones."""
    context: dict = {}
    request_id = get_request_id()
    if request_id:
        context["request_id"] = request_id
    for name in _CALL_FIELDS:
        value = getattr(record, name, None)
        if value is not None:
            context[name] = value
    return context


def _format_exc(record: logging.LogRecord) -> str | None:
    if record.exc_info and record.exc_info[0] is not None:
        return "".join(traceback.format_exception(*record.exc_info))
    return None


class JSONFormatter(logging.Formatter):
    """One JSON object per line, API call fields at the top level."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_call_context(record),
        }
        exc_text = _format_exc(record)
        if exc_text:
            entry["exception"] = exc_text
        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """``<ts> <LEVEL> [call <id>] <logger> - <message>``"""

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(
            record.created, tz=timezone.utc
        ).strftime("%Y-%m-%d %H:%M:%S")
        request_id = get_request_id()
        prefix = f"[call {request_id}] " if request_id else ""

        line = f"{ts} {record.levelname:<8} {prefix}{record.name} - {record.getMessage()}"
        exc_text = _format_exc(record)
        if exc_text:
            line += "\n" + exc_text
        return line


def setup_logging(log_level: str = "INFO", log_format: str = "text") -> None:
    """Configure the root logger to write to stderr. Call once at startup."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    if log_format.lower() == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(TextFormatter())

    root.addHandler(handler)
