"""JSON Lines event logging for conversion sessions.

Every request answered by the converter becomes one event. Events emitted
during the same session carry the same ``trace_id`` so a log file can be
grouped back into sessions.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Mapping, Optional
from uuid import uuid4

__all__ = [
    "LOGGER_NAME",
    "REQUEST_EVENT_PREFIX",
    "SESSION_FINISHED",
    "SESSION_STARTED",
    "JsonLogFormatter",
    "SessionLog",
    "configure_json_logger",
    "flush_handlers",
    "generate_trace_id",
    "get_logger",
    "log_event",
    "request_event",
]

LOGGER_NAME = "uniconv"

SESSION_STARTED = "session.started"
SESSION_FINISHED = "session.finished"
REQUEST_EVENT_PREFIX = "request."


def request_event(kind: str) -> str:
    """Event name for a request outcome, e.g. ``request.converted``."""

    return f"{REQUEST_EVENT_PREFIX}{kind}"


def _utc_timestamp(created: float) -> str:
    stamp = datetime.fromtimestamp(created, tz=timezone.utc).isoformat(timespec="milliseconds")
    return stamp.replace("+00:00", "Z")


class JsonLogFormatter(logging.Formatter):
    """Render a record as one JSON object: timestamp, level, event, fields."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        payload: Dict[str, Any] = {
            "timestamp": _utc_timestamp(record.created),
            "level": record.levelname.lower(),
            "event": getattr(record, "event", None) or message,
            "message": message,
        }
        trace_id = getattr(record, "trace_id", None)
        if trace_id:
            payload["trace_id"] = trace_id
        fields = getattr(record, "fields", None)
        if isinstance(fields, Mapping):
            payload.update(fields)
        return json.dumps(payload, ensure_ascii=False, default=str)


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def configure_json_logger(log_path: Path | None, level: int = logging.INFO) -> logging.Logger:
    """Point the ``uniconv`` logger at ``log_path``.

    Previous handlers are closed. Without a path the events are discarded so
    the prompts and answers on stdout stay clean.
    """

    logger = get_logger()
    logger.setLevel(level)
    logger.propagate = False
    while logger.handlers:
        stale = logger.handlers[0]
        logger.removeHandler(stale)
        stale.close()

    handler: logging.Handler
    if log_path is None:
        handler = logging.NullHandler()
    else:
        target = Path(log_path)
        target.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(target, encoding="utf-8")
        handler.setFormatter(JsonLogFormatter())
    handler.setLevel(level)
    logger.addHandler(handler)
    return logger


def flush_handlers(logger: logging.Logger) -> None:
    for handler in logger.handlers:
        handler.flush()


def generate_trace_id() -> str:
    return uuid4().hex


def log_event(
    logger: logging.Logger,
    event: str,
    *,
    trace_id: str | None = None,
    level: int = logging.INFO,
    message: str | None = None,
    **fields: Any,
) -> str:
    """Emit ``event`` with ``fields`` and return the trace id it was tagged with."""

    trace_id = trace_id or generate_trace_id()
    logger.log(level, message or event, extra={"event": event, "trace_id": trace_id, "fields": fields})
    return trace_id


class SessionLog:
    """Event emitter bound to one session trace id."""

    def __init__(self, logger: Optional[logging.Logger] = None, trace_id: Optional[str] = None) -> None:
        self.logger = logger or get_logger()
        self.trace_id = trace_id or generate_trace_id()

    def started(self, **fields: Any) -> None:
        log_event(self.logger, SESSION_STARTED, trace_id=self.trace_id, **fields)

    def request(self, kind: str, *, level: int = logging.INFO, **fields: Any) -> None:
        log_event(self.logger, request_event(kind), trace_id=self.trace_id, level=level, **fields)

    def finished(self, **fields: Any) -> None:
        log_event(self.logger, SESSION_FINISHED, trace_id=self.trace_id, **fields)
        flush_handlers(self.logger)
