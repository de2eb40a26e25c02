"""Shared utilities."""

from .logging import (
    LOGGER_NAME,
    REQUEST_EVENT_PREFIX,
    SESSION_FINISHED,
    SESSION_STARTED,
    JsonLogFormatter,
    SessionLog,
    configure_json_logger,
    flush_handlers,
    generate_trace_id,
    get_logger,
    log_event,
    request_event,
)

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
