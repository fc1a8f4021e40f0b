"""
Diagnostics for klio_logger itself.

Events such as swallowed sink errors are reported here through structlog,
on stderr, never through the sinks of the loggers that produced them. The
global structlog configuration of the host program is left untouched.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone

import orjson
import structlog
from structlog.typing import EventDict, Processor, WrappedLogger

from .config import get_settings


def add_timestamp(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add ISO 8601 timestamp to log event."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _json_serializer(v: object, **kwargs: object) -> str:
    return orjson.dumps(v, default=str).decode()


def _renderer(fmt: str) -> Processor:
    if fmt == "json":
        return structlog.processors.JSONRenderer(serializer=_json_serializer)
    return structlog.dev.ConsoleRenderer(colors=False)


def get_logger(name: str | None = None) -> structlog.typing.FilteringBoundLogger:
    """Get a diagnostics logger writing to the current ``sys.stderr``.

    Threshold and format come from ``LoggerSettings.diagnostics_level`` and
    ``LoggerSettings.diagnostics_format``.
    """
    settings = get_settings()
    threshold = getattr(logging, settings.diagnostics_level.value, logging.WARNING)
    return structlog.wrap_logger(
        structlog.PrintLogger(file=sys.stderr),
        processors=[
            structlog.processors.add_log_level,
            add_timestamp,
            _renderer(settings.diagnostics_format.value),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(threshold),
        logger_name=name or "klio_logger",
    )
