"""Turns each diagnostic event into one structlog record.

The record name and level per event type live in _ROUTES; the event's
fields become the record's key/value pairs.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

from eventlog.observability.events import (
    DispatchCompleted,
    DispatchStarted,
    LineWritten,
    SubscriberFailed,
)
from eventlog.observability.linker import EventlogLinker
from eventlog.observability.logging import get_logger

_ROUTES: dict[type, tuple[str, str]] = {
    DispatchStarted: ("dispatch.started", "debug"),
    DispatchCompleted: ("dispatch.completed", "info"),
    SubscriberFailed: ("subscriber.failed", "error"),
    LineWritten: ("sink.line_written", "debug"),
}

_registered: bool = False


def log_event(event: Any) -> None:
    name, level = _ROUTES[type(event)]
    getattr(get_logger(), level)(name, **asdict(event))


def register_structlog_subscriber() -> None:
    """Link log_event to every routed event type. Later calls are no-ops."""
    global _registered
    if _registered:
        return
    EventlogLinker.on(*_ROUTES)(log_event)
    _registered = True
