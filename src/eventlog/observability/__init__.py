"""eventlog diagnostics: typed events about dispatches, logged with structlog.

    emit(event)     fire an event; no-op until configure()
    configure(cfg)  install the log handler and the subscriber
    reset()         back to unconfigured (tests)
"""

from eventlog.observability.config import DiagnosticsConfig
from eventlog.observability.emitter import configure, emit, is_configured, reset
from eventlog.observability.events import (
    DispatchCompleted,
    DispatchStarted,
    LineWritten,
    SubscriberFailed,
)
from eventlog.observability.logging import get_logger

__all__ = [
    "DiagnosticsConfig",
    "configure",
    "emit",
    "is_configured",
    "reset",
    "get_logger",
    "DispatchStarted",
    "DispatchCompleted",
    "SubscriberFailed",
    "LineWritten",
]
