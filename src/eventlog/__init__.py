"""eventlog: publish one log event to console and file subscribers."""

from eventlog.app import run
from eventlog.config import ConfigError, EventlogConfig
from eventlog.core import (
    DispatchResult,
    EventPublisher,
    FaultPolicy,
    LogEventPayload,
    Subscriber,
    SubscriberFailure,
    format_line,
)
from eventlog.sinks import ConsoleSink, FileSink, LogSink, register_sink

__all__ = [
    "run",
    "ConfigError",
    "EventlogConfig",
    "DispatchResult",
    "EventPublisher",
    "FaultPolicy",
    "LogEventPayload",
    "Subscriber",
    "SubscriberFailure",
    "format_line",
    "ConsoleSink",
    "FileSink",
    "LogSink",
    "register_sink",
]
