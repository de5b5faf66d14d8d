"""Publisher, payload and dispatch result types."""

from eventlog.core.models import (
    DEFAULT_TIMESTAMP_FORMAT,
    DispatchResult,
    LogEventPayload,
    SubscriberFailure,
    format_line,
)
from eventlog.core.publisher import EventPublisher, FaultPolicy, Subscriber

__all__ = [
    "DEFAULT_TIMESTAMP_FORMAT",
    "DispatchResult",
    "EventPublisher",
    "FaultPolicy",
    "LogEventPayload",
    "Subscriber",
    "SubscriberFailure",
    "format_line",
]
