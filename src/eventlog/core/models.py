"""Core data models for eventlog.

LogEventPayload is the value carried by one event occurrence. DispatchResult
and SubscriberFailure describe what happened during one dispatch.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class LogEventPayload:
    """A log message and the moment it was raised."""

    message: str
    timestamp: datetime

    @classmethod
    def now(cls, message: str) -> LogEventPayload:
        return cls(message=message, timestamp=datetime.now())


@dataclass(frozen=True)
class SubscriberFailure:
    """A callback that raised while being dispatched to."""

    callback_name: str
    error: BaseException


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of a single dispatch call."""

    delivered: int = 0
    failures: tuple[SubscriberFailure, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.failures


def format_line(
    message: str,
    timestamp: datetime,
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
) -> str:
    """Render the persisted form of a log event: ``"{timestamp} - {message}\\n"``."""
    return f"{timestamp.strftime(timestamp_format)} - {message}\n"
