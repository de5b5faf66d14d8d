"""LogSink protocol: what every log line destination must provide."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from eventlog.core.models import LogEventPayload
    from eventlog.core.publisher import EventPublisher


@runtime_checkable
class LogSink(Protocol):
    """Subscribes to a publisher and persists each payload as one line."""

    def subscribe(self, publisher: EventPublisher) -> None: ...

    def handle(self, source: Any, payload: LogEventPayload) -> None: ...

    def write(self, message: str, timestamp: datetime | None = None) -> None: ...
