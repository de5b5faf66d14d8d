"""Console sink: write log lines to standard output."""

from __future__ import annotations

import sys
from datetime import datetime
from typing import TYPE_CHECKING, Any

from eventlog.core.models import DEFAULT_TIMESTAMP_FORMAT, LogEventPayload, format_line
from eventlog.observability.emitter import emit
from eventlog.observability.events import LineWritten

if TYPE_CHECKING:
    from eventlog.core.publisher import EventPublisher


class ConsoleSink:
    """Write one formatted line per event to stdout."""

    def __init__(self, timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT) -> None:
        self.timestamp_format = timestamp_format

    def subscribe(self, publisher: EventPublisher) -> None:
        publisher.register(self.handle)

    def handle(self, source: Any, payload: LogEventPayload) -> None:
        self.write(payload.message, payload.timestamp)

    def write(self, message: str, timestamp: datetime | None = None) -> None:
        if timestamp is None:
            timestamp = datetime.now()
        line = format_line(message, timestamp, self.timestamp_format)
        # Looked up per call so redirected/captured stdout is honoured
        sys.stdout.write(line)
        sys.stdout.flush()
        emit(LineWritten(sink="console", destination="stdout", length=len(line)))
