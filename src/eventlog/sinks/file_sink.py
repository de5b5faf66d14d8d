"""File sink: append log lines to a text file."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

from eventlog.core.models import DEFAULT_TIMESTAMP_FORMAT, LogEventPayload, format_line
from eventlog.observability.emitter import emit
from eventlog.observability.events import LineWritten

if TYPE_CHECKING:
    from eventlog.core.publisher import EventPublisher

DEFAULT_FILE_PATH = "log.txt"


class FileSink:
    """Append one formatted line per event to a file.

    Every write opens the file in append mode, writes, and closes it again.
    No handle is held between writes and existing content is never
    truncated. A relative path resolves against the working directory at
    write time. Write errors (permissions, path is a directory) propagate.
    """

    def __init__(
        self,
        path: str | Path = DEFAULT_FILE_PATH,
        timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
    ) -> None:
        self._path = Path(path)
        self.timestamp_format = timestamp_format

    @property
    def path(self) -> Path:
        return self._path

    def subscribe(self, publisher: EventPublisher) -> None:
        publisher.register(self.handle)

    def handle(self, source: Any, payload: LogEventPayload) -> None:
        self.write(payload.message, payload.timestamp)

    def write(self, message: str, timestamp: datetime | None = None) -> None:
        if timestamp is None:
            timestamp = datetime.now()
        line = format_line(message, timestamp, self.timestamp_format)
        with open(self._path, "a", encoding="utf-8") as f:
            f.write(line)
        emit(LineWritten(sink="file", destination=str(self._path), length=len(line)))
