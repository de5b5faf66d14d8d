"""Log sinks: destinations that turn payloads into persisted lines."""

from eventlog.sinks.base import LogSink
from eventlog.sinks.console_sink import ConsoleSink
from eventlog.sinks.file_sink import DEFAULT_FILE_PATH, FileSink
from eventlog.sinks.registry import available_sinks, build_sinks, register_sink

__all__ = [
    "LogSink",
    "ConsoleSink",
    "FileSink",
    "DEFAULT_FILE_PATH",
    "available_sinks",
    "build_sinks",
    "register_sink",
]
