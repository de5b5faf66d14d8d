"""Sink registry: build the configured sinks by name.

    console  ConsoleSink (stdout)
    file     FileSink (config.file_path)

Register your own:
    from eventlog.sinks.registry import register_sink
    register_sink("syslog", lambda cfg: SyslogSink(cfg.timestamp_format))
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from eventlog.sinks.base import LogSink
from eventlog.sinks.console_sink import ConsoleSink
from eventlog.sinks.file_sink import FileSink

if TYPE_CHECKING:
    from eventlog.config import EventlogConfig

SinkFactory = Callable[["EventlogConfig"], LogSink]

_SINKS: dict[str, SinkFactory] = {
    "console": lambda cfg: ConsoleSink(timestamp_format=cfg.timestamp_format),
    "file": lambda cfg: FileSink(cfg.file_path, timestamp_format=cfg.timestamp_format),
}


def register_sink(name: str, factory: SinkFactory) -> None:
    """Register a custom sink factory. Call before run()."""
    _SINKS[name] = factory


def available_sinks() -> list[str]:
    return list(_SINKS)


def build_sinks(config: EventlogConfig) -> list[LogSink]:
    """Instantiate config.sinks in order. Unknown names raise ConfigError."""
    from eventlog.config import ConfigError

    unknown = [name for name in config.sinks if name not in _SINKS]
    if unknown:
        raise ConfigError(
            f"Unknown sink(s): {unknown}. "
            f"Available: {available_sinks()}. "
            f"Register custom sinks with register_sink()."
        )
    return [_SINKS[name](config) for name in config.sinks]
