"""Module-level diagnostics emitter.

The publisher and the sinks call emit() unconditionally. Until configure()
runs there is no emitter and emit() returns immediately, so library use and
most tests pay nothing for diagnostics.
"""

from __future__ import annotations

from typing import Any

from pyventus.core.processing.asyncio import AsyncIOProcessingService
from pyventus.events import EventEmitter

from eventlog.observability.config import DiagnosticsConfig
from eventlog.observability.linker import EventlogLinker
from eventlog.observability.logging import setup_logging, shutdown_logging
from eventlog.observability.subscribers.structlog_sub import register_structlog_subscriber

_emitter: EventEmitter | None = None


def emit(event: Any) -> None:
    if _emitter is not None:
        _emitter.emit(event)


def configure(config: DiagnosticsConfig | None = None) -> EventEmitter:
    """Install the log handler and start routing diagnostic events.

    A second call keeps the first configuration.
    """
    global _emitter
    if _emitter is None:
        setup_logging(config or DiagnosticsConfig.from_env())
        register_structlog_subscriber()
        _emitter = EventEmitter(
            event_linker=EventlogLinker,
            event_processor=AsyncIOProcessingService(),
        )
    return _emitter


def is_configured() -> bool:
    return _emitter is not None


def reset() -> None:
    """Drop the emitter and detach the log handler."""
    global _emitter
    shutdown_logging()
    _emitter = None
