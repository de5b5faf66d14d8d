"""structlog wiring for eventlog diagnostics.

Records go through the stdlib ``eventlog`` logger so the destination is an
ordinary logging.Handler: stderr by default, or a JSONL file. Nothing here
ever writes to stdout, which belongs to the console sink.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from eventlog.observability.config import DiagnosticsConfig

DIAGNOSTICS_LOGGER = "eventlog.diagnostics"
_ROOT = "eventlog"
_DESTINATIONS = ("stderr", "jsonl")


def _open_handler(config: DiagnosticsConfig) -> logging.Handler:
    if config.destination == "stderr":
        return logging.StreamHandler(sys.stderr)
    if config.destination == "jsonl":
        path = Path(config.jsonl_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(path, mode="a", encoding="utf-8")
    raise ValueError(
        f"Unknown diagnostics destination: {config.destination!r}. "
        f"Available: {list(_DESTINATIONS)}."
    )


def setup_logging(config: DiagnosticsConfig) -> logging.Handler:
    """Route structlog records for the ``eventlog`` logger tree to one handler.

    Replaces any handler a previous call installed. Returns the new handler.
    """
    handler = _open_handler(config)

    if config.format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer(colors=False)
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    shutdown_logging()
    root = logging.getLogger(_ROOT)
    root.addHandler(handler)
    root.setLevel(getattr(logging, config.level.upper(), logging.INFO))
    # Host applications' root handlers must not see our records twice
    root.propagate = False
    return handler


def shutdown_logging() -> None:
    """Close and detach the diagnostics handler, if any."""
    root = logging.getLogger(_ROOT)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.NOTSET)
    root.propagate = True


def get_logger(**initial_values: Any) -> Any:
    return structlog.get_logger(DIAGNOSTICS_LOGGER, **initial_values)
