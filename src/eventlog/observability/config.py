"""Diagnostics settings.

Diagnostics are structlog records about dispatches and sink writes. They
are opt-in by the caller (the CLI configures them, library use doesn't) and
read their settings from EVENTLOG_DIAG_* env vars:

    EVENTLOG_DIAG_LEVEL        DEBUG | INFO (default) | WARNING | ...
    EVENTLOG_DIAG_FORMAT       json (default) | console
    EVENTLOG_DIAG_DESTINATION  stderr (default) | jsonl
    EVENTLOG_DIAG_PATH         JSONL file for the jsonl destination
"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_JSONL_PATH = "eventlog-diagnostics.jsonl"


@dataclass
class DiagnosticsConfig:
    level: str = "INFO"
    format: str = "json"
    destination: str = "stderr"
    jsonl_path: str = DEFAULT_JSONL_PATH

    @classmethod
    def from_env(cls) -> DiagnosticsConfig:
        env = os.environ
        return cls(
            level=env.get("EVENTLOG_DIAG_LEVEL", cls.level),
            format=env.get("EVENTLOG_DIAG_FORMAT", cls.format),
            destination=env.get("EVENTLOG_DIAG_DESTINATION", cls.destination),
            jsonl_path=env.get("EVENTLOG_DIAG_PATH", cls.jsonl_path),
        )
