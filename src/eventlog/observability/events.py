"""Typed diagnostic events fired while delivering log lines.

All events are frozen (immutable) dataclasses. The publisher and the sinks
emit these; they don't know where the diagnostics end up. Subscribers handle
routing.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Dispatch lifecycle
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DispatchStarted:
    subscriber_count: int
    message: str
    fault_policy: str  # "propagate" | "continue"


@dataclass(frozen=True)
class DispatchCompleted:
    delivered: int
    failed: int
    latency_ms: float


@dataclass(frozen=True)
class SubscriberFailed:
    callback: str
    error: str
    error_type: str
    fault_policy: str


# ---------------------------------------------------------------------------
# Sink output
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LineWritten:
    sink: str  # "console" | "file"
    destination: str
    length: int
