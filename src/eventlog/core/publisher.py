"""EventPublisher: ordered subscriber registry with synchronous dispatch.

Callbacks are invoked in registration order, on the caller's thread, each
receiving the publisher as the event source and the payload. Whether one
failing callback stops the rest is controlled by FaultPolicy:

    PROPAGATE  the exception leaves dispatch(); later callbacks don't run
    CONTINUE   the exception is recorded and delivery moves on
"""

from __future__ import annotations

import time
from enum import StrEnum
from typing import Any, Protocol, runtime_checkable

from eventlog.core.models import DispatchResult, LogEventPayload, SubscriberFailure
from eventlog.observability.emitter import emit
from eventlog.observability.events import (
    DispatchCompleted,
    DispatchStarted,
    SubscriberFailed,
)


class FaultPolicy(StrEnum):
    PROPAGATE = "propagate"
    CONTINUE = "continue"


@runtime_checkable
class Subscriber(Protocol):
    """Callback shape the publisher invokes: (source, payload) -> None."""

    def __call__(self, source: Any, payload: LogEventPayload) -> None: ...


def _callback_name(callback: Subscriber) -> str:
    return getattr(callback, "__qualname__", None) or repr(callback)


class EventPublisher:
    """Holds subscriber callbacks and dispatches payloads to them."""

    def __init__(self, fault_policy: FaultPolicy | str = FaultPolicy.PROPAGATE) -> None:
        self.fault_policy = FaultPolicy(fault_policy)
        self._subscribers: list[Subscriber] = []

    def register(self, callback: Subscriber) -> None:
        """Append a callback. Registering the same callback twice delivers twice."""
        self._subscribers.append(callback)

    @property
    def subscribers(self) -> tuple[Subscriber, ...]:
        return tuple(self._subscribers)

    def __len__(self) -> int:
        return len(self._subscribers)

    def dispatch(self, payload: LogEventPayload) -> DispatchResult:
        """Invoke every registered callback with ``(self, payload)``.

        No-op when nothing is registered. Under PROPAGATE the first
        exception escapes and the remaining callbacks are skipped.
        """
        if not self._subscribers:
            return DispatchResult()

        # Snapshot: callbacks registering more callbacks don't extend this dispatch
        callbacks = list(self._subscribers)
        emit(
            DispatchStarted(
                subscriber_count=len(callbacks),
                message=payload.message,
                fault_policy=self.fault_policy.value,
            )
        )

        t0 = time.perf_counter()
        delivered = 0
        failures: list[SubscriberFailure] = []
        for callback in callbacks:
            try:
                callback(self, payload)
            except Exception as exc:
                name = _callback_name(callback)
                emit(
                    SubscriberFailed(
                        callback=name,
                        error=str(exc),
                        error_type=type(exc).__name__,
                        fault_policy=self.fault_policy.value,
                    )
                )
                if self.fault_policy is FaultPolicy.PROPAGATE:
                    raise
                failures.append(SubscriberFailure(callback_name=name, error=exc))
                continue
            delivered += 1

        emit(
            DispatchCompleted(
                delivered=delivered,
                failed=len(failures),
                latency_ms=(time.perf_counter() - t0) * 1000,
            )
        )
        return DispatchResult(delivered=delivered, failures=tuple(failures))
