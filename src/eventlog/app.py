"""Entry routine: wire the publisher to its sinks and fire one log event."""

from __future__ import annotations

from eventlog.config import EventlogConfig
from eventlog.core.models import DispatchResult, LogEventPayload
from eventlog.core.publisher import EventPublisher
from eventlog.sinks.registry import build_sinks


def run(config: EventlogConfig | None = None) -> DispatchResult:
    """Build publisher and sinks, subscribe each sink, dispatch one payload.

    Sinks subscribe in config.sinks order, which is also delivery order.
    The payload is stamped just before dispatch.
    """
    cfg = config or EventlogConfig.load()

    publisher = EventPublisher(fault_policy=cfg.fault_policy)
    for sink in build_sinks(cfg):
        sink.subscribe(publisher)

    payload = LogEventPayload.now(cfg.message)
    return publisher.dispatch(payload)
