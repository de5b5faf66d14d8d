"""Shared fixtures: every test starts with diagnostics unconfigured."""

from __future__ import annotations

from datetime import datetime

import pytest

from eventlog.core.models import LogEventPayload


@pytest.fixture(autouse=True)
def _reset_observability():
    """Reset emitter state before and after each test."""
    from eventlog.observability.emitter import reset

    reset()
    yield
    reset()


@pytest.fixture()
def fixed_time() -> datetime:
    return datetime(2026, 1, 2, 3, 4, 5)


@pytest.fixture()
def payload(fixed_time) -> LogEventPayload:
    return LogEventPayload(message="LogEvent published", timestamp=fixed_time)
