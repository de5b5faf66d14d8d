"""Event namespace for diagnostic subscribers, kept apart from the default pyventus linker."""

from __future__ import annotations

from pyventus.events import EventLinker


class EventlogLinker(EventLinker):
    pass
