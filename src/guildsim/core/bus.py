"""
Typed event bus for guildsim.

Each event class gets its own queue. Components declare themselves as
readers of the event types they consume; every reader keeps its own
cursor, so each event is delivered to each reader exactly once and only
after it was emitted::

    bus = EventBus()
    bus.register(TurnDelta, "clock")
    bus.emit(TurnDelta(amount=1))
    for event in bus.read(TurnDelta, "clock"):
        ...
    bus.end_cycle()

Events are immutable pydantic models; the bus never copies them.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import TypeVar

from pydantic import BaseModel

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=BaseModel)


class EventBus:
    """Per-type event queues with independent reader cursors."""

    def __init__(self) -> None:
        self._queues: dict[type[BaseModel], list[BaseModel]] = defaultdict(list)
        # Absolute index of the first event still held in each queue
        self._offsets: dict[type[BaseModel], int] = defaultdict(int)
        # (event type, reader) -> absolute index of the next unread event
        self._cursors: dict[tuple[type[BaseModel], str], int] = {}
        self._stats: dict[str, int] = defaultdict(int)

    def register(self, event_type: type[BaseModel], reader: str) -> None:
        """
        Declare ``reader`` as a consumer of ``event_type``.

        A new reader starts at the oldest event still held by the bus.
        Registering twice is a no-op.
        """
        key = (event_type, reader)
        if key not in self._cursors:
            self._cursors[key] = self._offsets[event_type]

    def emit(self, event: BaseModel) -> None:
        """Queue an event for its readers."""
        self._queues[type(event)].append(event)
        self._stats[type(event).__name__] += 1

    def read(self, event_type: type[E], reader: str) -> list[E]:
        """Return every ``event_type`` event emitted since ``reader`` last read."""
        key = (event_type, reader)
        if key not in self._cursors:
            raise ValueError(f"{reader!r} is not registered for {event_type.__name__}")

        queue = self._queues[event_type]
        offset = self._offsets[event_type]
        start = self._cursors[key] - offset
        events = queue[start:]
        self._cursors[key] = offset + len(queue)
        return events  # type: ignore[return-value]

    def pending(self, event_type: type[BaseModel], reader: str) -> int:
        """Number of events waiting for ``reader``."""
        key = (event_type, reader)
        if key not in self._cursors:
            return 0
        return self._offsets[event_type] + len(self._queues[event_type]) - self._cursors[key]

    def end_cycle(self) -> None:
        """Drop every event that all of its readers have seen."""
        for event_type, queue in self._queues.items():
            offset = self._offsets[event_type]
            cursors = [pos for (t, _), pos in self._cursors.items() if t is event_type]
            if cursors:
                consumed = min(cursors) - offset
            else:
                consumed = len(queue)
                if queue:
                    logger.debug("Dropping %d unread %s events", len(queue), event_type.__name__)
            if consumed:
                del queue[:consumed]
                self._offsets[event_type] = offset + consumed

    def clear(self) -> None:
        """Discard all queued events and move every reader to the end."""
        for event_type, queue in self._queues.items():
            self._offsets[event_type] += len(queue)
            queue.clear()
        for event_type, reader in self._cursors:
            self._cursors[(event_type, reader)] = self._offsets[event_type]

    def stats(self) -> dict[str, int]:
        """Cumulative event counts by type name."""
        return dict(self._stats)

    def __repr__(self) -> str:
        queued = sum(len(q) for q in self._queues.values())
        return f"EventBus(queued={queued}, readers={len(self._cursors)})"
