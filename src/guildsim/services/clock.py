"""
Turn Clock Service for guildsim.

Advances the global turn counter and every live countdown timer by the
turns requested this cycle, reporting timers that run out.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from guildsim.core import EventBus
from guildsim.db.interfaces import EntityStore
from guildsim.models import NotificationEvent, TimerComplete, TurnCounter, TurnDelta

logger = logging.getLogger(__name__)


@dataclass
class TurnClock:
    """Consumes TurnDelta events and emits TimerComplete events."""

    store: EntityStore
    bus: EventBus
    notify_on_zero_delta: bool = True

    reader: str = "turn_clock"

    def __post_init__(self) -> None:
        self.bus.register(TurnDelta, self.reader)

    def run(self, turn: TurnCounter) -> int:
        """
        Apply every TurnDelta emitted since the last run.

        Returns the total number of turns applied.
        """
        total = sum(event.amount for event in self.bus.read(TurnDelta, self.reader))
        self.advance(turn, total)
        return total

    def advance(self, turn: TurnCounter, delta: int) -> list[int]:
        """
        Advance the turn counter and all timers by ``delta``.

        Timers that were already at zero are skipped. Returns the handles
        of entities whose timer reached zero in this call.
        """
        current = turn.advance(delta)
        if delta > 0 or self.notify_on_zero_delta:
            self.bus.emit(
                NotificationEvent(message=f"Turn advanced by {delta}. Current turn: {current}")
            )

        completed: list[int] = []
        for entity_id, timer in self.store.timers():
            if timer.tick(delta):
                logger.debug("Turn timer complete for entity: %s", entity_id)
                self.bus.emit(TimerComplete(entity=entity_id))
                completed.append(entity_id)
        return completed
