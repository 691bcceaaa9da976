"""
Quest Lifecycle Service for guildsim.

Drives quests through their states:

    AVAILABLE --StartQuest--> IN_PROGRESS --timer--> resolved (removed)
    AVAILABLE --timer--> expired (removed)

Resolved and expired quests are removed from the store; there is no
"completed" record.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from pydantic import BaseModel, Field

from guildsim.core import EventBus
from guildsim.db.interfaces import EntityStore
from guildsim.models import (
    NotificationEvent,
    Percent,
    Quest,
    QuestComplete,
    StartQuest,
    TimerComplete,
)
from guildsim.skills.outcome import PreconditionError, roll_success, success_probability

logger = logging.getLogger(__name__)


class LifecycleResult(BaseModel):
    """Quests that left the board during one run."""

    expired: list[int] = Field(default_factory=list)
    completed: list[QuestComplete] = Field(default_factory=list)


@dataclass
class QuestLifecycle:
    """Consumes StartQuest and TimerComplete events."""

    store: EntityStore
    bus: EventBus

    reader: str = "quest_lifecycle"

    def __post_init__(self) -> None:
        self.bus.register(StartQuest, self.reader)
        self.bus.register(TimerComplete, self.reader)

    # =========================================================================
    # Starting quests
    # =========================================================================

    def run_starts(self) -> list[int]:
        """Handle every StartQuest emitted since the last run."""
        started: list[int] = []
        for event in self.bus.read(StartQuest, self.reader):
            if self.start_quest(event.quest, event.heroes):
                started.append(event.quest)
        return started

    def start_quest(self, quest_id: int, hero_ids: tuple[int, ...] | list[int]) -> bool:
        """
        Send heroes out on a quest.

        The quest timer is re-armed with ``turns_to_complete`` and every
        hero is linked to the quest, leaving any quest they were on.
        A quest already in progress keeps its party, restarts its timer
        and takes on the new heroes. A quest that takes zero turns is
        reported complete right away. Requests naming a quest that is
        gone are dropped. Returns True if the quest was started.
        """
        quest = self.store.get_quest(quest_id)
        if quest is None:
            logger.debug("StartQuest for missing quest %s dropped", quest_id)
            return False

        if quest.is_available:
            quest.begin()
        else:
            logger.debug("Quest %s already in progress, restarting its timer", quest_id)
            quest.restart()
        for hero_id in hero_ids:
            if self.store.get_hero(hero_id) is None:
                logger.debug("Hero %s for quest %s not found, skipping", hero_id, quest_id)
                continue
            self.store.link_hero(hero_id, quest_id)

        # The clock never ticks a timer that is already at zero
        if quest.timer.is_complete:
            self.bus.emit(TimerComplete(entity=quest_id))
        return True

    # =========================================================================
    # Timers running out
    # =========================================================================

    def run_timers(self, rng: random.Random) -> LifecycleResult:
        """
        Handle every TimerComplete emitted since the last run.

        Events are handled in the order they were emitted, which keeps the
        random draws reproducible.
        """
        result = LifecycleResult()
        for event in self.bus.read(TimerComplete, self.reader):
            quest = self.store.get_quest(event.entity)
            if quest is None:
                continue
            if quest.is_available:
                self.expire_quest(quest)
                result.expired.append(quest.id)
            elif quest.is_in_progress:
                result.completed.append(self.complete_quest(quest, rng))
        return result

    def expire_quest(self, quest: Quest) -> None:
        """Remove an available quest whose time ran out."""
        self.store.despawn(quest.id)
        self.bus.emit(NotificationEvent(message=f"An available quest expired: entity {quest.id}"))

    def complete_quest(self, quest: Quest, rng: random.Random) -> QuestComplete:
        """
        Resolve an in-progress quest and remove it.

        Heroes are unlinked before the quest is removed so they stay in
        the store. A quest with nobody on it fails without a roll.
        """
        hero_ids = self.store.children_of(quest.id)
        levels = [
            hero.level
            for hero in (self.store.get_hero(hid) for hid in hero_ids)
            if hero is not None
        ]

        try:
            chance = success_probability(quest.description.difficulty, levels)
            is_successful = roll_success(chance, rng)
        except PreconditionError:
            logger.warning("Quest %s finished with no heroes, counting it as failed", quest.id)
            chance = Percent(value=0)
            is_successful = False

        event = QuestComplete(
            quest_description=quest.description,
            heroes=tuple(hero_ids),
            success_probability=chance,
            is_successful=is_successful,
            exp_reward=quest.description.exp_reward,
            gold_reward=quest.description.gold_reward if is_successful else 0,
        )
        self.bus.emit(event)

        for hero_id in hero_ids:
            self.store.unlink_hero(hero_id)
        self.store.despawn(quest.id)
        return event
