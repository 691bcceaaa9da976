"""
Quest models for guildsim.

A quest is posted on the guild board as AVAILABLE, counting down to its
expiry. Once heroes commit to it, it becomes IN_PROGRESS and counts down
to its resolution instead.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from guildsim.models.hero import HeroClass


class QuestStatus(str, Enum):
    """Status of a quest on the guild board."""

    AVAILABLE = "available"  # Posted, waiting for heroes
    IN_PROGRESS = "in_progress"  # Heroes are out on the quest


class Item(BaseModel):
    """An item that a quest may award. Items are not distributed yet."""

    model_config = ConfigDict(frozen=True)

    hero_class: HeroClass
    """Class that can make use of the item."""


class QuestDescription(BaseModel):
    """Immutable terms of a quest."""

    model_config = ConfigDict(frozen=True)

    difficulty: int = Field(ge=0)
    """Level a hero should have for a baseline chance of success."""

    turns_to_complete: int = Field(ge=0)
    exp_reward: int = Field(default=0, ge=0)
    """Experience granted to every hero, win or lose."""

    gold_reward: int = Field(default=0, ge=0)
    """Gold granted to the guild on success."""

    item_reward: Item | None = None
    turns_to_expiry: int = Field(ge=1)
    """Turns the quest stays on the board before it expires."""


class TurnTimer(BaseModel):
    """Countdown measured in turns."""

    initial_value: int = Field(ge=0)
    """Number of turns this timer will take (or has taken) to complete."""

    turns_remaining: int = Field(ge=0)
    """Starts equal to initial_value and counts down to 0."""

    @classmethod
    def start(cls, turns: int) -> TurnTimer:
        return cls(initial_value=turns, turns_remaining=turns)

    @property
    def is_complete(self) -> bool:
        return self.turns_remaining == 0

    def tick(self, delta: int) -> bool:
        """
        Count down by ``delta`` turns, stopping at zero.

        Returns True only if this call brought the timer to zero.
        Timers that were already complete are left alone.
        """
        if self.turns_remaining == 0:
            return False
        self.turns_remaining = max(0, self.turns_remaining - delta)
        return self.turns_remaining == 0


class Quest(BaseModel):
    """A quest tracked by the entity store."""

    id: int = Field(ge=1)
    description: QuestDescription
    status: QuestStatus = QuestStatus.AVAILABLE
    timer: TurnTimer

    @property
    def is_available(self) -> bool:
        return self.status == QuestStatus.AVAILABLE

    @property
    def is_in_progress(self) -> bool:
        return self.status == QuestStatus.IN_PROGRESS

    def begin(self) -> None:
        """Move from AVAILABLE to IN_PROGRESS and re-arm the timer."""
        if self.status != QuestStatus.AVAILABLE:
            raise ValueError(f"Quest {self.id} is not available")
        self.status = QuestStatus.IN_PROGRESS
        self.restart()

    def restart(self) -> None:
        """Re-arm the timer with the full ``turns_to_complete``."""
        self.timer = TurnTimer.start(self.description.turns_to_complete)


def create_quest(
    quest_id: int,
    *,
    difficulty: int,
    turns_to_complete: int,
    turns_to_expiry: int,
    exp_reward: int = 0,
    gold_reward: int = 0,
    item_reward: Item | None = None,
) -> Quest:
    """
    Factory function to create an available quest.

    The timer is armed with ``turns_to_expiry``.
    """
    description = QuestDescription(
        difficulty=difficulty,
        turns_to_complete=turns_to_complete,
        exp_reward=exp_reward,
        gold_reward=gold_reward,
        item_reward=item_reward,
        turns_to_expiry=turns_to_expiry,
    )
    return Quest(
        id=quest_id,
        description=description,
        timer=TurnTimer.start(turns_to_expiry),
    )
