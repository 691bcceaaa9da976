"""
Event Models for guildsim.

Events are immutable records passed between the engine components
through the event bus during a cycle.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from guildsim.models.percent import Percent
from guildsim.models.quest import QuestDescription


class TurnDelta(BaseModel):
    """Request to advance the game by ``amount`` turns."""

    model_config = ConfigDict(frozen=True)

    amount: int = Field(ge=0)


class TimerComplete(BaseModel):
    """The countdown timer attached to ``entity`` reached zero."""

    model_config = ConfigDict(frozen=True)

    entity: int


class StartQuest(BaseModel):
    """The player committed ``heroes`` to ``quest``."""

    model_config = ConfigDict(frozen=True)

    quest: int
    heroes: tuple[int, ...] = ()


class QuestComplete(BaseModel):
    """An in-progress quest was resolved."""

    model_config = ConfigDict(frozen=True)

    quest_description: QuestDescription
    heroes: tuple[int, ...]
    """Heroes that were on the quest."""

    success_probability: Percent
    is_successful: bool
    exp_reward: int = Field(ge=0)
    """Experience for each hero, granted regardless of success."""

    gold_reward: int = Field(ge=0)
    """Gold for the guild, zero unless successful."""


class NotificationEvent(BaseModel):
    """A human-readable message for the notification log."""

    model_config = ConfigDict(frozen=True)

    message: str
