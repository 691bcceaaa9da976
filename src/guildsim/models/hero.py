"""
Hero Models for guildsim.

Defines the heroes that belong to the guild: their class, personality,
level progress and relationships with other entities.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class HeroClass(str, Enum):
    """Combat role of a hero."""

    WARRIOR = "Warrior"
    TANK = "Tank"
    SUPPORT = "Support"


class Personality(str, Enum):
    """How a hero forms opinions of party members after a quest."""

    FRIENDLY = "Friendly"  # +1 opinion of party members, regardless of outcome
    RESULT_ORIENTED = "ResultOriented"  # +1 if successful, -1 if not
    MIRROR = "Mirror"  # Moves toward the other person's opinion of them
    JUDGMENTAL = "Judgmental"  # -2 if they get injured, +1 otherwise
    LEARNER = "Learner"  # +1 of anyone stronger, -1 of anyone weaker
    TEACHER = "Teacher"  # +1 of anyone weaker, -1 of anyone stronger


class LevelState(BaseModel):
    """Level and experience progress of a hero."""

    level: int = Field(default=1, ge=1)
    exp: int = Field(default=0, ge=0)
    exp_to_next: int = Field(default=100, ge=0)

    def gain_exp(self, amount: int) -> None:
        """Add experience. Leveling up is handled elsewhere."""
        if amount < 0:
            raise ValueError(f"Experience gain must be non-negative: {amount}")
        self.exp += amount


class Hero(BaseModel):
    """
    A member of the guild.

    ``quest_id`` is the handle of the quest the hero is currently on,
    or None while idle. The store keeps the reverse index.
    """

    id: int = Field(ge=1)
    hero_class: HeroClass
    personality: Personality
    level: LevelState = Field(default_factory=LevelState)

    relationships: dict[int, int] = Field(default_factory=dict)
    """Entity handle -> opinion. No entry until the first interaction."""

    quest_id: int | None = None

    @property
    def is_on_quest(self) -> bool:
        return self.quest_id is not None

    def opinion_of(self, entity_id: int) -> int | None:
        """Opinion of another entity, or None if they never interacted."""
        return self.relationships.get(entity_id)


def create_hero(
    hero_id: int,
    hero_class: HeroClass,
    personality: Personality,
    *,
    level: int = 1,
    exp: int = 0,
    exp_to_next: int = 100,
) -> Hero:
    """
    Factory function to create a hero.

    Args:
        hero_id: Store handle for the hero
        hero_class: Combat role
        personality: Opinion-forming personality
        level: Starting level
        exp: Starting experience
        exp_to_next: Experience needed for the next level

    Returns:
        A new idle Hero instance
    """
    return Hero(
        id=hero_id,
        hero_class=hero_class,
        personality=personality,
        level=LevelState(level=level, exp=exp, exp_to_next=exp_to_next),
    )
