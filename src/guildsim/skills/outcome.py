"""
Quest Outcome Skill.

Computes a party's chance of completing a quest and rolls the result
against a seeded random source, so a run can be replayed exactly.
"""

from __future__ import annotations

import random
from collections.abc import Sequence

from guildsim.models import LevelState, Percent

# Effectiveness percentage if hero level matches difficulty level
BASELINE_EFFECTIVENESS = 70

# Effectiveness gained for each level above the difficulty (lost below it)
EFFECTIVENESS_PER_LEVEL = 20


class PreconditionError(ValueError):
    """Raised when a skill is called with input it cannot work with."""


def hero_effectiveness(level: int, difficulty: int) -> Percent:
    """Effectiveness of a single hero against a quest difficulty."""
    return Percent(value=BASELINE_EFFECTIVENESS + (level - difficulty) * EFFECTIVENESS_PER_LEVEL)


def success_probability(difficulty: int, heroes: Sequence[LevelState]) -> Percent:
    """
    Chance that a party completes a quest.

    The average of every hero's effectiveness, truncated to an integer.
    The result is not clamped and may fall outside 0-100.

    Args:
        difficulty: Quest difficulty level
        heroes: Level state of each hero on the quest

    Returns:
        Success chance as a Percent

    Raises:
        PreconditionError: If ``heroes`` is empty

    Examples:
        >>> success_probability(4, [LevelState(level=3), LevelState(level=2), LevelState(level=5)])
        Percent(value=56)
    """
    if not heroes:
        raise PreconditionError("Cannot compute success probability without heroes")

    total = sum(hero_effectiveness(h.level, difficulty).value for h in heroes)
    # Truncate toward zero, not toward negative infinity
    average = abs(total) // len(heroes)
    return Percent(value=average if total >= 0 else -average)


def roll_success(chance: Percent, rng: random.Random) -> bool:
    """
    Roll a quest outcome.

    Draws exactly one number from ``rng``. The chance is clamped to
    0-100 first, so 0 always fails and 100 always succeeds.
    """
    return rng.randrange(100) < chance.clamped()
