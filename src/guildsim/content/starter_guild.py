"""
Starter Guild for guildsim.

Provides a small pre-built guild so a simulation can be run straight
away: two fresh heroes and one easy quest on the board.
"""

from __future__ import annotations

from dataclasses import dataclass

from guildsim.db.interfaces import EntityStore
from guildsim.models import HeroClass, Personality


@dataclass
class StarterGuildResult:
    """Result of creating a starter guild."""

    heroes: dict[str, int]  # name -> handle
    quests: dict[str, int]  # name -> handle


def create_starter_guild(store: EntityStore) -> StarterGuildResult:
    """
    Populate ``store`` with the starter guild.

    Returns:
    - A level 1 Warrior (Friendly) and a level 1 Tank (ResultOriented)
    - A difficulty 1 quest taking 5 turns, worth 50 exp and 100 gold,
      that expires after 10 turns on the board
    """
    warrior = store.spawn_hero(HeroClass.WARRIOR, Personality.FRIENDLY)
    tank = store.spawn_hero(HeroClass.TANK, Personality.RESULT_ORIENTED)

    quest = store.spawn_quest(
        difficulty=1,
        turns_to_complete=5,
        exp_reward=50,
        gold_reward=100,
        turns_to_expiry=10,
    )

    return StarterGuildResult(
        heroes={"warrior": warrior.id, "tank": tank.id},
        quests={"first_contract": quest.id},
    )
