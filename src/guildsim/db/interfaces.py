"""
Entity store interface for guildsim.

Uses a Protocol class to define the contract for entity storage.
The engine only depends on this interface.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from guildsim.models import Hero, HeroClass, Item, Personality, Quest, QuestStatus, TurnTimer


class EntityStore(Protocol):
    """
    Interface for entity storage.

    Entities are identified by opaque positive integer handles that are
    never reused. Heroes can be linked to at most one quest; the store
    keeps the quest -> heroes reverse index in link order.
    """

    # Entity operations
    def spawn_hero(
        self,
        hero_class: HeroClass,
        personality: Personality,
        *,
        level: int = 1,
        exp: int = 0,
        exp_to_next: int = 100,
    ) -> Hero:
        """Create a hero and return it."""
        ...

    def spawn_quest(
        self,
        *,
        difficulty: int,
        turns_to_complete: int,
        turns_to_expiry: int,
        exp_reward: int = 0,
        gold_reward: int = 0,
        item_reward: Item | None = None,
    ) -> Quest:
        """Create an available quest and return it."""
        ...

    def despawn(self, entity_id: int) -> bool:
        """Remove an entity. Returns False if it did not exist."""
        ...

    def exists(self, entity_id: int) -> bool:
        """Check whether an entity is alive."""
        ...

    def get_hero(self, hero_id: int) -> Hero | None:
        """Get a hero by handle."""
        ...

    def get_quest(self, quest_id: int) -> Quest | None:
        """Get a quest by handle."""
        ...

    def heroes(self) -> list[Hero]:
        """All heroes in creation order."""
        ...

    def quests(self, status: QuestStatus | None = None) -> list[Quest]:
        """All quests in creation order, optionally filtered by status."""
        ...

    def timers(self) -> Iterator[tuple[int, TurnTimer]]:
        """Yield (owner handle, timer) for every live timer."""
        ...

    # Quest/hero relation
    def link_hero(self, hero_id: int, quest_id: int) -> None:
        """Make the hero a child of the quest, replacing any prior link."""
        ...

    def unlink_hero(self, hero_id: int) -> None:
        """Detach the hero from its quest, if any."""
        ...

    def children_of(self, quest_id: int) -> list[int]:
        """Heroes linked to the quest, in link order."""
        ...

    # Change tracking
    def drain_added_heroes(self) -> list[int]:
        """Heroes created since the last drain, in creation order."""
        ...
