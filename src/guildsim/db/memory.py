"""
In-memory implementation of the entity store.

Records live in plain dictionaries keyed by handle; dicts keep insertion
order, so every listing is in creation order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from guildsim.models import (
    Hero,
    HeroClass,
    Item,
    Personality,
    Quest,
    QuestStatus,
    TurnTimer,
    create_hero,
    create_quest,
)

logger = logging.getLogger(__name__)


class InMemoryEntityStore:
    """
    In-memory implementation of EntityStore.

    Records returned by the getters are the live objects; callers mutate
    them in place. The hero -> quest link is stored on the hero
    (``Hero.quest_id``) and mirrored in ``_children``.
    """

    def __init__(self) -> None:
        self._next_id = 0
        self._heroes: dict[int, Hero] = {}
        self._quests: dict[int, Quest] = {}

        # quest handle -> hero handles in link order
        self._children: dict[int, list[int]] = {}

        self._added_heroes: list[int] = []

    def _allocate(self) -> int:
        self._next_id += 1
        return self._next_id

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
        hero = create_hero(
            self._allocate(),
            hero_class,
            personality,
            level=level,
            exp=exp,
            exp_to_next=exp_to_next,
        )
        self._heroes[hero.id] = hero
        self._added_heroes.append(hero.id)
        return hero

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
        quest = create_quest(
            self._allocate(),
            difficulty=difficulty,
            turns_to_complete=turns_to_complete,
            turns_to_expiry=turns_to_expiry,
            exp_reward=exp_reward,
            gold_reward=gold_reward,
            item_reward=item_reward,
        )
        self._quests[quest.id] = quest
        return quest

    def despawn(self, entity_id: int) -> bool:
        """
        Remove an entity.

        Heroes are unlinked from their quest first. A quest that still has
        heroes linked to it cannot be removed; unlink them beforehand.
        """
        if entity_id in self._heroes:
            self.unlink_hero(entity_id)
            del self._heroes[entity_id]
            if entity_id in self._added_heroes:
                self._added_heroes.remove(entity_id)
            return True

        if entity_id in self._quests:
            if self._children.get(entity_id):
                raise ValueError(
                    f"Quest {entity_id} still has heroes linked: {self._children[entity_id]}"
                )
            self._children.pop(entity_id, None)
            del self._quests[entity_id]
            return True

        return False

    def exists(self, entity_id: int) -> bool:
        """Check whether an entity is alive."""
        return entity_id in self._heroes or entity_id in self._quests

    def get_hero(self, hero_id: int) -> Hero | None:
        """Get a hero by handle."""
        return self._heroes.get(hero_id)

    def get_quest(self, quest_id: int) -> Quest | None:
        """Get a quest by handle."""
        return self._quests.get(quest_id)

    def heroes(self) -> list[Hero]:
        """All heroes in creation order."""
        return list(self._heroes.values())

    def quests(self, status: QuestStatus | None = None) -> list[Quest]:
        """All quests in creation order, optionally filtered by status."""
        if status is None:
            return list(self._quests.values())
        return [q for q in self._quests.values() if q.status == status]

    def timers(self) -> Iterator[tuple[int, TurnTimer]]:
        """Yield (owner handle, timer) for every live timer."""
        for quest in list(self._quests.values()):
            yield quest.id, quest.timer

    # Quest/hero relation
    def link_hero(self, hero_id: int, quest_id: int) -> None:
        """Make the hero a child of the quest, replacing any prior link."""
        hero = self._heroes.get(hero_id)
        if hero is None:
            raise ValueError(f"Hero {hero_id} does not exist")
        if quest_id not in self._quests:
            raise ValueError(f"Quest {quest_id} does not exist")

        if hero.quest_id == quest_id:
            return
        if hero.quest_id is not None:
            logger.debug("Hero %s moved from quest %s to quest %s", hero_id, hero.quest_id, quest_id)
        self.unlink_hero(hero_id)

        hero.quest_id = quest_id
        self._children.setdefault(quest_id, []).append(hero_id)

    def unlink_hero(self, hero_id: int) -> None:
        """Detach the hero from its quest, if any."""
        hero = self._heroes.get(hero_id)
        if hero is None or hero.quest_id is None:
            return

        siblings = self._children.get(hero.quest_id, [])
        if hero_id in siblings:
            siblings.remove(hero_id)
        if not siblings:
            self._children.pop(hero.quest_id, None)
        hero.quest_id = None

    def children_of(self, quest_id: int) -> list[int]:
        """Heroes linked to the quest, in link order."""
        return list(self._children.get(quest_id, []))

    # Change tracking
    def drain_added_heroes(self) -> list[int]:
        """Heroes created since the last drain, in creation order."""
        added = self._added_heroes
        self._added_heroes = []
        return added

    def __repr__(self) -> str:
        return f"InMemoryEntityStore(heroes={len(self._heroes)}, quests={len(self._quests)})"
