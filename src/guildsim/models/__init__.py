"""
Core Data Models for guildsim.

These models define the records the engine works with: heroes, quests,
their timers, guild-wide state and the events passed between components.
"""

from guildsim.models.event import (
    NotificationEvent,
    QuestComplete,
    StartQuest,
    TimerComplete,
    TurnDelta,
)
from guildsim.models.guild import (
    GuildLedger,
    Notification,
    NotificationLog,
    TurnCounter,
)
from guildsim.models.hero import (
    Hero,
    HeroClass,
    LevelState,
    Personality,
    create_hero,
)
from guildsim.models.percent import Percent
from guildsim.models.quest import (
    Item,
    Quest,
    QuestDescription,
    QuestStatus,
    TurnTimer,
    create_quest,
)

__all__ = [
    # Heroes
    "Hero",
    "HeroClass",
    "LevelState",
    "Personality",
    "create_hero",
    # Quests
    "Item",
    "Quest",
    "QuestDescription",
    "QuestStatus",
    "TurnTimer",
    "create_quest",
    # Guild state
    "GuildLedger",
    "Notification",
    "NotificationLog",
    "TurnCounter",
    "Percent",
    # Events
    "NotificationEvent",
    "QuestComplete",
    "StartQuest",
    "TimerComplete",
    "TurnDelta",
]
