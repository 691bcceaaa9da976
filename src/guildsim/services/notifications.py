"""
Notification Service for guildsim.

Moves NotificationEvents into the notification log, and announces heroes
who joined the guild.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from guildsim.core import EventBus
from guildsim.db.interfaces import EntityStore
from guildsim.models import Notification, NotificationEvent, NotificationLog

logger = logging.getLogger(__name__)

NotificationObserver = Callable[[Notification], None]


@dataclass
class NotificationSink:
    """
    Final stop for NotificationEvents.

    Every message is appended to the log as unread, logged, and passed to
    each observer (e.g. a display).
    """

    bus: EventBus
    observers: list[NotificationObserver] = field(default_factory=list)

    reader: str = "notification_sink"

    def __post_init__(self) -> None:
        self.bus.register(NotificationEvent, self.reader)

    def subscribe(self, observer: NotificationObserver) -> None:
        self.observers.append(observer)

    def run(self, log: NotificationLog) -> list[Notification]:
        """Record every NotificationEvent emitted since the last run."""
        recorded: list[Notification] = []
        for event in self.bus.read(NotificationEvent, self.reader):
            notification = log.append(event.message)
            logger.info("Notification: %s", notification.message)
            for observer in self.observers:
                observer(notification)
            recorded.append(notification)
        return recorded


@dataclass
class HeroAnnouncer:
    """Announces heroes added to the store since the last run."""

    store: EntityStore
    bus: EventBus

    def run(self) -> list[int]:
        announced: list[int] = []
        for hero_id in self.store.drain_added_heroes():
            hero = self.store.get_hero(hero_id)
            if hero is None:
                continue
            self.bus.emit(
                NotificationEvent(
                    message=(
                        f"New hero created: Level: {hero.level.level}, "
                        f"Class: {hero.hero_class.value}, "
                        f"Personality: {hero.personality.value}"
                    )
                )
            )
            announced.append(hero_id)
        return announced
