"""Tests for the notification sink and hero announcements."""

from __future__ import annotations

import logging

import pytest

from guildsim.core import EventBus
from guildsim.db import InMemoryEntityStore
from guildsim.models import HeroClass, NotificationEvent, NotificationLog, Personality
from guildsim.services import HeroAnnouncer, NotificationSink


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def store():
    return InMemoryEntityStore()


class TestNotificationSink:
    """Tests for recording notifications."""

    def test_appends_unread(self, bus):
        sink = NotificationSink(bus=bus)
        log = NotificationLog()
        bus.emit(NotificationEvent(message="first"))
        bus.emit(NotificationEvent(message="second"))

        recorded = sink.run(log)

        assert [n.message for n in recorded] == ["first", "second"]
        assert log.messages == ["first", "second"]
        assert all(n.is_unread for n in log.entries)

    def test_each_event_recorded_once(self, bus):
        sink = NotificationSink(bus=bus)
        log = NotificationLog()
        bus.emit(NotificationEvent(message="only once"))

        sink.run(log)
        sink.run(log)

        assert log.messages == ["only once"]

    def test_observers_receive_notifications(self, bus):
        seen = []
        sink = NotificationSink(bus=bus)
        sink.subscribe(lambda n: seen.append(n.message))
        bus.emit(NotificationEvent(message="hello"))

        sink.run(NotificationLog())

        assert seen == ["hello"]

    def test_logged_at_info(self, bus, caplog):
        sink = NotificationSink(bus=bus)
        bus.emit(NotificationEvent(message="logged"))

        with caplog.at_level(logging.INFO, logger="guildsim.services.notifications"):
            sink.run(NotificationLog())

        assert "Notification: logged" in caplog.text


class TestHeroAnnouncer:
    """Tests for announcing new heroes."""

    def test_announces_new_heroes(self, bus, store):
        bus.register(NotificationEvent, "test")
        store.spawn_hero(HeroClass.WARRIOR, Personality.FRIENDLY)
        store.spawn_hero(HeroClass.TANK, Personality.RESULT_ORIENTED, level=2)

        HeroAnnouncer(store=store, bus=bus).run()
        messages = [e.message for e in bus.read(NotificationEvent, "test")]

        assert messages == [
            "New hero created: Level: 1, Class: Warrior, Personality: Friendly",
            "New hero created: Level: 2, Class: Tank, Personality: ResultOriented",
        ]

    def test_announces_once(self, bus, store):
        bus.register(NotificationEvent, "test")
        hero = store.spawn_hero(HeroClass.SUPPORT, Personality.TEACHER)
        announcer = HeroAnnouncer(store=store, bus=bus)

        assert announcer.run() == [hero.id]
        hero.level.gain_exp(10)
        assert announcer.run() == []
