"""Tests for the turn clock service."""

from __future__ import annotations

import pytest

from guildsim.core import EventBus
from guildsim.db import InMemoryEntityStore
from guildsim.models import NotificationEvent, TimerComplete, TurnCounter, TurnDelta
from guildsim.services import TurnClock


@pytest.fixture
def store():
    return InMemoryEntityStore()


@pytest.fixture
def bus():
    bus = EventBus()
    bus.register(NotificationEvent, "test")
    bus.register(TimerComplete, "test")
    return bus


@pytest.fixture
def clock(store, bus):
    return TurnClock(store=store, bus=bus)


def _notes(bus):
    return [e.message for e in bus.read(NotificationEvent, "test")]


def _completed(bus):
    return [e.entity for e in bus.read(TimerComplete, "test")]


class TestTurnCounter:
    """Tests for advancing the global turn."""

    def test_deltas_are_summed(self, clock, bus):
        turn = TurnCounter()
        bus.emit(TurnDelta(amount=3))
        bus.emit(TurnDelta(amount=2))

        assert clock.run(turn) == 5
        assert turn.value == 5

    def test_one_notification_per_run(self, clock, bus):
        turn = TurnCounter()
        bus.emit(TurnDelta(amount=3))
        bus.emit(TurnDelta(amount=2))

        clock.run(turn)

        assert _notes(bus) == ["Turn advanced by 5. Current turn: 5"]

    def test_notification_text(self, clock, bus):
        turn = TurnCounter()
        bus.emit(TurnDelta(amount=1))
        clock.run(turn)
        assert _notes(bus) == ["Turn advanced by 1. Current turn: 1"]

    def test_turn_accumulates_across_runs(self, clock, bus):
        turn = TurnCounter()
        for amount in (1, 4, 2):
            bus.emit(TurnDelta(amount=amount))
            clock.run(turn)

        assert turn.value == 7
        assert _notes(bus)[-1] == "Turn advanced by 2. Current turn: 7"

    def test_zero_delta_still_notifies(self, clock, bus):
        turn = TurnCounter()
        clock.run(turn)

        assert turn.value == 0
        assert _notes(bus) == ["Turn advanced by 0. Current turn: 0"]

    def test_zero_delta_notification_can_be_disabled(self, store, bus):
        clock = TurnClock(store=store, bus=bus, notify_on_zero_delta=False)
        clock.run(TurnCounter())
        assert _notes(bus) == []


class TestTimers:
    """Tests for counting down timers."""

    def test_deltas_applied_together(self, clock, bus, store):
        quest = store.spawn_quest(difficulty=1, turns_to_complete=5, turns_to_expiry=5)
        bus.emit(TurnDelta(amount=1))
        bus.emit(TurnDelta(amount=2))

        clock.run(TurnCounter())

        assert quest.timer.turns_remaining == 2
        assert _completed(bus) == []

    def test_completion_event(self, clock, bus, store):
        quest = store.spawn_quest(difficulty=1, turns_to_complete=5, turns_to_expiry=5)
        bus.emit(TurnDelta(amount=5))

        clock.run(TurnCounter())

        assert quest.timer.turns_remaining == 0
        assert _completed(bus) == [quest.id]

    def test_overshoot_floors_at_zero(self, clock, store):
        quest = store.spawn_quest(difficulty=1, turns_to_complete=5, turns_to_expiry=5)
        assert clock.advance(TurnCounter(), 50) == [quest.id]
        assert quest.timer.turns_remaining == 0

    def test_finished_timer_does_not_fire_again(self, clock, bus, store):
        quest = store.spawn_quest(difficulty=1, turns_to_complete=5, turns_to_expiry=5)
        turn = TurnCounter()
        clock.advance(turn, 5)
        _completed(bus)

        for delta in (1, 2, 5):
            clock.advance(turn, delta)

        assert _completed(bus) == []
        assert quest.timer.turns_remaining == 0

    def test_all_timers_advance(self, clock, bus, store):
        short = store.spawn_quest(difficulty=1, turns_to_complete=5, turns_to_expiry=2)
        long = store.spawn_quest(difficulty=1, turns_to_complete=5, turns_to_expiry=4)
        also_short = store.spawn_quest(difficulty=1, turns_to_complete=5, turns_to_expiry=1)

        clock.advance(TurnCounter(), 2)

        assert long.timer.turns_remaining == 2
        assert _completed(bus) == [short.id, also_short.id]
