"""
Guild Simulation for guildsim.

The orchestration layer that runs simulation cycles. One cycle runs
every component once, in a fixed order:

1. Announce heroes added since the last cycle
2. Start quests heroes were committed to
3. Advance the turn counter and all timers
4. Expire or resolve quests whose timers ran out
5. Pay out rewards for resolved quests
6. Record notifications

Each step consumes what the earlier steps of the same cycle produced.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from guildsim.db import EntityStore
from guildsim.engine.models import CycleResult, SimulationConfig, SimulationState
from guildsim.models import Hero, Quest, QuestComplete, StartQuest, TurnDelta
from guildsim.services import (
    HeroAnnouncer,
    NotificationSink,
    QuestLifecycle,
    RewardService,
    TurnClock,
)
from guildsim.services.notifications import NotificationObserver

logger = logging.getLogger(__name__)

# Reader name used to expose QuestComplete events to callers
_RESULT_READER = "cycle_result"


@dataclass
class GuildSimulation:
    """
    Turn-based quest simulation for one guild.

    Owns all mutable state. External collaborators feed it TurnDelta and
    StartQuest events through ``send`` and call ``run_cycle``.
    """

    config: SimulationConfig = field(default_factory=SimulationConfig)
    state: SimulationState = field(init=False)

    # Components (initialized in __post_init__)
    announcer: HeroAnnouncer = field(init=False)
    lifecycle: QuestLifecycle = field(init=False)
    clock: TurnClock = field(init=False)
    rewards: RewardService = field(init=False)
    sink: NotificationSink = field(init=False)

    cycles_run: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        """Initialize state and components."""
        self.state = SimulationState.seeded(self.config.seed)
        store, bus = self.state.store, self.state.bus

        self.announcer = HeroAnnouncer(store=store, bus=bus)
        self.lifecycle = QuestLifecycle(store=store, bus=bus)
        self.clock = TurnClock(
            store=store,
            bus=bus,
            notify_on_zero_delta=self.config.notify_on_zero_delta,
        )
        self.rewards = RewardService(store=store, bus=bus)
        self.sink = NotificationSink(bus=bus)

        bus.register(QuestComplete, _RESULT_READER)

    @property
    def store(self) -> EntityStore:
        return self.state.store

    @property
    def turn(self) -> int:
        return self.state.turn.value

    @property
    def gold(self) -> int:
        return self.state.ledger.gold

    # =========================================================================
    # Input
    # =========================================================================

    def send(self, event: TurnDelta | StartQuest) -> None:
        """Queue an external event for the next cycle."""
        if not isinstance(event, (TurnDelta, StartQuest)):
            raise TypeError(f"Unsupported external event: {type(event).__name__}")
        self.state.bus.emit(event)

    def start_quest(self, quest_id: int, hero_ids: list[int]) -> None:
        """Commit heroes to a quest on the next cycle."""
        self.send(StartQuest(quest=quest_id, heroes=tuple(hero_ids)))

    def advance(self, turns: int = 1) -> CycleResult:
        """Advance by ``turns`` and run one cycle."""
        self.send(TurnDelta(amount=turns))
        return self.run_cycle()

    def subscribe(self, observer: NotificationObserver) -> None:
        """Receive every notification as it is recorded."""
        self.sink.subscribe(observer)

    # =========================================================================
    # Cycle
    # =========================================================================

    def run_cycle(self) -> CycleResult:
        """Run every component once in order and report what happened."""
        state = self.state

        self.announcer.run()
        started = self.lifecycle.run_starts()
        delta = self.clock.run(state.turn)
        timers = self.lifecycle.run_timers(state.rng)
        self.rewards.run(state.ledger)
        recorded = self.sink.run(state.notifications)

        completed = state.bus.read(QuestComplete, _RESULT_READER)
        state.bus.end_cycle()
        self.cycles_run += 1

        logger.debug(
            "Cycle %d: turn=%d started=%s expired=%s completed=%d",
            self.cycles_run,
            state.turn.value,
            started,
            timers.expired,
            len(completed),
        )

        return CycleResult(
            cycle=self.cycles_run,
            turn=state.turn.value,
            turn_delta=delta,
            gold=state.ledger.gold,
            quests_started=started,
            quests_expired=timers.expired,
            quests_completed=completed,
            notifications=[n.message for n in recorded],
        )

    # =========================================================================
    # Queries
    # =========================================================================

    def heroes(self) -> list[Hero]:
        return self.state.store.heroes()

    def quests(self) -> list[Quest]:
        return self.state.store.quests()
