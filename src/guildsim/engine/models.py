"""
Engine Data Models for guildsim.

Defines the configuration, the owned simulation state and the
per-cycle result returned to the caller.
"""

from __future__ import annotations

import os
import random
from dataclasses import dataclass, field

from pydantic import BaseModel, Field

from guildsim.core import EventBus
from guildsim.db import EntityStore, InMemoryEntityStore
from guildsim.models import GuildLedger, NotificationLog, QuestComplete, TurnCounter

DEFAULT_SEED = 42


def _env_flag(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


class SimulationConfig(BaseModel):
    """
    Simulation configuration.

    Configuration via environment variables (see ``from_env``):
        GUILDSIM_SEED: Seed for the random source (default: 42)
        GUILDSIM_NOTIFY_ON_ZERO_DELTA: Announce turns that advanced by 0
    """

    seed: int = DEFAULT_SEED
    notify_on_zero_delta: bool = True

    @classmethod
    def from_env(cls, **overrides: object) -> SimulationConfig:
        """Build a config from the environment. Keyword overrides win."""
        values: dict[str, object] = {}
        if os.getenv("GUILDSIM_SEED"):
            values["seed"] = int(os.getenv("GUILDSIM_SEED", str(DEFAULT_SEED)))
        if os.getenv("GUILDSIM_NOTIFY_ON_ZERO_DELTA"):
            values["notify_on_zero_delta"] = _env_flag(
                os.getenv("GUILDSIM_NOTIFY_ON_ZERO_DELTA", "true")
            )
        values.update(overrides)
        return cls(**values)


@dataclass
class SimulationState:
    """
    Everything the engine mutates.

    Owned by one GuildSimulation; components receive the pieces they
    need for the step they are running.
    """

    store: EntityStore = field(default_factory=InMemoryEntityStore)
    bus: EventBus = field(default_factory=EventBus)
    turn: TurnCounter = field(default_factory=TurnCounter)
    ledger: GuildLedger = field(default_factory=GuildLedger)
    notifications: NotificationLog = field(default_factory=NotificationLog)
    rng: random.Random = field(default_factory=lambda: random.Random(DEFAULT_SEED))

    @classmethod
    def seeded(cls, seed: int) -> SimulationState:
        return cls(rng=random.Random(seed))


class CycleResult(BaseModel):
    """Result of one simulation cycle."""

    cycle: int = Field(description="1-based number of the cycle that ran")
    turn: int = Field(description="Turn counter after the cycle")
    turn_delta: int = 0
    gold: int = Field(description="Guild gold after the cycle")

    quests_started: list[int] = Field(default_factory=list)
    quests_expired: list[int] = Field(default_factory=list)
    quests_completed: list[QuestComplete] = Field(default_factory=list)

    notifications: list[str] = Field(
        default_factory=list, description="Messages logged during the cycle"
    )
