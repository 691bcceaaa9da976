"""
Service layer for guildsim.

Each service is one step of the simulation cycle. Services read their
input events from the bus and emit the events the next step consumes.
"""

from __future__ import annotations

from guildsim.services.clock import TurnClock
from guildsim.services.lifecycle import LifecycleResult, QuestLifecycle
from guildsim.services.notifications import HeroAnnouncer, NotificationSink
from guildsim.services.rewards import RewardService, describe_completion

__all__ = [
    "HeroAnnouncer",
    "LifecycleResult",
    "NotificationSink",
    "QuestLifecycle",
    "RewardService",
    "TurnClock",
    "describe_completion",
]
