"""
Core Engine for guildsim.

The engine orchestrates one simulation cycle at a time:
- Turn advancement (clock and timers)
- Quest lifecycle (start, expiry, resolution)
- Rewards (experience and gold)
- Notifications
"""

from __future__ import annotations

from guildsim.engine.models import (
    DEFAULT_SEED,
    CycleResult,
    SimulationConfig,
    SimulationState,
)
from guildsim.engine.simulation import GuildSimulation

__all__ = [
    # Main engine
    "GuildSimulation",
    # Models
    "CycleResult",
    "DEFAULT_SEED",
    "SimulationConfig",
    "SimulationState",
]
