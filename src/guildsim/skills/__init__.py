"""
Stateless Skills for guildsim.

Skills are pure functions that:
- Take structured input (pydantic models)
- Execute game rules
- Return structured output
- NEVER hold state between calls (randomness is passed in)
"""

from guildsim.skills.outcome import (
    BASELINE_EFFECTIVENESS,
    EFFECTIVENESS_PER_LEVEL,
    PreconditionError,
    hero_effectiveness,
    roll_success,
    success_probability,
)

__all__ = [
    "BASELINE_EFFECTIVENESS",
    "EFFECTIVENESS_PER_LEVEL",
    "PreconditionError",
    "hero_effectiveness",
    "roll_success",
    "success_probability",
]
