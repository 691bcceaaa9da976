"""
guildsim: turn-based quest simulation for a guild of heroes.

Heroes are sent on timed quests; each turn advances every timer, quests
that run out either expire or are resolved with a seeded dice roll, and
rewards flow back to the heroes and the guild ledger.
"""

__version__ = "0.1.0"
