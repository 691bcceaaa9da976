"""
Storage layer for guildsim.

Provides the entity store interface and its in-memory implementation.
Persistence is left to external collaborators.
"""

from __future__ import annotations

from guildsim.db.interfaces import EntityStore
from guildsim.db.memory import InMemoryEntityStore

__all__ = [
    "EntityStore",
    "InMemoryEntityStore",
]
