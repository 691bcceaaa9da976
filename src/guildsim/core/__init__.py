"""
Core plumbing for guildsim.

The event bus lives here so that services and the engine can both
depend on it without importing each other.
"""

from __future__ import annotations

from guildsim.core.bus import EventBus

__all__ = ["EventBus"]
