"""Pre-built content for guildsim."""

from guildsim.content.starter_guild import StarterGuildResult, create_starter_guild

__all__ = ["StarterGuildResult", "create_starter_guild"]
