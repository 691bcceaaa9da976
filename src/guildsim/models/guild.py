"""
Guild-wide state for guildsim.

The turn counter, the gold ledger and the notification log. One
instance of each is owned by the simulation state.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class TurnCounter(BaseModel):
    """Current game turn. Only ever increases."""

    value: int = Field(default=0, ge=0)

    def advance(self, delta: int) -> int:
        if delta < 0:
            raise ValueError(f"Turn delta must be non-negative: {delta}")
        self.value += delta
        return self.value


class GuildLedger(BaseModel):
    """The guild's treasury."""

    gold: int = Field(default=0, ge=0)

    def deposit(self, amount: int) -> None:
        if amount < 0:
            raise ValueError(f"Deposit must be non-negative: {amount}")
        self.gold += amount


class Notification(BaseModel):
    """A message shown to the player."""

    message: str
    is_unread: bool = True


class NotificationLog(BaseModel):
    """Append-only list of notifications, oldest first."""

    entries: list[Notification] = Field(default_factory=list)

    def append(self, message: str) -> Notification:
        notification = Notification(message=message)
        self.entries.append(notification)
        return notification

    def unread(self) -> list[Notification]:
        return [n for n in self.entries if n.is_unread]

    def mark_all_read(self) -> int:
        """Mark every notification as read. Returns how many changed."""
        changed = 0
        for notification in self.entries:
            if notification.is_unread:
                notification.is_unread = False
                changed += 1
        return changed

    @property
    def messages(self) -> list[str]:
        return [n.message for n in self.entries]

    def __len__(self) -> int:
        return len(self.entries)
