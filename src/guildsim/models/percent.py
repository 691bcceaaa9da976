"""Percent value used for quest success chances."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Percent(BaseModel):
    """
    A percentage, normally 0-100.

    Values below 0 or above 100 are allowed while modifiers are being
    added together; they are only clamped when turned into a chance.
    """

    model_config = ConfigDict(frozen=True)

    value: int

    def __add__(self, other: Percent) -> Percent:
        return Percent(value=self.value + other.value)

    def __sub__(self, other: Percent) -> Percent:
        return Percent(value=self.value - other.value)

    def clamped(self) -> int:
        """The value limited to the 0-100 range."""
        return max(0, min(100, self.value))

    def __str__(self) -> str:
        return f"{self.value}%"
