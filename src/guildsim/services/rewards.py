"""Quest reward distribution for guildsim."""

from __future__ import annotations

from dataclasses import dataclass

from guildsim.core import EventBus
from guildsim.db.interfaces import EntityStore
from guildsim.models import GuildLedger, NotificationEvent, QuestComplete


def describe_completion(event: QuestComplete) -> str:
    """Player-facing summary of a finished quest."""
    outcome = "successful" if event.is_successful else "failed"
    return (
        f"Quest completed: {outcome}. Heroes: {list(event.heroes)}, "
        f"Exp Reward: {event.exp_reward}, Gold Reward: {event.gold_reward}, "
        f"Success Probability: {event.success_probability}"
    )


@dataclass
class RewardService:
    """Pays out experience and gold when quests finish."""

    store: EntityStore
    bus: EventBus

    reader: str = "rewards"

    def __post_init__(self) -> None:
        self.bus.register(QuestComplete, self.reader)

    def run(self, ledger: GuildLedger) -> list[QuestComplete]:
        """Apply every QuestComplete emitted since the last run."""
        events = self.bus.read(QuestComplete, self.reader)
        for event in events:
            self.apply(event, ledger)
        return events

    def apply(self, event: QuestComplete, ledger: GuildLedger) -> None:
        """
        Apply one quest result.

        Every hero still in the store gains the experience reward, win or
        lose. Gold only goes to the guild on success.
        """
        for hero_id in event.heroes:
            hero = self.store.get_hero(hero_id)
            if hero is not None:
                hero.level.gain_exp(event.exp_reward)

        if event.is_successful:
            ledger.deposit(event.gold_reward)

        self.bus.emit(NotificationEvent(message=describe_completion(event)))
