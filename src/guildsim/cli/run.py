"""
Headless runner for guildsim.

Builds the starter guild, optionally sends both heroes on the starter
quest, advances the requested number of turns and prints the
notification log.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from guildsim.content import create_starter_guild
from guildsim.engine import GuildSimulation, SimulationConfig
from guildsim.models import Notification


def run_simulation(
    turns: int = 10,
    delta: int = 1,
    seed: int | None = None,
    start_quest: bool = True,
    echo: bool = True,
) -> GuildSimulation:
    """
    Run the starter guild for ``turns`` cycles of ``delta`` turns each.

    Args:
        turns: Number of cycles to run
        delta: Turns to advance per cycle
        seed: Random seed (default: from environment, else 42)
        start_quest: Send both starter heroes on the starter quest
        echo: Print notifications as they are recorded

    Returns:
        The simulation after the last cycle
    """
    config = SimulationConfig.from_env() if seed is None else SimulationConfig.from_env(seed=seed)
    sim = GuildSimulation(config=config)
    if echo:
        sim.subscribe(_print_notification)

    guild = create_starter_guild(sim.store)
    if start_quest:
        sim.start_quest(guild.quests["first_contract"], list(guild.heroes.values()))

    for _ in range(turns):
        sim.advance(delta)

    return sim


def _print_notification(notification: Notification) -> None:
    print(f"  * {notification.message}")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="guildsim quest simulation")
    parser.add_argument("--turns", type=int, default=10, help="Number of cycles to run")
    parser.add_argument("--delta", type=int, default=1, help="Turns to advance per cycle")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--idle",
        action="store_true",
        help="Leave the starter quest on the board instead of starting it",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level",
    )

    args = parser.parse_args(argv)
    if args.turns < 0 or args.delta < 0:
        parser.error("--turns and --delta must be non-negative")

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    sim = run_simulation(
        turns=args.turns,
        delta=args.delta,
        seed=args.seed,
        start_quest=not args.idle,
    )

    print(f"\nTurn {sim.turn}, guild gold: {sim.gold}")
    for hero in sim.heroes():
        print(
            f"  Hero {hero.id}: {hero.hero_class.value} level {hero.level.level}, "
            f"{hero.level.exp}/{hero.level.exp_to_next} exp"
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
