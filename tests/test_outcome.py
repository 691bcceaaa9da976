"""Tests for the quest outcome skill."""

from __future__ import annotations

import random

import pytest

from guildsim.models import LevelState, Percent
from guildsim.skills.outcome import (
    PreconditionError,
    hero_effectiveness,
    roll_success,
    success_probability,
)


def _party(*levels: int) -> list[LevelState]:
    return [LevelState(level=level) for level in levels]


class TestSuccessProbability:
    """Tests for the success chance formula."""

    @pytest.mark.parametrize(
        "difficulty,expected",
        [(5, 30), (4, 50), (3, 70), (2, 90), (1, 110)],
    )
    def test_equal_levels(self, difficulty, expected):
        """Three level 3 heroes against each difficulty."""
        assert success_probability(difficulty, _party(3, 3, 3)) == Percent(value=expected)

    @pytest.mark.parametrize(
        "difficulty,expected",
        [(5, 30), (4, 50), (3, 70), (2, 90), (1, 110)],
    )
    def test_mixed_levels_same_average(self, difficulty, expected):
        """Levels 3, 2 and 4 average to level 3."""
        assert success_probability(difficulty, _party(3, 2, 4)) == Percent(value=expected)

    @pytest.mark.parametrize("difficulty,expected", [(4, 56), (3, 76), (2, 96)])
    def test_fractional_average_truncates(self, difficulty, expected):
        """Levels 3, 2 and 5: the average effectiveness is truncated."""
        assert success_probability(difficulty, _party(3, 2, 5)) == Percent(value=expected)

    def test_single_hero(self):
        assert success_probability(1, _party(1)) == Percent(value=70)

    def test_negative_average_truncates_toward_zero(self):
        """(-10 - 10 + 10) / 3 = -3.33, truncated to -3 rather than -4."""
        assert success_probability(5, _party(1, 2)) == Percent(value=0)
        assert success_probability(5, _party(1, 1, 2)) == Percent(value=-3)

    def test_hero_effectiveness(self):
        assert hero_effectiveness(3, 3) == Percent(value=70)
        assert hero_effectiveness(1, 5) == Percent(value=-10)
        assert hero_effectiveness(6, 1) == Percent(value=170)

    def test_no_heroes(self):
        with pytest.raises(PreconditionError):
            success_probability(1, [])

    def test_precondition_error_is_value_error(self):
        with pytest.raises(ValueError):
            success_probability(1, [])


class TestRollSuccess:
    """Tests for rolling an outcome from a chance."""

    def test_above_hundred_always_succeeds(self):
        rng = random.Random(1)
        assert all(roll_success(Percent(value=110), rng) for _ in range(200))

    def test_below_zero_always_fails(self):
        rng = random.Random(1)
        assert not any(roll_success(Percent(value=-10), rng) for _ in range(200))

    def test_zero_always_fails(self):
        rng = random.Random(1)
        assert not any(roll_success(Percent(value=0), rng) for _ in range(200))

    def test_draws_exactly_once(self):
        rng = random.Random(7)
        reference = random.Random(7)

        roll_success(Percent(value=50), rng)
        reference.randrange(100)

        assert rng.getstate() == reference.getstate()

    def test_same_seed_same_outcomes(self):
        first = random.Random(42)
        second = random.Random(42)
        chance = Percent(value=50)

        a = [roll_success(chance, first) for _ in range(50)]
        b = [roll_success(chance, second) for _ in range(50)]

        assert a == b

    def test_rate_roughly_matches_chance(self):
        rng = random.Random(123)
        hits = sum(roll_success(Percent(value=70), rng) for _ in range(10_000))
        assert 6700 < hits < 7300
