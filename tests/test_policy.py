"""Tests for the pursuer's decision rule in pacpy.policy."""

from __future__ import annotations

import pytest

from pacpy.agents import DOWN, LEFT, NONE, RIGHT, UP, reverse
from pacpy.grid import Grid
from pacpy.policy import DIRECTIONS, candidate_directions, choose_pursuit_direction
from pacpy.rng import LCG

OPEN = ["1" * 21] + ["1" + "0" * 19 + "1" for _ in range(19)] + ["1" * 21]
DEAD_END = [
    "111111",
    "100001",
    "111111",
]


class FixedRng:
    def __init__(self, value):
        self.value = value
        self.calls = 0

    def rand(self):
        self.calls += 1
        return self.value


@pytest.fixture
def open_grid():
    return Grid.from_rows(OPEN)


class TestEnumeration:
    def test_order_is_plus_x_minus_x_plus_y_minus_y(self) -> None:
        assert DIRECTIONS == ((1, 0), (-1, 0), (0, 1), (0, -1))

    def test_reverse_excluded(self, open_grid) -> None:
        assert candidate_directions(open_grid, (10, 10), RIGHT) == [RIGHT, DOWN, UP]

    def test_walls_excluded(self) -> None:
        grid = Grid.from_rows(DEAD_END)
        assert candidate_directions(grid, (2, 1), RIGHT) == [RIGHT]


class TestChoice:
    def test_due_north_prefers_up(self, open_grid) -> None:
        d = choose_pursuit_direction(open_grid, (10, 10), (10, 5), RIGHT, FixedRng(0.99))
        assert d == UP

    def test_misdirection_takes_second_best(self, open_grid) -> None:
        # UP scores 4, RIGHT and DOWN tie at 6; RIGHT wins the tie
        d = choose_pursuit_direction(open_grid, (10, 10), (10, 5), RIGHT, FixedRng(0.0))
        assert d == RIGHT

    def test_misdirection_threshold(self, open_grid) -> None:
        assert choose_pursuit_direction(open_grid, (10, 10), (10, 5), RIGHT, FixedRng(0.15)) == UP
        assert choose_pursuit_direction(open_grid, (10, 10), (10, 5), RIGHT, FixedRng(0.1499)) == RIGHT

    def test_ties_keep_enumeration_order(self, open_grid) -> None:
        # every candidate lands at distance 1 from the target
        assert choose_pursuit_direction(open_grid, (5, 5), (5, 5), UP, FixedRng(0.99)) == RIGHT
        assert choose_pursuit_direction(open_grid, (5, 5), (5, 5), UP, FixedRng(0.0)) == LEFT

    def test_single_candidate_ignores_misdirection(self) -> None:
        grid = Grid.from_rows(DEAD_END)
        assert choose_pursuit_direction(grid, (2, 1), (1, 1), RIGHT, FixedRng(0.0)) == RIGHT

    def test_forced_reversal(self) -> None:
        grid = Grid.from_rows(DEAD_END)
        rng = FixedRng(0.0)
        assert choose_pursuit_direction(grid, (4, 1), (1, 1), RIGHT, rng) == LEFT
        # no random draw when the reversal is forced
        assert rng.calls == 0

    def test_enclosed_idle_pursuer_stays_idle(self) -> None:
        grid = Grid.from_rows(["111", "101", "111"])
        assert choose_pursuit_direction(grid, (1, 1), (1, 1), NONE, FixedRng(0.5)) == NONE

    def test_empirical_misdirection_split(self, open_grid) -> None:
        rng = LCG(2025)
        trials = 10_000
        best = sum(
            1 for _ in range(trials)
            if choose_pursuit_direction(open_grid, (10, 10), (10, 5), RIGHT, rng) == UP
        )
        assert abs(best / trials - 0.85) < 0.02


class TestProperties:
    def test_never_into_wall_and_never_needless_reverse(self) -> None:
        grid = Grid.default()
        rng = LCG(11)
        target = (14, 17)
        for y in range(grid.rows):
            for x in range(grid.cols):
                for current in DIRECTIONS:
                    d = choose_pursuit_direction(grid, (x, y), target, current, rng)
                    legal = candidate_directions(grid, (x, y), current)
                    if legal:
                        assert d in legal
                        assert d != reverse(current)
                        assert not grid.is_wall(x + d[0], y + d[1])
                    else:
                        assert d == reverse(current)
