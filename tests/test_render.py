"""Tests for the drawing pass in pacpy.render."""

from __future__ import annotations

import math

import pygame
import pytest

from pacpy.config import BG_COLOR, GHOST_COLOR, PELLET_COLOR, WALL_INNER, WALL_OUTER, GameConfig
from pacpy.grid import Grid
from pacpy.render import draw_grid, draw_hud, draw_world, hud_labels, mouth_angle
from pacpy.session import World

T = 28
SMALL = [
    "11111",
    "10201",
    "11111",
]


def rgb(surf, pos):
    return tuple(surf.get_at(pos))[:3]


@pytest.fixture
def small_grid():
    return Grid.from_rows(SMALL, tile_size=T)


class TestGrid:
    def test_wall_is_two_nested_rectangles(self, small_grid) -> None:
        surf = pygame.Surface((small_grid.width, small_grid.height))
        draw_grid(surf, small_grid)
        assert rgb(surf, (0, 0)) == WALL_OUTER
        assert rgb(surf, (1, 1)) == WALL_OUTER
        assert rgb(surf, (T // 2, T // 2)) == WALL_INNER

    def test_pellet_and_empty(self, small_grid) -> None:
        surf = pygame.Surface((small_grid.width, small_grid.height))
        draw_grid(surf, small_grid)
        assert rgb(surf, (T + T // 2, T + T // 2)) == PELLET_COLOR
        assert rgb(surf, (T + 2, T + 2)) == BG_COLOR
        # the empty tile draws nothing
        assert rgb(surf, (2 * T + T // 2, T + T // 2)) == BG_COLOR


class TestWorld:
    def test_draw_world_does_not_touch_state(self) -> None:
        world = World(GameConfig())
        world.player.want = (1, 0)
        world.update(16)
        before = (world.player.px, world.player.py, world.pursuer.px, world.pursuer.py,
                  world.score, world.lives, world.pellets_remaining, world.player.dir)
        surf = pygame.Surface((world.grid.width, world.grid.height))
        draw_world(surf, world, 1234.0)
        after = (world.player.px, world.player.py, world.pursuer.px, world.pursuer.py,
                 world.score, world.lives, world.pellets_remaining, world.player.dir)
        assert before == after

    def test_ghost_drawn_at_anchor(self) -> None:
        world = World(GameConfig())
        surf = pygame.Surface((world.grid.width, world.grid.height))
        draw_world(surf, world, 0.0)
        g = world.pursuer
        # lower body, clear of the eyes
        assert rgb(surf, (int(g.px + 3), int(g.py + T * 0.75))) == GHOST_COLOR


class TestMouth:
    def test_range(self) -> None:
        angles = [mouth_angle(t) for t in range(0, 2000, 7)]
        assert min(angles) >= 0.22 * math.pi - 1e-9
        assert max(angles) <= 0.40 * math.pi + 1e-9

    def test_closed_at_zero(self) -> None:
        assert mouth_angle(0.0) == pytest.approx(0.22 * math.pi)


class TestHud:
    def test_labels(self) -> None:
        world = World(GameConfig())
        world.score = 150
        world.lives = 2
        assert hud_labels(world) == ("SCORE: 150", "LIVES: 2")

    def test_draw_hud(self) -> None:
        pygame.font.init()
        world = World(GameConfig())
        surf = pygame.Surface((world.grid.width, 40))
        draw_hud(surf, pygame.font.Font(None, 22), world, world.grid.width)
        # something was written into the strip
        assert any(rgb(surf, (x, y)) != BG_COLOR for x in range(0, 120) for y in range(0, 30))
