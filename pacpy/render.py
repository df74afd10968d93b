# render.py
# Drawing only: reads the world, never changes it.

import math

import pygame

from pacpy.config import (
    BG_COLOR, EYE_PUPIL, EYE_WHITE, GHOST_COLOR, HUD_COLOR, OVERLAY_COLOR,
    PAC_COLOR, PELLET_COLOR, WALL_INNER, WALL_OUTER,
)
from pacpy.grid import Tile


def mouth_angle(now_ms: float) -> float:
    """Half-angle of the mouth wedge in radians; opens and closes over time."""
    return (0.22 + abs(math.sin(now_ms / 150)) * 0.18) * math.pi


def draw_grid(surf, grid):
    t = grid.tile
    pellet_r = max(2, int(t * 0.08))
    for y in range(grid.rows):
        for x in range(grid.cols):
            v = grid.tiles[y][x]
            px, py = x * t, y * t
            if v is Tile.WALL:
                pygame.draw.rect(surf, WALL_OUTER, (px, py, t, t))
                pygame.draw.rect(surf, WALL_INNER, (px + 2, py + 2, t - 4, t - 4))
            elif v is Tile.PELLET:
                pygame.draw.circle(surf, PELLET_COLOR, (px + t // 2, py + t // 2), pellet_r)
            # empty tile: nothing to draw


def draw_player(surf, agent, tile, now_ms):
    # px/py is the top-left anchor; the disc sits half a tile further in
    cx, cy = agent.px + tile / 2, agent.py + tile / 2
    start = mouth_angle(now_ms)
    end = 2 * math.pi - start
    points = [(cx, cy)]
    steps = 16
    for i in range(steps + 1):
        a = start + (end - start) * (i / steps)
        points.append((cx + agent.radius * math.cos(a), cy + agent.radius * math.sin(a)))
    pygame.draw.polygon(surf, PAC_COLOR, points)


def draw_ghost(surf, x, y, size, color=GHOST_COLOR):
    # body: rounded top + rectangle skirt
    pygame.draw.circle(surf, color, (x + size / 2, y + size / 2 - 2), size * 0.42,
                       draw_top_left=True, draw_top_right=True)
    pygame.draw.rect(surf, color, (int(x), int(y + size * 0.25), size, int(size * 0.6)))
    # eyes
    for ex in (0.35, 0.65):
        pygame.draw.circle(surf, EYE_WHITE, (x + size * ex, y + size * 0.35), size * 0.12)
        pygame.draw.circle(surf, EYE_PUPIL, (x + size * ex, y + size * 0.36), size * 0.06)


def draw_world(surf, world, now_ms):
    surf.fill(BG_COLOR)
    draw_grid(surf, world.grid)
    draw_player(surf, world.player, world.grid.tile, now_ms)
    draw_ghost(surf, world.pursuer.px, world.pursuer.py, world.grid.tile)


def hud_labels(world):
    return f"SCORE: {world.score}", f"LIVES: {world.lives}"


def draw_hud(surf, font, world, width):
    score_text, lives_text = hud_labels(world)
    score_surf = font.render(score_text, True, HUD_COLOR)
    lives_surf = font.render(lives_text, True, HUD_COLOR)
    surf.blit(score_surf, (10, 6))
    surf.blit(lives_surf, (width - lives_surf.get_width() - 10, 6))


def draw_overlay(surf, font, text):
    txt = font.render(text, True, OVERLAY_COLOR)
    w, h = surf.get_size()
    surf.blit(txt, (w // 2 - txt.get_width() // 2, h // 2 - txt.get_height() // 2))
