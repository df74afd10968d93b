# session.py
# The World: grid, both agents, score/lives and the game state machine.
# One instance is owned by the frame driver and advanced with update(dt_ms).

import math
from dataclasses import dataclass
from enum import Enum

from pacpy.agents import Agent, KeySteering, PursuitSteering, step_agent
from pacpy.config import AGENT_RADIUS, COLLISION_DISTANCE, PELLET_SCORE, GameConfig
from pacpy.grid import Grid
from pacpy.policy import choose_pursuit_direction
from pacpy.rng import LCG


class Event(Enum):
    LIFE_LOST = "life_lost"
    GAME_OVER = "game_over"
    LEVEL_CLEAR = "level_clear"


@dataclass(frozen=True)
class Notification:
    kind: Event
    score: int
    lives: int


@dataclass
class PendingTransition:
    """A game over / level clear waiting for its delay before it is applied."""

    kind: Event
    score: int
    remaining_ms: float


class World:
    def __init__(self, config: GameConfig = None, grid: Grid = None):
        self.config = config or GameConfig()
        self.grid = grid if grid is not None else Grid.default(self.config.tile)
        if self.grid.tile != self.config.tile:
            raise ValueError(f"grid tile size {self.grid.tile} != config tile {self.config.tile}")
        for label, start in (("player", self.config.player_start),
                             ("pursuer", self.config.pursuer_start)):
            if self.grid.is_wall(*start):
                raise ValueError(f"{label} start tile {tuple(start)} is a wall")
        self.rng = LCG(self.config.seed)
        radius = AGENT_RADIUS * self.config.tile
        self.player = Agent.spawn("player", self.grid, self.config.player_start,
                                  self.config.player_speed, radius)
        self.pursuer = Agent.spawn("pursuer", self.grid, self.config.pursuer_start,
                                   self.config.pursuer_speed, radius,
                                   start_dir=self.config.pursuer_start_dir)
        self.player_steering = KeySteering()
        self.pursuer_steering = PursuitSteering(self._pursuit_choice)
        self.score = 0
        self.lives = self.config.start_lives
        self.pending = None
        self.halted = False

    @property
    def pellets_remaining(self) -> int:
        return self.grid.pellets_remaining

    def _pursuit_choice(self, agent):
        return choose_pursuit_direction(
            self.grid,
            agent.center_tile(self.grid),
            self.player.center_tile(self.grid),
            agent.dir,
            self.rng,
            self.config.misdirection_chance,
        )

    # -----------------------
    # resets
    # -----------------------
    def reset_positions(self):
        self.player.reset(self.grid)
        self.pursuer.reset(self.grid)

    def restart(self):
        """Full reset: fresh score and lives, refilled board, agents home."""
        self.score = 0
        self.lives = self.config.start_lives
        self.grid.refill()
        self.reset_positions()
        self.pending = None
        self.halted = False

    def collided(self) -> bool:
        dist = math.hypot(self.player.px - self.pursuer.px, self.player.py - self.pursuer.py)
        return dist < self.grid.tile * COLLISION_DISTANCE

    # -----------------------
    # per-frame update
    # -----------------------
    def update(self, dt_ms):
        """Advance the world by one frame; return the notifications it produced."""
        if self.halted:
            return []
        dt = min(self.config.max_frame_ms, max(0.0, dt_ms))
        if self.pending is not None:
            self.pending.remaining_ms -= dt
            if self.pending.remaining_ms > 0:
                return []
            return [self._apply_pending()]

        events = []
        threshold = self.config.turn_threshold
        if step_agent(self.player, self.grid, self.player_steering, dt, threshold):
            tx, ty = self.player.turned_at
            if self.grid.consume_pellet(tx, ty):
                self.score += PELLET_SCORE
        step_agent(self.pursuer, self.grid, self.pursuer_steering, dt, threshold)

        if self.collided():
            self.lives -= 1
            if self.lives <= 0:
                self._schedule(Event.GAME_OVER)
                return events
            self.reset_positions()
            events.append(Notification(Event.LIFE_LOST, self.score, self.lives))

        if self.grid.pellets_remaining <= 0:
            self._schedule(Event.LEVEL_CLEAR)
        return events

    def _schedule(self, kind):
        self.pending = PendingTransition(kind, self.score, self.config.transition_delay_ms)

    def _apply_pending(self):
        p = self.pending
        self.pending = None
        note = Notification(p.kind, p.score, self.lives)
        if p.kind is Event.GAME_OVER:
            if self.config.auto_restart:
                self.restart()
            else:
                self.halted = True
        else:
            self.grid.refill()
            self.reset_positions()
        return note
