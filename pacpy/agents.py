# agents.py
# Player and pursuer share one Agent record and one movement rule. They only
# differ in the steering strategy that supplies the wanted direction.

from dataclasses import dataclass

from pacpy.config import PROBE_REACH, REFERENCE_FRAME_MS

NONE = (0, 0)
UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)


def reverse(d):
    return (-d[0], -d[1])


@dataclass
class Agent:
    name: str
    px: float
    py: float
    speed: float
    radius: float
    start: tuple
    start_dir: tuple = NONE
    dir: tuple = NONE
    want: tuple = NONE              # latest held-key direction (player only)
    turned_at: tuple = None         # tile of the last alignment decision

    @classmethod
    def spawn(cls, name, grid, start, speed, radius, start_dir=NONE):
        a = cls(name=name, px=0.0, py=0.0, speed=speed, radius=radius,
                start=tuple(start), start_dir=tuple(start_dir))
        a.reset(grid)
        return a

    def reset(self, grid):
        self.px = grid.tile_center(self.start[0])
        self.py = grid.tile_center(self.start[1])
        self.dir = self.start_dir
        self.want = NONE
        self.turned_at = None

    def center_tile(self, grid):
        """Tile under the drawn center: position shifted by half a tile."""
        half = grid.tile / 2
        return grid.tile_of(self.px + half, self.py + half)


# -----------------------
# Steering strategies
# -----------------------
class KeySteering:
    """Player: follow the held key, stop when it points into a wall."""

    halts_at_walls = True

    def __call__(self, agent):
        return agent.want


class PursuitSteering:
    """Pursuer: ask a policy for the next direction; never goes idle."""

    halts_at_walls = False

    def __init__(self, choose):
        self.choose = choose

    def __call__(self, agent):
        return self.choose(agent)


# -----------------------
# Mover
# -----------------------
def near_center(grid, px, py):
    tx, ty = grid.tile_of(px, py)
    cx, cy = grid.tile_center(tx), grid.tile_center(ty)
    return tx, ty, abs(px - cx), abs(py - cy), cx, cy


def is_aligned(agent, grid, threshold) -> bool:
    tx, ty, dx, dy, _, _ = near_center(grid, agent.px, agent.py)
    if dx >= threshold or dy >= threshold:
        return False
    # already turned here and on the way out
    return agent.dir == NONE or agent.turned_at != (tx, ty)


def can_move_from(grid, px, py, d, reach=PROBE_REACH) -> bool:
    probe_x = px + d[0] * grid.tile * reach
    probe_y = py + d[1] * grid.tile * reach
    return not grid.is_wall(*grid.tile_of(probe_x, probe_y))


def step_agent(agent, grid, steer, dt_ms, threshold) -> bool:
    """Advance one agent by one frame. Returns True when it was aligned."""
    aligned = is_aligned(agent, grid, threshold)
    tx, ty, _, _, cx, cy = near_center(grid, agent.px, agent.py)
    if aligned:
        agent.px, agent.py = cx, cy
        agent.turned_at = (tx, ty)
        want = steer(agent)
        if not steer.halts_at_walls:
            agent.dir = want
        elif want != NONE and not grid.is_wall(*grid.tile_of(agent.px + want[0] * grid.tile,
                                                              agent.py + want[1] * grid.tile)):
            agent.dir = want
        else:
            agent.dir = NONE
    elif steer.halts_at_walls and agent.dir != NONE and not can_move_from(grid, agent.px, agent.py, agent.dir):
        # blocked mid-tile: stop on this tile's center until a key is read
        agent.dir = NONE
        agent.px, agent.py = cx, cy

    scale = agent.speed * (dt_ms / REFERENCE_FRAME_MS)
    agent.px += agent.dir[0] * scale
    agent.py += agent.dir[1] * scale

    # horizontal tunnel wrap
    if agent.px < -grid.tile:
        agent.px = grid.width + grid.tile
    elif agent.px > grid.width + grid.tile:
        agent.px = -grid.tile
    return aligned
