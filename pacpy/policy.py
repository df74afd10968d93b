# policy.py
# Ghost decision at tile centers: head for the player by Manhattan distance,
# don't reverse unless forced, and now and then take the second-best turn.

from pacpy.agents import DOWN, LEFT, RIGHT, UP, reverse
from pacpy.config import MISDIRECTION_CHANCE

# enumeration order doubles as the tie-break
DIRECTIONS = (RIGHT, LEFT, DOWN, UP)


def candidate_directions(grid, here, current):
    """Non-reversing directions whose destination tile is open, in DIRECTIONS order."""
    back = reverse(current)
    return [d for d in DIRECTIONS
            if d != back and not grid.is_wall(here[0] + d[0], here[1] + d[1])]


def rank_candidates(candidates, here, target):
    def dist(d):
        return abs(here[0] + d[0] - target[0]) + abs(here[1] + d[1] - target[1])
    # sorted() is stable, ties keep enumeration order
    return sorted(candidates, key=dist)


def choose_pursuit_direction(grid, here, target, current, rng, misdirection=MISDIRECTION_CHANCE):
    """Pick the pursuer's next direction.

    here / target are tile coordinates (pursuer and player), current is the
    pursuer's present direction, rng is anything with a rand() in [0, 1).
    """
    possible = candidate_directions(grid, here, current)
    if not possible:
        # reversal forced
        return reverse(current)
    ranked = rank_candidates(possible, here, target)
    if rng.rand() < misdirection and len(ranked) > 1:
        return ranked[1]
    return ranked[0]
