# controls.py
# Held-key tracking. Only the held state matters; when several direction keys
# are down the priority is Up, Left, Down, Right.

import pygame

from pacpy.agents import DOWN, LEFT, NONE, RIGHT, UP

KEY_DIRECTIONS = {
    pygame.K_UP: UP, pygame.K_w: UP,
    pygame.K_LEFT: LEFT, pygame.K_a: LEFT,
    pygame.K_DOWN: DOWN, pygame.K_s: DOWN,
    pygame.K_RIGHT: RIGHT, pygame.K_d: RIGHT,
}
PRIORITY = (UP, LEFT, DOWN, RIGHT)


class KeyState:
    def __init__(self):
        self.held = set()

    def press(self, key) -> bool:
        if key not in KEY_DIRECTIONS:
            return False
        self.held.add(key)
        return True

    def release(self, key) -> bool:
        if key not in KEY_DIRECTIONS:
            return False
        self.held.discard(key)
        return True

    def clear(self):
        self.held.clear()

    def direction(self):
        down = {KEY_DIRECTIONS[k] for k in self.held}
        for d in PRIORITY:
            if d in down:
                return d
        # no key held -> stop at the next tile center
        return NONE
