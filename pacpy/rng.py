# rng.py
# Reproducible LCG generator used by the pursuit policy.


class LCG:
    def __init__(self, seed=12345):
        self.m = 2**32
        self.a = 1664525
        self.c = 1013904223
        self.state = seed & 0xFFFFFFFF

    def rand(self):
        """Uniform float in [0, 1)."""
        self.state = (self.a*self.state + self.c) % self.m
        return self.state / self.m
