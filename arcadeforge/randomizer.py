"""Random numbers, positions and headings for spawning objects."""

from __future__ import annotations

import random

from arcadeforge.body import SCREEN_HEIGHT, SCREEN_WIDTH
from arcadeforge.vector import Vector


class Randomizer:
    """A seeded source of game randomness; seeded from the clock by default."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def rand_int(self, ceil: int) -> int:
        """Return an integer in 0..ceil-1."""
        if ceil <= 0:
            raise ValueError(f"ceil must be positive, got {ceil}")
        return self._rng.randrange(ceil)

    def rand_fract(self) -> float:
        """Return one of 0.00, 0.01, ..., 0.99."""
        return self._rng.randrange(100) / 100.0

    def rand_sign(self) -> int:
        """Return 1 or -1 with equal chance."""
        return 1 if self._rng.randrange(2) == 0 else -1

    def rand_pos(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT) -> Vector:
        """Return a point with integer coordinates on the screen."""
        return Vector(self.rand_int(width), self.rand_int(height))

    def rand_dir(self) -> Vector:
        """Return a random unit heading."""
        while True:
            candidate = Vector(
                self.rand_fract() * self.rand_sign(),
                self.rand_fract() * self.rand_sign(),
            )
            if candidate.magnitude() > 0.0:
                return candidate.normalised()