"""Two-dimensional vectors and point classification against segments."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Vector:
    """An immutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vector:
        return Vector(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __str__(self) -> str:
        return f"{self.x:f} {self.y:f}"

    def magnitude(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalised(self) -> Vector:
        """Return a unit vector with the same direction.

        Raises ZeroDivisionError for the zero vector.
        """
        length = self.magnitude()
        return Vector(self.x / length, self.y / length)

    def rotated(self, degrees: float) -> Vector:
        """Return the vector rotated by ``degrees`` (positive is clockwise on screen)."""
        angle = math.radians(degrees)
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Vector(
            self.x * cos_a - self.y * sin_a,
            self.x * sin_a + self.y * cos_a,
        )


class Position(Enum):
    """Where a point lies relative to a directed segment."""

    LEFT = "left"
    RIGHT = "right"
    BEYOND = "beyond"
    BEHIND = "behind"
    BETWEEN = "between"
    ORIGIN = "origin"
    DESTINATION = "destination"


def classify(p: Vector, e0: Vector, e1: Vector) -> Position:
    """Classify point ``p`` against the directed segment from ``e0`` to ``e1``."""
    a = e1 - e0
    b = p - e0
    sa = a.x * b.y - b.x * a.y
    if sa > 0.0:
        return Position.LEFT
    if sa < 0.0:
        return Position.RIGHT
    if a.x * b.x < 0.0 or a.y * b.y < 0.0:
        return Position.BEHIND
    if a.magnitude() < b.magnitude():
        return Position.BEYOND
    if e0 == p:
        return Position.ORIGIN
    if e1 == p:
        return Position.DESTINATION
    return Position.BETWEEN


def point_in_triangle(p: Vector, a: Vector, b: Vector, c: Vector) -> bool:
    """Return True if ``p`` is not to the left of any edge of triangle ``a, b, c``."""
    return all(
        classify(p, start, end) is not Position.LEFT
        for start, end in ((a, b), (b, c), (c, a))
    )