"""Rigid bodies with a polygon collider that move and wrap around the screen."""

from __future__ import annotations

from dataclasses import dataclass, field

from arcadeforge.vector import Vector

MAX_COLLIDER_POINTS = 16
SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480


@dataclass
class PhysicsBody:
    """A position, a heading, a speed and a polygon of collider points."""

    position: Vector = Vector()
    direction: Vector = Vector()
    collider: list[Vector] = field(default_factory=list)
    velocity: float = 0.0

    def __post_init__(self) -> None:
        self.collider = list(self.collider)
        if len(self.collider) > MAX_COLLIDER_POINTS:
            raise ValueError(
                f"a collider holds at most {MAX_COLLIDER_POINTS} points, "
                f"got {len(self.collider)}"
            )

    def move(self) -> None:
        """Advance the position by the direction scaled by the velocity."""
        self.position = self.position + self.direction * self.velocity

    def rotate_collider(self, degrees: float) -> None:
        """Rotate every collider point about the body's position."""
        self.collider = [point.rotated(degrees) for point in self.collider]

    def rotate(self, degrees: float) -> None:
        """Rotate both the heading and the collider."""
        self.direction = self.direction.rotated(degrees)
        self.rotate_collider(degrees)

    def wrap(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT) -> None:
        """Move a body that has left the screen to the opposite edge."""
        x, y = self.position.x, self.position.y
        if x < 0:
            x = width
        elif x > width:
            x = 0
        if y < 0:
            y = height
        elif y > height:
            y = 0
        self.position = Vector(x, y)

    def is_out_of_screen(
        self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT
    ) -> bool:
        """Return True if the position lies outside the screen rectangle."""
        x, y = self.position.x, self.position.y
        return x < 0 or x > width or y < 0 or y > height