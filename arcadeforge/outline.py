"""Wire-frame shapes for bodies, the lives display and crash debris."""

from __future__ import annotations

import pygame

from arcadeforge.body import PhysicsBody
from arcadeforge.vector import Vector

WHITE = (255, 255, 255, 255)
_EXHAUST_POINTS = (Vector(0, -7), Vector(-3, 0), Vector(3, 0))
_HUD_X = 25
_HUD_Y = 35
_HUD_PERIOD = 15

Segment = tuple[Vector, Vector]


def body_outline(body: PhysicsBody) -> list[Segment]:
    """Return the closed polygon of a body's collider in screen coordinates."""
    if not body.collider:
        raise ValueError("body has no collider points")
    points = [body.position + point for point in body.collider]
    segments = list(zip(points, points[1:]))
    segments.append((points[0], points[-1]))
    return segments


def ship_icon_segments(lives: int) -> list[Segment]:
    """Return the small ship icons drawn in the corner, one per life."""
    segments: list[Segment] = []
    for index in range(lives):
        x = _HUD_X + index * _HUD_PERIOD
        y = _HUD_Y
        top = Vector(x, y - 15)
        left = Vector(x - 5, y)
        right = Vector(x + 5, y)
        segments += [(top, left), (top, right), (right, left)]
    return segments


def exhaust_body(position: Vector, angle: float) -> PhysicsBody:
    """Return the flame triangle shown behind a thrusting ship."""
    return PhysicsBody(
        position=position,
        collider=[point.rotated(angle) for point in _EXHAUST_POINTS],
    )


def crash_fragments(body: PhysicsBody, elapsed_ms: float) -> list[PhysicsBody]:
    """Split a triangular ship into three edges drifting apart over time."""
    if len(body.collider) < 3:
        raise ValueError("a crashed ship needs at least three collider points")
    delta = int(1 + elapsed_ms * 0.01)
    p0, p1, p2 = body.collider[:3]
    heading = p0.normalised()
    fragments = []
    for edge, turn in (((p0, p1), -45), ((p1, p2), 180), ((p2, p0), 45)):
        drift = heading.rotated(turn) * delta
        fragments.append(PhysicsBody(position=body.position + drift, collider=list(edge)))
    return fragments


def draw_body(surface: pygame.Surface, body: PhysicsBody, color=WHITE) -> None:
    """Draw a body's collider outline."""
    for start, end in body_outline(body):
        pygame.draw.line(surface, color, (start.x, start.y), (end.x, end.y))