"""Drawing of pixels, lines and images onto surfaces."""

from __future__ import annotations

import math
from collections.abc import Iterator

import pygame

from arcadeforge.vector import Vector


def line_points(begin: Vector, end: Vector) -> Iterator[Vector]:
    """Yield unit-spaced points from ``begin`` towards ``end``, excluding the far end."""
    span = end - begin
    length = span.magnitude()
    if length == 0.0:
        return
    step = span * (1.0 / length)
    point = begin
    for _ in range(math.ceil(length)):
        yield point
        point = point + step


def draw_point(surface: pygame.Surface, point: Vector, color) -> None:
    """Set the single pixel at ``point``."""
    surface.fill(color, pygame.Rect(int(point.x), int(point.y), 1, 1))


def draw_line(surface: pygame.Surface, begin: Vector, end: Vector, color) -> None:
    """Draw a line by stepping one pixel at a time from ``begin`` to ``end``."""
    for point in line_points(begin, end):
        draw_point(surface, point, color)


def draw_image(
    surface: pygame.Surface,
    image: pygame.Surface,
    dst: Vector,
    offset: Vector = Vector(),
) -> None:
    """Blit ``image`` onto ``surface`` at ``dst`` shifted by ``offset``."""
    target = dst + offset
    surface.blit(image, (int(target.x), int(target.y)))