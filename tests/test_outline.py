import pygame
import pytest

from arcadeforge.body import PhysicsBody
from arcadeforge.outline import (
    body_outline,
    crash_fragments,
    draw_body,
    exhaust_body,
    ship_icon_segments,
)
from arcadeforge.vector import Vector


def _ship():
    return PhysicsBody(
        position=Vector(50, 50),
        collider=[Vector(0, -10), Vector(-5, 5), Vector(5, 5)],
    )


def test_body_outline_closes_polygon():
    segments = body_outline(_ship())
    assert segments == [
        (Vector(50, 40), Vector(45, 55)),
        (Vector(45, 55), Vector(55, 55)),
        (Vector(50, 40), Vector(55, 55)),
    ]


def test_body_outline_without_points_raises():
    with pytest.raises(ValueError):
        body_outline(PhysicsBody())


def test_ship_icons_none_for_no_lives():
    assert ship_icon_segments(0) == []


def test_ship_icons_three_segments_per_life_and_spaced():
    segments = ship_icon_segments(3)
    assert len(segments) == 9
    assert segments[0] == (Vector(25, 20), Vector(20, 35))
    for first, second in zip(segments[:3], segments[3:6]):
        assert second[0] - first[0] == Vector(15, 0)
        assert second[1] - first[1] == Vector(15, 0)


def test_exhaust_body_unrotated():
    body = exhaust_body(Vector(10, 20), 0)
    assert body.position == Vector(10, 20)
    assert body.collider == [Vector(0, -7), Vector(-3, 0), Vector(3, 0)]


def test_exhaust_body_rotation_keeps_lengths():
    plain = exhaust_body(Vector(), 0)
    turned = exhaust_body(Vector(), 75)
    for a, b in zip(plain.collider, turned.collider):
        assert b.magnitude() == pytest.approx(a.magnitude())


@pytest.mark.parametrize("elapsed, distance", [(0, 1), (1000, 11)])
def test_crash_fragments_drift_distance(elapsed, distance):
    ship = _ship()
    for fragment in crash_fragments(ship, elapsed):
        assert (fragment.position - ship.position).magnitude() == pytest.approx(distance)


def test_crash_fragments_edges_and_back_fragment():
    ship = _ship()
    first, second, third = crash_fragments(ship, 0)
    p0, p1, p2 = ship.collider
    assert first.collider == [p0, p1]
    assert second.collider == [p1, p2]
    assert third.collider == [p2, p0]
    back = second.position - ship.position
    assert back.x == pytest.approx(-p0.normalised().x, abs=1e-12)
    assert back.y == pytest.approx(-p0.normalised().y, abs=1e-12)


def test_crash_fragments_need_three_points():
    with pytest.raises(ValueError):
        crash_fragments(PhysicsBody(collider=[Vector(1, 0), Vector(0, 1)]), 0)


def test_draw_body_lights_vertices():
    surface = pygame.Surface((100, 100))
    draw_body(surface, _ship())
    white = pygame.Color(255, 255, 255, 255)
    for vertex in [(50, 40), (45, 55), (55, 55)]:
        assert surface.get_at(vertex) == white
    assert surface.get_at((0, 0)) != white