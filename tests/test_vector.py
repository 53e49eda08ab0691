import math

import pytest

from arcadeforge.vector import Position, Vector, classify, point_in_triangle


def test_add_then_sub_round_trip():
    v = Vector(1.5, -2.0)
    u = Vector(15, 15)
    assert (v + u) - u == v


def test_mul_matches_repeated_addition():
    v = Vector(0.25, 3.0)
    assert v * 2 == v + v
    assert 2 * v == v * 2


def test_str_uses_six_decimals():
    assert str(Vector(1, 2)) == "1.000000 2.000000"


def test_magnitude_of_three_four():
    assert Vector(3, 4).magnitude() == pytest.approx(5.0)


def test_normalised_has_unit_length_and_same_direction():
    v = Vector(15, -7)
    n = v.normalised()
    assert n.magnitude() == pytest.approx(1.0)
    assert n.x * v.y - n.y * v.x == pytest.approx(0.0)
    assert n.x * v.x + n.y * v.y > 0


def test_normalised_zero_vector_raises():
    with pytest.raises(ZeroDivisionError):
        Vector(0, 0).normalised()


@pytest.mark.parametrize("degrees", [1, -1, 45, 90, 180, 333])
def test_rotation_preserves_magnitude(degrees):
    v = Vector(0, 1)
    assert v.rotated(degrees).magnitude() == pytest.approx(v.magnitude())


@pytest.mark.parametrize("degrees", [1, 17.5, -90, 270])
def test_rotation_is_reversible(degrees):
    v = Vector(15, 15)
    back = v.rotated(degrees).rotated(-degrees)
    assert back.x == pytest.approx(v.x)
    assert back.y == pytest.approx(v.y)


def test_full_turn_returns_original():
    v = Vector(-4.0, 9.0)
    r = v.rotated(360)
    assert r.x == pytest.approx(v.x)
    assert r.y == pytest.approx(v.y)


def test_quarter_turn_is_perpendicular():
    v = Vector(2.0, 5.0)
    r = v.rotated(90)
    assert v.x * r.x + v.y * r.y == pytest.approx(0.0, abs=1e-9)
    assert not math.isclose(r.x, v.x)


def test_classify_sides_swap_with_segment_direction():
    e0, e1, p = Vector(0, 0), Vector(10, 0), Vector(3, 4)
    first = classify(p, e0, e1)
    second = classify(p, e1, e0)
    assert {first, second} == {Position.LEFT, Position.RIGHT}


def test_classify_collinear_positions():
    e0, e1 = Vector(0, 0), Vector(10, 0)
    assert classify(e0, e0, e1) is Position.ORIGIN
    assert classify(e1, e0, e1) is Position.DESTINATION
    assert classify(Vector(5, 0), e0, e1) is Position.BETWEEN
    assert classify(Vector(-5, 0), e0, e1) is Position.BEHIND
    assert classify(Vector(20, 0), e0, e1) is Position.BEYOND


def test_point_in_triangle_depends_on_orientation():
    a, b, c = Vector(0, 0), Vector(0, 10), Vector(10, 0)
    p = Vector(2, 2)
    assert point_in_triangle(p, a, b, c)
    assert not point_in_triangle(p, a, c, b)


def test_point_outside_triangle():
    a, b, c = Vector(0, 0), Vector(0, 10), Vector(10, 0)
    assert not point_in_triangle(Vector(20, 20), a, b, c)


def test_triangle_vertices_count_as_inside():
    a, b, c = Vector(0, 0), Vector(0, 10), Vector(10, 0)
    assert all(point_in_triangle(v, a, b, c) for v in (a, b, c))