import math

import pytest

from cpnotes.geometry import Point, deg_to_rad, distance, rad_to_deg, rotate


def test_distance_pythagorean():
    assert distance(Point(0, 0), Point(3, 4)) == pytest.approx(5.0)


def test_distance_symmetric_and_zero():
    a, b = Point(1.5, -2), Point(-4, 7)
    assert distance(a, b) == pytest.approx(distance(b, a))
    assert distance(a, a) == 0


def test_angle_conversion():
    assert deg_to_rad(180) == pytest.approx(math.pi)
    assert rad_to_deg(math.pi) == pytest.approx(180)


@pytest.mark.parametrize("angle", [0, 30, 90, 123.4, -45])
def test_angle_round_trip(angle):
    assert rad_to_deg(deg_to_rad(angle)) == pytest.approx(angle)


def test_rotate_half_turn_negates():
    p = Point(2, 5)
    assert rotate(p, 180) == Point(-2, -5)


def test_rotate_full_turn_identity():
    p = Point(-3.25, 1.5)
    assert rotate(p, 360) == p


def test_rotate_composes():
    p = Point(1, 2)
    assert rotate(rotate(p, 90), 90) == rotate(p, 180)


def test_rotate_keeps_distance_to_origin():
    p = Point(3, -7)
    origin = Point()
    assert distance(rotate(p, 37), origin) == pytest.approx(distance(p, origin))


def test_tolerant_equality():
    assert Point(1, 1) == Point(1 + 1e-12, 1 - 1e-12)
    assert not Point(1, 1) == Point(1 + 1e-6, 1)


def test_ordering_by_x_then_y():
    points = [Point(2, 0), Point(1, 5), Point(1, 3)]
    assert sorted(points) == [Point(1, 3), Point(1, 5), Point(2, 0)]
    assert Point(1, 3) < Point(1 + 1e-12, 4)