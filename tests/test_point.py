import math

import pytest

from towerengine.point import Point


def test_default_is_origin():
    assert Point() == Point(0, 0)


def test_add_then_subtract_round_trip():
    a = Point(1.5, -2.25)
    b = Point(3.0, 7.5)
    assert (a + b) - b == a


def test_scalar_multiplication_is_commutative():
    a = Point(2.0, -3.0)
    assert 2 * a == a * 2
    assert a * 2 == a + a


def test_division_undoes_multiplication():
    a = Point(1.25, 4.5)
    assert (a * 4) / 4 == a


def test_magnitude_of_three_four():
    assert Point(3, 4).magnitude() == 5


def test_magnitude_squared_matches_dot_with_self():
    a = Point(-1.5, 2.5)
    assert a.dot(a) == a.magnitude_squared()
    assert math.isclose(a.magnitude() ** 2, a.magnitude_squared())


def test_normalize_gives_unit_length_same_direction():
    a = Point(6.0, -8.0)
    n = a.normalize()
    assert math.isclose(n.magnitude(), 1.0)
    assert math.isclose(n.dot(a), a.magnitude())


def test_normalize_zero_vector_is_origin():
    assert Point(0, 0).normalize() == Point()


def test_dot_of_perpendicular_vectors_is_zero():
    assert Point(1, 0).dot(Point(0, 5)) == 0


def test_inequality():
    assert (Point(1, 2) == Point(1, 3)) is False


def test_divide_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Point(1, 1) / 0