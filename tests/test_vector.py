import math

import pytest

from consolebounce.vector import Vector2D, distance


def test_length_of_pythagorean_vector():
    assert Vector2D(3, 4).length() == pytest.approx(5)


def test_default_vector_is_origin():
    assert Vector2D() == Vector2D(0, 0)


def test_add_and_negate_cancel():
    v = Vector2D(1.5, -2.25)
    assert v + (-v) == Vector2D()


def test_addition_is_componentwise():
    a, b = Vector2D(1, 2), Vector2D(3, 4)
    total = a + b
    assert total.x == a.x + b.x
    assert total.y == a.y + b.y


def test_add_rejects_non_vectors():
    with pytest.raises(TypeError):
        Vector2D(1, 2) + 3


def test_scaled_multiplies_length():
    v = Vector2D(2, -7)
    assert v.scaled(3).length() == pytest.approx(3 * v.length())


def test_normalized_has_unit_length_and_same_direction():
    v = Vector2D(-6, 2.5)
    n = v.normalized()
    assert n.length() == pytest.approx(1.0)
    assert n.dot(v) == pytest.approx(v.length())


def test_normalized_zero_vector_is_nan():
    n = Vector2D().normalized()
    assert [math.isnan(n.x), math.isnan(n.y)] == [True, True]


def test_dot_with_self_is_square_length():
    v = Vector2D(1.25, 4.5)
    assert v.dot(v) == pytest.approx(v.length() ** 2)


def test_dot_is_commutative():
    a, b = Vector2D(1, -3), Vector2D(4, 0.5)
    assert a.dot(b) == b.dot(a)


def test_perpendicular_dot_is_zero():
    assert Vector2D(2, 3).dot(Vector2D(-3, 2)) == 0


def test_distance_matches_difference_length():
    diff = Vector2D(7, -1) + -Vector2D(2, 3)
    assert distance(2, 3, 7, -1) == pytest.approx(diff.length())


def test_distance_is_symmetric():
    assert distance(1, 2, 8, 9) == distance(8, 9, 1, 2)


def test_vectors_are_immutable():
    v = Vector2D(1, 2)
    with pytest.raises(AttributeError):
        setattr(v, "x", 5)
    assert v.x == 1
    assert v == Vector2D(1, 2)