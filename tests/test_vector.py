"""Unit tests for Vector3, lerp and Ray."""

import math

import pytest

from core.ray import Ray
from core.vector import Color, Vector3, lerp


class TestVectorArithmetic:
    """Component-wise operators return new vectors."""

    def test_add_sub(self):
        a = Vector3(1, 2, 3)
        b = Vector3(4, 5, 6)
        assert a + b == Vector3(5, 7, 9)
        assert b - a == Vector3(3, 3, 3)

    def test_scalar_mul_div(self):
        v = Vector3(1, -2, 3)
        assert v * 2 == Vector3(2, -4, 6)
        assert 2 * v == Vector3(2, -4, 6)
        assert v / 2 == Vector3(0.5, -1, 1.5)

    def test_elementwise_mul_and_negation(self):
        assert Vector3(1, 2, 3) * Vector3(2, 3, 4) == Vector3(2, 6, 12)
        assert -Vector3(1, -2, 0) == Vector3(-1, 2, 0)

    def test_operands_unchanged(self):
        a = Vector3(1, 2, 3)
        _ = a + Vector3(1, 1, 1)
        _ = a * 3
        assert a == Vector3(1, 2, 3)

    def test_immutable(self):
        v = Vector3(1, 2, 3)
        with pytest.raises(AttributeError):
            v.x = 5

    def test_color_aliases(self):
        c = Color(0.1, 0.2, 0.3)
        assert (c.r, c.g, c.b) == (0.1, 0.2, 0.3)
        assert tuple(c) == (0.1, 0.2, 0.3)


class TestVectorProducts:
    """Dot, cross, length and normalization."""

    def test_dot(self):
        assert Vector3(1, 2, 3).dot(Vector3(4, -5, 6)) == 12

    def test_cross(self):
        assert Vector3(1, 0, 0).cross(Vector3(0, 1, 0)) == Vector3(0, 0, 1)

    def test_length(self):
        assert Vector3(3, 4, 0).length() == 5
        assert Vector3(3, 4, 0).length_squared() == 25

    def test_normalize(self):
        n = Vector3(0, 3, 4).normalize()
        assert n.length() == pytest.approx(1.0)
        assert n.y == pytest.approx(0.6)
        assert n.z == pytest.approx(0.8)

    def test_normalize_zero_vector_raises(self):
        """Normalizing a zero vector is a precondition violation."""
        with pytest.raises(ZeroDivisionError):
            Vector3(0, 0, 0).normalize()


class TestLerp:
    """Linear interpolation between two vectors."""

    def test_endpoints(self):
        a = Vector3(1, 1, 1)
        b = Vector3(0.5, 0.7, 1.0)
        assert lerp(a, b, 0.0) == a
        assert lerp(a, b, 1.0) == b

    def test_midpoint(self):
        mid = lerp(Vector3(0, 0, 0), Vector3(2, 4, 6), 0.5)
        assert mid == Vector3(1, 2, 3)


class TestRay:
    """Parametric point evaluation."""

    def test_at(self):
        ray = Ray(Vector3(1, 1, 1), Vector3(0, 0, -2))
        assert ray.at(0) == Vector3(1, 1, 1)
        assert ray.at(1.5) == Vector3(1, 1, -2)

    def test_direction_not_normalized(self):
        ray = Ray(Vector3(0, 0, 0), Vector3(3, 4, 0))
        assert ray.direction.length() == 5
        assert math.isclose(ray.at(0.2).length(), 1.0)
