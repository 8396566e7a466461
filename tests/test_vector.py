#!/usr/bin/env python3
"""
Unit tests for the Vector value type.
"""

import dataclasses
import math

import pytest

from driftsum import Vector, ZERO, DegenerateVector


class TestArithmetic:
    """Operators are pure and follow IEEE-754."""

    def test_add_sub_neg(self):
        a = Vector(1.0, 2.0, 3.0)
        b = Vector(0.5, -1.0, 4.0)

        assert a + b == Vector(1.5, 1.0, 7.0)
        assert a - b == Vector(0.5, 3.0, -1.0)
        assert -a == Vector(-1.0, -2.0, -3.0)

        # operands untouched
        assert a == Vector(1.0, 2.0, 3.0)
        assert b == Vector(0.5, -1.0, 4.0)

    def test_scalar_multiply_both_sides(self):
        v = Vector(1.0, -2.0, 0.25)
        assert v * 2.0 == Vector(2.0, -4.0, 0.5)
        assert 2.0 * v == Vector(2.0, -4.0, 0.5)
        assert 3 * v == v.scale(3)

    def test_scalar_divide(self):
        assert Vector(1.0, 2.0, 3.0) / 2.0 == Vector(0.5, 1.0, 1.5)

    def test_divide_by_zero_follows_ieee(self):
        result = Vector(1.0, -1.0, 0.0) / 0.0
        assert result.x == math.inf
        assert result.y == -math.inf
        assert math.isnan(result.z)

    def test_vector_times_vector_is_unsupported(self):
        with pytest.raises(TypeError):
            Vector(1.0, 1.0, 1.0) * Vector(1.0, 1.0, 1.0)

    def test_nan_passes_through(self):
        v = Vector(math.nan, 1.0, 1.0) + Vector(1.0, math.inf, 1.0)
        assert math.isnan(v.x)
        assert v.y == math.inf
        assert v.z == 2.0

    def test_immutable(self):
        v = Vector(1.0, 2.0, 3.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            v.x = 5.0

    def test_iteration(self):
        assert list(Vector(1.0, 2.0, 3.0)) == [1.0, 2.0, 3.0]


class TestGeometry:
    """Euclidean helpers."""

    def test_dot(self):
        assert Vector(1.0, 2.0, 3.0).dot(Vector(4.0, 5.0, 6.0)) == 32.0

    def test_cross_of_axes(self):
        x = Vector(1.0, 0.0, 0.0)
        y = Vector(0.0, 1.0, 0.0)
        z = Vector(0.0, 0.0, 1.0)

        assert x.cross(y) == z
        assert y.cross(z) == x
        assert z.cross(x) == y
        assert y.cross(x) == Vector(0.0, 0.0, -1.0)

    def test_cross_is_orthogonal(self):
        a = Vector(1.0, 2.0, 3.0)
        b = Vector(-2.0, 0.5, 4.0)
        c = a.cross(b)
        assert c.dot(a) == pytest.approx(0.0, abs=1e-12)
        assert c.dot(b) == pytest.approx(0.0, abs=1e-12)

    def test_length(self):
        v = Vector(3.0, 4.0, 12.0)
        assert v.length_squared() == 169.0
        assert v.length() == 13.0
        assert v.magnitude() == v.length()
        assert v.magnitude_squared() == v.length_squared()

    def test_normalize(self):
        n = Vector(3.0, 0.0, 4.0).normalize()
        assert n.x == pytest.approx(0.6)
        assert n.y == 0.0
        assert n.z == pytest.approx(0.8)
        assert n.length() == pytest.approx(1.0)

    def test_normalize_zero_raises_every_time(self):
        for _ in range(3):
            with pytest.raises(DegenerateVector):
                Vector(0.0, 0.0, 0.0).normalize()
        with pytest.raises(DegenerateVector):
            Vector(-0.0, 0.0, -0.0).normalize()

    def test_degenerate_vector_is_arithmetic_error(self):
        with pytest.raises(ArithmeticError):
            ZERO.normalize()

    def test_normalize_subnormal(self):
        # length_squared underflows to zero but the vector is not zero
        assert Vector(5e-324, 0.0, 0.0).normalize() == Vector(1.0, 0.0, 0.0)

    def test_normalize_subnormal_length_squared(self):
        # length_squared is subnormal, not zero
        assert Vector(1e-160, 0.0, 0.0).normalize() == Vector(1.0, 0.0, 0.0)
        assert Vector(0.0, -1e-160, 0.0).normalize() == Vector(0.0, -1.0, 0.0)

    def test_normalize_tiny_mixed(self):
        n = Vector(1e-160, 1e-161, 0.0).normalize()
        assert n.length() == pytest.approx(1.0, rel=1e-15)
        assert n.x == pytest.approx(1.0 / math.sqrt(1.01), rel=1e-12)
        assert n.y == pytest.approx(0.1 / math.sqrt(1.01), rel=1e-12)
        assert n.z == 0.0

    def test_normalize_huge(self):
        n = Vector(1e200, 1e200, 0.0).normalize()
        assert n.x == pytest.approx(math.sqrt(0.5))
        assert n.y == pytest.approx(math.sqrt(0.5))
        assert n.z == 0.0

    def test_normalize_nan_propagates(self):
        n = Vector(math.nan, 1.0, 0.0).normalize()
        assert math.isnan(n.x)


class TestBitwiseEquality:
    """Equality and hashing use raw bit patterns."""

    def test_signed_zero_distinct(self):
        assert Vector(-0.0, 0.0, 0.0) != Vector(0.0, 0.0, 0.0)
        assert ZERO == Vector.zero()

    def test_nan_equals_same_pattern(self):
        nan = float("nan")
        assert Vector(nan, 0.0, 0.0) == Vector(nan, 0.0, 0.0)

    def test_no_epsilon_fuzz(self):
        assert Vector(0.1 + 0.2, 0.0, 0.0) != Vector(0.3, 0.0, 0.0)

    def test_int_components_compare_as_doubles(self):
        assert Vector(1, 2, 3) == Vector(1.0, 2.0, 3.0)

    def test_hash_consistent_with_eq(self):
        vectors = {Vector(1.0, 2.0, 3.0), Vector(1.0, 2.0, 3.0), Vector(-0.0, 0.0, 0.0), ZERO}
        assert len(vectors) == 3

    def test_not_equal_to_tuple(self):
        assert Vector(1.0, 2.0, 3.0) != (1.0, 2.0, 3.0)
