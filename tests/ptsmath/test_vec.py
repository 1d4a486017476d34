"""Tests for vector algebra on raw buffers."""

import math

import numpy as np
import pytest

from pts.core.errors import DegenerateInputError, DimensionMismatchError
from pts.math import vec


def buf(*values):
    return vec.as_buffer(values)


class TestArithmetic:
    """Test in-place arithmetic against scalars and vectors."""

    def test_add_scalar(self):
        """Test a scalar is added to every component."""
        b = buf(1, 2, 3)
        result = vec.add(b, 1)
        assert result is b
        assert b.tolist() == [2, 3, 4]

    def test_add_vector(self):
        """Test elementwise addition."""
        b = buf(1, 2)
        vec.add(b, [10, 20])
        assert b.tolist() == [11, 22]

    def test_shorter_operand_leaves_tail(self):
        """Test only overlapping components change."""
        b = buf(1, 2, 3)
        vec.add(b, [10])
        assert b.tolist() == [11, 2, 3]

    def test_longer_operand_is_truncated(self):
        """Test extra operand components are ignored."""
        b = buf(1, 2)
        vec.subtract(b, [1, 1, 1, 1])
        assert b.tolist() == [0, 1]
        assert len(b) == 2

    def test_multiply_and_divide(self):
        """Test scalar multiply and elementwise divide."""
        b = buf(2, 4)
        vec.multiply(b, 3)
        vec.divide(b, [2, 4])
        assert b.tolist() == [3, 3]

    def test_divide_by_zero_follows_ieee(self):
        """Test division by zero gives inf and nan without raising."""
        b = buf(1, -1, 0)
        vec.divide(b, 0)
        assert b[0] == np.inf
        assert b[1] == -np.inf
        assert np.isnan(b[2])

    def test_storage_stays_float32(self):
        """Test operations never change the buffer dtype."""
        b = buf(1, 2)
        vec.multiply(b, 0.5)
        assert b.dtype == np.float32


class TestProducts:
    """Test dot and cross products."""

    def test_dot(self):
        """Test dot product."""
        assert vec.dot([1, 2, 3], [4, 5, 6]) == 32

    def test_dot_uses_overlap(self):
        """Test dot product over the shorter length."""
        assert vec.dot([1, 2, 3], [4, 5]) == 14

    def test_cross(self):
        """Test x cross y is z."""
        assert vec.cross([1, 0, 0], [0, 1, 0]).tolist() == [0, 0, 1]

    def test_cross_anticommutes(self):
        """Test a x b == -(b x a)."""
        a, b = [1, 2, 3], [4, 5, 6]
        assert vec.cross(a, b).tolist() == (-vec.cross(b, a)).tolist()

    def test_cross_requires_three_dimensions(self):
        """Test 2D cross product is rejected."""
        with pytest.raises(DimensionMismatchError) as exc_info:
            vec.cross([1, 0], [0, 1, 0])
        assert exc_info.value.details["required"] == 3
        assert exc_info.value.details["actual"] == 2


class TestMagnitude:
    """Test magnitude and normalization."""

    def test_magnitude(self):
        """Test the 3-4-5 triangle."""
        assert vec.magnitude([3, 4]) == 5
        assert vec.magnitude_sq([3, 4]) == 25

    def test_unit(self):
        """Test normalization gives length 1."""
        b = buf(3, 4)
        vec.unit(b)
        assert b[0] == pytest.approx(0.6)
        assert b[1] == pytest.approx(0.8)
        assert vec.magnitude(b) == pytest.approx(1.0)

    def test_unit_with_known_magnitude(self):
        """Test a caller-supplied magnitude is used as is."""
        b = buf(3, 4)
        vec.unit(b, 10)
        assert b.tolist() == pytest.approx([0.3, 0.4])

    def test_unit_of_zero_is_nan(self):
        """Test a zero vector normalizes to nan components."""
        b = buf(0, 0)
        vec.unit(b)
        assert np.isnan(b).all()


class TestRounding:
    """Test abs, floor, ceil and round."""

    def test_abs(self):
        """Test absolute values."""
        assert vec.abs(buf(-1, 2, -3.5)).tolist() == [1, 2, 3.5]

    def test_floor_and_ceil(self):
        """Test floor and ceil on negative and positive values."""
        assert vec.floor(buf(1.5, -1.5)).tolist() == [1, -2]
        assert vec.ceil(buf(1.5, -1.5)).tolist() == [2, -1]

    def test_round_halves_up(self):
        """Test halves round towards positive infinity."""
        assert vec.round(buf(2.5, -2.5, 1.4, -1.6)).tolist() == [3, -2, 1, -2]

    def test_round_keeps_large_integers(self):
        """Test integers above 2**23 are left as they are."""
        assert vec.round(buf(8388609.0, -8388609.0)).tolist() == [8388609, -8388609]

    def test_round_just_below_half(self):
        """Test the float32 value just below 0.5 rounds down."""
        b = buf(0.49999997, -0.50000006)
        vec.round(b)
        assert b.tolist() == [0, -1]
        assert b.dtype == np.float32


class TestExtremes:
    """Test min and max with indices."""

    def test_empty_raises(self):
        """Test a zero-length vector has no extremes."""
        with pytest.raises(DegenerateInputError):
            vec.min(buf())
        with pytest.raises(DegenerateInputError):
            vec.max(buf())

    def test_min(self):
        """Test smallest component and its index."""
        result = vec.min(buf(3, -1, 2))
        assert result.value == -1
        assert result.index == 1

    def test_max_first_wins_on_ties(self):
        """Test the first of equal maxima is reported."""
        result = vec.max(buf(5, 1, 5))
        assert result == (5, 0)

    def test_magnitude_is_float(self):
        """Test magnitude returns a plain float."""
        assert isinstance(vec.magnitude(buf(1, 1)), float)
        assert vec.magnitude(buf(1, 1)) == pytest.approx(math.sqrt(2))
