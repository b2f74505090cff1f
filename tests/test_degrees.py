"""Tests for fixed-point degrees."""

import math

import pytest

from latlng.degrees import degrees_equal, to_fixed, to_float
from latlng.exceptions import InvalidDegree


class TestToFixed:
    """Tests for converting degrees to micro-degrees."""

    def test_whole_and_fractional_degrees(self):
        """Degrees should scale by one million."""
        assert to_fixed(0.0) == 0
        assert to_fixed(1.5) == 1_500000
        assert to_fixed(44.869797) == 44_869797
        assert to_fixed(-123.182312) == -123_182312

    def test_rounds_to_nearest_micro_degree(self):
        """Sub-micro-degree detail should round away."""
        assert to_fixed(10.0000004) == 10_000000
        assert to_fixed(10.0000006) == 10_000001
        assert to_fixed(-10.0000006) == -10_000001

    def test_negative_zero(self):
        """Negative zero is zero."""
        assert to_fixed(-0.0) == 0

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_rejects_non_finite(self, value):
        """NaN and infinities have no fixed-point form."""
        with pytest.raises(InvalidDegree):
            to_fixed(value)


class TestToFloat:
    """Tests for converting micro-degrees back to degrees."""

    def test_matches_decimal_literal(self):
        """The float should be the one the decimal literal names."""
        assert to_float(44_869797) == 44.869797
        assert to_float(-5_603027) == -5.603027
        assert to_float(0) == 0.0


class TestDegreesEqual:
    """Tests for micro-degree equality."""

    def test_equal_values(self):
        assert degrees_equal(0.0, 0.0)
        assert degrees_equal(0.0, -0.0)
        assert degrees_equal(123.123456, 123.123456)
        assert degrees_equal(-123.123456, -123.123456)

    def test_below_tolerance_is_equal(self):
        """Differences smaller than half a micro-degree vanish."""
        assert degrees_equal(0.0, 0.0000001)
        assert degrees_equal(0.0, 0.0000004)

    def test_at_or_above_tolerance_is_different(self):
        assert not degrees_equal(0.0, 1.0)
        assert not degrees_equal(-123, 123)
        assert not degrees_equal(0.0, 0.001)
        assert not degrees_equal(0.0, 0.000001)
        assert not degrees_equal(15, 15.000001)
        assert not degrees_equal(-15, -15.000001)
        assert not degrees_equal(-15, 15.000001)

    def test_non_finite_never_equal(self):
        """NaN and infinities are not equal to anything, themselves included."""
        assert not degrees_equal(0, math.inf)
        assert not degrees_equal(math.inf, 0)
        assert not degrees_equal(math.inf, math.inf)
        assert not degrees_equal(0, math.nan)
        assert not degrees_equal(math.nan, 0)
        assert not degrees_equal(math.nan, math.nan)
        assert not degrees_equal(math.nan, -math.inf)
