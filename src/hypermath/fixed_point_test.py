"""Tests for the rounding-explicit fixed point helpers."""

import pytest
from fixedpointmath import FixedPoint

from .errors import NegativeFixedPointError
from .fixed_point import ZERO, mul_div_down, mul_div_up, require_non_negative


def test_mul_div_rounding_direction():
    """Floor and ceiling variants differ by one unit when the division is inexact."""
    one_wei = FixedPoint(scaled_value=1)
    three = FixedPoint(3)
    assert mul_div_down(FixedPoint(1), one_wei, three) == ZERO
    assert mul_div_up(FixedPoint(1), one_wei, three) == one_wei
    assert mul_div_down(FixedPoint(2), FixedPoint(1), three) == FixedPoint(scaled_value=666666666666666666)
    assert mul_div_up(FixedPoint(2), FixedPoint(1), three) == FixedPoint(scaled_value=666666666666666667)


def test_mul_div_exact():
    """Exact divisions round the same way in both directions."""
    assert mul_div_down(FixedPoint(6), FixedPoint(4), FixedPoint(8)) == FixedPoint(3)
    assert mul_div_up(FixedPoint(6), FixedPoint(4), FixedPoint(8)) == FixedPoint(3)


def test_mul_div_keeps_full_precision():
    """The product is not truncated before dividing, unlike chaining `*` and `/`."""
    x = FixedPoint(scaled_value=3)
    y = FixedPoint("0.1")
    d = FixedPoint("0.1")
    # x * y rounds to zero on its own
    assert (x * y) / d == ZERO
    assert mul_div_down(x, y, d) == x


def test_mul_div_negative_rounds_toward_negative_infinity():
    """Floor of a negative result moves away from zero."""
    minus_one_wei = FixedPoint(scaled_value=-1)
    assert mul_div_down(FixedPoint(1), minus_one_wei, FixedPoint(3)) == minus_one_wei
    assert mul_div_up(FixedPoint(1), minus_one_wei, FixedPoint(3)) == ZERO


def test_require_non_negative():
    """Zero and positive values pass through; negative values raise."""
    assert require_non_negative("x", ZERO) == ZERO
    assert require_non_negative("x", FixedPoint("1.5")) == FixedPoint("1.5")
    with pytest.raises(NegativeFixedPointError, match="x must be non-negative"):
        require_non_negative("x", FixedPoint("-0.000000000000000001"))
