"""Rounding-explicit helpers on top of fixedpointmath.

FixedPoint's ``*`` and ``/`` operators always round down. The Hyperdrive math picks the
rounding direction at each call site, so the multiply-then-divide variants here keep the
full integer product before dividing and let the caller choose floor or ceiling.
"""

from __future__ import annotations

from fixedpointmath import FixedPoint, FixedPointIntegerMath

from .errors import NegativeFixedPointError

ONE = FixedPoint(1)
ZERO = FixedPoint(0)


def mul_div_down(x: FixedPoint, y: FixedPoint, d: FixedPoint) -> FixedPoint:
    """Compute x * y / d, rounding the result down.

    Arguments
    ---------
    x: FixedPoint
        The first multiplicand.
    y: FixedPoint
        The second multiplicand.
    d: FixedPoint
        The divisor.

    Returns
    -------
    FixedPoint
        The floor of x * y / d.
    """
    return FixedPoint(
        scaled_value=FixedPointIntegerMath.mul_div_down(x.scaled_value, y.scaled_value, d.scaled_value)
    )


def mul_div_up(x: FixedPoint, y: FixedPoint, d: FixedPoint) -> FixedPoint:
    """Compute x * y / d, rounding the result up.

    Arguments
    ---------
    x: FixedPoint
        The first multiplicand.
    y: FixedPoint
        The second multiplicand.
    d: FixedPoint
        The divisor.

    Returns
    -------
    FixedPoint
        The ceiling of x * y / d.
    """
    return FixedPoint(scaled_value=FixedPointIntegerMath.mul_div_up(x.scaled_value, y.scaled_value, d.scaled_value))


def require_non_negative(name: str, value: FixedPoint) -> FixedPoint:
    """Return the value unchanged, raising if a quantity that must be unsigned went negative.

    Arguments
    ---------
    name: str
        Name of the quantity, used in the error message.
    value: FixedPoint
        The value to check.

    Returns
    -------
    FixedPoint
        The input value.
    """
    if value < ZERO:
        raise NegativeFixedPointError(f"{name} must be non-negative, got {value}")
    return value
