"""Conversions between YieldSpace prices, fixed rates and pool parameters."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fixedpointmath import FixedPoint, FixedPointIntegerMath

from .fixed_point import ONE, mul_div_down

if TYPE_CHECKING:
    from .state import PoolState

ONE_YEAR_IN_SECONDS = 365 * 24 * 60 * 60


def _ln(x: FixedPoint) -> FixedPoint:
    return FixedPoint(scaled_value=FixedPointIntegerMath.ln(x.scaled_value))


def annualized_time(duration: int) -> FixedPoint:
    """Convert a duration in seconds to a fraction of a year."""
    return FixedPoint(duration) / FixedPoint(ONE_YEAR_IN_SECONDS)


def calculate_spot_rate(pool_state: PoolState) -> FixedPoint:
    r"""Calculate the fixed rate implied by the current spot price.

    .. math::
        r = \frac{1 - p}{p \cdot T}

    where :math:`T` is the position duration in years.

    Arguments
    ---------
    pool_state: PoolState
        The pool snapshot.

    Returns
    -------
    FixedPoint
        The annualized fixed rate.
    """
    spot_price = pool_state.spot_price()
    return (ONE - spot_price) / (spot_price * annualized_time(pool_state.pool_config.position_duration))


def calculate_time_stretch(apr: FixedPoint, position_duration: int) -> FixedPoint:
    """Calculate the time stretch for a target rate and term length.

    The base time stretch is fit for a one year term. For other terms we solve

        (1 + apr) * A ** time_stretch = 1
        (1 + apr * T) * A ** target_time_stretch = 1

    which gives target_time_stretch = time_stretch * ln(1 + apr * T) / ln(1 + apr).

    Arguments
    ---------
    apr: FixedPoint
        The target fixed rate; must be positive.
    position_duration: int
        The term length in seconds.

    Returns
    -------
    FixedPoint
        The time stretch.
    """
    time_stretch = FixedPoint("5.24592") / (FixedPoint("0.04665") * (apr * FixedPoint(100)))
    time_stretch = ONE / time_stretch
    numerator = _ln(ONE + apr * annualized_time(position_duration))
    denominator = _ln(ONE + apr)
    return mul_div_down(numerator, time_stretch, denominator)


def calculate_initial_bond_reserves(
    effective_share_reserves: FixedPoint,
    initial_share_price: FixedPoint,
    apr: FixedPoint,
    position_duration: int,
    time_stretch: FixedPoint,
) -> FixedPoint:
    r"""Calculate the bond reserves that put the spot rate at ``apr``.

    .. math::
        y = \mu z_e (1 + r T)^{1 / t_s}

    Arguments
    ---------
    effective_share_reserves: FixedPoint
        The effective share reserves.
    initial_share_price: FixedPoint
        The initial share price.
    apr: FixedPoint
        The target fixed rate.
    position_duration: int
        The term length in seconds.
    time_stretch: FixedPoint
        The time stretch.

    Returns
    -------
    FixedPoint
        The bond reserves.
    """
    return initial_share_price * effective_share_reserves * (
        (ONE + apr * annualized_time(position_duration)) ** (ONE / time_stretch)
    )
