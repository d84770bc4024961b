"""Pool solvency before and after opening a long."""

from __future__ import annotations

from fixedpointmath import FixedPoint, minimum

from ..fixed_point import ONE, ZERO, mul_div_down
from ..results import Feasible, Infeasible, SolvencyResult
from ..state import PoolState
from .pricing import long_amount_derivative, long_governance_fee


def checkpoint_exposure_credit(checkpoint_exposure: FixedPoint) -> FixedPoint:
    """The part of the checkpoint exposure that offsets the global exposure.

    Only negative checkpoint exposure (unnetted shorts in the current checkpoint) counts,
    so this is ``-min(checkpoint_exposure, 0)``.
    """
    return -minimum(checkpoint_exposure, ZERO)


def get_solvency(pool_state: PoolState) -> FixedPoint:
    r"""Calculate the pool's solvency, the spare share reserves beyond what the longs need.

    .. math::
        s = z - \frac{e}{c} - z_{min}

    A negative result means the pool is already insolvent.

    Arguments
    ---------
    pool_state: PoolState
        The pool snapshot.

    Returns
    -------
    FixedPoint
        The solvency in shares.
    """
    return (
        pool_state.share_reserves
        - pool_state.long_exposure / pool_state.share_price
        - pool_state.minimum_share_reserves
    )


def solvency_after_long(
    pool_state: PoolState, base_amount: FixedPoint, bond_amount: FixedPoint, checkpoint_exposure: FixedPoint
) -> SolvencyResult:
    r"""Calculate the pool's solvency after opening a long.

    Opening a long of ``base_amount`` that pays ``bond_amount`` updates the reserves and exposure as

    .. math::
        z' = z + \frac{x - g(x)}{c}, \quad e' = e + 2 y - x + g(x)

    Arguments
    ---------
    pool_state: PoolState
        The pool snapshot.
    base_amount: FixedPoint
        The amount of base paid for the long.
    bond_amount: FixedPoint
        The bonds received by the trader.
    checkpoint_exposure: FixedPoint
        The exposure of the current checkpoint; may be negative.

    Returns
    -------
    Feasible[FixedPoint] | Infeasible
        The solvency after the trade, or Infeasible if the trade would make the pool insolvent.
    """
    share_price = pool_state.share_price
    governance_fee = long_governance_fee(pool_state, base_amount)
    share_reserves = pool_state.share_reserves + base_amount / share_price - governance_fee / share_price
    exposure = pool_state.long_exposure + FixedPoint(2) * bond_amount - base_amount + governance_fee
    share_reserves += checkpoint_exposure_credit(checkpoint_exposure) / share_price
    obligations = exposure / share_price + pool_state.minimum_share_reserves
    if share_reserves >= obligations:
        return Feasible(share_reserves - obligations)
    return Infeasible("pool would be insolvent")


def solvency_after_long_derivative(pool_state: PoolState, base_amount: FixedPoint) -> SolvencyResult:
    r"""Calculate the negated derivative of :func:`solvency_after_long` with respect to the base paid.

    .. math::
        -s'(x) = \frac{2}{c} \left(y'(x) + \phi_g \phi_c (1 - p) - 1\right)

    Solvency falls as the long grows, so the negated value is positive wherever the curve is defined.

    Arguments
    ---------
    pool_state: PoolState
        The pool snapshot.
    base_amount: FixedPoint
        The amount of base paid for the long.

    Returns
    -------
    Feasible[FixedPoint] | Infeasible
        The negated derivative, or Infeasible if it is undefined or not positive.
    """
    derivative = long_amount_derivative(pool_state, base_amount)
    if isinstance(derivative, Infeasible):
        return derivative
    spot_price = pool_state.spot_price()
    slope = derivative.value + pool_state.governance_fee * pool_state.curve_fee * (ONE - spot_price) - ONE
    slope = mul_div_down(slope, FixedPoint(2), pool_state.share_price)
    if slope <= ZERO:
        return Infeasible("solvency is not decreasing")
    return Feasible(slope)
