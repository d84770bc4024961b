"""Pricing for opening longs: bonds out, fees and the marginal rate of bonds per base."""

from __future__ import annotations

from fixedpointmath import FixedPoint

from ..errors import CurveDomainError
from ..fixed_point import ONE, ZERO, require_non_negative
from ..results import Feasible, Infeasible, SolvencyResult
from ..state import PoolState


def long_curve_fee(pool_state: PoolState, base_amount: FixedPoint) -> FixedPoint:
    r"""Calculate the curve fee charged on a long, paid in bonds.

    .. math::
        \Phi_c(x) = \phi_c \cdot (1 / p - 1) \cdot x

    Arguments
    ---------
    pool_state: PoolState
        The pool snapshot.
    base_amount: FixedPoint
        The amount of base paid for the long.

    Returns
    -------
    FixedPoint
        The curve fee.
    """
    return pool_state.curve_fee * (ONE / pool_state.spot_price() - ONE) * base_amount


def long_governance_fee(pool_state: PoolState, base_amount: FixedPoint) -> FixedPoint:
    r"""Calculate the share of the curve fee that goes to governance, paid in base.

    .. math::
        \Phi_g(x) = \phi_g \cdot p \cdot \Phi_c(x)

    Arguments
    ---------
    pool_state: PoolState
        The pool snapshot.
    base_amount: FixedPoint
        The amount of base paid for the long.

    Returns
    -------
    FixedPoint
        The governance fee.
    """
    return pool_state.governance_fee * pool_state.spot_price() * long_curve_fee(pool_state, base_amount)


def calculate_long_amount(pool_state: PoolState, base_amount: FixedPoint) -> SolvencyResult:
    """Calculate the bonds received for a long, or Infeasible if the trade runs off the curve.

    Arguments
    ---------
    pool_state: PoolState
        The pool snapshot.
    base_amount: FixedPoint
        The amount of base paid for the long.

    Returns
    -------
    Feasible[FixedPoint] | Infeasible
        The bonds received after the curve fee.
    """
    require_non_negative("base_amount", base_amount)
    bonds_out = pool_state.bonds_out_given_shares_in(base_amount / pool_state.share_price)
    if isinstance(bonds_out, Infeasible):
        return bonds_out
    bond_amount = bonds_out.value - long_curve_fee(pool_state, base_amount)
    if bond_amount < ZERO:
        return Infeasible("curve fee exceeds the bonds out")
    return Feasible(bond_amount)


def get_long_amount(pool_state: PoolState, base_amount: FixedPoint) -> FixedPoint:
    """Calculate the bonds a trader receives for opening a long with ``base_amount``.

    The base is converted to shares at the current share price and traded along the curve;
    the curve fee is then taken out of the bonds.

    Arguments
    ---------
    pool_state: PoolState
        The pool snapshot.
    base_amount: FixedPoint
        The amount of base paid for the long.

    Returns
    -------
    FixedPoint
        The bonds received after the curve fee.
    """
    long_amount = calculate_long_amount(pool_state, base_amount)
    if isinstance(long_amount, Infeasible):
        raise CurveDomainError(f"cannot open a long for {base_amount} base: {long_amount.reason}")
    return long_amount.value


def long_amount_derivative(pool_state: PoolState, base_amount: FixedPoint) -> SolvencyResult:
    r"""Calculate the derivative of :func:`get_long_amount` with respect to the base paid.

    With :math:`z_e` the effective share reserves and :math:`t_s` the time stretch,

    .. math::
        y'(x) = (\mu (z_e + x / c))^{-t_s}
            \left(k - \frac{c}{\mu} (\mu (z_e + x / c))^{1 - t_s}\right)^{\frac{t_s}{1 - t_s}}
            - \phi_c (1 / p - 1)

    Arguments
    ---------
    pool_state: PoolState
        The pool snapshot.
    base_amount: FixedPoint
        The amount of base paid for the long.

    Returns
    -------
    Feasible[FixedPoint] | Infeasible
        The derivative, or Infeasible when the trade is at or past the edge of the curve.
    """
    share_price = pool_state.share_price
    initial_share_price = pool_state.initial_share_price
    time_stretch = pool_state.time_stretch
    inner = initial_share_price * (pool_state.effective_share_reserves + base_amount / share_price)
    derivative = ONE / inner**time_stretch
    # k is just above the right hand side when the trade is near the edge of the curve
    k = pool_state.k_down()
    rhs = (share_price / initial_share_price) * inner ** (ONE - time_stretch)
    if k < rhs:
        return Infeasible("trade is past the edge of the curve")
    derivative *= (k - rhs) ** time_stretch.div_up(ONE - time_stretch)
    derivative -= pool_state.curve_fee * (ONE / pool_state.spot_price() - ONE)
    return Feasible(derivative)


def spot_price_after_long(
    pool_state: PoolState, base_amount: FixedPoint, bond_amount: FixedPoint | None = None
) -> FixedPoint:
    """Calculate the spot price after opening a long.

    The share reserves grow by the base paid net of the governance fee, and the bond reserves
    shrink by the bonds paid to the trader; the curve fee stays in the pool.

    Arguments
    ---------
    pool_state: PoolState
        The pool snapshot.
    base_amount: FixedPoint
        The amount of base paid for the long.
    bond_amount: FixedPoint | None, optional
        The bonds received by the trader. Defaults to ``get_long_amount(pool_state, base_amount)``.

    Returns
    -------
    FixedPoint
        The spot price after the trade.
    """
    if bond_amount is None:
        bond_amount = get_long_amount(pool_state, base_amount)
    governance_fee = long_governance_fee(pool_state, base_amount)
    share_reserves = pool_state.share_reserves + (base_amount - governance_fee) / pool_state.share_price
    bond_reserves = require_non_negative("bond_reserves", pool_state.bond_reserves - bond_amount)
    return pool_state.with_info(share_reserves=share_reserves, bond_reserves=bond_reserves).spot_price()
