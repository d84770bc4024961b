r"""YieldSpace bonding curve primitives.

The curve invariant is

.. math::
    k = \frac{c}{\mu} (\mu z_e)^{t} + y^{t}, \quad t = 1 - t_s

Functions take the raw reserves and curve parameters so they can be compared line-by-line
against the Hyperdrive contracts; ``PoolState`` wraps them with the pool's own values.
Trades past the edge of the curve return ``Infeasible`` instead of a negative amount.
"""

from __future__ import annotations

from fixedpointmath import FixedPoint

from .fixed_point import ONE, ZERO, mul_div_down, mul_div_up
from .results import Feasible, Infeasible

# Let the variable names be the same as their solidity counterpart so that it is easier to compare the two.
# pylint: disable=invalid-name
# pylint: disable=too-many-arguments


def _root(x: FixedPoint, t: FixedPoint) -> FixedPoint:
    # round the exponent so that x^(1/t) rounds up on either side of one
    if x >= ONE:
        return x ** ONE.div_up(t)
    return x ** (ONE / t)


def _root_down(x: FixedPoint, t: FixedPoint) -> FixedPoint:
    # round the exponent so that x^(1/t) rounds down on either side of one
    if x >= ONE:
        return x ** (ONE / t)
    return x ** ONE.div_up(t)


def calculate_k_down(ze: FixedPoint, y: FixedPoint, t: FixedPoint, c: FixedPoint, mu: FixedPoint) -> FixedPoint:
    """Calculate the YieldSpace invariant k, rounding down.

    Arguments
    ---------
    ze: FixedPoint
        The effective share reserves.
    y: FixedPoint
        The bond reserves.
    t: FixedPoint
        One minus the time stretch.
    c: FixedPoint
        The current share price.
    mu: FixedPoint
        The initial share price.

    Returns
    -------
    FixedPoint
        The invariant k.
    """
    return mul_div_down(c, (mu * ze) ** t, mu) + y**t


def calculate_k_up(ze: FixedPoint, y: FixedPoint, t: FixedPoint, c: FixedPoint, mu: FixedPoint) -> FixedPoint:
    """Calculate the YieldSpace invariant k, rounding up.

    Arguments
    ---------
    ze: FixedPoint
        The effective share reserves.
    y: FixedPoint
        The bond reserves.
    t: FixedPoint
        One minus the time stretch.
    c: FixedPoint
        The current share price.
    mu: FixedPoint
        The initial share price.

    Returns
    -------
    FixedPoint
        The invariant k.
    """
    return mul_div_up(c, mu.mul_up(ze) ** t, mu) + y**t


def calculate_spot_price(ze: FixedPoint, y: FixedPoint, mu: FixedPoint, time_stretch: FixedPoint) -> FixedPoint:
    """Calculate the spot price of a bond in base, (mu * ze / y) ** time_stretch.

    Arguments
    ---------
    ze: FixedPoint
        The effective share reserves.
    y: FixedPoint
        The bond reserves.
    mu: FixedPoint
        The initial share price.
    time_stretch: FixedPoint
        The time stretch exponent.

    Returns
    -------
    FixedPoint
        The spot price.
    """
    return mul_div_down(mu, ze, y) ** time_stretch


def calculate_bonds_out_given_shares_in_down(
    ze: FixedPoint, y: FixedPoint, dz: FixedPoint, t: FixedPoint, c: FixedPoint, mu: FixedPoint
) -> Feasible[FixedPoint] | Infeasible:
    """Calculate the bonds a trader receives for a given amount of shares, rounding in the pool's favor.

    Arguments
    ---------
    ze: FixedPoint
        The effective share reserves.
    y: FixedPoint
        The bond reserves.
    dz: FixedPoint
        The amount of shares paid in.
    t: FixedPoint
        One minus the time stretch.
    c: FixedPoint
        The current share price.
    mu: FixedPoint
        The initial share price.

    Returns
    -------
    Feasible[FixedPoint] | Infeasible
        The amount of bonds out, or Infeasible if the trade is past the edge of the curve.
    """
    if dz == ZERO:
        return Feasible(ZERO)
    k = calculate_k_up(ze, y, t, c, mu)
    ze = (mu * (ze + dz)) ** t
    ze = mul_div_down(c, ze, mu)
    if k < ze:
        return Infeasible("share reserves exceed the curve invariant")
    _y = _root(k - ze, t)
    if y < _y:
        return Infeasible("bond reserves would increase")
    return Feasible(y - _y)


def calculate_shares_out_given_bonds_in_down(
    ze: FixedPoint, y: FixedPoint, dy: FixedPoint, t: FixedPoint, c: FixedPoint, mu: FixedPoint
) -> Feasible[FixedPoint] | Infeasible:
    """Calculate the shares a trader receives for a given amount of bonds, rounding in the pool's favor.

    Arguments
    ---------
    ze: FixedPoint
        The effective share reserves.
    y: FixedPoint
        The bond reserves.
    dy: FixedPoint
        The amount of bonds paid in.
    t: FixedPoint
        One minus the time stretch.
    c: FixedPoint
        The current share price.
    mu: FixedPoint
        The initial share price.

    Returns
    -------
    Feasible[FixedPoint] | Infeasible
        The amount of shares out, or Infeasible if the trade is past the edge of the curve.
    """
    if dy == ZERO:
        return Feasible(ZERO)
    k = calculate_k_up(ze, y, t, c, mu)
    y = (y + dy) ** t
    if k < y:
        return Infeasible("bond reserves exceed the curve invariant")
    _z = mul_div_up(k - y, mu, c)
    _z = _root(_z, t).div_up(mu)
    if ze < _z:
        return Infeasible("share reserves would increase")
    return Feasible(ze - _z)


def calculate_max_buy(
    ze: FixedPoint, y: FixedPoint, t: FixedPoint, c: FixedPoint, mu: FixedPoint
) -> Feasible[tuple[FixedPoint, FixedPoint]] | Infeasible:
    r"""Calculate the largest bond purchase the curve allows.

    The spot price can never exceed one. A spot price of one means mu * ze = y, which simplifies the
    invariant to k = (c / mu + 1) * y ** t, so the reserves at the edge of the curve are

    .. math::
        y' = \left(\frac{k}{c / \mu + 1}\right)^{1 / t}, \quad z' = \frac{y'}{\mu}

    Arguments
    ---------
    ze: FixedPoint
        The effective share reserves.
    y: FixedPoint
        The bond reserves.
    t: FixedPoint
        One minus the time stretch.
    c: FixedPoint
        The current share price.
    mu: FixedPoint
        The initial share price.

    Returns
    -------
    Feasible[tuple[FixedPoint, FixedPoint]] | Infeasible
        The shares paid in and the bonds paid out by the max purchase,
        or Infeasible if the spot price is already at one.
    """
    c_div_mu = c.div_up(mu)
    k = calculate_k_down(ze, y, t, c, mu)
    # edge reserves round down so the max buy never pays in more shares than the curve allows
    optimal_y = _root_down(k / (c_div_mu + ONE), t)
    optimal_z = optimal_y / mu
    if optimal_z < ze or optimal_y > y:
        return Infeasible("spot price is already at one")
    return Feasible((optimal_z - ze, y - optimal_y))
