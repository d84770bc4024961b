"""Solver for the largest long the pool can stay solvent through."""

from __future__ import annotations

import logging
from typing import Any, NoReturn

from fixedpointmath import FixedPoint, minimum

from ..errors import AbsoluteMaxExceededError, InitialGuessInsolventError, MaxLongInvariantError
from ..fixed_point import ONE, ZERO, mul_div_down, require_non_negative
from ..hyperlogs import log_max_long_crash
from ..results import Feasible, Infeasible, SolvencyResult
from ..state import PoolState
from .pricing import calculate_long_amount, long_curve_fee
from .solvency import checkpoint_exposure_credit, get_solvency, solvency_after_long, solvency_after_long_derivative

DEFAULT_MAX_ITERATIONS = 7
# The blended price used by the second estimate never moves more than this fraction of the way to one
MAX_PRICE_WEIGHT = FixedPoint("0.8")


def _raise_invariant_error(error_type: type[MaxLongInvariantError], message: str, **exception_data: Any) -> NoReturn:
    error = error_type(message, exception_data=exception_data)
    log_max_long_crash(error)
    raise error


def max_long_estimate(
    pool_state: PoolState, estimate_price: FixedPoint, spot_price: FixedPoint, checkpoint_exposure: FixedPoint
) -> SolvencyResult:
    r"""Estimate the max long by linearizing solvency around an assumed average price.

    Assuming every bond is bought at ``estimate_price`` and solving solvency_after_long = 0 for the
    base amount gives

    .. math::
        x = \frac{c}{2} \cdot \frac{s + e_c / c}
            {1 / p_r + \phi_g \phi_c (1 - p) - 1 - \phi_c (1 / p - 1)}

    where :math:`s` is the current solvency and :math:`e_c` the checkpoint exposure credit.
    The lower the assumed price, the more conservative the estimate.

    Arguments
    ---------
    pool_state: PoolState
        The pool snapshot.
    estimate_price: FixedPoint
        The assumed average price of the bonds.
    spot_price: FixedPoint
        The current spot price, used for the fee terms.
    checkpoint_exposure: FixedPoint
        The exposure of the current checkpoint; may be negative.

    Returns
    -------
    Feasible[FixedPoint] | Infeasible
        The estimated base amount, or Infeasible if the pool is already insolvent or the
        linearization has no positive solution.
    """
    share_price = pool_state.share_price
    curve_fee = pool_state.curve_fee
    estimate = get_solvency(pool_state) + checkpoint_exposure_credit(checkpoint_exposure) / share_price
    if estimate < ZERO:
        return Infeasible("pool is already insolvent")
    estimate = mul_div_down(estimate, share_price, FixedPoint(2))
    denominator = (
        ONE / estimate_price
        + pool_state.governance_fee * curve_fee * (ONE - spot_price)
        - ONE
        - curve_fee * (ONE / spot_price - ONE)
    )
    if denominator <= ZERO:
        return Infeasible("fees exceed the price discount")
    return Feasible(estimate / denominator)


def get_max_long(
    pool_state: PoolState,
    budget: FixedPoint,
    checkpoint_exposure: FixedPoint,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> FixedPoint:
    """Calculate the largest long, in base, that fits the budget and keeps the pool solvent.

    If the pool stays solvent all the way to the edge of the curve (spot price of one) the edge
    is the answer. Otherwise a two-pass analytic estimate seeds Newton's method on
    solvency_after_long, and every accepted iterate is checked to be solvent.

    Arguments
    ---------
    pool_state: PoolState
        The pool snapshot.
    budget: FixedPoint
        The most base the trader can spend.
    checkpoint_exposure: FixedPoint
        The exposure of the current checkpoint; may be negative.
    max_iterations: int, optional
        The maximum number of Newton iterations. Defaults to DEFAULT_MAX_ITERATIONS.

    Returns
    -------
    FixedPoint
        The max long in base; never more than the budget.
    """
    # pylint: disable=too-many-locals
    require_non_negative("budget", budget)
    if budget == ZERO:
        return ZERO

    # Get the max long given by the curve alone. If the pool is solvent there, we're done.
    max_buy = pool_state.max_buy()
    if isinstance(max_buy, Infeasible):
        logging.debug("no long can be opened: %s", max_buy.reason)
        return ZERO
    share_amount, bond_amount = max_buy.value
    absolute_max_base_amount = share_amount * pool_state.share_price
    absolute_max_bond_amount = bond_amount - long_curve_fee(pool_state, absolute_max_base_amount)
    boundary_solvency: SolvencyResult = Infeasible("curve fee exceeds the bonds out at the edge of the curve")
    if absolute_max_bond_amount >= ZERO:
        boundary_solvency = solvency_after_long(
            pool_state, absolute_max_base_amount, absolute_max_bond_amount, checkpoint_exposure
        )
    if isinstance(boundary_solvency, Feasible):
        return minimum(absolute_max_base_amount, budget)
    logging.debug("the edge of the curve can't be reached: %s", boundary_solvency.reason)

    # Estimate the max long with the spot price as the average price, then blend the spot price toward
    # one by how close that first guess is to the absolute max and estimate again.
    spot_price = pool_state.spot_price()
    estimate = max_long_estimate(pool_state, spot_price, spot_price, checkpoint_exposure)
    if isinstance(estimate, Feasible):
        weight = (estimate.value / absolute_max_base_amount) ** ONE.div_up(ONE - pool_state.time_stretch)
        weight *= MAX_PRICE_WEIGHT
        estimate_price = spot_price * (ONE - weight) + weight
        estimate = max_long_estimate(pool_state, estimate_price, spot_price, checkpoint_exposure)
    if isinstance(estimate, Infeasible):
        _raise_invariant_error(
            InitialGuessInsolventError,
            f"Initial guess in `get_max_long` is undefined: {estimate.reason}.",
            pool_state=pool_state,
            budget=budget,
            checkpoint_exposure=checkpoint_exposure,
            spot_price=spot_price,
        )
    max_base_amount = estimate.value
    bond_amount_result = calculate_long_amount(pool_state, max_base_amount)
    solvency: SolvencyResult = bond_amount_result
    if isinstance(bond_amount_result, Feasible):
        solvency = solvency_after_long(pool_state, max_base_amount, bond_amount_result.value, checkpoint_exposure)
    if isinstance(solvency, Infeasible):
        _raise_invariant_error(
            InitialGuessInsolventError,
            "Initial guess in `get_max_long` is insolvent.",
            pool_state=pool_state,
            budget=budget,
            checkpoint_exposure=checkpoint_exposure,
            initial_guess=max_base_amount,
            reason=solvency.reason,
        )
    max_solvency = solvency.value

    # Newton's method on solvency(x) = 0. Solvency falls as x grows, so stepping by the solvency
    # over the negated slope moves toward the root from below.
    for iteration in range(max_iterations):
        if max_base_amount >= absolute_max_base_amount:
            _raise_invariant_error(
                AbsoluteMaxExceededError,
                "Reached absolute max bond amount in `get_max_long`.",
                pool_state=pool_state,
                budget=budget,
                checkpoint_exposure=checkpoint_exposure,
                iteration=iteration,
                max_base_amount=max_base_amount,
                absolute_max_base_amount=absolute_max_base_amount,
            )
        if max_base_amount >= budget:
            return budget

        derivative = solvency_after_long_derivative(pool_state, max_base_amount)
        if isinstance(derivative, Infeasible):
            logging.debug("stopping max long search: %s", derivative.reason)
            break
        possible_max_base_amount = max_base_amount + max_solvency / derivative.value
        bond_amount_result = calculate_long_amount(pool_state, possible_max_base_amount)
        if isinstance(bond_amount_result, Infeasible):
            logging.debug("stopping max long search: %s", bond_amount_result.reason)
            break
        solvency = solvency_after_long(
            pool_state, possible_max_base_amount, bond_amount_result.value, checkpoint_exposure
        )
        if isinstance(solvency, Infeasible):
            break
        max_base_amount = possible_max_base_amount
        max_solvency = solvency.value
        logging.debug(
            "max long iteration %d: base_amount=%s solvency=%s", iteration, max_base_amount, max_solvency
        )

    return minimum(max_base_amount, budget)
