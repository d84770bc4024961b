"""Pool snapshots shared across the test suite."""

from __future__ import annotations

import pytest
from fixedpointmath import FixedPoint

from hypermath.long import get_solvency, long_curve_fee, solvency_after_long
from hypermath.results import Feasible
from hypermath.state import Fees, PoolConfig, PoolInfo, PoolState

# Fixtures defined in the same file
# pylint: disable=redefined-outer-name

ONE_DAY_IN_SECONDS = 60 * 60 * 24
ONE_YEAR_IN_SECONDS = 365 * ONE_DAY_IN_SECONDS


def build_pool_state(
    share_reserves: FixedPoint = FixedPoint(100_000),
    bond_reserves: FixedPoint = FixedPoint(110_000),
    share_price: FixedPoint = FixedPoint(1),
    long_exposure: FixedPoint = FixedPoint(0),
    share_adjustment: FixedPoint = FixedPoint(0),
    curve_fee: FixedPoint = FixedPoint("0.01"),
    governance_fee: FixedPoint = FixedPoint("0.1"),
    time_stretch: FixedPoint = FixedPoint("0.05"),
    initial_share_price: FixedPoint = FixedPoint(1),
    minimum_share_reserves: FixedPoint = FixedPoint(1),
) -> PoolState:
    """Build a pool snapshot, defaulting to a 100k share, 110k bond pool with a 1% curve fee.

    Returns
    -------
    PoolState
        The snapshot.
    """
    # pylint: disable=too-many-arguments
    return PoolState(
        PoolConfig(
            initial_share_price=initial_share_price,
            minimum_share_reserves=minimum_share_reserves,
            position_duration=ONE_YEAR_IN_SECONDS,
            checkpoint_duration=ONE_DAY_IN_SECONDS,
            time_stretch=time_stretch,
            fees=Fees(curve=curve_fee, flat=FixedPoint(0), governance=governance_fee),
        ),
        PoolInfo(
            share_reserves=share_reserves,
            share_adjustment=share_adjustment,
            bond_reserves=bond_reserves,
            share_price=share_price,
            longs_outstanding=long_exposure,
            long_exposure=long_exposure,
        ),
    )


def solvency_used_by_max_buy(pool_state: PoolState) -> FixedPoint:
    """How much solvency the largest purchase the curve allows would use up."""
    max_buy = pool_state.max_buy()
    assert isinstance(max_buy, Feasible)
    share_amount, bond_amount = max_buy.value
    base_amount = share_amount * pool_state.share_price
    bond_amount -= long_curve_fee(pool_state, base_amount)
    solvency = solvency_after_long(pool_state, base_amount, bond_amount, FixedPoint(0))
    assert isinstance(solvency, Feasible)
    return get_solvency(pool_state) - solvency.value


@pytest.fixture(scope="function")
def pool_state_fixture() -> PoolState:
    """A pool with no longs open; it stays solvent all the way to a spot price of one.

    Returns
    -------
    PoolState
        The snapshot.
    """
    return build_pool_state()


@pytest.fixture(scope="function")
def solvency_bound_pool_state_fixture(pool_state_fixture: PoolState) -> PoolState:
    """A pool with enough long exposure that solvency, not the curve, limits the max long.

    The exposure leaves 99% of the solvency the max curve purchase would need.

    Returns
    -------
    PoolState
        The snapshot.
    """
    solvency = solvency_used_by_max_buy(pool_state_fixture) * FixedPoint("0.99")
    share_price = pool_state_fixture.share_price
    long_exposure = (
        pool_state_fixture.share_reserves - pool_state_fixture.minimum_share_reserves - solvency
    ) * share_price
    return pool_state_fixture.with_info(long_exposure=long_exposure, longs_outstanding=long_exposure)
