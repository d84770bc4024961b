"""Random pool snapshots for fuzz testing."""

from __future__ import annotations

from fixedpointmath import FixedPoint
from numpy.random import Generator

from ..rates import calculate_initial_bond_reserves, calculate_time_stretch
from .fees import Fees
from .pool_config import PoolConfig
from .pool_info import PoolInfo
from .pool_state import PoolState

ONE_HOUR_IN_SECONDS = 60 * 60
ONE_YEAR_IN_HOURS = 365 * 24

# Fuzz ranges, defined as tuples of (min, max)

INITIAL_SHARE_PRICE_RANGE: tuple[float, float] = (0.5, 2.5)
# The current share price is drawn as a multiple of the initial share price
SHARE_PRICE_MULTIPLIER_RANGE: tuple[float, float] = (1, 2)
MINIMUM_SHARE_RESERVES_RANGE: tuple[float, float] = (0.1, 1)
SHARE_RESERVES_RANGE: tuple[float, float] = (1_000, 100_000_000)
# The share adjustment is drawn as a fraction of the share reserves
SHARE_ADJUSTMENT_FRACTION_RANGE: tuple[float, float] = (-0.1, 0.1)
# Long exposure is drawn as a fraction of the largest exposure that keeps the pool solvent
LONG_EXPOSURE_FRACTION_RANGE: tuple[float, float] = (0, 1)
POSITION_DURATION_HOURS_RANGE: tuple[int, int] = (91 * 24, 2 * ONE_YEAR_IN_HOURS)
CHECKPOINT_DURATION_HOURS_RANGE: tuple[int, int] = (1, 24)
TIME_STRETCH_APR_RANGE: tuple[float, float] = (0.005, 0.5)
FIXED_RATE_RANGE: tuple[float, float] = (0.005, 0.5)
CURVE_FEE_RANGE: tuple[float, float] = (0.0001, 0.1)
FLAT_FEE_RANGE: tuple[float, float] = (0.0001, 0.1)
GOVERNANCE_FEE_RANGE: tuple[float, float] = (0.0001, 0.2)


def random_pool_state(rng: Generator) -> PoolState:
    """Draw a random, valid pool snapshot.

    A valid snapshot has a spot price below one and non-negative solvency.

    Arguments
    ---------
    rng: Generator
        Numpy random number generator.

    Returns
    -------
    PoolState
        The random snapshot.
    """
    # pylint: disable=too-many-locals
    checkpoint_duration_hours = int(rng.integers(*CHECKPOINT_DURATION_HOURS_RANGE))
    position_duration_hours = int(rng.integers(*POSITION_DURATION_HOURS_RANGE))
    # Position duration must be a multiple of checkpoint duration
    position_duration_hours -= position_duration_hours % checkpoint_duration_hours
    position_duration = position_duration_hours * ONE_HOUR_IN_SECONDS
    checkpoint_duration = checkpoint_duration_hours * ONE_HOUR_IN_SECONDS

    initial_share_price = FixedPoint(rng.uniform(*INITIAL_SHARE_PRICE_RANGE))
    minimum_share_reserves = FixedPoint(rng.uniform(*MINIMUM_SHARE_RESERVES_RANGE))
    time_stretch = calculate_time_stretch(FixedPoint(rng.uniform(*TIME_STRETCH_APR_RANGE)), position_duration)
    pool_config = PoolConfig(
        initial_share_price=initial_share_price,
        minimum_share_reserves=minimum_share_reserves,
        position_duration=position_duration,
        checkpoint_duration=checkpoint_duration,
        time_stretch=time_stretch,
        fees=Fees(
            curve=FixedPoint(rng.uniform(*CURVE_FEE_RANGE)),
            flat=FixedPoint(rng.uniform(*FLAT_FEE_RANGE)),
            governance=FixedPoint(rng.uniform(*GOVERNANCE_FEE_RANGE)),
        ),
    )

    share_reserves = FixedPoint(rng.uniform(*SHARE_RESERVES_RANGE))
    share_adjustment = share_reserves * FixedPoint(rng.uniform(*SHARE_ADJUSTMENT_FRACTION_RANGE))
    share_price = initial_share_price * FixedPoint(rng.uniform(*SHARE_PRICE_MULTIPLIER_RANGE))
    bond_reserves = calculate_initial_bond_reserves(
        share_reserves - share_adjustment,
        initial_share_price,
        FixedPoint(rng.uniform(*FIXED_RATE_RANGE)),
        position_duration,
        time_stretch,
    )
    # solvency = z - e / c - z_min, so e can be at most (z - z_min) * c
    long_exposure = (share_reserves - minimum_share_reserves) * share_price
    long_exposure *= FixedPoint(rng.uniform(*LONG_EXPOSURE_FRACTION_RANGE))
    return PoolState(
        pool_config,
        PoolInfo(
            share_reserves=share_reserves,
            share_adjustment=share_adjustment,
            bond_reserves=bond_reserves,
            share_price=share_price,
            longs_outstanding=long_exposure,
            long_exposure=long_exposure,
        ),
    )
