"""Tests for fixed rate and time stretch conversions."""

from __future__ import annotations

from fixedpointmath import FixedPoint, isclose

from .rates import (
    ONE_YEAR_IN_SECONDS,
    annualized_time,
    calculate_initial_bond_reserves,
    calculate_spot_rate,
    calculate_time_stretch,
)
from .test_fixtures import build_pool_state

# allow magic value comparison
# ruff: noqa: PLR2004


def test_annualized_time():
    """Durations are converted to fractions of a 365 day year."""
    assert annualized_time(ONE_YEAR_IN_SECONDS) == FixedPoint(1)
    assert annualized_time(ONE_YEAR_IN_SECONDS // 2) == FixedPoint("0.5")


def test_time_stretch_one_year():
    """A 5% pool with a one year term has the canonical time stretch."""
    time_stretch = calculate_time_stretch(FixedPoint("0.05"), ONE_YEAR_IN_SECONDS)
    assert isclose(time_stretch, FixedPoint("0.0444631"), abs_tol=FixedPoint("0.000001"))


def test_time_stretch_shrinks_with_term():
    """Shorter terms get a smaller time stretch for the same rate."""
    one_year = calculate_time_stretch(FixedPoint("0.05"), ONE_YEAR_IN_SECONDS)
    half_year = calculate_time_stretch(FixedPoint("0.05"), ONE_YEAR_IN_SECONDS // 2)
    assert half_year < one_year


def test_initial_bond_reserves_hit_target_rate():
    """A pool seeded with the initial bond reserves quotes the target rate."""
    apr = FixedPoint("0.05")
    time_stretch = calculate_time_stretch(apr, ONE_YEAR_IN_SECONDS)
    for initial_share_price in [FixedPoint(1), FixedPoint("1.5")]:
        share_reserves = FixedPoint(100_000)
        bond_reserves = calculate_initial_bond_reserves(
            share_reserves, initial_share_price, apr, ONE_YEAR_IN_SECONDS, time_stretch
        )
        pool_state = build_pool_state(
            share_reserves=share_reserves,
            bond_reserves=bond_reserves,
            share_price=initial_share_price,
            initial_share_price=initial_share_price,
            time_stretch=time_stretch,
        )
        assert isclose(calculate_spot_rate(pool_state), apr, abs_tol=FixedPoint("0.00001"))
