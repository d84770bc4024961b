"""Tests for the pool state snapshot."""

from __future__ import annotations

import dataclasses

import pytest
from fixedpointmath import FixedPoint

from ..test_fixtures import build_pool_state
from .fees import Fees
from .pool_config import PoolConfig
from .pool_state import PoolState


def test_fees_from_sequence():
    """PoolConfig accepts fees as a (curve, flat, governance) sequence."""
    pool_config = PoolConfig(
        initial_share_price=FixedPoint(1),
        minimum_share_reserves=FixedPoint(1),
        position_duration=31_536_000,
        checkpoint_duration=86_400,
        time_stretch=FixedPoint("0.05"),
        fees=[FixedPoint("0.01"), FixedPoint("0.0005"), FixedPoint("0.1")],
    )
    assert pool_config.fees == Fees(FixedPoint("0.01"), FixedPoint("0.0005"), FixedPoint("0.1"))
    pool_state = PoolState(pool_config, build_pool_state().pool_info)
    assert isinstance(pool_state.fees, Fees)
    assert pool_state.curve_fee == FixedPoint("0.01")
    assert pool_state.governance_fee == FixedPoint("0.1")


def test_effective_share_reserves():
    """The share adjustment is subtracted from the share reserves, and can be negative."""
    assert build_pool_state(share_adjustment=FixedPoint(1_000)).effective_share_reserves == FixedPoint(99_000)
    assert build_pool_state(share_adjustment=FixedPoint(-1_000)).effective_share_reserves == FixedPoint(101_000)


def test_share_adjustment_moves_spot_price():
    """The curve trades against effective reserves, so a positive adjustment lowers the spot price."""
    assert build_pool_state(share_adjustment=FixedPoint(1_000)).spot_price() < build_pool_state().spot_price()


def test_with_info_leaves_snapshot_unchanged(pool_state_fixture: PoolState):
    """Projected states are copies; the original snapshot never changes."""
    updated = pool_state_fixture.with_info(share_reserves=FixedPoint(1))
    assert updated.share_reserves == FixedPoint(1)
    assert pool_state_fixture.share_reserves == FixedPoint(100_000)
    assert updated.pool_config is pool_state_fixture.pool_config


def test_snapshot_is_frozen(pool_state_fixture: PoolState):
    """The snapshot itself can't be reassigned."""
    with pytest.raises(dataclasses.FrozenInstanceError):
        pool_state_fixture.pool_info = pool_state_fixture.pool_info  # type: ignore


def test_t_is_one_minus_time_stretch(pool_state_fixture: PoolState):
    """The curve exponent."""
    assert pool_state_fixture.t == FixedPoint("0.95")
