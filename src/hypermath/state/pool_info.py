"""Hyperdrive pool reserves and accounting."""

from __future__ import annotations

from dataclasses import dataclass

from fixedpointmath import FixedPoint


@dataclass
class PoolInfo:
    """PoolInfo struct.

    ``long_exposure`` is signed; netting within a checkpoint can push it below zero.
    """

    share_reserves: FixedPoint
    share_adjustment: FixedPoint
    bond_reserves: FixedPoint
    share_price: FixedPoint
    longs_outstanding: FixedPoint
    long_exposure: FixedPoint
