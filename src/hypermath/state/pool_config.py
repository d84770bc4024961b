"""Hyperdrive pool configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from fixedpointmath import FixedPoint

from .fees import Fees


# pylint: disable=too-many-instance-attributes
@dataclass
class PoolConfig:
    """PoolConfig struct.

    These values are set once when the pool is deployed and never change afterwards.
    Durations are in seconds.
    """

    initial_share_price: FixedPoint
    minimum_share_reserves: FixedPoint
    position_duration: int
    checkpoint_duration: int
    time_stretch: FixedPoint
    # TODO: Pyright:
    # Declaration "fees" is obscured by a declaration of the same name here but not elsewhere
    fees: Fees | Sequence  # type: ignore

    def __post_init__(self):
        if isinstance(self.fees, Sequence):
            self.fees: Fees = Fees(*self.fees)
