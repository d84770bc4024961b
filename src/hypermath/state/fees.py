"""Hyperdrive fee parameters."""

from __future__ import annotations

from dataclasses import dataclass

from fixedpointmath import FixedPoint


@dataclass
class Fees:
    """Fees struct.

    All fees are fractions, e.g. ``FixedPoint("0.01")`` is a 1% fee.
    The governance fee is charged as a fraction of the curve fee.
    """

    curve: FixedPoint
    flat: FixedPoint
    governance: FixedPoint
