"""A read-only snapshot of a Hyperdrive pool."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, cast

from fixedpointmath import FixedPoint

from .. import yieldspace
from ..fixed_point import ONE
from ..results import Feasible, Infeasible
from .fees import Fees
from .pool_config import PoolConfig
from .pool_info import PoolInfo


@dataclass(frozen=True)
class PoolState:
    r"""The pool configuration and reserves that every calculation reads from.

    A PoolState is built by the caller for each calculation. Nothing in this library mutates it;
    projected states are built with :meth:`with_info`, which returns a new snapshot.
    """

    pool_config: PoolConfig
    pool_info: PoolInfo

    def with_info(self, **changes: Any) -> PoolState:
        """Return a copy of the state with some pool info fields replaced.

        Arguments
        ---------
        **changes: Any
            PoolInfo field names mapped to their new values.

        Returns
        -------
        PoolState
            The updated snapshot.
        """
        return PoolState(self.pool_config, replace(self.pool_info, **changes))

    @property
    def fees(self) -> Fees:
        """The pool's fee schedule; PoolConfig coerces fee sequences on construction."""
        return cast(Fees, self.pool_config.fees)

    @property
    def curve_fee(self) -> FixedPoint:
        return self.fees.curve

    @property
    def governance_fee(self) -> FixedPoint:
        return self.fees.governance

    @property
    def initial_share_price(self) -> FixedPoint:
        return self.pool_config.initial_share_price

    @property
    def minimum_share_reserves(self) -> FixedPoint:
        return self.pool_config.minimum_share_reserves

    @property
    def time_stretch(self) -> FixedPoint:
        return self.pool_config.time_stretch

    @property
    def share_price(self) -> FixedPoint:
        return self.pool_info.share_price

    @property
    def share_reserves(self) -> FixedPoint:
        return self.pool_info.share_reserves

    @property
    def bond_reserves(self) -> FixedPoint:
        return self.pool_info.bond_reserves

    @property
    def long_exposure(self) -> FixedPoint:
        return self.pool_info.long_exposure

    @property
    def effective_share_reserves(self) -> FixedPoint:
        """Share reserves net of the share adjustment; this is what the curve trades against."""
        return self.pool_info.share_reserves - self.pool_info.share_adjustment

    @property
    def t(self) -> FixedPoint:  # pylint: disable=invalid-name
        """The YieldSpace exponent, one minus the time stretch."""
        return ONE - self.time_stretch

    def k_down(self) -> FixedPoint:
        """The YieldSpace invariant, rounded down."""
        return yieldspace.calculate_k_down(
            self.effective_share_reserves, self.bond_reserves, self.t, self.share_price, self.initial_share_price
        )

    def k_up(self) -> FixedPoint:
        """The YieldSpace invariant, rounded up."""
        return yieldspace.calculate_k_up(
            self.effective_share_reserves, self.bond_reserves, self.t, self.share_price, self.initial_share_price
        )

    def spot_price(self) -> FixedPoint:
        """The current price of a bond in base."""
        return yieldspace.calculate_spot_price(
            self.effective_share_reserves, self.bond_reserves, self.initial_share_price, self.time_stretch
        )

    def bonds_out_given_shares_in(self, share_amount: FixedPoint) -> Feasible[FixedPoint] | Infeasible:
        """Trade shares for bonds along the curve, before fees."""
        return yieldspace.calculate_bonds_out_given_shares_in_down(
            self.effective_share_reserves,
            self.bond_reserves,
            share_amount,
            self.t,
            self.share_price,
            self.initial_share_price,
        )

    def shares_out_given_bonds_in(self, bond_amount: FixedPoint) -> Feasible[FixedPoint] | Infeasible:
        """Trade bonds for shares along the curve, before fees."""
        return yieldspace.calculate_shares_out_given_bonds_in_down(
            self.effective_share_reserves,
            self.bond_reserves,
            bond_amount,
            self.t,
            self.share_price,
            self.initial_share_price,
        )

    def max_buy(self) -> Feasible[tuple[FixedPoint, FixedPoint]] | Infeasible:
        """The (shares in, bonds out) trade that moves the spot price to exactly one."""
        return yieldspace.calculate_max_buy(
            self.effective_share_reserves, self.bond_reserves, self.t, self.share_price, self.initial_share_price
        )
