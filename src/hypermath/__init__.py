"""Hyperdrive long pricing and max long math on top of fixedpointmath."""

import logging

from .errors import (
    AbsoluteMaxExceededError,
    CurveDomainError,
    InitialGuessInsolventError,
    MaxLongInvariantError,
    NegativeFixedPointError,
)
from .long import (
    DEFAULT_MAX_ITERATIONS,
    calculate_long_amount,
    get_long_amount,
    get_max_long,
    get_solvency,
    long_amount_derivative,
    long_curve_fee,
    long_governance_fee,
    solvency_after_long,
    solvency_after_long_derivative,
    spot_price_after_long,
)
from .rates import calculate_initial_bond_reserves, calculate_spot_rate, calculate_time_stretch
from .results import Feasible, Infeasible, SolvencyResult
from .state import Fees, PoolConfig, PoolInfo, PoolState, pool_state_from_dicts, random_pool_state

logging.getLogger(__name__).addHandler(logging.NullHandler())
