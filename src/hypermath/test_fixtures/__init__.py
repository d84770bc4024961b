"""Test fixtures for hypermath."""

from .pool_state_fixture import (
    build_pool_state,
    pool_state_fixture,
    solvency_bound_pool_state_fixture,
    solvency_used_by_max_buy,
)
