"""Hyperdrive pool state."""

from .conversions import (
    camel_to_snake,
    dict_to_fees,
    dict_to_pool_config,
    dict_to_pool_info,
    pool_state_from_dicts,
    snake_to_camel,
)
from .fees import Fees
from .pool_config import PoolConfig
from .pool_info import PoolInfo
from .pool_state import PoolState
from .random_state import random_pool_state
