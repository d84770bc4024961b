"""Build pool state from contract-style dictionaries.

Contract calls return camelCase keys with integer values scaled by 1e18.
These helpers convert them into the snake_case FixedPoint dataclasses used by the library.
Keys that the library does not model (token addresses, governance, etc.) are dropped.
"""

from __future__ import annotations

import re
from dataclasses import fields
from typing import Any, Mapping

from fixedpointmath import FixedPoint

from .fees import Fees
from .pool_config import PoolConfig
from .pool_info import PoolInfo
from .pool_state import PoolState

# Durations are kept as integer seconds
_INTEGER_FIELDS = {"position_duration", "checkpoint_duration"}


def camel_to_snake(camel_string: str) -> str:
    """Convert camel case string to snake case string.

    Arguments
    ---------
    camel_string: str
        The string to convert.

    Returns
    -------
    str
        The snake case string.
    """
    return re.sub(r"(?<!^)(?=[A-Z])", "_", camel_string).lower()


def snake_to_camel(snake_string: str) -> str:
    """Convert snake case string to camel case string.

    Arguments
    ---------
    snake_string: str
        The string to convert.

    Returns
    -------
    str
        The camel case string.
    """
    camel_string = re.sub(r"_([a-z])", lambda x: x.group(1).upper(), snake_string)
    return camel_string[0].lower() + camel_string[1:] if camel_string else camel_string


def _to_fixed_point(value: int | FixedPoint) -> FixedPoint:
    if isinstance(value, FixedPoint):
        return value
    return FixedPoint(scaled_value=int(value))


def _snake_keys(contract_dict: Mapping[str, Any], field_names: set[str]) -> dict[str, Any]:
    snake_dict = {camel_to_snake(key): value for key, value in contract_dict.items()}
    missing = field_names - snake_dict.keys()
    if missing:
        raise KeyError(f"contract dict is missing {sorted(snake_to_camel(name) for name in missing)}")
    return {key: value for key, value in snake_dict.items() if key in field_names}


def dict_to_fees(contract_fees: Mapping[str, Any] | tuple | list) -> Fees:
    """Convert contract fees, either a struct dict or a (curve, flat, governance) tuple, to Fees.

    Arguments
    ---------
    contract_fees: Mapping[str, Any] | tuple | list
        The fees as returned by the contract.

    Returns
    -------
    Fees
        The fees with FixedPoint values.
    """
    if isinstance(contract_fees, (tuple, list)):
        return Fees(*(_to_fixed_point(value) for value in contract_fees))
    values = _snake_keys(contract_fees, {field.name for field in fields(Fees)})
    return Fees(**{key: _to_fixed_point(value) for key, value in values.items()})


def dict_to_pool_config(contract_pool_config: Mapping[str, Any]) -> PoolConfig:
    """Convert a contract pool config dict into a PoolConfig.

    Arguments
    ---------
    contract_pool_config: Mapping[str, Any]
        The pool config with camelCase keys and scaled integer values.

    Returns
    -------
    PoolConfig
        The pool config with snake_case attributes and FixedPoint values.
    """
    values = _snake_keys(contract_pool_config, {field.name for field in fields(PoolConfig)})
    converted: dict[str, Any] = {}
    for key, value in values.items():
        if key == "fees":
            converted[key] = dict_to_fees(value)
        elif key in _INTEGER_FIELDS:
            converted[key] = int(value)
        else:
            converted[key] = _to_fixed_point(value)
    return PoolConfig(**converted)


def dict_to_pool_info(contract_pool_info: Mapping[str, Any]) -> PoolInfo:
    """Convert a contract pool info dict into a PoolInfo.

    Arguments
    ---------
    contract_pool_info: Mapping[str, Any]
        The pool info with camelCase keys and scaled integer values.

    Returns
    -------
    PoolInfo
        The pool info with snake_case attributes and FixedPoint values.
    """
    values = _snake_keys(contract_pool_info, {field.name for field in fields(PoolInfo)})
    return PoolInfo(**{key: _to_fixed_point(value) for key, value in values.items()})


def pool_state_from_dicts(
    contract_pool_config: Mapping[str, Any], contract_pool_info: Mapping[str, Any]
) -> PoolState:
    """Build a PoolState snapshot straight from contract dicts."""
    return PoolState(dict_to_pool_config(contract_pool_config), dict_to_pool_info(contract_pool_info))
