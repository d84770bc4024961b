"""Explicit result type for calculations that can land outside the feasible region."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from fixedpointmath import FixedPoint

T = TypeVar("T")


@dataclass(frozen=True)
class Feasible(Generic[T]):
    """A calculation that produced a usable value."""

    value: T


@dataclass(frozen=True)
class Infeasible:
    """A calculation whose input lies outside the feasible region.

    This is a normal outcome (e.g. the pool would be insolvent after the trade),
    not an error; callers branch on it instead of catching an exception.
    """

    reason: str = ""


SolvencyResult = Union[Feasible[FixedPoint], Infeasible]
