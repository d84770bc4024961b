"""Exceptions raised by the hypermath library."""

from __future__ import annotations

from typing import Any


class NegativeFixedPointError(ValueError):
    """Thrown when a quantity that must be unsigned (reserves, trade amounts) goes negative."""


class CurveDomainError(ValueError):
    """Thrown when a trade would push the YieldSpace curve past the edge of its domain."""


class MaxLongInvariantError(Exception):
    """Thrown when the max long solver's own assumptions are violated.

    The offending inputs are attached as ``exception_data`` so the caller can log or report them.
    """

    def __init__(
        self,
        *args,
        # Passed as a kwarg so that multiple positional `args` still work like a normal exception
        exception_data: dict[str, Any] | None = None,
    ):
        super().__init__(*args)
        if exception_data is None:
            exception_data = {}
        self.exception_data = exception_data


class InitialGuessInsolventError(MaxLongInvariantError):
    """Thrown when the conservative initial guess for the max long is already insolvent."""


class AbsoluteMaxExceededError(MaxLongInvariantError):
    """Thrown when a Newton iterate reaches the absolute max long, which is known to be insolvent."""
