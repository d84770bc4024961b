"""JSON encoder that understands the numeric and state types used by hypermath."""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from enum import Enum
from traceback import format_tb
from types import TracebackType
from typing import Any

import numpy as np
from fixedpointmath import FixedPoint
from numpy.random import Generator


class ExtendedJSONEncoder(json.JSONEncoder):
    r"""Custom encoder for JSON string dumps."""

    # pylint: disable=too-many-return-statements
    def default(self, o: Any) -> Any:
        """Override default behavior.

        Arguments
        ---------
        o: Any
            The object to be converted to JSON.

        Returns
        -------
        Any
            The corresponding object ready to be serialized to JSON.
        """
        if isinstance(o, FixedPoint):
            # str keeps all 18 decimals; float would round
            return str(o)
        if isinstance(o, set):
            return list(o)
        if isinstance(o, np.integer):
            return int(o)
        if isinstance(o, np.floating):
            return float(o)
        if isinstance(o, np.ndarray):
            return o.tolist()
        if isinstance(o, Generator):
            return "NumpyGenerator"
        if isinstance(o, TracebackType):
            return format_tb(o)
        if isinstance(o, BaseException):
            return repr(o)
        if isinstance(o, Enum):
            return o.name
        if is_dataclass(o) and not isinstance(o, type):
            out = asdict(o)
            out.update({"class_name": o.__class__.__name__})
            return out
        # Let the base class default method raise the TypeError
        return json.JSONEncoder.default(self, o)
