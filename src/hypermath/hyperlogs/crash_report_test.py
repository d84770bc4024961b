"""Tests for crash reports and the JSON encoder."""

from __future__ import annotations

import json
import logging
import os
from enum import Enum

import numpy as np
import pytest
from fixedpointmath import FixedPoint

from ..errors import InitialGuessInsolventError
from ..state import PoolState
from .crash_report import build_crash_report, log_max_long_crash
from .json_encoder import ExtendedJSONEncoder


class _Color(Enum):
    RED = 1


def test_encoder_types(pool_state_fixture: PoolState):
    """FixedPoint keeps every decimal; numpy values become plain JSON; dataclasses carry their class name."""
    encoded = json.loads(
        json.dumps(
            {
                "fixed_point": FixedPoint("1.000000000000000001"),
                "np_int": np.int64(3),
                "np_float": np.float64(0.5),
                "array": np.array([1, 2]),
                "set": {7},
                "enum": _Color.RED,
                "error": ValueError("bad"),
                "pool_state": pool_state_fixture,
            },
            cls=ExtendedJSONEncoder,
        )
    )
    assert encoded["fixed_point"] == "1.000000000000000001"
    assert encoded["np_int"] == 3
    assert encoded["np_float"] == 0.5
    assert encoded["array"] == [1, 2]
    assert encoded["set"] == [7]
    assert encoded["enum"] == "RED"
    assert encoded["error"] == "ValueError('bad')"
    assert encoded["pool_state"]["class_name"] == "PoolState"
    assert encoded["pool_state"]["pool_info"]["share_reserves"] == str(FixedPoint(100_000))


def test_encoder_rejects_unknown_types():
    """Anything the encoder doesn't know about still raises."""
    with pytest.raises(TypeError):
        json.dumps(object(), cls=ExtendedJSONEncoder)


def test_build_crash_report():
    """The report carries the error and its data in a fixed order."""
    error = InitialGuessInsolventError("bad guess", exception_data={"initial_guess": FixedPoint(5)})
    report = build_crash_report(error, additional_info={"run": 1})
    assert list(report.keys()) == ["log_time", "exception", "exception_data", "additional_info", "traceback"]
    assert report["exception_data"]["initial_guess"] == FixedPoint(5)
    assert report["additional_info"] == {"run": 1}


def test_log_max_long_crash(caplog: pytest.LogCaptureFixture, tmp_path, monkeypatch: pytest.MonkeyPatch):
    """The report is logged as JSON at critical level and optionally written to file."""
    monkeypatch.chdir(tmp_path)
    error = InitialGuessInsolventError("bad guess", exception_data={"initial_guess": FixedPoint(5)})
    with caplog.at_level(logging.CRITICAL):
        crash_report_file = log_max_long_crash(error, crash_report_to_file=True)
    assert len(caplog.records) == 1
    assert caplog.records[0].levelno == logging.CRITICAL
    logged = json.loads(caplog.records[0].getMessage())
    assert logged["exception_data"] == {"initial_guess": str(FixedPoint(5))}
    assert crash_report_file is not None and os.path.exists(crash_report_file)
    with open(crash_report_file, encoding="utf-8") as file:
        assert json.load(file)["exception"] == repr(error)
