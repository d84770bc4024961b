"""Crash reports for fatal max long solver errors."""

from __future__ import annotations

import json
import logging
import os
from collections import OrderedDict
from datetime import datetime, timezone
from typing import Any

from ..errors import MaxLongInvariantError
from . import logs
from .json_encoder import ExtendedJSONEncoder

CRASH_REPORT_DIR = ".crash_report"


def setup_crash_report_logging(log_format_string: str | None = None) -> None:
    """Add a CRITICAL level file handler that only receives crash reports.

    Arguments
    ---------
    log_format_string: str, optional
        Logging format described in string format.
    """
    logs.add_file_handler(
        log_filename="hypermath_crash_report.log",
        log_format_string=log_format_string,
        delete_previous_logs=False,
        log_level=logging.CRITICAL,
    )


def build_crash_report(error: MaxLongInvariantError, additional_info: dict[str, Any] | None = None) -> OrderedDict:
    """Collect the error and the inputs that caused it into an ordered dict.

    Arguments
    ---------
    error: MaxLongInvariantError
        The fatal solver error.
    additional_info: dict[str, Any] | None, optional
        Extra caller-supplied data to attach to the report.

    Returns
    -------
    OrderedDict
        The report, ready to be encoded with ExtendedJSONEncoder.
    """
    return OrderedDict(
        [
            ("log_time", datetime.now(timezone.utc).isoformat()),
            ("exception", error),
            ("exception_data", error.exception_data),
            ("additional_info", additional_info or {}),
            ("traceback", error.__traceback__),
        ]
    )


def log_max_long_crash(
    error: MaxLongInvariantError,
    log_level: int | None = None,
    crash_report_to_file: bool = False,
    additional_info: dict[str, Any] | None = None,
) -> str | None:
    """Log a crash report for a fatal max long error.

    Arguments
    ---------
    error: MaxLongInvariantError
        The fatal solver error.
    log_level: int | None, optional
        The logging level for this crash report. Defaults to critical.
    crash_report_to_file: bool, optional
        Whether to also write the report to a json file in CRASH_REPORT_DIR. Defaults to False.
    additional_info: dict[str, Any] | None, optional
        Extra caller-supplied data to attach to the report.

    Returns
    -------
    str | None
        The path of the crash report file, if one was written.
    """
    if log_level is None:
        log_level = logging.CRITICAL
    dump_obj = build_crash_report(error, additional_info)
    logging.log(log_level, json.dumps(dump_obj, indent=2, cls=ExtendedJSONEncoder))
    if not crash_report_to_file:
        return None
    os.makedirs(CRASH_REPORT_DIR, exist_ok=True)
    file_time = datetime.now(timezone.utc).strftime("%Y_%m_%d_%H_%M_%S_%f")
    crash_report_file = os.path.join(CRASH_REPORT_DIR, f"max_long_{file_time}.json")
    with open(crash_report_file, "w", encoding="utf-8") as file:
        json.dump(dump_obj, file, indent=2, cls=ExtendedJSONEncoder)
    return crash_report_file
