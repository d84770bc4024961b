"""Logging utilities."""

from .crash_report import build_crash_report, log_max_long_crash, setup_crash_report_logging
from .json_encoder import ExtendedJSONEncoder
from .logs import (
    DEFAULT_LOG_DATETIME,
    DEFAULT_LOG_FORMATTER,
    DEFAULT_LOG_LEVEL,
    DEFAULT_LOG_MAXBYTES,
    add_file_handler,
    add_stdout_handler,
    close_logging,
    create_formatter,
    prepare_log_path,
    remove_handlers,
    setup_logging,
)
