"""Logging setup for scripts and services that use hypermath.

The library itself only emits records on the root logger; it never installs handlers.
"""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

# Logging defaults
DEFAULT_LOG_LEVEL = logging.INFO
DEFAULT_LOG_FORMATTER = "\n%(asctime)s: %(levelname)s: %(filename)s:%(lineno)s::%(module)s::%(funcName)s:\n%(message)s"
DEFAULT_LOG_DATETIME = "%y-%m-%d %H:%M:%S"
DEFAULT_LOG_MAXBYTES = int(2e6)  # 2MB
DEFAULT_LOG_DIR = ".logging"


def setup_logging(
    log_filename: str | None = None,
    max_bytes: int | None = None,
    log_level: int | None = None,
    delete_previous_logs: bool = False,
    log_stdout: bool = True,
    log_format_string: str | None = None,
    keep_previous_handlers: bool = False,
) -> None:
    """Set up root logging for stdout, a rotating log file, or both.

    Run this once at startup; use add_stdout_handler or add_file_handler afterwards to customize.

    Arguments
    ---------
    log_filename: str, optional
        Path and name of the log file. If not set, nothing is logged to file.
    max_bytes: int, optional
        Maximum size of the log file in bytes. Defaults to DEFAULT_LOG_MAXBYTES.
    log_level: int, optional
        Log level to track. Defaults to DEFAULT_LOG_LEVEL.
    delete_previous_logs: bool, optional
        Whether to delete previous log file if it exists. Defaults to False.
    log_stdout: bool, optional
        Whether to log to standard output. Defaults to True.
    log_format_string: str, optional
        Log format string. Defaults to DEFAULT_LOG_FORMATTER.
    keep_previous_handlers: bool, optional
        Whether to keep handlers that are already installed. Defaults to False.
    """
    # pylint: disable=too-many-arguments
    root_logger = logging.getLogger()
    if not keep_previous_handlers:
        remove_handlers(root_logger)
    if log_stdout:
        add_stdout_handler(log_format_string=log_format_string, log_level=log_level)
    if log_filename is not None:
        add_file_handler(
            log_filename=log_filename,
            delete_previous_logs=delete_previous_logs,
            log_format_string=log_format_string,
            max_bytes=max_bytes,
            log_level=log_level,
        )
    # The root logger has to let through everything its most verbose handler wants
    if root_logger.handlers:
        root_logger.setLevel(min(handler.level for handler in root_logger.handlers))
    else:
        root_logger.setLevel(DEFAULT_LOG_LEVEL if log_level is None else log_level)


def close_logging(delete_logs: bool = True) -> None:
    """Close and remove all root handlers, optionally deleting the files they wrote.

    Arguments
    ---------
    delete_logs: bool
        Whether to delete log files before closing logging.
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        handler.close()
        if delete_logs and isinstance(handler, logging.FileHandler) and os.path.exists(handler.baseFilename):
            os.remove(handler.baseFilename)
    remove_handlers(root_logger)


def prepare_log_path(log_filename: str) -> str:
    """Return the full log path, adding a ".log" extension and creating the directory if necessary.

    Bare file names go into DEFAULT_LOG_DIR under the working directory.

    Arguments
    ---------
    log_filename: str
        Path and name of the log file.

    Returns
    -------
    str
        The full path of the log file.
    """
    log_dir, log_name = os.path.split(log_filename)
    if not log_name.endswith(".log"):
        log_name += ".log"
    if log_dir == "":
        log_dir = os.path.join(os.getcwd(), DEFAULT_LOG_DIR)
    os.makedirs(log_dir, exist_ok=True)
    return os.path.join(log_dir, log_name)


def create_formatter(log_format_string: str | None = None) -> logging.Formatter:
    """Create a Formatter, falling back to DEFAULT_LOG_FORMATTER."""
    if log_format_string is None:
        log_format_string = DEFAULT_LOG_FORMATTER
    return logging.Formatter(log_format_string, DEFAULT_LOG_DATETIME)


def add_stdout_handler(
    logger: logging.Logger | None = None,
    log_format_string: str | None = None,
    log_level: int | None = logging.INFO,
    keep_previous_handlers: bool = True,
) -> None:
    """Add a stdout handler to the logger.

    Arguments
    ---------
    logger: logging.Logger, optional
        Logger to which to add the handler. Defaults to the root logger.
    log_format_string: str, optional
        Log format string. Defaults to DEFAULT_LOG_FORMATTER.
    log_level: int, optional
        Log level to track. Defaults to DEFAULT_LOG_LEVEL.
    keep_previous_handlers: bool, optional
        Whether to keep handlers that are already installed. Defaults to True.
    """
    logger = logging.getLogger() if logger is None else logger
    if not keep_previous_handlers:
        remove_handlers(logger)
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setLevel(DEFAULT_LOG_LEVEL if log_level is None else log_level)
    stream_handler.setFormatter(create_formatter(log_format_string))
    logger.addHandler(stream_handler)


def add_file_handler(
    log_filename: str,
    logger: logging.Logger | None = None,
    delete_previous_logs: bool = False,
    log_format_string: str | None = None,
    log_level: int | None = logging.INFO,
    max_bytes: int | None = None,
    keep_previous_handlers: bool = True,
) -> None:
    """Add a rotating file handler to the logger.

    Arguments
    ---------
    log_filename: str
        Path and name of the log file.
    logger: logging.Logger, optional
        Logger to which to add the handler. Defaults to the root logger.
    delete_previous_logs: bool, optional
        Whether to delete previous log file if it exists. Defaults to False.
    log_format_string: str, optional
        Log format string. Defaults to DEFAULT_LOG_FORMATTER.
    log_level: int, optional
        Log level to track. Defaults to DEFAULT_LOG_LEVEL.
    max_bytes: int, optional
        Maximum size of the log file in bytes. Defaults to DEFAULT_LOG_MAXBYTES.
    keep_previous_handlers: bool, optional
        Whether to keep handlers that are already installed. Defaults to True.
    """
    # pylint: disable=too-many-arguments
    logger = logging.getLogger() if logger is None else logger
    if not keep_previous_handlers:
        remove_handlers(logger)
    log_path = prepare_log_path(log_filename)
    if delete_previous_logs and os.path.exists(log_path):
        os.remove(log_path)
    file_handler = RotatingFileHandler(
        log_path, mode="w", maxBytes=DEFAULT_LOG_MAXBYTES if max_bytes is None else max_bytes
    )
    file_handler.setFormatter(create_formatter(log_format_string))
    file_handler.setLevel(DEFAULT_LOG_LEVEL if log_level is None else log_level)
    logger.addHandler(file_handler)


def remove_handlers(logger: logging.Logger) -> None:
    """Remove all handlers from the logger."""
    while logger.handlers:
        logger.removeHandler(logger.handlers[0])
