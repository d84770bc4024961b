"""Tests for logging utils modules."""
from __future__ import annotations

import logging
import os
import unittest

from . import logs as log_utils


class TestLogging(unittest.TestCase):
    """Run the logging tests."""

    def test_prepare_log_path(self):
        """Bare names go into the default log directory and get a .log extension."""
        log_path = log_utils.prepare_log_path("test_prepare_log_path")
        self.assertEqual(os.path.basename(log_path), "test_prepare_log_path.log")
        self.assertEqual(os.path.dirname(log_path), os.path.join(os.getcwd(), log_utils.DEFAULT_LOG_DIR))
        self.assertTrue(os.path.isdir(os.path.dirname(log_path)))

    def test_file_handler_writes(self):
        """Records at or above the handler level land in the file."""
        log_filename = ".logging/test_file_handler_writes.log"
        log_utils.setup_logging(log_filename=log_filename, log_stdout=False, log_level=logging.WARNING)
        logging.info("Info test")
        logging.warning("Warning test")
        handler = logging.getLogger().handlers[0]
        assert isinstance(handler, logging.FileHandler)
        handler.flush()
        with open(handler.baseFilename, encoding="utf-8") as file:
            contents = file.read()
        self.assertIn("Warning test", contents)
        self.assertNotIn("Info test", contents)
        log_utils.close_logging()
        self.assertFalse(os.path.exists(handler.baseFilename))

    def test_multiple_handlers_setup_logging(self):
        """Verfies that two handlers are created if we log to file and stdout."""
        log_filename = ".logging/test_logging.log"
        # one handler because we're logging to file only
        log_utils.setup_logging(log_filename=log_filename, log_stdout=False, keep_previous_handlers=False)
        self.assertEqual(len(logging.getLogger().handlers), 1)
        log_utils.close_logging()
        # one handler because we're logging to stdout only
        log_utils.setup_logging(log_stdout=True)
        self.assertEqual(len(logging.getLogger().handlers), 1)
        log_utils.close_logging()
        # two handlers because we're logging to file and stdout
        log_utils.setup_logging(log_filename=log_filename, log_stdout=True)
        self.assertEqual(len(logging.getLogger().handlers), 2)
        log_utils.close_logging()

    def test_multiple_handlers_add_handlers(self):
        """Verfies that two handlers are created if we log to file and stdout."""
        log_filename = ".logging/test_logging.log"
        log_utils.add_stdout_handler(keep_previous_handlers=False)
        self.assertEqual(len(logging.getLogger().handlers), 1)
        log_utils.close_logging()
        log_utils.add_file_handler(log_filename=log_filename)
        self.assertEqual(len(logging.getLogger().handlers), 1)
        log_utils.close_logging()
        log_utils.add_stdout_handler(keep_previous_handlers=False)
        log_utils.add_file_handler(log_filename=log_filename)
        self.assertEqual(len(logging.getLogger().handlers), 2)
        log_utils.close_logging()

    def test_root_level_follows_most_verbose_handler(self):
        """The root logger lets through what the most verbose handler asks for."""
        log_filename = ".logging/test_root_level.log"
        log_utils.setup_logging(log_filename=log_filename, log_stdout=False, log_level=logging.DEBUG)
        self.assertEqual(logging.getLogger().level, logging.DEBUG)
        log_utils.close_logging()
