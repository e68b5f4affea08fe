"""
Tests for logging and configuration helpers

Run with:
    python -m pytest tests/test_logging_config.py -v
"""

import logging
import os
import tempfile
import unittest
from unittest import mock

from tletrack import config
from tletrack.logging_config import DATE_FORMAT, LOG_FORMAT, configure_logging, get_logger


class TestLoggingConfig(unittest.TestCase):

    def setUp(self):
        self.root = logging.getLogger()
        self.saved_handlers = self.root.handlers[:]
        self.saved_level = self.root.level
        self.root.handlers = []

    def tearDown(self):
        for handler in self.root.handlers:
            handler.close()
        self.root.handlers = self.saved_handlers
        self.root.setLevel(self.saved_level)

    def test_get_logger_uses_module_name(self):
        logger = get_logger("tletrack.tracks")
        self.assertEqual(logger.name, "tletrack.tracks")

    def test_importing_package_adds_no_handlers(self):
        import tletrack  # noqa: F401

        self.assertEqual(logging.getLogger("tletrack").handlers, [])

    def test_level_from_string(self):
        configure_logging("debug")
        self.assertEqual(self.root.level, logging.DEBUG)
        self.assertEqual(self.root.handlers[0].formatter._fmt, LOG_FORMAT)
        self.assertEqual(self.root.handlers[0].formatter.datefmt, DATE_FORMAT)

    def test_default_level(self):
        with mock.patch.object(config, "LOG_LEVEL", "WARNING"):
            configure_logging()
        self.assertEqual(self.root.level, logging.WARNING)

    def test_log_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "tletrack.log")
            configure_logging(logging.INFO, log_file=path)
            get_logger("tletrack.test").info("Ground track computed")
            for handler in self.root.handlers:
                handler.flush()

            with open(path) as f:
                self.assertIn("Ground track computed", f.read())

            for handler in self.root.handlers:
                handler.close()
            self.root.handlers = []


class TestConfig(unittest.TestCase):

    def test_time_constants(self):
        self.assertEqual(config.MS_IN_A_MINUTE, 60000)
        self.assertEqual(config.MS_IN_A_DAY, 86400000)

    def test_environment_override(self):
        with mock.patch.dict(os.environ, {"TLETRACK_ORBIT_TRACK_STEP_MS": "250"}):
            self.assertEqual(config._env_int("ORBIT_TRACK_STEP_MS", 1000), 250)
        self.assertEqual(config._env_float("NOT_SET_ANYWHERE", 1.5), 1.5)


if __name__ == "__main__":
    unittest.main()
