"""Logging setup tests: level resolution and environment override."""

from __future__ import annotations

import logging
import os
import unittest
from unittest import mock

from cardtree.logging_config import LOG_LEVEL_ENV, setup_logging


class SetupLoggingTests(unittest.TestCase):
    def setUp(self) -> None:
        logger = logging.getLogger("cardtree")
        saved = (logger.level, list(logger.handlers), logger.propagate)

        def restore() -> None:
            logger.setLevel(saved[0])
            logger.handlers[:] = saved[1]
            logger.propagate = saved[2]

        self.addCleanup(restore)

    def test_explicit_level_is_applied(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=False):
            os.environ.pop(LOG_LEVEL_ENV, None)
            self.assertEqual(setup_logging("debug"), "DEBUG")

        logger = logging.getLogger("cardtree")
        self.assertEqual(logger.level, logging.DEBUG)
        self.assertFalse(logger.propagate)

    def test_environment_overrides_argument(self) -> None:
        with mock.patch.dict(os.environ, {LOG_LEVEL_ENV: "error"}):
            self.assertEqual(setup_logging("debug"), "ERROR")

    def test_unknown_level_falls_back_to_warning(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=False):
            os.environ.pop(LOG_LEVEL_ENV, None)
            self.assertEqual(setup_logging("chatty"), "WARNING")
            self.assertEqual(setup_logging(None), "WARNING")


if __name__ == "__main__":
    unittest.main()
