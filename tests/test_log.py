import logging
import os
import unittest
from unittest import mock

from textscrub.log import HANDLER_NAME, LOG_LEVEL_ENV, init_logging


class InitLoggingTests(unittest.TestCase):
    def setUp(self) -> None:
        self.logger = logging.getLogger("textscrub")
        self._saved_handlers = list(self.logger.handlers)
        self._saved_level = self.logger.level
        self.logger.handlers = []

    def tearDown(self) -> None:
        self.logger.handlers = self._saved_handlers
        self.logger.setLevel(self._saved_level)

    def test_handler_added_once(self) -> None:
        init_logging("info")
        init_logging("debug")
        named = [h for h in self.logger.handlers if h.get_name() == HANDLER_NAME]
        self.assertEqual(len(named), 1)
        self.assertEqual(self.logger.level, logging.DEBUG)

    def test_level_from_environment(self) -> None:
        with mock.patch.dict(os.environ, {LOG_LEVEL_ENV: "error"}):
            init_logging()
        self.assertEqual(self.logger.level, logging.ERROR)

    def test_unknown_level_defaults_to_warning(self) -> None:
        init_logging("chatty")
        self.assertEqual(self.logger.level, logging.WARNING)
