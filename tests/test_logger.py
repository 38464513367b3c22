from __future__ import annotations

import logging
import unittest

from cgorithm import ForeachAction, foreach, setup_logger
from cgorithm.logger import LOGGER_NAME, logger


class LoggerSetupTests(unittest.TestCase):
    def tearDown(self) -> None:
        for handler in list(logger.handlers):
            if not isinstance(handler, logging.NullHandler):
                logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)

    def test_library_is_silent_by_default(self) -> None:
        self.assertEqual(logger.name, LOGGER_NAME)
        self.assertTrue(any(isinstance(h, logging.NullHandler) for h in logger.handlers))

    def test_setup_logger_is_idempotent(self) -> None:
        first = setup_logger(level="debug")
        second = setup_logger(level="info")
        self.assertIs(first, second)
        stream_handlers = [h for h in first.handlers if isinstance(h, logging.StreamHandler)]
        self.assertEqual(len(stream_handlers), 1)
        self.assertEqual(first.level, logging.INFO)

    def test_module_loggers_are_children(self) -> None:
        setup_logger(level="DEBUG")
        with self.assertLogs(LOGGER_NAME, level="DEBUG") as logs:
            foreach([1, 2], lambda _i, _x: ForeachAction.BREAK)
        self.assertTrue(any("cgorithm.iteration" in line for line in logs.output))


if __name__ == "__main__":
    unittest.main()
