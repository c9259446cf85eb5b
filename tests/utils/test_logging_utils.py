import json
import logging
import re
import sys
import unittest

import matchvalues
from matchvalues.utils.logging_utils import (
    JSONFormatter,
    configure_logging,
    get_log_format,
)


class TestJSONFormatter(unittest.TestCase):
    def test_format_structure(self):
        formatter = JSONFormatter()
        record = logging.LogRecord(
            name="test_logger",
            level=logging.INFO,
            pathname=__file__,
            lineno=10,
            msg="test message",
            args=(),
            exc_info=None,
        )
        record.extra = {"custom_field": "custom_value"}

        formatted = formatter.format(record)
        data = json.loads(formatted)

        self.assertEqual(data["message"], "test message")
        self.assertEqual(data["level"], "INFO")
        self.assertEqual(data["logger"], "test_logger")
        self.assertEqual(data["custom_field"], "custom_value")
        self.assertTrue("timestamp" in data)

    def test_format_exception(self):
        formatter = JSONFormatter()
        try:
            raise matchvalues.FormatError("abc", int)
        except matchvalues.FormatError:
            exc_info = sys.exc_info()
        record = logging.LogRecord(
            name="test_logger",
            level=logging.ERROR,
            pathname=__file__,
            lineno=10,
            msg="failed",
            args=(),
            exc_info=exc_info,
        )

        data = json.loads(formatter.format(record))

        self.assertIn("FormatError", data["exception"])


class TestConfigureLogging(unittest.TestCase):
    def tearDown(self):
        configure_logging(level="warning")

    def test_get_log_format(self):
        configure_logging(log_format="json")
        self.assertEqual(get_log_format(), "json")

        configure_logging(log_format="human")
        self.assertEqual(get_log_format(), "human")

    def test_binding_is_logged_at_debug_level(self):
        configure_logging(level="debug")
        with self.assertLogs("matchvalues.binding", level="DEBUG") as logs:
            matchvalues.get(re.search(r"(\d+)", "a 12"), int)

        self.assertTrue(any("Bound" in line for line in logs.output))
