"""
Tests for the ConfigOptions logging configuration.
"""

import json
import logging
import unittest

from ConfigOptions.utils.logging import (
    PACKAGE_LOGGER_NAME,
    JsonFormatter,
    StructuredLoggerAdapter,
    configure_logging,
    get_logger,
    set_log_level,
)


class TestLogging(unittest.TestCase):
    """Test cases for logger configuration."""

    def tearDown(self):
        """Restore text logging at INFO."""
        configure_logging(level="info", use_json=False)

    def test_set_log_level(self):
        """set_log_level changes the package logger level."""
        set_log_level("debug")
        self.assertEqual(logging.getLogger(PACKAGE_LOGGER_NAME).level, logging.DEBUG)
        set_log_level(logging.WARNING)
        self.assertEqual(logging.getLogger(PACKAGE_LOGGER_NAME).level, logging.WARNING)

    def test_set_invalid_log_level(self):
        """Unknown level names are rejected."""
        with self.assertRaises(ValueError):
            set_log_level("chatty")

    def test_root_logger_untouched(self):
        """Only the package logger gets handlers."""
        root_handlers = list(logging.getLogger().handlers)
        configure_logging(level="debug", use_json=False)

        package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
        self.assertEqual(len(package_logger.handlers), 1)
        self.assertFalse(package_logger.propagate)
        self.assertEqual(logging.getLogger().handlers, root_handlers)

    def test_text_logger(self):
        """Text mode hands out plain loggers."""
        configure_logging(use_json=False)
        self.assertIsInstance(get_logger("ConfigOptions.test"), logging.Logger)

    def test_json_logger(self):
        """JSON mode hands out structured adapters and formats records as JSON."""
        configure_logging(use_json=True)
        logger = get_logger("ConfigOptions.test", {"component": "loader"})
        self.assertIsInstance(logger, StructuredLoggerAdapter)

        msg, kwargs = logger.process("Loading", {"extra": {"path": "site.yml"}})
        record = logging.LogRecord("ConfigOptions.test", logging.INFO, __file__, 1, msg, None, None)
        record.extras = kwargs["extra"]["extras"]
        data = json.loads(JsonFormatter().format(record))

        self.assertEqual(data["message"], "Loading")
        self.assertEqual(data["level"], "INFO")
        self.assertEqual(data["component"], "loader")
        self.assertEqual(data["path"], "site.yml")
        self.assertEqual(data["service_name"], "configoptions")


if __name__ == "__main__":
    unittest.main()
