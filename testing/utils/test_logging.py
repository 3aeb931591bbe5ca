"""Tests for logging configuration."""

import io
import logging
import os
import unittest
from unittest.mock import patch

from src.utils.logging import configure_logging


class TestConfigureLogging(unittest.TestCase):
    """Tests for configure_logging."""

    def setUp(self) -> None:
        """Save root logger state."""
        root = logging.getLogger()
        self._handlers = list(root.handlers)
        self._level = root.level

    def tearDown(self) -> None:
        """Restore root logger state."""
        root = logging.getLogger()
        root.handlers[:] = self._handlers
        root.setLevel(self._level)

    def test_installs_single_handler(self) -> None:
        """Test that exactly one handler is attached at the configured level."""
        stream = io.StringIO()
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}):
            configure_logging(stream=stream)

        root = logging.getLogger()
        self.assertEqual(len(root.handlers), 1)
        self.assertEqual(root.level, logging.DEBUG)
        self.assertIn("Logging configured: level=DEBUG", stream.getvalue())

    def test_quietens_third_party_loggers(self) -> None:
        """Test that cron library loggers are raised to WARNING."""
        with patch.dict(os.environ, {"LOG_LEVEL": "DEBUG"}):
            configure_logging(stream=io.StringIO())

        self.assertEqual(logging.getLogger("croniter").level, logging.WARNING)

    def test_invalid_level_raises(self) -> None:
        """Test that an unknown level name is rejected."""
        with patch.dict(os.environ, {"LOG_LEVEL": "LOUD"}), self.assertRaises(ValueError):
            configure_logging(stream=io.StringIO())


if __name__ == "__main__":
    unittest.main()
