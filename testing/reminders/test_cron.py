"""Tests for reminder cron helpers."""

import unittest

from src.reminders.config import ReminderConfig
from src.reminders.cron import cron_to_prose, derive_cron, is_cron_syntax_valid


class TestIsCronSyntaxValid(unittest.TestCase):
    """Tests for is_cron_syntax_valid."""

    def test_accepts_standard_expressions(self) -> None:
        """Test that common five-field expressions are valid."""
        for expression in ("0 0 */5 * *", "* * * * *", "30 9 * * 1-5", "0 12 1 */2 *"):
            with self.subTest(expression=expression):
                self.assertTrue(is_cron_syntax_valid(expression))

    def test_accepts_surrounding_whitespace(self) -> None:
        """Test that leading and trailing whitespace is ignored."""
        self.assertTrue(is_cron_syntax_valid("  0 0 * * *  "))

    def test_rejects_wrong_field_count(self) -> None:
        """Test that anything other than five fields is rejected."""
        for expression in ("0 0 * *", "0 0 * * * *", "not-a-cron", "@daily", ""):
            with self.subTest(expression=expression):
                self.assertFalse(is_cron_syntax_valid(expression))

    def test_rejects_out_of_range_values(self) -> None:
        """Test that out-of-range field values are rejected."""
        self.assertFalse(is_cron_syntax_valid("60 0 * * *"))
        self.assertFalse(is_cron_syntax_valid("0 25 * * *"))

    def test_rejects_non_strings(self) -> None:
        """Test that None and other types are rejected."""
        self.assertFalse(is_cron_syntax_valid(None))
        self.assertFalse(is_cron_syntax_valid(5))


class TestDeriveCron(unittest.TestCase):
    """Tests for derive_cron."""

    def test_derives_midnight_interval(self) -> None:
        """Test the canonical expression for a day interval."""
        self.assertEqual(derive_cron(5), "0 0 */5 * *")

    def test_fields_for_any_positive_integer(self) -> None:
        """Test the five fields for a range of intervals, including above 365."""
        for days in (1, 2, 31, 90, 365, 400):
            with self.subTest(days=days):
                fields = derive_cron(days).split(" ")
                self.assertEqual(fields, ["0", "0", f"*/{days}", "*", "*"])

    def test_is_deterministic(self) -> None:
        """Test that deriving twice gives the same expression."""
        self.assertEqual(derive_cron(10), derive_cron(10))


class TestCronToProse(unittest.TestCase):
    """Tests for cron_to_prose."""

    def test_describes_day_interval_in_24_hour_time(self) -> None:
        """Test the description of a derived expression."""
        settings = ReminderConfig(_env_file=None)

        description = cron_to_prose("0 0 */5 * *", settings)

        self.assertIn("00:00", description)
        self.assertIn("5 days", description)

    def test_describes_in_12_hour_time_when_configured(self) -> None:
        """Test that the 24-hour setting can be turned off."""
        settings = ReminderConfig(use_24hour_time_format=False, _env_file=None)

        description = cron_to_prose("0 0 */5 * *", settings)

        self.assertIn("AM", description)
        self.assertNotIn("00:00", description)


if __name__ == "__main__":
    unittest.main()
