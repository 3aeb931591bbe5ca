"""Cron helpers for reminder schedules.

Cron semantics are never interpreted here: validity checking is delegated to
croniter and prose rendering to cron-descriptor.
"""

import logging

from cron_descriptor import ExpressionDescriptor, Options
from croniter import croniter

from src.reminders.config import ReminderConfig, get_reminder_settings

logger = logging.getLogger(__name__)

# minute hour day-of-month month day-of-week
CRON_FIELD_COUNT = 5


def is_cron_syntax_valid(expression: object) -> bool:
    """Check whether a value is a standard five-field cron expression.

    Macros such as ``@daily`` and six-field (seconds) forms are rejected.

    :param expression: Candidate cron expression.
    :returns: True if croniter accepts the expression and it has five fields.
    """
    if not isinstance(expression, str):
        return False

    stripped = expression.strip()
    if len(stripped.split()) != CRON_FIELD_COUNT:
        return False

    return bool(croniter.is_valid(stripped))


def derive_cron(days: int) -> str:
    """Build the canonical cron expression for a day interval.

    Runs at midnight every ``days`` days of the month. The range is not
    checked here.

    :param days: Interval in days.
    :returns: Cron expression, e.g. ``0 0 */5 * *`` for 5.
    """
    return f"0 0 */{days} * *"


def _build_options(settings: ReminderConfig) -> Options:
    options = Options()
    options.use_24hour_time_format = settings.use_24hour_time_format
    options.locale_code = settings.locale_code
    options.verbose = settings.verbose_descriptions
    return options


def cron_to_prose(expression: str, settings: ReminderConfig | None = None) -> str:
    """Render a cron expression as a human-readable sentence.

    Only call this with an expression that passed is_cron_syntax_valid.

    :param expression: Valid cron expression.
    :param settings: Description settings. Defaults to the cached settings.
    :returns: Description such as "At 00:00, every 5 days".
    :raises cron_descriptor.FormatException: If cron-descriptor cannot parse it.
    """
    if settings is None:
        settings = get_reminder_settings()

    descriptor = ExpressionDescriptor(expression.strip(), _build_options(settings))
    description = descriptor.get_description()
    logger.debug(f"Described cron: expression={expression!r}, description={description!r}")
    return description
