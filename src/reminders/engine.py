"""Rule-set for validating reminder drafts and deriving their cron schedules."""

import logging
from collections.abc import Mapping
from dataclasses import asdict
from typing import Any

from cron_descriptor import FormatException
from pydantic import ValidationError

from src.reminders import cron as cron_utils
from src.reminders.config import ReminderConfig
from src.reminders.enums import ReminderField
from src.reminders.models import (
    DAYS_TOO_HIGH_MESSAGE,
    DAYS_TOO_LOW_MESSAGE,
    INVALID_CRON_MESSAGE,
    INVALID_NOTE_MESSAGE,
    FieldErrors,
    ReminderDescriptor,
    ReminderDraft,
)

logger = logging.getLogger(__name__)


def _message_for(field: ReminderField, error_type: str) -> str:
    if field == ReminderField.DAYS:
        # Missing, non-numeric and below-minimum all share one message
        return DAYS_TOO_HIGH_MESSAGE if error_type == "less_than_equal" else DAYS_TOO_LOW_MESSAGE
    if field == ReminderField.CRON:
        return INVALID_CRON_MESSAGE
    return INVALID_NOTE_MESSAGE


def _to_field_errors(exc: ValidationError) -> FieldErrors:
    """Convert a pydantic validation error to one message per field.

    :param exc: Error raised while building a ReminderDescriptor.
    :returns: Messages keyed by field, in form field order.
    """
    found: FieldErrors = {}
    for error in exc.errors():
        field = ReminderField(error["loc"][0])
        if field not in found:
            found[field] = _message_for(field, error["type"])

    return {field: found[field] for field in ReminderField if field in found}


class ReminderRuleEngine:
    """Validates reminder drafts, derives cron schedules and describes them.

    The engine holds no draft state; every operation is a pure function of
    its arguments.
    """

    def __init__(self, settings: ReminderConfig | None = None) -> None:
        """Initialise the rule engine.

        :param settings: Settings for cron descriptions. Defaults to the
            cached process settings when a description is first requested.
        """
        self._settings = settings

    def validate(
        self, draft: ReminderDraft | Mapping[str, Any]
    ) -> ReminderDescriptor | FieldErrors:
        """Validate a draft.

        Every field is checked independently, so several errors can be
        reported together. Failures are returned, never raised.

        :param draft: The draft, or a mapping with note/days/cron keys.
        :returns: A descriptor if the draft is valid, otherwise field errors.
        """
        data = asdict(draft) if isinstance(draft, ReminderDraft) else dict(draft)

        try:
            descriptor = ReminderDescriptor.model_validate(data)
        except ValidationError as e:
            errors = _to_field_errors(e)
            logger.debug(f"Reminder draft invalid: errors={dict(errors)}")
            return errors

        logger.debug(f"Reminder draft valid: days={descriptor.days}, cron={descriptor.cron!r}")
        return descriptor

    def derive_cron(self, days: int) -> str:
        """Derive the canonical cron expression for a day interval.

        :param days: Interval in days.
        :returns: Cron expression running at midnight every ``days`` days.
        """
        expression = cron_utils.derive_cron(days)
        logger.debug(f"Derived cron from days: days={days}, cron={expression!r}")
        return expression

    def describe_cron(self, cron: str | None, days: Any = None) -> str | None:
        """Describe a cron expression for display next to the form.

        Nothing is described unless a day count is set and the cron is a
        non-empty, valid expression.

        :param cron: Cron expression.
        :param days: Current day-count value.
        :returns: A human-readable sentence, or None.
        """
        if not days or not cron or not cron_utils.is_cron_syntax_valid(cron):
            return None

        try:
            return cron_utils.cron_to_prose(cron, self._settings)
        except FormatException as e:
            logger.warning(f"Failed to describe cron expression {cron!r}: {e}")
            return None
