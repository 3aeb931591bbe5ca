"""Data models for reminder drafts and validated reminder descriptors."""

import math
import re
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.reminders.cron import is_cron_syntax_valid
from src.reminders.enums import ReminderField

MIN_DAYS = 1
MAX_DAYS = 365

DAYS_TOO_LOW_MESSAGE = f"Must be at least {MIN_DAYS} day"
DAYS_TOO_HIGH_MESSAGE = f"Must be less than {MAX_DAYS} days"
INVALID_CRON_MESSAGE = "Invalid cron expression"
INVALID_NOTE_MESSAGE = "Note must be text"

# Leading signed integer, as read from a number input box
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

FieldErrors = dict[ReminderField, str]


def coerce_days(value: Any) -> int | None:
    """Coerce a raw day-count input to an integer.

    Text is read from its leading digits and floats are truncated toward
    zero. Anything without a usable integer coerces to None.

    :param value: Raw input (int, float, str or None).
    :returns: The integer day count, or None if the input has none.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        return int(match.group(1)) if match else None
    return None


@dataclass
class ReminderDraft:
    """User-edited reminder fields for a single form session.

    Values are stored raw; nothing is checked until validation.
    """

    note: str | None = None
    days: Any = None
    cron: str | None = None


class ReminderDescriptor(BaseModel):
    """A validated secret rotation reminder."""

    model_config = ConfigDict(frozen=True)

    note: str | None = Field(None, description="Free-text note shown with the reminder")
    days: int = Field(..., ge=MIN_DAYS, le=MAX_DAYS, description="Days between reminders")
    cron: str = Field(..., description="Five-field cron expression for the reminder")

    @field_validator("days", mode="before")
    @classmethod
    def coerce_days_input(cls, v: Any) -> int | None:
        """Coerce the raw day count before range checks run.

        :param v: Raw day-count input.
        :returns: Integer day count, or None which then fails the int check.
        """
        return coerce_days(v)

    @field_validator("cron")
    @classmethod
    def validate_cron(cls, v: str) -> str:
        """Validate that the cron expression is well formed.

        :param v: Cron expression.
        :returns: The expression unchanged.
        :raises ValueError: If the expression is not a valid five-field cron.
        """
        if not is_cron_syntax_valid(v):
            raise ValueError(INVALID_CRON_MESSAGE)
        return v
