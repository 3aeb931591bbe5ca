"""Validation and cron derivation rules for secret rotation reminders."""

from src.reminders.engine import ReminderRuleEngine
from src.reminders.enums import ReminderField, SessionState
from src.reminders.exceptions import (
    ReminderError,
    ReminderSessionError,
    ReminderValidationError,
    SessionClosedError,
    SubmitInProgressError,
)
from src.reminders.models import (
    MAX_DAYS,
    MIN_DAYS,
    FieldErrors,
    ReminderDescriptor,
    ReminderDraft,
)
from src.reminders.session import ReminderFormSession

__all__ = [
    # Engine and session
    "ReminderFormSession",
    "ReminderRuleEngine",
    # Models
    "MAX_DAYS",
    "MIN_DAYS",
    "FieldErrors",
    "ReminderDescriptor",
    "ReminderDraft",
    # Enums
    "ReminderField",
    "SessionState",
    # Exceptions
    "ReminderError",
    "ReminderSessionError",
    "ReminderValidationError",
    "SessionClosedError",
    "SubmitInProgressError",
]
