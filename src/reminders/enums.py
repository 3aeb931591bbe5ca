"""Enumerations for the reminders module."""

from enum import StrEnum


class ReminderField(StrEnum):
    """Fields of a reminder form that can carry a validation message."""

    DAYS = "days"
    CRON = "cron"
    NOTE = "note"


class SessionState(StrEnum):
    """Lifecycle state of a single reminder form session.

    EDITING: Initial state, and the state returned to after a failed submit.
    SUBMITTING: A validation pass is in flight.
    CLOSED_WITH_DATA: Terminal, a descriptor was handed to the caller.
    CLOSED_WITHOUT_DATA: Terminal, the session was cancelled.
    """

    EDITING = "editing"
    SUBMITTING = "submitting"
    CLOSED_WITH_DATA = "closed_with_data"
    CLOSED_WITHOUT_DATA = "closed_without_data"

    @property
    def is_closed(self) -> bool:
        """Whether the state is terminal."""
        return self in (SessionState.CLOSED_WITH_DATA, SessionState.CLOSED_WITHOUT_DATA)
