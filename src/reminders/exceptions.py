"""Custom exceptions for the reminders module."""

from src.reminders.enums import ReminderField, SessionState


class ReminderError(Exception):
    """Base exception for reminder-related errors."""


class ReminderValidationError(ReminderError):
    """Raised by a session submit when the draft fails validation."""

    def __init__(self, errors: dict[ReminderField, str]) -> None:
        """Initialise ReminderValidationError.

        :param errors: Field-level messages keyed by field.
        """
        self.errors = dict(errors)
        summary = ", ".join(f"{field}: {message}" for field, message in self.errors.items())
        super().__init__(f"Reminder validation failed: {summary}")


class ReminderSessionError(ReminderError):
    """Error related to the reminder form session lifecycle."""


class SessionClosedError(ReminderSessionError):
    """Raised when a closed session is edited or submitted."""

    def __init__(self, state: SessionState) -> None:
        """Initialise SessionClosedError.

        :param state: The terminal state the session is in.
        """
        self.state = state
        super().__init__(f"Reminder session is already closed: state={state}")


class SubmitInProgressError(ReminderSessionError):
    """Raised when a submit is requested while another is still in flight."""

    def __init__(self) -> None:
        """Initialise SubmitInProgressError."""
        super().__init__("A submit is already in progress for this reminder session")
