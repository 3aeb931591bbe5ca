"""Form session for creating a single secret rotation reminder."""

import logging
import threading
from collections.abc import Callable
from dataclasses import replace
from typing import Any

from src.reminders.engine import ReminderRuleEngine
from src.reminders.enums import SessionState
from src.reminders.exceptions import (
    ReminderValidationError,
    SessionClosedError,
    SubmitInProgressError,
)
from src.reminders.models import FieldErrors, ReminderDescriptor, ReminderDraft, coerce_days

logger = logging.getLogger(__name__)

OnComplete = Callable[[bool, ReminderDescriptor | None], None]


class ReminderFormSession:
    """Owns one reminder draft from first edit until submit or cancel.

    Setting the day count overwrites the cron field with the derived
    expression, so a manually entered cron only survives until the next
    day-count change. The caller's ``on_complete`` callback is invoked
    exactly once, when the session closes.
    """

    def __init__(self, on_complete: OnComplete, engine: ReminderRuleEngine | None = None) -> None:
        """Initialise the session.

        :param on_complete: Called with (True, descriptor) after a successful
            submit, or (False, None) after cancel.
        :param engine: Rule engine to use. Defaults to a new engine.
        """
        self._on_complete = on_complete
        self._engine = engine or ReminderRuleEngine()
        self._draft = ReminderDraft()
        self._errors: FieldErrors = {}
        self._state = SessionState.EDITING
        self._state_lock = threading.Lock()
        self._submit_lock = threading.Lock()

    @property
    def state(self) -> SessionState:
        """Current lifecycle state."""
        return self._state

    @property
    def draft(self) -> ReminderDraft:
        """A copy of the current draft."""
        return replace(self._draft)

    @property
    def errors(self) -> FieldErrors:
        """Field errors from the most recent failed submit."""
        return dict(self._errors)

    @property
    def description(self) -> str | None:
        """Human-readable description of the current cron, if one applies."""
        return self._engine.describe_cron(self._draft.cron, self._draft.days)

    def _ensure_open(self) -> None:
        if self._state.is_closed:
            raise SessionClosedError(self._state)

    def set_days(self, value: Any) -> None:
        """Set the day interval and re-derive the cron expression.

        An empty value leaves the current cron untouched.

        :param value: Raw day-count input.
        :raises SessionClosedError: If the session is closed.
        """
        self._ensure_open()
        days = coerce_days(value)
        self._draft.days = days
        if not days:
            return

        self._draft.cron = self._engine.derive_cron(days)

    def set_cron(self, value: str | None) -> None:
        """Set the cron expression directly.

        :param value: Cron expression as entered.
        :raises SessionClosedError: If the session is closed.
        """
        self._ensure_open()
        self._draft.cron = value

    def set_note(self, value: str | None) -> None:
        """Set the free-text note.

        :param value: Note text.
        :raises SessionClosedError: If the session is closed.
        """
        self._ensure_open()
        self._draft.note = value

    def submit(self) -> ReminderDescriptor:
        """Validate the draft and close the session with its descriptor.

        On failure the session returns to editing with the field errors
        attached, and the caller is not notified.

        :returns: The validated descriptor.
        :raises SubmitInProgressError: If another submit is in flight.
        :raises SessionClosedError: If the session is closed, including a
            cancel that lands while this submit is in flight.
        :raises ReminderValidationError: If the draft is invalid.
        """
        if not self._submit_lock.acquire(blocking=False):
            raise SubmitInProgressError()

        try:
            with self._state_lock:
                self._ensure_open()
                self._state = SessionState.SUBMITTING

            result = self._engine.validate(self._draft)

            with self._state_lock:
                if self._state != SessionState.SUBMITTING:
                    raise SessionClosedError(self._state)

                if isinstance(result, ReminderDescriptor):
                    self._errors = {}
                    self._state = SessionState.CLOSED_WITH_DATA
                else:
                    self._errors = result
                    self._state = SessionState.EDITING
        finally:
            self._submit_lock.release()

        if not isinstance(result, ReminderDescriptor):
            logger.debug(f"Reminder submit rejected: errors={dict(result)}")
            raise ReminderValidationError(result)

        self._complete(True, result)
        return result

    def cancel(self) -> None:
        """Close the session without validating or producing data.

        Cancelling a closed session does nothing.
        """
        with self._state_lock:
            if self._state.is_closed:
                logger.debug(f"Cancel ignored: session already {self._state}")
                return
            self._state = SessionState.CLOSED_WITHOUT_DATA

        self._complete(False, None)

    def _complete(self, has_data: bool, descriptor: ReminderDescriptor | None) -> None:
        logger.info(f"Reminder session closed: has_data={has_data}, state={self._state}")
        self._on_complete(has_data, descriptor)
