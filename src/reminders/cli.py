"""Command-line entry point for building a secret rotation reminder."""

import argparse
import logging
import sys

from src.reminders.exceptions import ReminderValidationError
from src.reminders.models import ReminderDescriptor
from src.reminders.session import ReminderFormSession
from src.utils.logging import configure_logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m src.reminders",
        description="Validate a secret rotation reminder and print it as JSON.",
    )
    parser.add_argument("--days", help="How many days between reminders (1-365)")
    parser.add_argument(
        "--cron",
        help="Cron expression. Applied after --days, so it replaces the derived schedule.",
    )
    parser.add_argument("--note", help="Note shown with the reminder")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the reminder form once from command-line arguments.

    :param argv: Arguments excluding the program name. Defaults to sys.argv.
    :returns: Process exit code, 0 on success and 1 on validation failure.
    """
    # stdout is reserved for the reminder JSON
    configure_logging(stream=sys.stderr)
    args = _build_parser().parse_args(argv)

    completed: list[ReminderDescriptor] = []

    def _on_complete(has_data: bool, descriptor: ReminderDescriptor | None) -> None:
        if has_data and descriptor is not None:
            completed.append(descriptor)

    session = ReminderFormSession(on_complete=_on_complete)
    if args.days is not None:
        session.set_days(args.days)
    if args.cron is not None:
        session.set_cron(args.cron)
    if args.note is not None:
        session.set_note(args.note)

    description = session.description
    if description:
        print(description)

    try:
        session.submit()
    except ReminderValidationError as e:
        for field, message in e.errors.items():
            print(f"{field}: {message}", file=sys.stderr)
        session.cancel()
        return 1

    print(completed[0].model_dump_json(indent=2))
    return 0
