"""Logging configuration for the application."""

import logging
import os
import sys
from collections.abc import Iterable
from typing import TextIO

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are only useful when debugging them directly
_QUIET_LOGGERS = ("croniter", "cron_descriptor")


def _parse_level(level: str) -> int:
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")
    return numeric_level


def _set_logger_levels(names: Iterable[str], level: int) -> None:
    for name in names:
        logging.getLogger(name).setLevel(level)


def configure_logging(stream: TextIO | None = None) -> None:
    """Configure application-wide logging to a single stream.

    :param stream: Stream for log output. Defaults to stdout.

    Env vars:
      - LOG_LEVEL: DEBUG/INFO/WARNING/ERROR/CRITICAL (default INFO)
    """
    level_name = os.environ.get("LOG_LEVEL", "INFO")
    level = _parse_level(level_name)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Hard reset: ensure exactly one handler with our formatter.
    root_logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(handler)

    _set_logger_levels(_QUIET_LOGGERS, level=max(level, logging.WARNING))

    logging.getLogger(__name__).info("Logging configured: level=%s", level_name.upper())
