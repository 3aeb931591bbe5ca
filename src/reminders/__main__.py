"""Entry point for running the reminder form as a module.

Allows running with: python -m src.reminders
"""

import sys

from src.reminders.cli import main

if __name__ == "__main__":
    sys.exit(main())
