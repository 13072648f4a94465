"""User-facing messages."""

from __future__ import annotations

import sys


def show_generic_error_message(message: str) -> None:
    """Report a failure to the user without technical detail.

    The details go to the log; the user only learns that the action failed.
    """
    print(f"{message}. See the log output for more details", file=sys.stderr)
