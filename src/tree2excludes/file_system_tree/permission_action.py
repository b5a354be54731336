"""Permission action enum for handling permission errors during directory traversal."""

from enum import Enum


class PermissionAction(str, Enum):
    """Action to take when a directory of the source tree cannot be read.

    Values:
        IGNORE: Skip the unreadable directory silently (default behavior)
        WARN: Skip the unreadable directory and log a warning
        RAISE: Raise a PermissionError immediately
    """

    IGNORE = "ignore"
    WARN = "warn"
    RAISE = "raise"
