"""Errors raised by the exercise core.

The CLI layer turns these into user-facing diagnostics; the core never prints.
"""

from __future__ import annotations


class DrillError(Exception):
    """Base class for every error raised by the exercises."""


class InvalidInputError(DrillError, ValueError):
    """Text read from the user could not be parsed into the expected number."""

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"{reason}: {text!r}")
        self.text = text
        self.reason = reason


class InvalidDayError(DrillError, IndexError):
    """A day index outside 0..11 was passed to a carol lookup."""

    def __init__(self, day: int) -> None:
        super().__init__(f"Invalid day: {day}")
        self.day = day
