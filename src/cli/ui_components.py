"""Text rendering for the CLI.

Keeps formatting out of the command functions so it can be tested directly.
"""

from __future__ import annotations

from rich.pretty import pretty_repr

from core.domain.models import AreaReport, FibonacciTerm, Rectangle, TemperatureConversion


def format_conversion(result: TemperatureConversion) -> str:
    return f"{result.fahrenheit}f is {result.celsius}c"


def format_fibonacci(result: FibonacciTerm) -> str:
    return f"{result.index} fibonacci number is {result.value}"


def format_rectangle_dump(rect: Rectangle) -> str:
    """Multi-line debug representation, one attribute per line."""

    return f"rect is {pretty_repr(rect, expand_all=True)}"


def format_area(report: AreaReport) -> str:
    return f"The area of the rectangle is {report.area} square pixels."
