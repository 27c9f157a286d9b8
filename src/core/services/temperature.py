"""Fahrenheit to Celsius conversion."""

from __future__ import annotations

import re

from core.domain.models import I32_MAX, I32_MIN, TemperatureConversion
from core.errors import InvalidInputError

_SIGNED_INT = re.compile(r"[+-]?[0-9]+")


def parse_fahrenheit(text: str) -> int:
    """Parse one line of user input as a signed 32-bit integer."""

    candidate = text.strip()
    if not _SIGNED_INT.fullmatch(candidate):
        raise InvalidInputError(text, "not an integer")

    try:
        value = int(candidate)
    except ValueError as exc:
        raise InvalidInputError(text, "out of range") from exc
    if not I32_MIN <= value <= I32_MAX:
        raise InvalidInputError(text, "out of range")
    return value


def _truncating_div(dividend: int, divisor: int) -> int:
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend >= 0) == (divisor > 0) else -quotient


def fahrenheit_to_celsius(fahrenheit: int) -> int:
    """Return ``(F - 32) * 5 / 9`` truncated toward zero.

    ``//`` floors, which differs for negative results: 0F is -17C here,
    not -18C.
    """

    return _truncating_div((fahrenheit - 32) * 5, 9)


def convert(fahrenheit: int) -> TemperatureConversion:
    return TemperatureConversion(
        fahrenheit=fahrenheit,
        celsius=fahrenheit_to_celsius(fahrenheit),
    )
