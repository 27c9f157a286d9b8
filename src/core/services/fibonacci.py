"""Naive recursive Fibonacci.

The recursion is deliberately left unmemoized: runtime grows exponentially
with the index, so anything much past 35 takes a noticeable amount of time.
"""

from __future__ import annotations

import re
import sys

from core.domain.models import FibonacciTerm
from core.errors import InvalidInputError

_UNSIGNED_INT = re.compile(r"\+?[0-9]+")

# Frames above fib() itself: caller, CLI, Click and the interpreter.
_RECURSION_MARGIN = 100


def parse_sequence_index(text: str) -> int:
    """Parse one line of user input as a non-negative integer.

    There is no numeric upper bound; only lines too long for ``int()`` are
    rejected.
    """

    candidate = text.strip()
    if not _UNSIGNED_INT.fullmatch(candidate):
        raise InvalidInputError(text, "not a non-negative integer")
    try:
        return int(candidate)
    except ValueError as exc:
        raise InvalidInputError(text, "out of range") from exc


def ensure_recursion_depth(n: int) -> None:
    """Raise the interpreter recursion limit so ``fib(n)`` can reach depth ``n``."""

    needed = n + _RECURSION_MARGIN
    if sys.getrecursionlimit() < needed:
        sys.setrecursionlimit(needed)


def fib(n: int) -> int:
    if n < 0:
        raise InvalidInputError(str(n), "negative sequence index")
    if n == 0:
        return 0
    if n == 1:
        return 1
    return fib(n - 1) + fib(n - 2)


def compute(n: int) -> FibonacciTerm:
    ensure_recursion_depth(n)
    return FibonacciTerm(index=n, value=fib(n))
