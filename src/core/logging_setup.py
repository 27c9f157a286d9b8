"""Logging configuration.

Log records go to stderr through Rich so stdout stays reserved for the
exercise output.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "drills-rich"


def setup_logging(level: str = "WARNING", *, force: bool = False) -> None:
    """Configure the root logger once (unless ``force=True``)."""

    if getattr(setup_logging, "_configured", False) and not force:
        return

    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(name)s | %(message)s"))

    root.addHandler(handler)
    root.setLevel(level.upper())
    setup_logging._configured = True  # type: ignore[attr-defined]


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
