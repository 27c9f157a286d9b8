"""Rectangle area demo."""

from __future__ import annotations

from core.domain.models import AreaReport, Rectangle

DEFAULT_WIDTH = 30
DEFAULT_HEIGHT = 50


def default_rectangle() -> Rectangle:
    return Rectangle(width=DEFAULT_WIDTH, height=DEFAULT_HEIGHT)


def area(rect: Rectangle) -> int:
    return rect.width * rect.height


def measure(rect: Rectangle) -> AreaReport:
    return AreaReport(rectangle=rect, area=area(rect))
