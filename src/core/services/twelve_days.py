"""Verse generator for "The Twelve Days of Christmas".

Each verse lists the gifts of every day so far, newest first:

    On the thrid of Christmas, my true love gave to me
    three French hens,
    two turtle doves
    and a partridge in a pear tree
"""

from __future__ import annotations

from core.domain.carol import DAYS_OF_CHRISTMAS, gift_for_day, name_for_day
from core.domain.models import Verse

VERSE_TEMPLATE = "On the {ordinal} of Christmas, my true love gave to me {gifts}\n"


def separator(day: int, gift: int) -> str:
    """Text placed before gift ``gift`` while listing day ``day``.

    The first rule must win when ``day == gift == 0``.
    """

    if gift == day:
        return "\n"
    if gift == 0:
        return "\nand "
    return ",\n"


def gift_list(day: int) -> str:
    parts: list[str] = []
    for gift in range(day, -1, -1):
        parts.append(separator(day, gift))
        parts.append(gift_for_day(gift))
    return "".join(parts)


def verse(day: int) -> str:
    return VERSE_TEMPLATE.format(ordinal=name_for_day(day), gifts=gift_list(day))


def build_verse(day: int) -> Verse:
    return Verse(day=day, ordinal=name_for_day(day), text=verse(day))


def verses() -> list[Verse]:
    return [build_verse(day) for day in range(DAYS_OF_CHRISTMAS)]
