"""Deterministic pick-of-the-day selection.

Every viewer gets the same item on the same calendar day without any server
coordination: the item is ``collection[day_ordinal % len(collection)]``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Generic, Sequence, TypeVar

from sakinah_stats.errors import InvalidArgument

T = TypeVar("T")


class RotationPeriod(Enum):
    YEAR = "year"  # day of year, 1..366
    MONTH = "month"  # day of month, 1..31
    WEEK = "week"  # weekday, Sunday 0 .. Saturday 6


@dataclass(frozen=True)
class DailyPick(Generic[T]):
    index: int
    content: T
    cache_key: str


def day_ordinal(day: date, period: RotationPeriod) -> int:
    """Return the ordinal of ``day`` within its rotation period."""
    if period is RotationPeriod.YEAR:
        return day.timetuple().tm_yday
    if period is RotationPeriod.MONTH:
        return day.day
    return day.isoweekday() % 7


def pick_index(size: int, ordinal: int) -> int:
    if size <= 0:
        raise InvalidArgument("Cannot pick from an empty collection")
    return ordinal % size


def pick_of_day(collection: Sequence[T], ordinal: int) -> T:
    """Return ``collection[ordinal % len(collection)]``.

    Raises InvalidArgument for an empty collection.
    """
    return collection[pick_index(len(collection), ordinal)]


def daily_pick(
    name: str,
    collection: Sequence[T],
    period: RotationPeriod = RotationPeriod.YEAR,
    today: date | None = None,
) -> DailyPick[T]:
    """Pick today's item from ``collection`` under the given rotation period."""
    ordinal = day_ordinal(today or date.today(), period)
    index = pick_index(len(collection), ordinal)
    return DailyPick(index=index, content=collection[index], cache_key=f"{name}{ordinal}")
