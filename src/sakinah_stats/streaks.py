"""Streak calculation over sets of active day keys."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta


@dataclass
class StreakInfo:
    current_streak: int
    longest_streak: int
    last_active_date: str | None  # YYYY-MM-DD
    is_active_today: bool


def _as_date(d: str | date) -> date:
    if isinstance(d, date):
        return d
    return date.fromisoformat(d)


def get_streak_from_dates(date_set: set[str], reference: str | date) -> int:
    """Count consecutive active days walking backwards from ``reference``.

    No grace: returns 0 if ``reference`` itself is not active.
    """
    streak = 0
    current = _as_date(reference)
    while current.isoformat() in date_set:
        streak += 1
        current -= timedelta(days=1)
    return streak


def calculate_streak(active_day_keys: set[str], today: str | date) -> int:
    """Current streak of consecutive active days ending today.

    An unlogged today does not break the streak: the walk starts from
    yesterday instead. Any older gap does.
    """
    if not active_day_keys:
        return 0

    ref = _as_date(today)
    if ref.isoformat() not in active_day_keys:
        ref -= timedelta(days=1)
    return get_streak_from_dates(active_day_keys, ref)


def longest_streak(active_day_keys: set[str]) -> int:
    """Longest run of consecutive days anywhere in the set."""
    if not active_day_keys:
        return 0

    sorted_dates = sorted(_as_date(d) for d in active_day_keys)
    longest = 1
    streak = 1
    for i in range(1, len(sorted_dates)):
        if (sorted_dates[i] - sorted_dates[i - 1]).days == 1:
            streak += 1
            longest = max(longest, streak)
        else:
            streak = 1
    return longest


def streak_info(active_day_keys: set[str], today: str | date | None = None) -> StreakInfo:
    """Summarise streak state for a set of active day keys."""
    if not active_day_keys:
        return StreakInfo(
            current_streak=0,
            longest_streak=0,
            last_active_date=None,
            is_active_today=False,
        )

    today_date = _as_date(today) if today else date.today()
    current = calculate_streak(active_day_keys, today_date)

    return StreakInfo(
        current_streak=current,
        longest_streak=max(longest_streak(active_day_keys), current),
        last_active_date=max(active_day_keys),
        is_active_today=today_date.isoformat() in active_day_keys,
    )
