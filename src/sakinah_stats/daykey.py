"""Calendar day keys in the viewer's local timezone.

A day key is a ``YYYY-MM-DD`` string. Two instants share a key exactly when
they fall on the same local calendar date; the time of day never matters.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone, tzinfo


def _aware(instant: datetime) -> datetime:
    # Persistence timestamps are UTC; a naive value is read as UTC.
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant


def local_date(instant: datetime, tz: tzinfo | None = None) -> date:
    """Return the calendar date of ``instant`` in ``tz`` (local zone if None)."""
    return _aware(instant).astimezone(tz).date()


def day_key(instant: datetime, tz: tzinfo | None = None) -> str:
    """Return the day key of ``instant`` in ``tz`` (local zone if None)."""
    return local_date(instant, tz).isoformat()


def today_key(now: datetime | None = None, tz: tzinfo | None = None) -> str:
    """Return the day key for ``now`` (defaults to the current instant)."""
    return day_key(now or datetime.now(timezone.utc), tz)


def parse_key(key: str) -> date:
    """Parse a day key back into a date."""
    return date.fromisoformat(key)


def shift_key(key: str, days: int) -> str:
    """Move a day key by ``days`` calendar days (negative goes back)."""
    return (parse_key(key) + timedelta(days=days)).isoformat()
