"""Dashboard and mood summaries.

Pure functions over lists of ActivityRecord. No I/O.
"""

from __future__ import annotations

from datetime import date, tzinfo
from typing import Iterable

from sakinah_stats.content import mood_band, mood_verse
from sakinah_stats.daykey import day_key, shift_key, today_key
from sakinah_stats.grouping import active_day_keys
from sakinah_stats.records import ActivityRecord, Role
from sakinah_stats.streaks import streak_info


def _today(today: date | None, tz: tzinfo | None) -> str:
    return today.isoformat() if today else today_key(tz=tz)


def last_n_days(current_key: str, n: int = 7) -> list[str]:
    """Return the ``n`` day keys ending at ``current_key``, oldest first."""
    return [shift_key(current_key, -i) for i in range(n - 1, -1, -1)]


def summarize_activity(
    records: list[ActivityRecord],
    today: date | None = None,
    tz: tzinfo | None = None,
) -> dict:
    """Aggregate records into the dashboard stats dict."""
    current = _today(today, tz)
    qualifying = [r for r in records if r.qualifies]
    keys = active_day_keys(qualifying, tz)
    info = streak_info(keys, current)

    first_entry = min((r.timestamp for r in qualifying), default=None)

    return {
        "total_entries": len(qualifying),
        "streak": info.current_streak,
        "longest_streak": info.longest_streak,
        "days_active": len(keys),
        "is_active_today": info.is_active_today,
        "last_active_date": info.last_active_date,
        "first_entry": first_entry.isoformat() if first_entry else None,
        "total_ai_replies": sum(1 for r in records if r.role is Role.ASSISTANT),
    }


def _mood_of(record: ActivityRecord) -> int | None:
    mood = record.payload.get("mood")
    if isinstance(mood, bool) or not isinstance(mood, int):
        return None
    return mood if 1 <= mood <= 5 else None


def weekly_mood(
    records: Iterable[ActivityRecord],
    today: date | None = None,
    tz: tzinfo | None = None,
    days: int = 7,
) -> dict:
    """Mood per day for the last ``days`` days plus the average and its verse.

    When a day has several logs, the most recent one wins.
    """
    current = _today(today, tz)
    window = last_n_days(current, days)
    wanted = set(window)

    latest: dict[str, ActivityRecord] = {}
    for record in records:
        if not record.qualifies or _mood_of(record) is None:
            continue
        key = record.payload.get("logged_at") or day_key(record.timestamp, tz)
        if key not in wanted:
            continue
        held = latest.get(key)
        if held is None or record.timestamp > held.timestamp:
            latest[key] = record

    per_day = [
        {"date": key, "mood": _mood_of(latest[key]) if key in latest else None}
        for key in window
    ]
    logged = [d["mood"] for d in per_day if d["mood"] is not None]
    average = round(sum(logged) / len(logged), 1) if logged else None

    return {
        "days": per_day,
        "today": per_day[-1]["mood"] if per_day else None,
        "logged_days": len(logged),
        "average": average,
        "band": mood_band(average) if average is not None else None,
        "verse": mood_verse(average) if average is not None else None,
    }
