"""Group activity records into local calendar days."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Iterable

from sakinah_stats.daykey import day_key, parse_key, shift_key, today_key
from sakinah_stats.records import ActivityRecord

MONTHS: dict[str, list[str]] = {
    "en": [
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ],
    "bm": [
        "Januari", "Februari", "Mac", "April", "Mei", "Jun",
        "Julai", "Ogos", "September", "Oktober", "November", "Disember",
    ],
}

RELATIVE_LABELS: dict[str, tuple[str, str]] = {
    "en": ("Today", "Yesterday"),
    "bm": ("Hari Ini", "Semalam"),
}


@dataclass(frozen=True)
class DayBucket:
    day_key: str
    label: str
    records: tuple[ActivityRecord, ...]

    @property
    def count(self) -> int:
        return len(self.records)


def format_date(key: str, lang: str = "en") -> str:
    """Format a day key as e.g. '5 January 2026' (or '5 Januari 2026')."""
    d = parse_key(key)
    months = MONTHS.get(lang, MONTHS["en"])
    return f"{d.day} {months[d.month - 1]} {d.year}"


def day_label(key: str, current_key: str, lang: str = "en") -> str:
    """Label a day relative to ``current_key``: Today, Yesterday or a date."""
    today_label, yesterday_label = RELATIVE_LABELS.get(lang, RELATIVE_LABELS["en"])
    if key == current_key:
        return today_label
    if key == shift_key(current_key, -1):
        return yesterday_label
    return format_date(key, lang)


def group_by_day(
    records: Iterable[ActivityRecord],
    now: datetime | None = None,
    tz: tzinfo | None = None,
    lang: str = "en",
) -> list[DayBucket]:
    """Partition user-authored records into day buckets, newest day first.

    Records keep their input order inside a bucket. ``now`` only affects the
    labels, never the grouping.
    """
    grouped: dict[str, list[ActivityRecord]] = {}
    for record in records:
        if not record.qualifies:
            continue
        grouped.setdefault(day_key(record.timestamp, tz), []).append(record)

    if not grouped:
        return []

    current = today_key(now, tz)
    return [
        DayBucket(day_key=key, label=day_label(key, current, lang), records=tuple(grouped[key]))
        for key in sorted(grouped, reverse=True)
    ]


def active_day_keys(records: Iterable[ActivityRecord], tz: tzinfo | None = None) -> set[str]:
    """Return the set of day keys that have at least one user-authored record."""
    return {day_key(r.timestamp, tz) for r in records if r.qualifies}


def chat_timeline(
    messages: Iterable[ActivityRecord],
    now: datetime | None = None,
    tz: tzinfo | None = None,
    lang: str = "en",
) -> list[dict]:
    """Interleave day dividers into a chat history.

    Every role is kept. A divider is emitted before the first message of each
    new local day, in the order the messages arrive.
    """
    current = today_key(now, tz)
    items: list[dict] = []
    last_key: str | None = None
    for msg in messages:
        key = day_key(msg.timestamp, tz)
        if key != last_key:
            items.append({
                "type": "divider",
                "day_key": key,
                "label": day_label(key, current, lang),
                "key": f"div-{msg.id}",
            })
            last_key = key
        items.append({"type": "message", "message": msg, "key": msg.id})
    return items
