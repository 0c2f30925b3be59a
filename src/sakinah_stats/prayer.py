"""Prayer-time countdown helpers.

Timings come from the Aladhan API as ``{"Fajr": "05:42", ...}``; values may
carry a zone suffix such as ``"05:42 (MYT)"``.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta

PRAYER_ORDER = ["Fajr", "Sunrise", "Dhuhr", "Asr", "Maghrib", "Isha"]

PRAYER_BM_NAMES = {
    "Fajr": "Subuh",
    "Sunrise": "Syuruk",
    "Dhuhr": "Zohor",
    "Asr": "Asar",
    "Maghrib": "Maghrib",
    "Isha": "Isyak",
}


def parse_prayer_time(value: str, day: date) -> datetime:
    """Parse 'HH:MM' (optionally followed by a zone label) on ``day``."""
    clean = value.strip().split(" ")[0]
    hours, minutes = (int(part) for part in clean.split(":")[:2])
    return datetime.combine(day, time(hours, minutes))


def format_countdown(seconds: float) -> str:
    """Format a duration as HH:MM:SS. Non-positive durations give 00:00:00."""
    if seconds <= 0:
        return "00:00:00"
    total = int(seconds)
    h, rem = divmod(total, 3600)
    m, s = divmod(rem, 60)
    return f"{h:02d}:{m:02d}:{s:02d}"


def next_prayer(timings: dict[str, str], now: datetime) -> dict:
    """Return the next prayer after ``now`` with its countdown.

    ``now`` is naive local wall-clock time. When every prayer has passed,
    the next one is tomorrow's Fajr.
    """
    today = now.date()
    for name in PRAYER_ORDER:
        at = parse_prayer_time(timings.get(name, "00:00"), today)
        if at > now:
            break
    else:
        name = "Fajr"
        at = parse_prayer_time(timings.get("Fajr", "05:00"), today + timedelta(days=1))

    return {
        "name": name,
        "name_bm": PRAYER_BM_NAMES[name],
        "at": at.strftime("%H:%M"),
        "countdown": format_countdown((at - now).total_seconds()),
    }
