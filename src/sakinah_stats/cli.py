"""CLI commands for sakinah-stats."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
from datetime import date, datetime
from pathlib import Path

from sakinah_stats.cache import CacheStore, SqliteCacheStore
from sakinah_stats.config import (
    get_cache_path,
    get_language,
    get_log_level,
    get_max_retries,
    get_quran_api_url,
)
from sakinah_stats.daily import ContentFetcher, DailyContentService, daily_hadith
from sakinah_stats.display import (
    print_daily,
    print_dashboard,
    print_days,
    print_mood,
    print_no_data_message,
    print_prayer,
)
from sakinah_stats.errors import UpstreamUnavailable
from sakinah_stats.grouping import group_by_day
from sakinah_stats.prayer import next_prayer
from sakinah_stats.quran import QuranClient
from sakinah_stats.records import ActivityRecord, load_records
from sakinah_stats.stats import summarize_activity, weekly_mood

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    parser = argparse.ArgumentParser(
        prog="sakinah-stats",
        description="Streaks, day summaries and daily content for Sakinah",
    )
    parser.add_argument("--lang", choices=["en", "bm"], default=None, help="Display language")
    subparsers = parser.add_subparsers(dest="command")
    dash_p = subparsers.add_parser("dashboard", help="Streak and activity summary")
    dash_p.add_argument("records", type=Path, help="JSON or JSONL export of records")
    days_p = subparsers.add_parser("days", help="Entries grouped by day")
    days_p.add_argument("records", type=Path, help="JSON or JSONL export of records")
    days_p.add_argument("--limit", type=int, default=14, help="Number of days to show")
    mood_p = subparsers.add_parser("mood", help="Mood over the last 7 days")
    mood_p.add_argument("records", type=Path, help="JSON or JSONL export of mood logs")
    today_p = subparsers.add_parser("today", help="Today's ayah and hadith")
    today_p.add_argument("--offline", action="store_true", help="Skip the ayah fetch")
    prayer_p = subparsers.add_parser("prayer", help="Countdown to the next prayer")
    prayer_p.add_argument("timings", type=Path, help="JSON file of prayer timings")
    return parser


def main() -> None:
    """Entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args()
    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")
    lang = args.lang or get_language()
    command = args.command or "today"

    if command == "dashboard":
        do_dashboard(load_records(args.records))
    elif command == "days":
        do_days(load_records(args.records), lang=lang, limit=args.limit)
    elif command == "mood":
        do_mood(load_records(args.records), lang=lang)
    elif command == "prayer":
        timings = json.loads(args.timings.read_text(encoding="utf-8"))
        do_prayer(timings, lang=lang)
    else:
        store = SqliteCacheStore(get_cache_path())
        try:
            fetcher = None if getattr(args, "offline", False) else QuranClient(get_quran_api_url())
            do_today(store, fetcher, lang=lang, max_retries=get_max_retries())
        finally:
            store.close()


def do_dashboard(records: list[ActivityRecord], today: date | None = None) -> dict:
    """Print and return the dashboard summary."""
    if not records:
        print_no_data_message()
        return {}
    summary = summarize_activity(records, today=today)
    print_dashboard(summary)
    return summary


def _preview(record: ActivityRecord, length: int = 40) -> str:
    text = str(record.payload.get("title") or record.payload.get("content") or "")
    if len(text) <= length:
        return text
    return text[:length].rstrip() + "…"


def do_days(
    records: list[ActivityRecord],
    lang: str = "en",
    limit: int = 14,
    now: datetime | None = None,
) -> list[dict]:
    """Print and return the most recent ``limit`` day buckets."""
    buckets = group_by_day(records, now=now, lang=lang)
    if not buckets:
        print_no_data_message()
        return []
    rows = [
        {
            "day_key": b.day_key,
            "label": b.label,
            "count": b.count,
            "preview": _preview(b.records[0]),
        }
        for b in buckets[:limit]
    ]
    print_days(rows)
    return rows


def do_mood(records: list[ActivityRecord], lang: str = "en", today: date | None = None) -> dict:
    """Print and return the weekly mood summary."""
    data = weekly_mood(records, today=today)
    data["lang"] = lang
    print_mood(data)
    return data


async def _load_ayah(service: DailyContentService, fetcher: ContentFetcher, today: date | None) -> dict:
    try:
        return await service.daily_ayah(today)
    finally:
        close = getattr(fetcher, "close", None)
        if close is not None:
            await close()


def do_today(
    store: CacheStore,
    fetcher: ContentFetcher | None,
    lang: str = "en",
    today: date | None = None,
    max_retries: int = 3,
) -> dict:
    """Print and return today's hadith and ayah.

    A failed ayah fetch is reported, not raised; the hadith needs no network.
    """
    result: dict = {
        "lang": lang,
        "hadith": daily_hadith(today).content,
        "ayah": None,
        "ayah_error": None,
    }
    if fetcher is not None:
        service = DailyContentService(store, fetcher, max_retries=max_retries)
        try:
            result["ayah"] = asyncio.run(_load_ayah(service, fetcher, today))
        except UpstreamUnavailable as e:
            logger.info("Ayah unavailable: %s", e)
            result["ayah_error"] = str(e)
    print_daily(result)
    return result


def do_prayer(timings: dict[str, str], lang: str = "en", now: datetime | None = None) -> dict:
    """Print and return the next prayer and its countdown."""
    data = next_prayer(timings, now or datetime.now())
    data["lang"] = lang
    print_prayer(data)
    return data

