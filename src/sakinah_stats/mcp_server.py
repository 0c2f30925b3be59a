"""MCP server for sakinah-stats.

Exposes daily content and activity summaries as MCP tools.
Run via: python3 -m sakinah_stats.mcp_server
"""
from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any

from mcp.server.fastmcp import FastMCP

from sakinah_stats.errors import UpstreamUnavailable

mcp = FastMCP(name="sakinah-stats")


def _get_store():
    from sakinah_stats.cache import SqliteCacheStore
    from sakinah_stats.config import get_cache_path
    return SqliteCacheStore(get_cache_path())


def _get_fetcher():
    from sakinah_stats.config import get_quran_api_url
    from sakinah_stats.quran import QuranClient
    return QuranClient(get_quran_api_url())


def _load(records_path: str) -> list | dict:
    from sakinah_stats.records import load_records
    path = Path(records_path)
    if not path.is_file():
        return {"error": f"Records file not found: {records_path}"}
    return load_records(path)


@mcp.tool()
async def get_daily_content() -> dict[str, Any]:
    """Get today's hadith and Quran ayah (ayah is cached for the day)."""
    from sakinah_stats.config import get_max_retries
    from sakinah_stats.daily import DailyContentService, daily_hadith

    result: dict[str, Any] = {"hadith": daily_hadith().content}
    store = _get_store()
    fetcher = _get_fetcher()
    try:
        service = DailyContentService(store, fetcher, max_retries=get_max_retries())
        result["ayah"] = await service.daily_ayah()
    except UpstreamUnavailable as e:
        result["ayah"] = None
        result["error"] = str(e)
        result["retryable"] = True
    finally:
        await fetcher.close()
        store.close()
    return result


@mcp.tool()
def get_activity_summary(records_path: str) -> dict[str, Any]:
    """Get streak, days active and entry counts from a records export file."""
    from sakinah_stats.grouping import group_by_day
    from sakinah_stats.stats import summarize_activity

    records = _load(records_path)
    if isinstance(records, dict):
        return records
    summary = summarize_activity(records)
    summary["recent_days"] = [
        {"date": b.day_key, "label": b.label, "count": b.count}
        for b in group_by_day(records)[:7]
    ]
    return summary


@mcp.tool()
def get_weekly_mood(records_path: str) -> dict[str, Any]:
    """Get mood per day for the last week, its average and a matching verse."""
    from sakinah_stats.stats import weekly_mood

    records = _load(records_path)
    if isinstance(records, dict):
        return records
    return weekly_mood(records)


@mcp.tool()
def get_next_prayer(timings: dict[str, str]) -> dict[str, Any]:
    """Get the next prayer and countdown from a timings dict ({"Fajr": "05:42", ...})."""
    from sakinah_stats.prayer import next_prayer

    try:
        return next_prayer(timings, datetime.now())
    except ValueError as e:
        return {"error": f"Invalid timings: {e}"}


def main() -> None:
    mcp.run()


if __name__ == "__main__":
    main()
