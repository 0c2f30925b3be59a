"""Daily content: static picks and network-backed picks with a day-scoped cache.

Network-backed content (the daily ayah) is cached under
``sakinah_<type>_<ordinal>``. Entries for any other ordinal are purged before
each lookup, so at most one entry per content type survives across days.
"""

from __future__ import annotations

import asyncio
import json
import logging
from datetime import date
from typing import Any, Protocol

from sakinah_stats.cache import CacheStore
from sakinah_stats.content import HADITH_COLLECTION, ISLAMIC_QUOTES
from sakinah_stats.errors import CacheCorrupt, UpstreamUnavailable
from sakinah_stats.picker import DailyPick, RotationPeriod, daily_pick, day_ordinal
from sakinah_stats.quran import TOTAL_AYAHS

logger = logging.getLogger(__name__)


class ContentFetcher(Protocol):
    async def fetch(self, key: int) -> dict[str, Any]: ...


def cache_prefix(content_type: str) -> str:
    return f"sakinah_{content_type}_"


def cache_key(content_type: str, ordinal: int) -> str:
    return f"{cache_prefix(content_type)}{ordinal}"


def daily_hadith(today: date | None = None) -> DailyPick[dict[str, str]]:
    """Today's hadith, rotating by day of year."""
    return daily_pick(cache_prefix("hadith"), HADITH_COLLECTION, RotationPeriod.YEAR, today)


def daily_quote(today: date | None = None) -> DailyPick[dict[str, str]]:
    """Today's sign-in quote, rotating by weekday."""
    return daily_pick(cache_prefix("quote"), ISLAMIC_QUOTES, RotationPeriod.WEEK, today)


class DailyContentService:
    """Serves network-backed daily content through a CacheStore.

    Failures are never cached. Concurrent requests for the same key share one
    fetch.
    """

    def __init__(
        self,
        store: CacheStore,
        fetcher: ContentFetcher,
        max_retries: int = 3,
        backoff_base: float = 1.0,
    ):
        self.store = store
        self.fetcher = fetcher
        self.max_retries = max(1, max_retries)
        self.backoff_base = backoff_base
        self._inflight: dict[str, asyncio.Task] = {}
        self._current: dict[str, int] = {}

    def purge_stale(self, content_type: str, ordinal: int) -> list[str]:
        """Remove cached entries of ``content_type`` for any other ordinal."""
        prefix = cache_prefix(content_type)
        keep = cache_key(content_type, ordinal)
        removed = [k for k in self.store.keys() if k.startswith(prefix) and k != keep]
        for key in removed:
            self.store.remove(key)
        if removed:
            logger.debug("Purged stale %s entries: %s", content_type, removed)
        return removed

    def _read_cached(self, key: str) -> dict[str, Any] | None:
        raw = self.store.get(key)
        if raw is None:
            return None
        try:
            value = json.loads(raw)
        except (json.JSONDecodeError, TypeError) as e:
            raise CacheCorrupt(key) from e
        if not isinstance(value, dict):
            raise CacheCorrupt(key)
        return value

    def cached(self, key: str) -> dict[str, Any] | None:
        """Return the cached entry, discarding it if it cannot be decoded."""
        try:
            return self._read_cached(key)
        except CacheCorrupt as e:
            logger.warning("%s; discarding", e)
            self.store.remove(key)
            return None

    async def get(self, content_type: str, ordinal: int, fetch_key: int | None = None) -> dict[str, Any]:
        """Return the content for ``(content_type, ordinal)``.

        ``fetch_key`` is passed to the fetcher (defaults to ``ordinal``).
        Raises UpstreamUnavailable when every fetch attempt fails.
        """
        key = cache_key(content_type, ordinal)
        self._current[content_type] = ordinal
        self.purge_stale(content_type, ordinal)

        cached = self.cached(key)
        if cached is not None:
            return cached

        task = self._inflight.get(key)
        if task is None:
            task = asyncio.ensure_future(
                self._fetch_and_store(content_type, ordinal, ordinal if fetch_key is None else fetch_key)
            )
            self._inflight[key] = task
            task.add_done_callback(lambda t: self._forget(key, t))
        # A cancelled caller must not cancel the fetch other callers share.
        return await asyncio.shield(task)

    def _forget(self, key: str, task: asyncio.Task) -> None:
        if self._inflight.get(key) is task:
            del self._inflight[key]
        if not task.cancelled():
            task.exception()  # mark retrieved; waiters re-raise it themselves

    async def _fetch_and_store(self, content_type: str, ordinal: int, fetch_key: int) -> dict[str, Any]:
        item = await self._fetch_with_retry(fetch_key)
        # The day may have rolled over while the fetch was running.
        if self._current.get(content_type, ordinal) != ordinal:
            logger.debug("Not caching stale %s for ordinal %d", content_type, ordinal)
            return item
        self.store.set(cache_key(content_type, ordinal), json.dumps(item, ensure_ascii=False))
        return item

    async def _fetch_with_retry(self, fetch_key: int) -> dict[str, Any]:
        last_error: UpstreamUnavailable | None = None
        for attempt in range(self.max_retries):
            try:
                return await self.fetcher.fetch(fetch_key)
            except UpstreamUnavailable as e:
                last_error = e
                logger.warning(
                    "Fetch of %d failed (attempt %d/%d): %s",
                    fetch_key, attempt + 1, self.max_retries, e,
                )
            if attempt < self.max_retries - 1:
                await asyncio.sleep(self.backoff_base * 2 ** attempt)
        raise last_error or UpstreamUnavailable("No fetch attempted")

    def in_flight(self, content_type: str, ordinal: int) -> bool:
        return cache_key(content_type, ordinal) in self._inflight

    async def daily_ayah(self, today: date | None = None) -> dict[str, Any]:
        """Today's ayah, rotating through all 6236 verses by day of year."""
        ordinal = day_ordinal(today or date.today(), RotationPeriod.YEAR)
        return await self.get("ayah", ordinal, fetch_key=ordinal % TOTAL_AYAHS + 1)
