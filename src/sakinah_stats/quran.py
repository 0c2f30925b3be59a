"""Quran verse client for api.alquran.cloud."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

import aiohttp

from sakinah_stats.errors import UpstreamUnavailable

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.alquran.cloud/v1"
TOTAL_AYAHS = 6236
ARABIC_EDITION = "quran-uthmani"
MALAY_EDITION = "ms.basmeih"


def build_ayah(arabic: dict[str, Any], malay: dict[str, Any]) -> dict[str, Any]:
    """Merge the Arabic and Malay edition payloads into one verse dict."""
    surah = arabic["surah"]
    return {
        "arabic": arabic["text"],
        "malay": malay["text"],
        "surah_name_en": surah["englishName"],
        "surah_name_ar": surah["name"],
        "surah_number": surah["number"],
        "number_in_surah": arabic["numberInSurah"],
        "reference": f"Surah {surah['englishName']} ({surah['number']}:{arabic['numberInSurah']})",
    }


class QuranClient:
    """Fetches a single ayah in Arabic and Malay."""

    def __init__(self, base_url: str = DEFAULT_API_URL, timeout: int = 15):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create HTTP session."""
        if self.session is None or self.session.closed:
            self.session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout)
            )
        return self.session

    async def _get_edition(self, number: int, edition: str) -> dict[str, Any]:
        url = f"{self.base_url}/ayah/{number}/{edition}"
        session = await self._get_session()
        try:
            async with session.get(url) as response:
                if response.status != 200:
                    raise UpstreamUnavailable(
                        f"Quran API returned HTTP {response.status} for {edition}",
                        status=response.status,
                    )
                body = await response.json()
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            raise UpstreamUnavailable(f"Quran API request failed: {e}") from e

        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, dict):
            raise UpstreamUnavailable("Quran API returned no data")
        return data

    async def fetch(self, key: int) -> dict[str, Any]:
        """Fetch ayah number ``key`` (1..6236)."""
        logger.debug("Fetching ayah %d", key)
        arabic, malay = await asyncio.gather(
            self._get_edition(key, ARABIC_EDITION),
            self._get_edition(key, MALAY_EDITION),
        )
        try:
            return build_ayah(arabic, malay)
        except (KeyError, TypeError) as e:
            raise UpstreamUnavailable(f"Unexpected Quran API payload: {e}") from e

    async def close(self) -> None:
        if self.session and not self.session.closed:
            await self.session.close()
