"""Device-local key-value cache stores.

Entries are best effort: any of them may vanish at any time, so callers must
treat a miss as the normal case.
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

DEFAULT_CACHE_PATH = Path.home() / ".sakinah" / "cache.db"


class CacheStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...

    def keys(self) -> list[str]: ...


class MemoryCacheStore:
    """In-process store, used in tests and as a throwaway cache."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def remove(self, key: str) -> None:
        self.data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self.data)


class SqliteCacheStore:
    """SQLite-backed store with WAL mode. Survives process restarts."""

    def __init__(self, db_path: Path | None = None) -> None:
        self.db_path = db_path or DEFAULT_CACHE_PATH
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.conn = sqlite3.connect(str(self.db_path))
        self.conn.row_factory = sqlite3.Row
        self.conn.execute("PRAGMA journal_mode=WAL")
        self.init_db()

    def init_db(self) -> None:
        """Create the cache table if it does not exist."""
        self.conn.executescript("""
            CREATE TABLE IF NOT EXISTS cache (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL
            );
        """)
        self.conn.commit()

    def get(self, key: str) -> str | None:
        row = self.conn.execute(
            "SELECT value FROM cache WHERE key = ?", (key,)
        ).fetchone()
        return row["value"] if row else None

    def set(self, key: str, value: str) -> None:
        """Set a value (upsert, last writer wins)."""
        self.conn.execute(
            "INSERT INTO cache (key, value) VALUES (?, ?) "
            "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
            (key, value),
        )
        self.conn.commit()

    def remove(self, key: str) -> None:
        self.conn.execute("DELETE FROM cache WHERE key = ?", (key,))
        self.conn.commit()
        logger.debug("Removed cache entry %s", key)

    def keys(self) -> list[str]:
        rows = self.conn.execute("SELECT key FROM cache ORDER BY key").fetchall()
        return [row["key"] for row in rows]

    def close(self) -> None:
        """Close the database connection."""
        self.conn.close()
