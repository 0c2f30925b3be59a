"""Activity records as returned by the persistence backend."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime, time, timezone
from enum import Enum
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


@dataclass(frozen=True)
class ActivityRecord:
    id: str | int
    timestamp: datetime  # timezone-aware, UTC
    role: Role = Role.USER
    payload: dict[str, Any] = field(default_factory=dict, compare=False)

    @property
    def qualifies(self) -> bool:
        """Only user-authored records count toward activity statistics."""
        return self.role is Role.USER


def parse_timestamp(raw: str) -> datetime:
    """Parse an ISO-8601 timestamp. A trailing ``Z`` and naive values mean UTC."""
    text = raw.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _parse_logged_at(raw: str) -> datetime:
    # Mood logs carry a bare local date; anchor it at local midnight.
    day = datetime.fromisoformat(raw.strip()).date()
    return datetime.combine(day, time()).astimezone().astimezone(timezone.utc)


def record_from_row(row: dict[str, Any]) -> ActivityRecord:
    """Build an ActivityRecord from a persistence row.

    Journal and mood rows have no ``role`` column and are user-authored.
    Raises KeyError or ValueError when the row has no usable id or timestamp.
    """
    if "created_at" in row and row["created_at"]:
        timestamp = parse_timestamp(str(row["created_at"]))
    elif "logged_at" in row and row["logged_at"]:
        timestamp = _parse_logged_at(str(row["logged_at"]))
    else:
        raise KeyError("created_at")

    role = Role(row.get("role") or Role.USER.value)
    payload = {
        k: v for k, v in row.items() if k not in ("id", "created_at", "role")
    }
    return ActivityRecord(id=row["id"], timestamp=timestamp, role=role, payload=payload)


def records_from_rows(rows: list[dict[str, Any]]) -> list[ActivityRecord]:
    """Convert rows, skipping any that cannot be parsed."""
    records: list[ActivityRecord] = []
    for row in rows:
        try:
            records.append(record_from_row(row))
        except (KeyError, ValueError, TypeError) as exc:
            logger.warning("Skipping malformed row %r: %s", row.get("id"), exc)
    return records


def load_records(path: Path) -> list[ActivityRecord]:
    """Load records from a JSON array or JSON-lines export file.

    Malformed lines are skipped. Records are returned newest first.
    """
    text = path.read_text(encoding="utf-8")
    rows: list[dict[str, Any]] = []
    try:
        data = json.loads(text)
        if isinstance(data, list):
            rows = [r for r in data if isinstance(r, dict)]
        elif isinstance(data, dict):
            rows = [data]
    except json.JSONDecodeError:
        for line in text.splitlines():
            line = line.strip()
            if not line:
                continue
            try:
                entry = json.loads(line)
            except json.JSONDecodeError:
                continue
            if isinstance(entry, dict):
                rows.append(entry)

    records = records_from_rows(rows)
    records.sort(key=lambda r: r.timestamp, reverse=True)
    return records
