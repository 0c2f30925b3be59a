"""Tests for activity record parsing."""

import json
from datetime import datetime, timezone

import pytest

from sakinah_stats.records import (
    ActivityRecord,
    Role,
    load_records,
    parse_timestamp,
    record_from_row,
    records_from_rows,
)


class TestParseTimestamp:
    def test_z_suffix(self):
        ts = parse_timestamp("2026-01-05T08:00:00Z")
        assert ts == datetime(2026, 1, 5, 8, 0, tzinfo=timezone.utc)

    def test_offset_converted_to_utc(self):
        ts = parse_timestamp("2026-01-05T08:00:00+08:00")
        assert ts == datetime(2026, 1, 5, 0, 0, tzinfo=timezone.utc)

    def test_naive_is_utc(self):
        ts = parse_timestamp("2026-01-05T08:00:00")
        assert ts.tzinfo is not None
        assert ts.hour == 8


class TestRecordFromRow:
    def test_chat_message(self):
        row = {"id": 7, "role": "assistant", "content": "Salam", "created_at": "2026-01-05T08:00:00Z"}
        record = record_from_row(row)
        assert record.id == 7
        assert record.role is Role.ASSISTANT
        assert record.payload == {"content": "Salam"}
        assert not record.qualifies

    def test_journal_row_defaults_to_user(self):
        row = {"id": "a1", "title": "Hari ini", "mood": 4, "created_at": "2026-01-05T08:00:00Z"}
        record = record_from_row(row)
        assert record.role is Role.USER
        assert record.qualifies
        assert record.payload["mood"] == 4

    def test_mood_log_uses_logged_at(self):
        record = record_from_row({"id": 1, "mood": 3, "logged_at": "2026-01-05"})
        assert record.payload["logged_at"] == "2026-01-05"
        assert record.timestamp.tzinfo is not None

    def test_missing_timestamp_raises(self):
        with pytest.raises(KeyError):
            record_from_row({"id": 1})

    def test_unknown_role_raises(self):
        with pytest.raises(ValueError):
            record_from_row({"id": 1, "role": "robot", "created_at": "2026-01-05T08:00:00Z"})

    def test_records_are_frozen(self):
        record = ActivityRecord(id=1, timestamp=datetime(2026, 1, 5, tzinfo=timezone.utc))
        with pytest.raises(AttributeError):
            record.id = 2  # type: ignore[misc]


class TestRecordsFromRows:
    def test_skips_malformed(self):
        rows = [
            {"id": 1, "created_at": "2026-01-05T08:00:00Z"},
            {"id": 2, "created_at": "not a date"},
            {"id": 3},
        ]
        assert [r.id for r in records_from_rows(rows)] == [1]


class TestLoadRecords:
    def test_json_array_sorted_newest_first(self, tmp_path):
        path = tmp_path / "records.json"
        path.write_text(json.dumps([
            {"id": 1, "created_at": "2026-01-04T08:00:00Z"},
            {"id": 2, "created_at": "2026-01-05T08:00:00Z"},
        ]), encoding="utf-8")
        assert [r.id for r in load_records(path)] == [2, 1]

    def test_jsonl_skips_bad_lines(self, tmp_path):
        path = tmp_path / "records.jsonl"
        path.write_text(
            '{"id": 1, "created_at": "2026-01-04T08:00:00Z"}\n'
            "not json\n"
            "\n"
            '{"id": 2, "created_at": "2026-01-05T08:00:00Z"}\n',
            encoding="utf-8",
        )
        assert [r.id for r in load_records(path)] == [2, 1]
