"""Tests for grouping records into local days."""

from datetime import datetime, timedelta, timezone

from sakinah_stats.grouping import (
    active_day_keys,
    chat_timeline,
    day_label,
    format_date,
    group_by_day,
)
from sakinah_stats.records import ActivityRecord, Role

MYT = timezone(timedelta(hours=8))
# Tuesday 2026-01-06, noon in Kuala Lumpur
NOW = datetime(2026, 1, 6, 12, 0, tzinfo=MYT)


def _rec(id_, year, month, day, hour, role=Role.USER):
    return ActivityRecord(id=id_, timestamp=datetime(year, month, day, hour, tzinfo=MYT), role=role)


class TestDayLabel:
    def test_today(self):
        assert day_label("2026-01-06", "2026-01-06") == "Today"

    def test_yesterday(self):
        assert day_label("2026-01-05", "2026-01-06") == "Yesterday"

    def test_yesterday_across_year(self):
        assert day_label("2025-12-31", "2026-01-01") == "Yesterday"

    def test_absolute_date(self):
        assert day_label("2026-01-02", "2026-01-06") == "2 January 2026"

    def test_malay_labels(self):
        assert day_label("2026-01-06", "2026-01-06", lang="bm") == "Hari Ini"
        assert day_label("2026-01-05", "2026-01-06", lang="bm") == "Semalam"
        assert day_label("2026-08-02", "2026-10-06", lang="bm") == "2 Ogos 2026"

    def test_unknown_language_falls_back_to_english(self):
        assert format_date("2026-03-09", lang="xx") == "9 March 2026"


class TestGroupByDay:
    def test_empty_input(self):
        assert group_by_day([], now=NOW, tz=MYT) == []

    def test_mon_mon_tue_scenario(self):
        records = [
            _rec("tue", 2026, 1, 6, 10),
            _rec("mon-pm", 2026, 1, 5, 20),
            _rec("mon-am", 2026, 1, 5, 9),
        ]
        buckets = group_by_day(records, now=NOW, tz=MYT)
        assert [b.day_key for b in buckets] == ["2026-01-06", "2026-01-05"]
        assert [b.count for b in buckets] == [1, 2]
        assert [b.label for b in buckets] == ["Today", "Yesterday"]

    def test_input_order_kept_within_bucket(self):
        records = [_rec("b", 2026, 1, 5, 20), _rec("a", 2026, 1, 5, 9)]
        (bucket,) = group_by_day(records, now=NOW, tz=MYT)
        assert [r.id for r in bucket.records] == ["b", "a"]

    def test_buckets_sorted_descending_for_unsorted_input(self):
        records = [
            _rec(1, 2026, 1, 2, 9),
            _rec(2, 2026, 1, 6, 9),
            _rec(3, 2025, 12, 30, 9),
            _rec(4, 2026, 1, 4, 9),
        ]
        keys = [b.day_key for b in group_by_day(records, now=NOW, tz=MYT)]
        assert keys == sorted(keys, reverse=True)
        assert len(keys) == len(set(keys))

    def test_only_user_records_counted(self):
        records = [
            _rec(1, 2026, 1, 6, 9),
            _rec(2, 2026, 1, 6, 9, role=Role.ASSISTANT),
            _rec(3, 2026, 1, 5, 9, role=Role.SYSTEM),
        ]
        buckets = group_by_day(records, now=NOW, tz=MYT)
        assert sum(b.count for b in buckets) == 1
        assert [b.day_key for b in buckets] == ["2026-01-06"]

    def test_completeness(self):
        records = [_rec(i, 2026, 1, 1 + i % 5, i % 24) for i in range(40)]
        buckets = group_by_day(records, now=NOW, tz=MYT)
        assert sum(b.count for b in buckets) == 40

    def test_grouping_independent_of_now(self):
        records = [_rec(1, 2026, 1, 5, 9), _rec(2, 2026, 1, 4, 9)]
        later = NOW + timedelta(days=30)
        early = [(b.day_key, b.count) for b in group_by_day(records, now=NOW, tz=MYT)]
        late = [(b.day_key, b.count) for b in group_by_day(records, now=later, tz=MYT)]
        assert early == late


class TestActiveDayKeys:
    def test_distinct_user_days(self):
        records = [
            _rec(1, 2026, 1, 5, 9),
            _rec(2, 2026, 1, 5, 22),
            _rec(3, 2026, 1, 4, 9, role=Role.ASSISTANT),
        ]
        assert active_day_keys(records, MYT) == {"2026-01-05"}


class TestChatTimeline:
    def test_dividers_on_day_change(self):
        messages = [
            _rec(1, 2026, 1, 5, 9),
            _rec(2, 2026, 1, 5, 9, role=Role.ASSISTANT),
            _rec(3, 2026, 1, 6, 8),
        ]
        items = chat_timeline(messages, now=NOW, tz=MYT)
        assert [i["type"] for i in items] == ["divider", "message", "message", "divider", "message"]
        assert items[0]["label"] == "Yesterday"
        assert items[3]["label"] == "Today"
        assert items[3]["key"] == "div-3"

    def test_empty(self):
        assert chat_timeline([], now=NOW, tz=MYT) == []
