"""Tests for the streak calculator."""

from datetime import date

from sakinah_stats.streaks import (
    calculate_streak,
    get_streak_from_dates,
    longest_streak,
    streak_info,
)

TODAY = "2026-01-05"


class TestGetStreakFromDates:
    def test_consecutive_five_days(self):
        dates = {"2026-01-01", "2026-01-02", "2026-01-03", "2026-01-04", "2026-01-05"}
        assert get_streak_from_dates(dates, "2026-01-05") == 5

    def test_reference_not_in_dates(self):
        assert get_streak_from_dates({"2026-01-01", "2026-01-02"}, "2026-01-05") == 0

    def test_gap_breaks_streak(self):
        dates = {"2026-01-01", "2026-01-02", "2026-01-04", "2026-01-05"}
        assert get_streak_from_dates(dates, "2026-01-05") == 2

    def test_accepts_date_reference(self):
        assert get_streak_from_dates({"2026-01-05"}, date(2026, 1, 5)) == 1

    def test_empty_dates(self):
        assert get_streak_from_dates(set(), "2026-01-01") == 0


class TestCalculateStreak:
    def test_today_yesterday_and_before(self):
        assert calculate_streak({"2026-01-05", "2026-01-04", "2026-01-03"}, TODAY) == 3

    def test_today_missing_yesterday_present(self):
        assert calculate_streak({"2026-01-04", "2026-01-03"}, TODAY) == 2

    def test_grace_covers_only_today(self):
        assert calculate_streak({"2026-01-03"}, TODAY) == 0

    def test_today_only(self):
        assert calculate_streak({"2026-01-05"}, TODAY) == 1

    def test_empty(self):
        assert calculate_streak(set(), TODAY) == 0

    def test_gap_before_yesterday_breaks(self):
        dates = {"2026-01-05", "2026-01-04", "2026-01-02", "2026-01-01"}
        assert calculate_streak(dates, TODAY) == 2

    def test_across_month_boundary(self):
        dates = {"2026-03-01", "2026-02-28", "2026-02-27"}
        assert calculate_streak(dates, "2026-03-01") == 3

    def test_future_keys_ignored(self):
        assert calculate_streak({"2026-01-06", "2026-01-05"}, TODAY) == 1

    def test_never_exceeds_distinct_keys(self):
        sets = [
            {"2026-01-05"},
            {"2026-01-04"},
            {"2026-01-05", "2026-01-04", "2025-12-31"},
            {f"2026-01-{d:02d}" for d in range(1, 6)},
        ]
        for keys in sets:
            assert 0 <= calculate_streak(keys, TODAY) <= len(keys)

    def test_accepts_date_today(self):
        assert calculate_streak({"2026-01-04"}, date(2026, 1, 5)) == 1


class TestLongestStreak:
    def test_empty(self):
        assert longest_streak(set()) == 0

    def test_picks_longest_run(self):
        dates = {
            "2026-01-01", "2026-01-02", "2026-01-03", "2026-01-04",
            "2026-01-10", "2026-01-11",
        }
        assert longest_streak(dates) == 4

    def test_single_day(self):
        assert longest_streak({"2026-01-01"}) == 1


class TestStreakInfo:
    def test_empty(self):
        info = streak_info(set(), TODAY)
        assert info.current_streak == 0
        assert info.longest_streak == 0
        assert info.last_active_date is None
        assert info.is_active_today is False

    def test_active_today(self):
        info = streak_info({"2026-01-04", "2026-01-05"}, TODAY)
        assert info.current_streak == 2
        assert info.is_active_today is True
        assert info.last_active_date == "2026-01-05"

    def test_grace_day_not_active_today(self):
        info = streak_info({"2026-01-03", "2026-01-04"}, TODAY)
        assert info.current_streak == 2
        assert info.is_active_today is False

    def test_longest_kept_after_break(self):
        dates = {"2026-01-01", "2026-01-02", "2026-01-03", "2026-01-05"}
        info = streak_info(dates, TODAY)
        assert info.current_streak == 1
        assert info.longest_streak == 3
