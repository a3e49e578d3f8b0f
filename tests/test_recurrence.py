"""
Tests for computing the next instance of a recurring reminder.
"""

from datetime import datetime

import pytest

from lifepulse.services.scheduling import next_occurrence


class TestNextOccurrence:
    """Next trigger time for each recurring pattern"""

    def test_daily_adds_one_day(self):
        assert next_occurrence(datetime(2024, 3, 5, 12, 30), "daily") == datetime(2024, 3, 6, 12, 30)

    def test_weekly_adds_seven_days(self):
        assert next_occurrence(datetime(2024, 3, 5, 8, 0), "weekly") == datetime(2024, 3, 12, 8, 0)

    def test_weekdays_moves_to_next_day_midweek(self):
        # Tuesday -> Wednesday
        assert next_occurrence(datetime(2024, 3, 5, 9, 0), "weekdays") == datetime(2024, 3, 6, 9, 0)

    def test_weekdays_skips_weekend_from_friday(self):
        # Friday -> Monday
        assert next_occurrence(datetime(2024, 3, 8, 9, 0), "weekdays") == datetime(2024, 3, 11, 9, 0)

    def test_weekdays_from_saturday_lands_on_monday(self):
        assert next_occurrence(datetime(2024, 3, 9, 9, 0), "weekdays") == datetime(2024, 3, 11, 9, 0)

    def test_weekdays_never_returns_weekend(self):
        start = datetime(2024, 3, 4, 7, 0)
        for offset in range(7):
            nxt = next_occurrence(start.replace(day=4 + offset), "weekdays")
            assert nxt.weekday() < 5

    def test_monthly_keeps_day_of_month(self):
        assert next_occurrence(datetime(2024, 3, 15, 10, 0), "monthly") == datetime(2024, 4, 15, 10, 0)

    def test_monthly_rolls_surplus_days_past_short_month(self):
        assert next_occurrence(datetime(2023, 1, 31, 10, 0), "monthly") == datetime(2023, 3, 3, 10, 0)
        assert next_occurrence(datetime(2024, 1, 31, 10, 0), "monthly") == datetime(2024, 3, 2, 10, 0)
        assert next_occurrence(datetime(2024, 3, 31, 10, 0), "monthly") == datetime(2024, 5, 1, 10, 0)

    def test_monthly_thirtieth(self):
        assert next_occurrence(datetime(2024, 1, 30, 10, 0), "monthly") == datetime(2024, 3, 1, 10, 0)
        assert next_occurrence(datetime(2024, 4, 30, 10, 0), "monthly") == datetime(2024, 5, 30, 10, 0)

    def test_monthly_rolls_over_year(self):
        assert next_occurrence(datetime(2024, 12, 10, 6, 0), "monthly") == datetime(2025, 1, 10, 6, 0)

    def test_unknown_pattern_is_rejected(self):
        with pytest.raises(ValueError):
            next_occurrence(datetime(2024, 3, 5), "fortnightly")
