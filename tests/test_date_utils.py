"""Tests for year progress date math."""

from datetime import datetime, timedelta

import pytest

from yearwall.date_utils import (
    YearProgress,
    get_date_in_timezone,
    get_day_of_year,
    get_days_in_year,
    is_leap_year,
    year_progress,
)


class TestLeapYears:
    @pytest.mark.parametrize(
        "year,expected",
        [(2023, 365), (2024, 366), (1900, 365), (2000, 366), (2100, 365), (2400, 366)],
    )
    def test_days_in_year_follows_gregorian_rule(self, year, expected):
        assert get_days_in_year(year) == expected

    def test_days_in_year_matches_leap_predicate(self):
        for year in range(1890, 2110):
            assert (get_days_in_year(year) == 366) == is_leap_year(year)


class TestDayOfYear:
    def test_first_of_january_is_day_one(self):
        assert get_day_of_year(datetime(2024, 1, 1, 0, 0)) == 1
        assert get_day_of_year(datetime(2024, 1, 1, 23, 59)) == 1

    def test_mid_year_in_leap_year(self):
        assert get_day_of_year(datetime(2024, 6, 15, 14, 0)) == 167

    def test_last_day_of_year(self):
        assert get_day_of_year(datetime(2023, 12, 31, 8, 0)) == 365
        assert get_day_of_year(datetime(2024, 12, 31, 8, 0)) == 366


class TestTimezoneShift:
    def test_positive_offset_moves_clock_forward(self, fixed_now):
        assert get_date_in_timezone(2, fixed_now) == datetime(2024, 6, 15, 14, 0)

    def test_fractional_offset(self, fixed_now):
        assert get_date_in_timezone(-3.5, fixed_now) == datetime(2024, 6, 15, 8, 30)

    def test_offset_can_cross_the_year_boundary(self):
        progress = year_progress(2, datetime(2024, 12, 31, 23, 0))
        assert progress.year == 2025
        assert progress.month == 0
        assert progress.day == 1
        assert progress.day_of_year == 1
        assert progress.days_left == 364

    def test_defaults_to_the_clock(self):
        assert isinstance(get_date_in_timezone(0), datetime)


class TestYearProgress:
    def test_facts_for_fixed_date(self, fixed_now):
        progress = year_progress(2, fixed_now)

        assert progress.year == 2024
        assert progress.month == 5
        assert progress.day == 15
        assert progress.day_of_year == 167
        assert progress.days_in_year == 366
        assert progress.days_left == 199
        assert progress.percent_left == 54
        assert progress.percent_passed == 46

    def test_percentages_always_sum_to_100(self):
        for day_offset in range(0, 366):
            now = datetime(2024, 1, 1, 12, 0) + timedelta(days=day_offset)
            progress = YearProgress(now)
            assert progress.percent_left + progress.percent_passed == 100

    def test_last_day_has_nothing_left(self):
        progress = YearProgress(datetime(2023, 12, 31, 18, 0))
        assert progress.days_left == 0
        assert progress.percent_left == 0
        assert progress.percent_passed == 100
