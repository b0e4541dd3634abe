"""
Date utilities for year progress calculations

"Now" is modelled as UTC plus a fixed civil offset in hours. There are no
DST rules; an offset of 2 always means UTC+02:00.
"""

from datetime import datetime, timedelta, timezone

from yearwall.numbers import round_half_up


def utc_now():
    """Current UTC wall-clock time as a naive datetime"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def get_date_in_timezone(timezone_offset_hours, now=None):
    """Shift a UTC instant by a fractional-hour offset

    Args:
        timezone_offset_hours (float): Hours offset from UTC (e.g. 2, -3.5)
        now (datetime, optional): Naive UTC instant, defaults to the clock

    Returns:
        datetime: Naive local datetime for the offset
    """
    if now is None:
        now = utc_now()
    return now + timedelta(hours=timezone_offset_hours)


def get_day_of_year(date_time):
    """Whole days since midnight of the last day of the previous year

    January 1st is day 1 regardless of the time of day.
    """
    start = datetime(date_time.year - 1, 12, 31)
    return (date_time - start).days


def is_leap_year(year):
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def get_days_in_year(year):
    return 366 if is_leap_year(year) else 365


class YearProgress:
    """Date facts for one render: position of 'now' within its year"""

    def __init__(self, now):
        self.now = now
        self.year = now.year
        self.month = now.month - 1  # 0-based
        self.day = now.day
        self.day_of_year = get_day_of_year(now)
        self.days_in_year = get_days_in_year(self.year)
        self.days_left = self.days_in_year - self.day_of_year
        self.percent_left = round_half_up(self.days_left / self.days_in_year * 100)
        self.percent_passed = 100 - self.percent_left

    def __repr__(self):
        return (
            f"YearProgress({self.now:%Y-%m-%d %H:%M}, day {self.day_of_year}/"
            f"{self.days_in_year}, {self.percent_left}% left)"
        )


def year_progress(timezone_offset_hours, now=None):
    """Build YearProgress for the given offset

    Args:
        timezone_offset_hours (float): Hours offset from UTC
        now (datetime, optional): Naive UTC instant, defaults to the clock
    """
    return YearProgress(get_date_in_timezone(timezone_offset_hours, now))
