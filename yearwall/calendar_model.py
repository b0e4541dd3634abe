"""Pure calendar calculations for the full-year grid."""

import calendar
from collections import namedtuple
from datetime import date

PAST = "past"
TODAY = "today"
FUTURE = "future"

MonthGrid = namedtuple("MonthGrid", ["month", "days_in_month", "offset", "cells"])


def monday_first_offset(year, month):
    """Column of day 1 in a Monday-first week for a 0-based month"""
    return calendar.monthrange(year, month + 1)[0]


def build_month(year, month):
    """Cells for one 0-based month: leading None slots, then 1..days_in_month"""
    offset, days_in_month = calendar.monthrange(year, month + 1)
    cells = [None] * offset + list(range(1, days_in_month + 1))
    return MonthGrid(month, days_in_month, offset, cells)


def build_year(year):
    return [build_month(year, m) for m in range(12)]


def week_rows(cells):
    """Split month cells into rows of 7; the last row may be shorter"""
    return [cells[i:i + 7] for i in range(0, len(cells), 7)]


def get_day_state(month, day, current_month, current_day):
    if month < current_month:
        return PAST
    if month > current_month:
        return FUTURE
    if day < current_day:
        return PAST
    if day == current_day:
        return TODAY
    return FUTURE


def is_weekend(year, month, day):
    return date(year, month + 1, day).weekday() >= 5
