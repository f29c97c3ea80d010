"""Puzzles about weekdays in the Gregorian calendar."""

from __future__ import annotations

import calendar
import datetime

_WEEKDAY_NAMES = ("月曜日", "火曜日", "水曜日", "木曜日", "金曜日", "土曜日", "日曜日")
_TARGET_SUM = 66
_MIN_DAYS = 30


def tuesday_day_sum(year: int, month: int) -> int:
    """Return the sum of the day numbers of the Tuesdays in the given month."""
    if not 1 <= month <= 12:
        raise ValueError("month must lie between 1 and 12")
    days_in_month = calendar.monthrange(year, month)[1]
    return sum(
        day
        for day in range(1, days_in_month + 1)
        if datetime.date(year, month, day).weekday() == calendar.TUESDAY
    )


def matching_months(start_year: int = 1800, end_year: int = 2024) -> list[tuple[int, int]]:
    """Return the months from January ``start_year`` up to January ``end_year``, exclusive,
    with at least 30 days whose Tuesdays' day numbers sum to 66."""
    return [
        (year, month)
        for year in range(start_year, end_year)
        for month in range(1, 13)
        if calendar.monthrange(year, month)[1] >= _MIN_DAYS
        and tuesday_day_sum(year, month) == _TARGET_SUM
    ]


def weekday_of_thirtieth(start_year: int = 1800, end_year: int = 2024) -> str | None:
    """Return the weekday name shared by the 30th of every matching month.

    Returns None when no month matches; raises ValueError if the months disagree.
    """
    names = {
        _WEEKDAY_NAMES[datetime.date(year, month, 30).weekday()]
        for year, month in matching_months(start_year, end_year)
    }
    if not names:
        return None
    if len(names) > 1:
        raise ValueError("the matching months fall on different weekdays")
    return names.pop()


def leap_years_starting_tuesday(start_year: int = 2000, span: int = 100) -> list[int]:
    """Return the leap years in [start_year, start_year + span] that begin on a Tuesday."""
    return [
        year
        for year in range(start_year, start_year + span + 1)
        if calendar.isleap(year) and datetime.date(year, 1, 1).weekday() == calendar.TUESDAY
    ]


def years_until_tuesday_start(year: int, span: int = 100) -> int | None:
    """Return how many years after ``year`` the next year beginning on a Tuesday comes.

    Only the next ``span`` years are searched; None is returned if none qualifies.
    """
    for offset in range(1, span + 1):
        if datetime.date(year + offset, 1, 1).weekday() == calendar.TUESDAY:
            return offset
    return None