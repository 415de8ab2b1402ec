"""New Year resolution for Gregorian dates.

Finds which BS year a Gregorian date falls in by walking the New Year
table. This module is not part of the public API.
"""

from __future__ import annotations

from datetime import date
from typing import NamedTuple

from sambat._internal.calendar import add_days_to_gregorian
from sambat.data.calendar import MAX_BS_YEAR, MIN_BS_YEAR, calendar_years
from sambat.errors import CalendarRangeError


class NewYearInfo(NamedTuple):
    """The BS year containing a Gregorian date.

    Attributes:
        new_year_date: Gregorian date of 1 Baisakh of bs_year.
        bs_year: The BS year.
    """

    new_year_date: date
    bs_year: int


def get_new_year_date_info(ad_date: date) -> NewYearInfo:
    """Return the BS year a Gregorian date falls in, with its New Year date.

    The table is scanned in increasing BS year order for the year whose
    New Year is on or before ad_date and whose successor's New Year is
    after it. The last tabulated year ends the day before its New Year
    plus its length.

    Args:
        ad_date: The Gregorian date.

    Returns:
        NewYearInfo for the containing BS year.

    Raises:
        CalendarRangeError: If ad_date is outside the tabulated range.

    Examples:
        >>> get_new_year_date_info(date(2020, 4, 12))
        NewYearInfo(new_year_date=datetime.date(2019, 4, 14), bs_year=2076)
        >>> get_new_year_date_info(date(2020, 4, 13))
        NewYearInfo(new_year_date=datetime.date(2020, 4, 13), bs_year=2077)
    """
    previous = None
    for year in calendar_years():
        if previous is not None and previous.new_year <= ad_date < year.new_year:
            return NewYearInfo(previous.new_year, previous.bs_year)
        previous = year

    if previous is not None:
        end = add_days_to_gregorian(previous.new_year, previous.total_days)
        if previous.new_year <= ad_date < end:
            return NewYearInfo(previous.new_year, previous.bs_year)

    raise CalendarRangeError(
        f"{ad_date.isoformat()} is outside the supported range of BS years "
        f"{MIN_BS_YEAR}-{MAX_BS_YEAR}"
    )


__all__ = [
    "NewYearInfo",
    "get_new_year_date_info",
]
