"""Static calendar data.

This module provides the read-only tables the rest of the library is
built on:
    - calendar: per-year month lengths and New Year dates
    - names: month and weekday names in English and Nepali
"""

from __future__ import annotations

from sambat.data.calendar import (
    MAX_BS_YEAR,
    MIN_BS_YEAR,
    CalendarYear,
    calendar_years,
    days_in_month,
    days_in_year,
    get_calendar_year,
    is_leap_year,
    new_year_gregorian_date,
    supported_years,
)
from sambat.data.names import (
    DEFAULT_LANGUAGE,
    LanguageCode,
    MonthDescriptor,
    WeekdayDescriptor,
    get_month_names,
    get_weekday_names,
    month_descriptor,
)

__all__: list[str] = [
    "MIN_BS_YEAR",
    "MAX_BS_YEAR",
    "CalendarYear",
    "calendar_years",
    "days_in_month",
    "days_in_year",
    "get_calendar_year",
    "is_leap_year",
    "new_year_gregorian_date",
    "supported_years",
    "DEFAULT_LANGUAGE",
    "LanguageCode",
    "MonthDescriptor",
    "WeekdayDescriptor",
    "get_month_names",
    "get_weekday_names",
    "month_descriptor",
]
