"""Day arithmetic for Sambat.

This module provides internal functions for counting and shifting days,
including JDN (Julian Day Number) conversions for the proleptic
Gregorian calendar and day offsets within a BS year.

JDN 0 = 24 November 4714 BCE (proleptic Gregorian), JDN 2451545 = 2000-01-01

This module is not part of the public API.
"""

from __future__ import annotations

from datetime import date

from sambat._internal.constants import DAYS_IN_A_WEEK, JDN_SUNDAY_OFFSET
from sambat.data.calendar import days_in_month


def ymd_to_jdn(year: int, month: int, day: int) -> int:
    """Convert a proleptic Gregorian year, month, day to a Julian Day Number.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        The JDN.

    Examples:
        >>> ymd_to_jdn(2000, 1, 1)
        2451545
    """
    # Shift the year to start in March so the leap day is the last day
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return (
        day
        + (153 * m + 2) // 5
        + 365 * y
        + y // 4
        - y // 100
        + y // 400
        - 32045
    )


def jdn_to_ymd(jdn: int) -> tuple[int, int, int]:
    """Convert a Julian Day Number to proleptic Gregorian year, month, day.

    Args:
        jdn: The Julian Day Number.

    Returns:
        Tuple of (year, month, day).
    """
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - 146097 * b // 4
    d = (4 * c + 3) // 1461
    e = c - 1461 * d // 4
    m = (5 * e + 2) // 153

    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + m // 10
    return (year, month, day)


def jdn_to_day_of_week(jdn: int) -> int:
    """Convert a JDN to day of week (Sunday=0, Saturday=6)."""
    return (jdn + JDN_SUNDAY_OFFSET) % DAYS_IN_A_WEEK


def day_of_week(ad_date: date) -> int:
    """Return the day of week of a Gregorian date (Sunday=0, Saturday=6).

    Examples:
        >>> day_of_week(date(2020, 4, 13))  # Monday
        1
    """
    return jdn_to_day_of_week(ymd_to_jdn(ad_date.year, ad_date.month, ad_date.day))


def days_between(ad_date_a: date, ad_date_b: date) -> int:
    """Return the signed number of days from b to a (a - b).

    Examples:
        >>> days_between(date(2024, 3, 1), date(2024, 2, 1))
        29
        >>> days_between(date(2024, 2, 1), date(2024, 3, 1))
        -29
    """
    return ymd_to_jdn(ad_date_a.year, ad_date_a.month, ad_date_a.day) - ymd_to_jdn(
        ad_date_b.year, ad_date_b.month, ad_date_b.day
    )


def add_days_to_gregorian(ad_date: date, days: int) -> date:
    """Return the Gregorian date a number of days after another.

    Args:
        ad_date: The starting date.
        days: Number of days to add (can be negative).

    Returns:
        The shifted date.

    Examples:
        >>> add_days_to_gregorian(date(2024, 2, 28), 1)
        datetime.date(2024, 2, 29)
        >>> add_days_to_gregorian(date(2024, 1, 1), -1)
        datetime.date(2023, 12, 31)
    """
    jdn = ymd_to_jdn(ad_date.year, ad_date.month, ad_date.day) + days
    return date(*jdn_to_ymd(jdn))


def days_from_bs_new_year(year: int, month: int, day: int) -> int:
    """Return the 1-based day of the BS year for year, month, day.

    1 Baisakh is day 1. The day itself is not checked against the length
    of its month; callers validate first.

    Args:
        year: The BS year.
        month: The BS month (1-12).
        day: The day of the month.

    Returns:
        Day of the BS year.

    Raises:
        CalendarRangeError: If the year or month is not tabulated.

    Examples:
        >>> days_from_bs_new_year(2077, 1, 1)
        1
        >>> days_from_bs_new_year(2077, 2, 1)  # Baisakh 2077 has 31 days
        32
    """
    # Looking up the month itself surfaces an out-of-range month
    days_in_month(year, month)
    return sum(days_in_month(year, m) for m in range(1, month)) + day


__all__ = [
    "ymd_to_jdn",
    "jdn_to_ymd",
    "jdn_to_day_of_week",
    "day_of_week",
    "days_between",
    "add_days_to_gregorian",
    "days_from_bs_new_year",
]
