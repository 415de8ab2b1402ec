"""Conversion between BS and Gregorian dates.

Functions accepting loosely typed input on either side of the
conversion:
    to_gregorian: BikramSambat, BS date string, or None -> datetime.date
    to_bikram_sambat: date, datetime, ISO string, or None -> BikramSambat

Examples:
    >>> to_gregorian("2077-01-01")
    datetime.date(2020, 4, 13)
    >>> to_bikram_sambat("2020-04-13")
    BikramSambat('2077-01-01')
"""

from __future__ import annotations

from datetime import date

from sambat.core.bikram_sambat import BikramSambat, GregorianInput


def to_gregorian(value: BikramSambat | str | None) -> date:
    """Convert a BS date, or text naming one, to a Gregorian date.

    Args:
        value: A BikramSambat, a string the parser accepts, or None.

    Returns:
        The equivalent Gregorian date.

    Raises:
        UnsetDateError: If value is None or text that does not parse.
        CalendarRangeError: If the BS year is not tabulated.
    """
    return BikramSambat(value).to_gregorian()


def to_bikram_sambat(value: GregorianInput) -> BikramSambat:
    """Convert a Gregorian date to a new BikramSambat.

    Args:
        value: A date, datetime, ISO "YYYY-MM-DD" string, or None.

    Returns:
        The equivalent BS date; unset if value is None or unreadable.

    Raises:
        CalendarRangeError: If the date is outside the tabulated years.
    """
    return BikramSambat.from_gregorian(value)


__all__ = [
    "to_gregorian",
    "to_bikram_sambat",
]
