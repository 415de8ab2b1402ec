"""Sambat exception hierarchy.

All Sambat-specific exceptions inherit from SambatError. Each one also
derives from the closest built-in exception so callers can catch
``LookupError`` or ``ValueError`` without importing this module.
"""

from __future__ import annotations


class SambatError(Exception):
    """Base exception for all Sambat errors."""

    pass


class ValidationError(SambatError, ValueError):
    """Invalid input values.

    Raised when explicit date components do not form a valid BS date.

    Examples:
        - Month value outside 1-12
        - Day 32 in a month that has 31 days that year
    """

    pass


class CalendarRangeError(SambatError, LookupError):
    """Requested date falls outside the tabulated calendar range.

    BS month lengths are read from a fixed table, so any year, month or
    Gregorian date the table does not cover is reported instead of being
    defaulted.

    Examples:
        - BS year 2100 when the table ends at 2090
        - Converting 1900-01-01 AD, before the first tabulated New Year
    """

    pass


class ParseError(SambatError, ValueError):
    """Failed to parse string representation.

    Only raised by the strict parsing entry points; the lenient parser
    returns None and the BikramSambat constructor yields an unset date.
    """

    pass


class UnsetDateError(SambatError, ValueError):
    """Operation needs a date but the BikramSambat is unset.

    Raised when converting an unset date to the Gregorian calendar.
    """

    pass


__all__ = [
    "SambatError",
    "ValidationError",
    "CalendarRangeError",
    "ParseError",
    "UnsetDateError",
]
