"""Sambat: Bikram Sambat calendar dates for Python.

Sambat converts dates between the Bikram Sambat (BS) calendar used in
Nepal and the Gregorian (AD) calendar, and parses, formats and does
calendar arithmetic on BS dates. BS month lengths vary from year to year
and are read from tables covering 2000-2090 BS.

Core Types:
    BikramSambat: BS date (year, month, day), or unset
    CalendarYear: One row of the calendar tables

Name Tables:
    LanguageCode: Supported languages (en, np)
    MonthDescriptor: A BS month's names
    WeekdayDescriptor: A weekday's names

Functions:
    parse / parse_strict: Parse BS date text
    format_date: Format a BS date with a token template
    to_gregorian / to_bikram_sambat: Convert between calendars
    get_month_names / get_weekday_names: Name lists by language

Exceptions:
    SambatError: Base exception
    ValidationError: Invalid date components
    CalendarRangeError: Outside the tabulated years (a LookupError)
    ParseError: Failed to parse string
    UnsetDateError: Converting an unset date

Example:
    >>> from sambat import BikramSambat
    >>> d = BikramSambat("2077-01-01")
    >>> d.to_gregorian()
    datetime.date(2020, 4, 13)
    >>> d.add_days(100).format("DD MMMM YYYY")
    '07 Shrawn 2077'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Exceptions
from sambat.errors import (
    CalendarRangeError,
    ParseError,
    SambatError,
    UnsetDateError,
    ValidationError,
)

# Tables
from sambat._internal.constants import INVALID_DATE
from sambat.data.calendar import CalendarYear
from sambat.data.names import (
    LanguageCode,
    MonthDescriptor,
    WeekdayDescriptor,
    get_month_names,
    get_weekday_names,
)

# Core type
from sambat.core.bikram_sambat import BikramSambat

# Format and conversion functions
from sambat.format import ParsedDate, ParseOptions, format_date, parse, parse_strict
from sambat.convert import to_bikram_sambat, to_gregorian

__all__: list[str] = [
    "__version__",
    # Core type
    "BikramSambat",
    # Tables
    "CalendarYear",
    "LanguageCode",
    "MonthDescriptor",
    "WeekdayDescriptor",
    "INVALID_DATE",
    "get_month_names",
    "get_weekday_names",
    # Format and conversion
    "ParsedDate",
    "ParseOptions",
    "parse",
    "parse_strict",
    "format_date",
    "to_gregorian",
    "to_bikram_sambat",
    # Exceptions
    "SambatError",
    "ValidationError",
    "CalendarRangeError",
    "ParseError",
    "UnsetDateError",
]
