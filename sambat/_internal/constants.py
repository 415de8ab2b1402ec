"""Internal constants for Sambat.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

MONTHS_IN_A_YEAR: int = 12
DAYS_IN_A_WEEK: int = 7

DAYS_IN_A_YEAR: int = 365
DAYS_IN_A_LEAP_YEAR: int = 366

# Shortest and longest BS months that occur in the tables
MIN_DAYS_IN_MONTH: int = 29
MAX_DAYS_IN_MONTH: int = 32

# Returned by str() and the formatter for unset dates. Consumers match on it.
INVALID_DATE: str = "Invalid Date"

# Added to two and three digit years while parsing ("77" -> 2077)
PARSE_BASE_YEAR: int = 2000

# (JDN + JDN_SUNDAY_OFFSET) % 7 == 0 on Sundays
JDN_SUNDAY_OFFSET: int = 1


__all__ = [
    "MONTHS_IN_A_YEAR",
    "DAYS_IN_A_WEEK",
    "DAYS_IN_A_YEAR",
    "DAYS_IN_A_LEAP_YEAR",
    "MIN_DAYS_IN_MONTH",
    "MAX_DAYS_IN_MONTH",
    "INVALID_DATE",
    "PARSE_BASE_YEAR",
    "JDN_SUNDAY_OFFSET",
]
