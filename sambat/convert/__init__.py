"""Calendar conversion functions.

This module provides functions for converting dates between the
Bikram Sambat and Gregorian calendars:
    - to_gregorian: BS date (or BS text) to datetime.date
    - to_bikram_sambat: Gregorian date (or ISO text) to BikramSambat

Examples:
    >>> from datetime import date
    >>> from sambat.convert import to_bikram_sambat, to_gregorian

    >>> to_bikram_sambat(date(2023, 4, 14))
    BikramSambat('2080-01-01')

    >>> to_gregorian("2080-01-01")
    datetime.date(2023, 4, 14)
"""

from __future__ import annotations

from sambat.convert.gregorian import to_bikram_sambat, to_gregorian

__all__: list[str] = [
    "to_bikram_sambat",
    "to_gregorian",
]
