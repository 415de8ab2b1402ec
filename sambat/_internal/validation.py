"""Validation utilities for Sambat.

This module provides checks for BS date components against the
calendar tables.

This module is not part of the public API.
"""

from __future__ import annotations

from sambat._internal.constants import MONTHS_IN_A_YEAR
from sambat.data.calendar import DAYS_IN_MONTH_MAP, days_in_month
from sambat.errors import ValidationError


def is_valid_day(year: int, month: int, day: int) -> bool:
    """Check that year, month, day form a valid tabulated BS date.

    Never raises: untabulated years and out-of-range months are invalid.

    Examples:
        >>> is_valid_day(2075, 3, 32)  # Ashad 2075 has 32 days
        True
        >>> is_valid_day(2075, 4, 32)  # Shrawan 2075 has 31
        False
    """
    if year not in DAYS_IN_MONTH_MAP:
        return False
    if month < 1 or month > MONTHS_IN_A_YEAR:
        return False
    return 1 <= day <= days_in_month(year, month)


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Raises:
        ValidationError: If month is outside 1-12.
    """
    if month < 1 or month > MONTHS_IN_A_YEAR:
        raise ValidationError(f"month must be between 1 and 12, got {month}")


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given BS year and month.

    Raises:
        CalendarRangeError: If the year is not tabulated.
        ValidationError: If day is invalid for the month.
    """
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise ValidationError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


__all__ = [
    "is_valid_day",
    "validate_month",
    "validate_day",
]
