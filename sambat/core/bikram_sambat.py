"""BikramSambat class representing a date in the Bikram Sambat calendar.

BS month lengths change from year to year, so every operation here that
touches month lengths or the Gregorian calendar consults the calendar
tables rather than fixed constants.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from enum import Enum
from typing import Union

from sambat._internal.calendar import (
    add_days_to_gregorian,
    day_of_week,
    days_between,
    days_from_bs_new_year,
)
from sambat._internal.constants import INVALID_DATE, MONTHS_IN_A_YEAR
from sambat._internal.resolver import get_new_year_date_info
from sambat._internal.validation import is_valid_day, validate_day, validate_month
from sambat.data import calendar
from sambat.data.names import (
    LanguageCode,
    MonthDescriptor,
    get_month_names,
    get_weekday_names,
    month_descriptor,
)
from sambat.errors import CalendarRangeError, UnsetDateError
from sambat.format.formatter import FORMAT_LANGUAGE, format_date
from sambat.format.parser import ParsedDate, parse, parse_strict

logger = logging.getLogger(__name__)

GregorianInput = Union[date, datetime, str, None]


class _Source(Enum):
    """Kinds of value the constructor accepts."""

    TEXT = "text"
    EXISTING = "existing"
    EMPTY = "empty"


def _classify(value: object) -> _Source:
    if value is None:
        return _Source.EMPTY
    if isinstance(value, str):
        return _Source.TEXT
    if isinstance(value, BikramSambat):
        return _Source.EXISTING
    raise TypeError(
        f"BikramSambat() argument must be str, BikramSambat or None, "
        f"not {type(value).__name__}"
    )


def _shift_month(year: int, month: int, months: int) -> tuple[int, int]:
    """Return (year, month) moved by a number of months, carrying years."""
    total = month + months
    years = 0
    while total > MONTHS_IN_A_YEAR:
        total -= MONTHS_IN_A_YEAR
        years += 1
    while total <= 0:
        total += MONTHS_IN_A_YEAR
        years -= 1
    return year + years, total


def _coerce_gregorian(value: GregorianInput) -> date | None:
    """Turn an AD input into a date, or None if it is unset or unreadable."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            logger.debug("cannot read %r as a Gregorian date", value)
            return None
    logger.debug("unsupported Gregorian input of type %s", type(value).__name__)
    return None


class BikramSambat:
    """A date in the Bikram Sambat calendar.

    A BikramSambat is either a valid (year, month, day) found in the
    calendar tables or unset. Unset dates come from the empty constructor
    or from text that does not parse; their accessors return None and
    str() returns "Invalid Date".

    Unlike most date types a BikramSambat is mutable: add_years,
    add_months and add_days change it in place and return it, so calls
    can be chained. Use copy() to keep the original.

    Attributes:
        year: The BS year, or None if unset.
        month: The BS month (1-12), or None if unset.
        day: The day of the month, or None if unset.

    Examples:
        >>> d = BikramSambat("2077-01-01")
        >>> d.year, d.month, d.day
        (2077, 1, 1)
        >>> d.to_gregorian()
        datetime.date(2020, 4, 13)

        >>> str(BikramSambat("not a date"))
        'Invalid Date'

        >>> BikramSambat("2075-03-31").add_months(1)
        BikramSambat('2075-04-31')
    """

    __slots__ = ("_year", "_month", "_day")

    # Mutable value object
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: str | BikramSambat | None = None) -> None:
        """Create a BikramSambat from text, another instance, or nothing.

        Args:
            value: A date string in any layout the parser accepts, a
                BikramSambat to copy, or None for an unset date.

        Raises:
            TypeError: If value is of any other type.

        Examples:
            >>> BikramSambat("12 Bhadra 2077")
            BikramSambat('2077-05-12')
            >>> BikramSambat("2077-13-01")
            BikramSambat()
        """
        self._year: int | None = None
        self._month: int | None = None
        self._day: int | None = None

        source = _classify(value)
        if source is _Source.TEXT:
            parsed = parse(value)  # type: ignore[arg-type]
            if parsed is None:
                logger.debug("%r is not a BS date, leaving it unset", value)
            self._assign(parsed)
        elif source is _Source.EXISTING:
            self._assign(value._parts())  # type: ignore[union-attr]

    def _assign(self, parts: ParsedDate | None) -> None:
        if parts is None:
            self._year = self._month = self._day = None
        else:
            self._year, self._month, self._day = parts

    def _parts(self) -> ParsedDate | None:
        if self._year is None or self._month is None or self._day is None:
            return None
        return ParsedDate(self._year, self._month, self._day)

    @classmethod
    def from_ymd(cls, year: int, month: int, day: int) -> BikramSambat:
        """Create a BikramSambat from explicit components.

        Args:
            year: The BS year.
            month: The BS month (1-12).
            day: The day of the month.

        Raises:
            CalendarRangeError: If the year is not tabulated.
            ValidationError: If month or day is out of range.

        Examples:
            >>> BikramSambat.from_ymd(2075, 3, 32)
            BikramSambat('2075-03-32')
        """
        validate_month(month)
        validate_day(year, month, day)
        instance = cls()
        instance._assign(ParsedDate(year, month, day))
        return instance

    @classmethod
    def parse(cls, text: str) -> BikramSambat:
        """Parse text into a BikramSambat, raising instead of going unset.

        Raises:
            ParseError: If text is not a valid BS date.
        """
        instance = cls()
        instance._assign(parse_strict(text))
        return instance

    @classmethod
    def from_gregorian(cls, value: GregorianInput) -> BikramSambat:
        """Convert a Gregorian date to a BikramSambat.

        Finds the BS year whose New Year precedes the date, then walks
        forward from 1 Baisakh by the number of days in between.

        Args:
            value: A date, datetime, ISO "YYYY-MM-DD" string, or None.

        Returns:
            The equivalent BS date, or an unset date if value is None or
            cannot be read as a Gregorian date.

        Raises:
            CalendarRangeError: If the date is outside the tabulated years.

        Examples:
            >>> BikramSambat.from_gregorian(date(2020, 4, 13))
            BikramSambat('2077-01-01')
            >>> BikramSambat.from_gregorian("2024-04-13")
            BikramSambat('2081-01-01')
        """
        ad_date = _coerce_gregorian(value)
        if ad_date is None:
            return cls()

        new_year_date, bs_year = get_new_year_date_info(ad_date)
        offset = days_between(ad_date, new_year_date)
        return cls.from_ymd(bs_year, 1, 1).add_days(offset)

    @classmethod
    def today(cls) -> BikramSambat:
        """Return today's date in the BS calendar.

        Raises:
            CalendarRangeError: If today is outside the tabulated years.
        """
        return cls.from_gregorian(date.today())

    @staticmethod
    def is_valid_day(year: int, month: int, day: int) -> bool:
        """Check if 1 <= day <= days in that month of that BS year."""
        return is_valid_day(year, month, day)

    @staticmethod
    def get_weekday_names(language: LanguageCode | str | None = None) -> list[str]:
        """Return the weekday names, Sunday first (Nepali by default)."""
        return get_weekday_names(language)

    @staticmethod
    def get_month_names(language: LanguageCode | str | None = None) -> list[str]:
        """Return the month names, Baisakh first (Nepali by default)."""
        return get_month_names(language)

    @property
    def year(self) -> int | None:
        """Return the year, or None if unset."""
        return self._year

    @property
    def month(self) -> int | None:
        """Return the month (1-12), or None if unset."""
        return self._month

    @property
    def day(self) -> int | None:
        """Return the day of the month, or None if unset."""
        return self._day

    @property
    def previous_year(self) -> int | None:
        """Return the year before this date's year, or None if unset."""
        return None if self._year is None else self._year - 1

    @property
    def next_year(self) -> int | None:
        """Return the year after this date's year, or None if unset."""
        return None if self._year is None else self._year + 1

    @property
    def days_in_month(self) -> int | None:
        """Return the number of days in this date's month, or None if unset.

        Examples:
            >>> BikramSambat("2075-03-01").days_in_month
            32
        """
        if self._year is None or self._month is None:
            return None
        return calendar.days_in_month(self._year, self._month)

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date's year has 366 days; False if unset.

        Examples:
            >>> BikramSambat("2077-01-01").is_leap_year
            True
            >>> BikramSambat("2078-01-01").is_leap_year
            False
        """
        if self._year is None:
            return False
        return calendar.is_leap_year(self._year)

    @property
    def day_of_week(self) -> int | None:
        """Return the day of the week (0=Sunday, 6=Saturday), or None if unset.

        Examples:
            >>> BikramSambat("2077-01-01").day_of_week  # Monday
            1
        """
        if self._parts() is None:
            return None
        return day_of_week(self.to_gregorian())

    @property
    def previous_month(self) -> MonthDescriptor | None:
        """Return the month before this one, wrapping Baisakh to Chaitra."""
        if self._month is None:
            return None
        return month_descriptor(MONTHS_IN_A_YEAR if self._month == 1 else self._month - 1)

    @property
    def next_month(self) -> MonthDescriptor | None:
        """Return the month after this one, wrapping Chaitra to Baisakh."""
        if self._month is None:
            return None
        return month_descriptor(self._month % MONTHS_IN_A_YEAR + 1)

    def is_valid(self) -> bool:
        """Return True if this date is set and present in the tables."""
        parts = self._parts()
        return parts is not None and is_valid_day(*parts)

    def copy(self) -> BikramSambat:
        """Return an independent copy of this date."""
        return BikramSambat(self)

    def add_years(self, years: int) -> BikramSambat:
        """Add years in place. Does nothing if unset.

        If the day does not exist in the same month of the new year it
        is clamped to the last day of that month.

        Args:
            years: Number of years to add (can be negative).

        Returns:
            This instance.

        Raises:
            CalendarRangeError: If the new year is not tabulated. The
                date is left unchanged.

        Examples:
            >>> BikramSambat("2075-03-32").add_years(1)  # Ashad 2076 has 31 days
            BikramSambat('2076-03-31')
        """
        if self._year is None or self._month is None or self._day is None:
            return self
        new_year = self._year + years
        max_day = calendar.days_in_month(new_year, self._month)
        self._year = new_year
        self._day = min(self._day, max_day)
        return self

    def add_months(self, months: int) -> BikramSambat:
        """Add months in place, carrying into the year. Does nothing if unset.

        If the day does not exist in the target month it is clamped to
        the last day of that month.

        Args:
            months: Number of months to add (can be negative).

        Returns:
            This instance.

        Raises:
            CalendarRangeError: If the target year is not tabulated. The
                date is left unchanged.

        Examples:
            >>> BikramSambat("2075-03-32").add_months(1)  # Shrawan 2075 has 31 days
            BikramSambat('2075-04-31')
            >>> BikramSambat("2077-01-15").add_months(-1)
            BikramSambat('2076-12-15')
        """
        if self._year is None or self._month is None or self._day is None:
            return self
        new_year, new_month = _shift_month(self._year, self._month, months)
        max_day = calendar.days_in_month(new_year, new_month)
        self._year, self._month = new_year, new_month
        self._day = min(self._day, max_day)
        return self

    def add_days(self, days: int) -> BikramSambat:
        """Add days in place, carrying into months and years. Does nothing if unset.

        Walks one month at a time using the length of the current month,
        since BS month lengths vary from year to year.

        Args:
            days: Number of days to add (can be negative).

        Returns:
            This instance.

        Raises:
            CalendarRangeError: If the result is outside the tabulated
                years. The date is left unchanged.

        Examples:
            >>> BikramSambat("2077-12-31").add_days(1)
            BikramSambat('2078-01-01')
            >>> BikramSambat("2078-01-01").add_days(-1)
            BikramSambat('2077-12-31')
        """
        if self._year is None or self._month is None or self._day is None:
            return self
        year, month = self._year, self._month
        total = self._day + days
        while total > calendar.days_in_month(year, month):
            total -= calendar.days_in_month(year, month)
            year, month = _shift_month(year, month, 1)
        while total <= 0:
            year, month = _shift_month(year, month, -1)
            total += calendar.days_in_month(year, month)
        self._assign(ParsedDate(year, month, total))
        return self

    def to_gregorian(self) -> date:
        """Convert this date to the Gregorian calendar.

        Returns:
            The equivalent Gregorian date.

        Raises:
            UnsetDateError: If this date is unset.
            CalendarRangeError: If the year is not tabulated.

        Examples:
            >>> BikramSambat("2077-01-01").to_gregorian()
            datetime.date(2020, 4, 13)
        """
        parts = self._parts()
        if parts is None:
            raise UnsetDateError("cannot convert an unset BikramSambat to Gregorian")
        offset = days_from_bs_new_year(*parts)
        return add_days_to_gregorian(calendar.new_year_gregorian_date(parts.year), offset - 1)

    def format(
        self,
        template: str,
        language: LanguageCode | str = FORMAT_LANGUAGE,
    ) -> str:
        """Format this date using a token template.

        See sambat.format.formatter for the supported tokens.

        Examples:
            >>> BikramSambat("2077-05-12").format("DD MMMM, YYYY")
            '12 Bhadra, 2077'
        """
        return format_date(self, template, language)

    def _key(self) -> ParsedDate | None:
        return self._parts()

    def __eq__(self, other: object) -> bool:
        """Check equality with another BikramSambat.

        Two unset dates are equal to each other and to no set date.
        """
        if not isinstance(other, BikramSambat):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BikramSambat):
            return NotImplemented
        a, b = self._key(), other._key()
        if a is None or b is None:
            return NotImplemented
        return a < b

    def __le__(self, other: object) -> bool:
        if not isinstance(other, BikramSambat):
            return NotImplemented
        a, b = self._key(), other._key()
        if a is None or b is None:
            return NotImplemented
        return a <= b

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, BikramSambat):
            return NotImplemented
        a, b = self._key(), other._key()
        if a is None or b is None:
            return NotImplemented
        return a > b

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, BikramSambat):
            return NotImplemented
        a, b = self._key(), other._key()
        if a is None or b is None:
            return NotImplemented
        return a >= b

    def __repr__(self) -> str:
        """Return a detailed string representation.

        Returns:
            String like "BikramSambat('2077-01-01')", or "BikramSambat()" if unset.
        """
        if self._parts() is None:
            return "BikramSambat()"
        return f"BikramSambat('{self}')"

    def __str__(self) -> str:
        """Return YYYY-MM-DD, or "Invalid Date" if unset."""
        if not self.is_valid():
            return INVALID_DATE
        return f"{self._year}-{self._month:02d}-{self._day:02d}"


__all__ = ["BikramSambat", "GregorianInput"]
