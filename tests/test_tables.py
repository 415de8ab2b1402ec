"""Tests for the BS calendar tables."""

from __future__ import annotations

from datetime import date

import pytest

from sambat._internal.calendar import add_days_to_gregorian
from sambat.data.calendar import (
    DAYS_IN_MONTH_MAP,
    MAX_BS_YEAR,
    MIN_BS_YEAR,
    NEW_YEAR_MAP,
    CalendarYear,
    calendar_years,
    days_in_month,
    days_in_year,
    get_calendar_year,
    is_leap_year,
    new_year_gregorian_date,
    supported_years,
)
from sambat.errors import CalendarRangeError


class TestTableShape:
    """Tests for the structure of the tables."""

    def test_range(self) -> None:
        """Tables cover 2000 to 2090 BS."""
        assert MIN_BS_YEAR == 2000
        assert MAX_BS_YEAR == 2090
        assert supported_years() == range(2000, 2091)

    def test_same_keys(self) -> None:
        """Both tables have an entry for every year."""
        assert set(DAYS_IN_MONTH_MAP) == set(NEW_YEAR_MAP) == set(supported_years())

    def test_twelve_months(self) -> None:
        """Every year has 12 months of 29 to 32 days."""
        for year, months in DAYS_IN_MONTH_MAP.items():
            assert len(months) == 12, year
            assert all(29 <= m <= 32 for m in months), year

    def test_tables_read_only(self) -> None:
        """The tables cannot be modified."""
        with pytest.raises(TypeError):
            DAYS_IN_MONTH_MAP[2100] = (30,) * 12  # type: ignore[index]
        with pytest.raises(TypeError):
            NEW_YEAR_MAP[2000] = date(2000, 1, 1)  # type: ignore[index]


class TestYearLengths:
    """Tests for year lengths and leap years."""

    def test_sum_is_365_or_366(self) -> None:
        """Each year has 365 or 366 days."""
        for year in calendar_years():
            assert year.total_days in (365, 366), year.bs_year

    def test_leap_iff_366(self) -> None:
        """A year is leap exactly when it has 366 days."""
        for year in calendar_years():
            assert is_leap_year(year.bs_year) == (sum(year.month_lengths) == 366)
            assert year.is_leap == (days_in_year(year.bs_year) == 366)

    @pytest.mark.parametrize("year", [2003, 2077, 2081, 2087])
    def test_known_leap_years(self, year: int) -> None:
        """Known 366-day years are leap."""
        assert is_leap_year(year)

    @pytest.mark.parametrize("year", [2000, 2076, 2078, 2080, 2090])
    def test_known_common_years(self, year: int) -> None:
        """Known 365-day years are not leap."""
        assert not is_leap_year(year)

    def test_leap_years_irregular(self) -> None:
        """Leap years do not follow a fixed four-year cycle."""
        leap = [y for y in supported_years() if is_leap_year(y)]
        gaps = {b - a for a, b in zip(leap, leap[1:])}
        assert len(gaps) > 1


class TestNewYears:
    """Tests for the New Year table."""

    @pytest.mark.parametrize(
        "bs_year, expected",
        [
            (2000, date(1943, 4, 14)),
            (2070, date(2013, 4, 14)),
            (2077, date(2020, 4, 13)),
            (2080, date(2023, 4, 14)),
            (2081, date(2024, 4, 13)),
            (2090, date(2033, 4, 14)),
        ],
    )
    def test_known_new_years(self, bs_year: int, expected: date) -> None:
        """New Year dates match published calendars."""
        assert new_year_gregorian_date(bs_year) == expected

    def test_consecutive_new_years(self) -> None:
        """Each New Year follows the previous one by that year's length."""
        years = list(calendar_years())
        for prev, nxt in zip(years, years[1:]):
            assert add_days_to_gregorian(prev.new_year, prev.total_days) == nxt.new_year

    def test_strictly_increasing(self) -> None:
        """New Year dates increase with the BS year."""
        dates = [NEW_YEAR_MAP[y] for y in supported_years()]
        assert dates == sorted(dates)
        assert len(set(dates)) == len(dates)

    def test_all_in_april(self) -> None:
        """BS New Year always falls in mid April."""
        for d in NEW_YEAR_MAP.values():
            assert d.month == 4
            assert 13 <= d.day <= 15


class TestLookups:
    """Tests for the lookup functions."""

    def test_days_in_month(self) -> None:
        """Month lengths come from the year's row."""
        assert days_in_month(2075, 3) == 32
        assert days_in_month(2075, 4) == 31
        assert days_in_month(2077, 12) == 31
        assert days_in_month(2076, 12) == 30

    def test_same_month_differs_between_years(self) -> None:
        """The same month can have different lengths in different years."""
        lengths = {days_in_month(y, 1) for y in supported_years()}
        assert lengths == {30, 31}

    def test_get_calendar_year(self) -> None:
        """A row bundles the New Year and month lengths."""
        row = get_calendar_year(2077)
        assert row == CalendarYear(
            2077,
            date(2020, 4, 13),
            (31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31),
        )
        assert row.total_days == 366
        assert row.is_leap

    def test_calendar_years_ordered(self) -> None:
        """Rows are yielded in increasing year order."""
        assert [r.bs_year for r in calendar_years()] == list(supported_years())

    @pytest.mark.parametrize("year", [1999, 2091, 2100, 0, -2077])
    def test_year_out_of_range(self, year: int) -> None:
        """Untabulated years raise CalendarRangeError."""
        with pytest.raises(CalendarRangeError, match="outside the supported range"):
            days_in_month(year, 1)
        with pytest.raises(CalendarRangeError):
            new_year_gregorian_date(year)
        with pytest.raises(CalendarRangeError):
            is_leap_year(year)

    @pytest.mark.parametrize("month", [0, 13, -1])
    def test_month_out_of_range(self, month: int) -> None:
        """Months outside 1-12 raise CalendarRangeError."""
        with pytest.raises(CalendarRangeError, match="month must be 1-12"):
            days_in_month(2077, month)
