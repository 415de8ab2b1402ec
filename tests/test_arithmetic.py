"""Tests for BikramSambat arithmetic.

BS month lengths change from year to year, so these cases deliberately
cross months of 29 to 32 days and both 365 and 366 day years.
"""

from __future__ import annotations

import pytest

from sambat import BikramSambat
from sambat.data.calendar import supported_years
from sambat.errors import CalendarRangeError


class TestAddDays:
    """Tests for add_days."""

    @pytest.mark.parametrize(
        "start, days, expected",
        [
            ("2077-01-01", 0, "2077-01-01"),
            ("2077-01-01", 30, "2077-01-31"),
            ("2077-01-01", 31, "2077-02-01"),
            ("2077-02-01", 31, "2077-02-32"),
            ("2077-02-01", 32, "2077-03-01"),
            ("2077-01-01", 365, "2077-12-31"),
            ("2077-01-01", 366, "2078-01-01"),
            ("2077-12-31", 1, "2078-01-01"),
            ("2078-01-01", -1, "2077-12-31"),
            ("2077-01-01", -1, "2076-12-30"),
            ("2077-03-01", -1, "2077-02-32"),
            ("2077-01-01", 100, "2077-04-07"),
            ("2079-09-15", -3000, "2071-06-27"),
        ],
    )
    def test_add_days(self, start: str, days: int, expected: str) -> None:
        """Days roll over months and years using each month's own length."""
        assert str(BikramSambat(start).add_days(days)) == expected

    def test_returns_self(self) -> None:
        """add_days mutates and returns the same instance."""
        d = BikramSambat("2077-01-01")
        assert d.add_days(5) is d
        assert d.day == 6

    def test_chaining(self) -> None:
        """Arithmetic calls can be chained."""
        d = BikramSambat("2077-01-01").add_days(31).add_months(1).add_years(1)
        assert str(d) == "2078-03-01"

    @pytest.mark.parametrize("days", [1, 29, 32, 100, 365, 366, 1000, -1, -32, -400, -5000])
    def test_inverse(self, days: int) -> None:
        """add_days(n) followed by add_days(-n) restores the date."""
        for text in ["2077-01-01", "2075-03-32", "2080-12-30", "2050-06-15"]:
            original = BikramSambat(text)
            assert original.copy().add_days(days).add_days(-days) == original

    def test_large_offset(self) -> None:
        """Spanning the whole table completes without recursion limits."""
        d = BikramSambat("2000-01-01").add_days(33237)
        assert str(d) == "2090-12-30"
        assert str(d.add_days(-33237)) == "2000-01-01"

    def test_past_end_of_table(self) -> None:
        """Moving past 2090 raises and leaves the date unchanged."""
        d = BikramSambat("2090-12-30")
        with pytest.raises(CalendarRangeError):
            d.add_days(1)
        assert str(d) == "2090-12-30"

    def test_before_start_of_table(self) -> None:
        """Moving before 2000 raises and leaves the date unchanged."""
        d = BikramSambat("2000-01-01")
        with pytest.raises(CalendarRangeError):
            d.add_days(-1)
        assert str(d) == "2000-01-01"


class TestAddMonths:
    """Tests for add_months."""

    @pytest.mark.parametrize(
        "start, months, expected",
        [
            ("2077-01-15", 1, "2077-02-15"),
            ("2077-01-15", 11, "2077-12-15"),
            ("2077-12-15", 1, "2078-01-15"),
            ("2077-01-15", -1, "2076-12-15"),
            ("2077-01-01", 24, "2079-01-01"),
            ("2077-05-10", -17, "2075-12-10"),
            ("2077-05-10", -4, "2077-01-10"),
            ("2077-05-10", -5, "2076-12-10"),
            ("2077-05-10", 0, "2077-05-10"),
        ],
    )
    def test_add_months(self, start: str, months: int, expected: str) -> None:
        """Months carry into years in both directions."""
        assert str(BikramSambat(start).add_months(months)) == expected

    def test_clamp_to_shorter_month(self) -> None:
        """Day 32 of Ashad 2075 becomes day 31 of Shrawan 2075."""
        assert str(BikramSambat("2075-03-32").add_months(1)) == "2075-04-31"

    def test_last_valid_day_carries(self) -> None:
        """Day 31 of Ashad 2075 stays 31 in Shrawan, its last day."""
        d = BikramSambat("2075-03-31").add_months(1)
        assert str(d) == "2075-04-31"
        assert d.day == d.days_in_month

    def test_clamp_backwards(self) -> None:
        """Day 32 of Shrawan 2077 becomes day 31 of Ashad 2077."""
        assert str(BikramSambat("2077-04-32").add_months(-1)) == "2077-03-31"

    def test_clamp_into_29_day_month(self) -> None:
        """Day 30 of Mangshir clamps to 29 in Paush 2077."""
        assert str(BikramSambat("2077-08-30").add_months(1)) == "2077-09-29"

    def test_past_end_of_table(self) -> None:
        """Moving past 2090 raises and leaves the date unchanged."""
        d = BikramSambat("2090-12-01")
        with pytest.raises(CalendarRangeError):
            d.add_months(1)
        assert str(d) == "2090-12-01"


class TestAddYears:
    """Tests for add_years."""

    def test_add_years(self) -> None:
        """Years shift without touching month and day."""
        assert str(BikramSambat("2077-05-12").add_years(3)) == "2080-05-12"
        assert str(BikramSambat("2077-05-12").add_years(-77)) == "2000-05-12"

    def test_clamp(self) -> None:
        """Ashad 2076 has 31 days, so day 32 clamps."""
        assert str(BikramSambat("2075-03-32").add_years(1)) == "2076-03-31"

    def test_out_of_range(self) -> None:
        """Leaving the table raises and leaves the date unchanged."""
        d = BikramSambat("2077-05-12")
        with pytest.raises(CalendarRangeError):
            d.add_years(100)
        assert str(d) == "2077-05-12"


class TestMonthLengthsDriveArithmetic:
    """Walking day by day visits exactly the tabulated days."""

    def test_walk_every_year(self) -> None:
        """Adding a year's length to 1 Baisakh lands on the next 1 Baisakh."""
        from sambat.data.calendar import days_in_year

        for year in list(supported_years())[:-1]:
            d = BikramSambat.from_ymd(year, 1, 1).add_days(days_in_year(year))
            assert (d.year, d.month, d.day) == (year + 1, 1, 1)
