"""Tests for BS date parsing."""

from __future__ import annotations

import pytest

from sambat import BikramSambat, ParsedDate, ParseOptions, parse, parse_strict
from sambat.errors import ParseError
from sambat.format._formats import DateLayout, detect_format


class TestParseLayouts:
    """Each recognised layout parses to its components."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("2077", (2077, 1, 1)),
            ("2077-05", (2077, 5, 1)),
            ("2077/5", (2077, 5, 1)),
            ("2077-05-12", (2077, 5, 12)),
            ("2077/5/3", (2077, 5, 3)),
            ("2077 05 03", (2077, 5, 3)),
            ("77-05-03", (2077, 5, 3)),
            ("077-05-03", (2077, 5, 3)),
            ("12-Bhadra-2077", (2077, 5, 12)),
            ("12 bhadra 2077", (2077, 5, 12)),
            ("12 Shrawan 2075", (2075, 4, 12)),
            ("12/Shrawn/2075", (2075, 4, 12)),
            ("1 Baishakh 2080", (2080, 1, 1)),
            ("12-05-2077", (2077, 5, 12)),
            ("1/1/2077", (2077, 1, 1)),
            ("  2077-01-01  ", (2077, 1, 1)),
        ],
    )
    def test_layouts(self, text: str, expected: tuple[int, int, int]) -> None:
        """Supported layouts parse into (year, month, day)."""
        assert parse(text) == ParsedDate(*expected)

    @pytest.mark.parametrize(
        "text, layout",
        [
            ("2077", DateLayout.YEAR),
            ("2077-05", DateLayout.YEAR_MONTH),
            ("2077-05-12", DateLayout.YEAR_MONTH_DAY),
            ("12-Bhadra-2077", DateLayout.DAY_MONTH_NAME_YEAR),
            ("12-05-2077", DateLayout.DAY_MONTH_YEAR),
            ("05-12", DateLayout.MONTH_DAY),
        ],
    )
    def test_detected_layout(self, text: str, layout: DateLayout) -> None:
        """The first matching template determines the layout."""
        detected = detect_format(text)
        assert detected is not None
        assert detected[0].layout is layout


class TestMonthDay:
    """Tests for the MM-DD layout, which has no year."""

    def test_default_year_option(self) -> None:
        """The year comes from ParseOptions.default_year."""
        assert parse("05-12", ParseOptions(default_year=2080)) == ParsedDate(2080, 5, 12)

    def test_current_year(self) -> None:
        """Without a default year the current BS year is used."""
        result = parse("01-15")
        assert result is not None
        assert result.year == BikramSambat.today().year
        assert (result.month, result.day) == (1, 15)

    def test_base_year_option(self) -> None:
        """Short years are offset by ParseOptions.base_year."""
        assert parse("45-01-01", ParseOptions(base_year=2000)) == ParsedDate(2045, 1, 1)
        assert parse("77-01-01", ParseOptions(base_year=1900)) is None


class TestInvalid:
    """Text that is not a valid BS date parses to None."""

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "   ",
            "abc",
            "2077-13-01",
            "2077-00-10",
            "2077-01-00",
            "2077-01-32",
            "2075-04-32",
            "2100-01-01",
            "1999-12-30",
            "99-01-01",
            "12 Smarch 2077",
            "2077-01-01-01",
            "2077.01.01",
            "20770-01-01",
            "32-01-2077",
            "13-01",
        ],
    )
    def test_invalid(self, text: str) -> None:
        """Out-of-range or unrecognised input gives None, never a partial date."""
        assert parse(text) is None

    def test_non_string(self) -> None:
        """Non-string input gives None."""
        assert parse(2077) is None  # type: ignore[arg-type]

    def test_strict_raises(self) -> None:
        """parse_strict raises ParseError for invalid text."""
        with pytest.raises(ParseError, match="Invalid BS date"):
            parse_strict("2077-13-01")

    def test_strict_success(self) -> None:
        """parse_strict returns the parsed date for valid text."""
        assert parse_strict("2077-01-01") == ParsedDate(2077, 1, 1)
