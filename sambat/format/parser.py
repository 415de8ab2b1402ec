"""Parsing of BS date strings.

Recognised layouts (separators "-", "/" or a space):
    YYYY            2077           -> 2077-01-01
    YYYY-MM         2077-05        -> 2077-05-01
    YYYY-MM-DD      2077-05-12     (year may have 2-4 digits)
    DD-MMMM-YYYY    12 Bhadra 2077 (English month name or common spelling)
    DD-MM-YYYY      12/05/2077
    MM-DD           05-12          (year from options or the current BS year)

Functions:
    parse: Return a ParsedDate, or None when the text is not a valid BS date.
    parse_strict: Same as parse but raises ParseError instead of returning None.

Examples:
    >>> parse("2077-05-12")
    ParsedDate(year=2077, month=5, day=12)
    >>> parse("12 Bhadra 2077")
    ParsedDate(year=2077, month=5, day=12)
    >>> parse("2077-13-01") is None
    True
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import NamedTuple

from sambat._internal.constants import PARSE_BASE_YEAR
from sambat._internal.resolver import get_new_year_date_info
from sambat._internal.validation import is_valid_day
from sambat.data.names import month_number_from_name
from sambat.errors import CalendarRangeError, ParseError
from sambat.format._formats import detect_format

logger = logging.getLogger(__name__)


class ParsedDate(NamedTuple):
    """Components of a successfully parsed BS date."""

    year: int
    month: int
    day: int


@dataclass(frozen=True)
class ParseOptions:
    """Configuration for BS date parsing.

    Attributes:
        base_year: Added to two and three digit years ("77" -> 2077).
        default_year: Year used for MM-DD input. When None, the BS year
            of today's date is used.

    Examples:
        >>> opts = ParseOptions(default_year=2080)
        >>> parse("01-15", opts)
        ParsedDate(year=2080, month=1, day=15)
    """

    base_year: int = PARSE_BASE_YEAR
    default_year: int | None = None


DEFAULT_OPTIONS = ParseOptions()


def _current_bs_year() -> int | None:
    try:
        return get_new_year_date_info(date.today()).bs_year
    except CalendarRangeError:
        logger.debug("today's date is outside the BS tables, no default year")
        return None


def _resolve_year(raw: str | None, options: ParseOptions) -> int | None:
    if raw is None:
        if options.default_year is not None:
            return options.default_year
        return _current_bs_year()
    year = int(raw)
    if len(raw) < 4:
        year += options.base_year
    return year


def parse(text: str, options: ParseOptions | None = None) -> ParsedDate | None:
    """Parse a BS date string.

    Args:
        text: The string to parse. Surrounding whitespace is ignored.
        options: Parsing options, defaults when omitted.

    Returns:
        The parsed components, or None if no layout matches or the
        components do not form a date present in the calendar tables.

    Examples:
        >>> parse("2077")
        ParsedDate(year=2077, month=1, day=1)
        >>> parse("2075-04-32") is None  # Shrawan 2075 has 31 days
        True
    """
    opts = options or DEFAULT_OPTIONS
    if not isinstance(text, str):
        logger.debug("cannot parse %r: not a string", text)
        return None

    detected = detect_format(text.strip())
    if detected is None:
        logger.debug("no BS date layout matches %r", text)
        return None
    fmt, components = detected

    if "month_name" in components:
        month = month_number_from_name(components["month_name"])
        if month is None:
            logger.debug("unknown month name in %r", text)
            return None
    else:
        month = int(components.get("month") or 1)

    day = int(components.get("day") or 1)
    year = _resolve_year(components.get("year"), opts)
    if year is None:
        return None

    if not is_valid_day(year, month, day):
        logger.debug(
            "%r matched %s but %d-%02d-%02d is not a valid BS date",
            text,
            fmt.layout.value,
            year,
            month,
            day,
        )
        return None
    return ParsedDate(year, month, day)


def parse_strict(text: str, options: ParseOptions | None = None) -> ParsedDate:
    """Parse a BS date string, raising on failure.

    Raises:
        ParseError: If the text is not a valid BS date.

    Examples:
        >>> parse_strict("2077-01-01")
        ParsedDate(year=2077, month=1, day=1)
    """
    result = parse(text, options)
    if result is None:
        raise ParseError(f"Invalid BS date: {text!r}")
    return result


__all__ = [
    "ParsedDate",
    "ParseOptions",
    "parse",
    "parse_strict",
]
