"""BS date parsing and formatting.

This module provides functions for converting BS dates to and from
string representations:
    - parse: lenient parsing of several common layouts
    - parse_strict: parsing that raises ParseError
    - format_date: token template formatting

Examples:
    >>> from sambat import BikramSambat
    >>> from sambat.format import parse, format_date

    >>> parse("12/05/2077")
    ParsedDate(year=2077, month=5, day=12)

    >>> format_date(BikramSambat("2077-05-12"), "YYYY/MM/DD")
    '2077/05/12'
"""

from __future__ import annotations

from sambat.format.formatter import format_date
from sambat.format.parser import ParsedDate, ParseOptions, parse, parse_strict

__all__: list[str] = [
    "format_date",
    "ParsedDate",
    "ParseOptions",
    "parse",
    "parse_strict",
]
