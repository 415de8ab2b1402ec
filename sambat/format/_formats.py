"""Known BS date format templates.

Each template pairs a regex with the layout it recognises. Templates are
tried in declaration order and the first match wins.

Internal module - use parse() from sambat.format instead.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Pattern


class DateLayout(Enum):
    """General layout of a recognised date string."""

    YEAR = "YYYY"
    YEAR_MONTH = "YYYY-MM"
    YEAR_MONTH_DAY = "YYYY-MM-DD"
    DAY_MONTH_NAME_YEAR = "DD-MMMM-YYYY"
    DAY_MONTH_YEAR = "DD-MM-YYYY"
    MONTH_DAY = "MM-DD"


@dataclass(frozen=True)
class DateFormat:
    """A format template for matching BS date strings.

    Attributes:
        layout: Which components appear and in what order.
        pattern: Compiled regex; groups follow the order of layout.
        groups: Component name for each regex group.
    """

    layout: DateLayout
    pattern: Pattern[str]
    groups: tuple[str, ...]

    def extract(self, text: str) -> dict[str, str] | None:
        """Return the raw matched components, or None if text does not match."""
        match = self.pattern.match(text)
        if not match:
            return None
        return dict(zip(self.groups, match.groups()))


# Separators between components: dash, slash or a single space
_SEP = r"[-/ ]"

DATE_FORMATS: tuple[DateFormat, ...] = (
    DateFormat(
        DateLayout.YEAR,
        re.compile(r"^(\d{4})$", re.ASCII),
        ("year",),
    ),
    DateFormat(
        DateLayout.YEAR_MONTH,
        re.compile(rf"^(\d{{4}}){_SEP}(\d{{1,2}})$", re.ASCII),
        ("year", "month"),
    ),
    DateFormat(
        DateLayout.YEAR_MONTH_DAY,
        re.compile(rf"^(\d{{2,4}}){_SEP}(\d{{1,2}}){_SEP}(\d{{1,2}})$", re.ASCII),
        ("year", "month", "day"),
    ),
    DateFormat(
        DateLayout.DAY_MONTH_NAME_YEAR,
        re.compile(rf"^(\d{{1,2}}){_SEP}([A-Za-z]+){_SEP}(\d{{4}})$", re.ASCII),
        ("day", "month_name", "year"),
    ),
    DateFormat(
        DateLayout.DAY_MONTH_YEAR,
        re.compile(rf"^(\d{{1,2}}){_SEP}(\d{{1,2}}){_SEP}(\d{{4}})$", re.ASCII),
        ("day", "month", "year"),
    ),
    DateFormat(
        DateLayout.MONTH_DAY,
        re.compile(rf"^(\d{{1,2}}){_SEP}(\d{{1,2}})$", re.ASCII),
        ("month", "day"),
    ),
)


def detect_format(text: str) -> tuple[DateFormat, dict[str, str]] | None:
    """Return the first template matching text with its raw components."""
    for fmt in DATE_FORMATS:
        components = fmt.extract(text)
        if components is not None:
            return fmt, components
    return None


__all__ = [
    "DateLayout",
    "DateFormat",
    "DATE_FORMATS",
    "detect_format",
]
