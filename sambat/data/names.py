"""Static month and weekday name tables.

Month descriptors are stored 0-indexed; everything else in the library
addresses months by their 1-based number, and month_descriptor() is the
only place that converts between the two.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple

from sambat._internal.constants import DAYS_IN_A_WEEK, MONTHS_IN_A_YEAR


class LanguageCode(str, Enum):
    """Languages available in the name tables.

    Examples:
        >>> LanguageCode("en")
        <LanguageCode.EN: 'en'>
    """

    EN = "en"
    NP = "np"


DEFAULT_LANGUAGE = LanguageCode.NP


class MonthDescriptor(NamedTuple):
    """A BS month.

    Attributes:
        number: Month number (1 = Baisakh).
        en: English transliteration.
        np: Name in Devanagari script.
        ad: Approximate Gregorian months the BS month spans.
    """

    number: int
    en: str
    np: str
    ad: str

    def name(self, language: LanguageCode | str | None = None) -> str:
        """Return the month name in the given language (default Nepali)."""
        return getattr(self, _language(language).value)


class WeekdayDescriptor(NamedTuple):
    """A day of the week.

    Attributes:
        number: Day of week (0 = Sunday).
        en: English name.
        np: Name in Devanagari script.
    """

    number: int
    en: str
    np: str

    def name(self, language: LanguageCode | str | None = None) -> str:
        """Return the weekday name in the given language (default Nepali)."""
        return getattr(self, _language(language).value)


NEPALI_MONTHS: tuple[MonthDescriptor, ...] = (
    MonthDescriptor(1, "Baisakh", "बैशाख", "Apr/May"),
    MonthDescriptor(2, "Jestha", "जेठ", "May/Jun"),
    MonthDescriptor(3, "Ashad", "असार", "Jun/Jul"),
    MonthDescriptor(4, "Shrawn", "श्रावण", "Jul/Aug"),
    MonthDescriptor(5, "Bhadra", "भदौ", "Aug/Sep"),
    MonthDescriptor(6, "Ashoj", "आश्विन", "Sep/Oct"),
    MonthDescriptor(7, "Kartik", "कार्तिक", "Oct/Nov"),
    MonthDescriptor(8, "Mangshir", "मंसिर", "Nov/Dec"),
    MonthDescriptor(9, "Paush", "पुष", "Dec/Jan"),
    MonthDescriptor(10, "Magh", "माघ", "Jan/Feb"),
    MonthDescriptor(11, "Falgun", "फाल्गुन", "Feb/Mar"),
    MonthDescriptor(12, "Chaitra", "चैत्र", "Mar/Apr"),
)

NEPALI_WEEKDAYS: tuple[WeekdayDescriptor, ...] = (
    WeekdayDescriptor(0, "Sunday", "आइतबार"),
    WeekdayDescriptor(1, "Monday", "सोमबार"),
    WeekdayDescriptor(2, "Tuesday", "मंगलबार"),
    WeekdayDescriptor(3, "Wednesday", "बुधबार"),
    WeekdayDescriptor(4, "Thursday", "बिहिबार"),
    WeekdayDescriptor(5, "Friday", "शुक्रबार"),
    WeekdayDescriptor(6, "Saturday", "शनिबार"),
)

# Lowercase spellings accepted by the parser, on top of the English names
_MONTH_ALIASES: dict[str, int] = {
    "baishakh": 1,
    "baisakh": 1,
    "baishak": 1,
    "jeth": 2,
    "jestha": 2,
    "ashadh": 3,
    "asar": 3,
    "asadh": 3,
    "shrawan": 4,
    "saun": 4,
    "sawan": 4,
    "bhadau": 5,
    "ashwin": 6,
    "asoj": 6,
    "mangsir": 8,
    "marga": 8,
    "poush": 9,
    "push": 9,
    "phalgun": 11,
    "fagun": 11,
    "chait": 12,
}

MONTH_NAME_LOOKUP: dict[str, int] = {
    **_MONTH_ALIASES,
    **{m.en.lower(): m.number for m in NEPALI_MONTHS},
}


def _language(language: LanguageCode | str | None) -> LanguageCode:
    if language is None:
        return DEFAULT_LANGUAGE
    return LanguageCode(language)


def month_descriptor(number: int) -> MonthDescriptor:
    """Return the descriptor for a 1-based month number.

    Raises:
        ValueError: If number is not in 1-12.
    """
    if number < 1 or number > MONTHS_IN_A_YEAR:
        raise ValueError(f"month must be 1-12, got {number}")
    return NEPALI_MONTHS[number - 1]


def weekday_descriptor(number: int) -> WeekdayDescriptor:
    """Return the descriptor for a day of week (0 = Sunday)."""
    if number < 0 or number >= DAYS_IN_A_WEEK:
        raise ValueError(f"day of week must be 0-6, got {number}")
    return NEPALI_WEEKDAYS[number]


def month_number_from_name(name: str) -> int | None:
    """Resolve a month name or common alternate spelling to 1-12.

    Examples:
        >>> month_number_from_name("Shrawan")
        4
        >>> month_number_from_name("Smarch") is None
        True
    """
    return MONTH_NAME_LOOKUP.get(name.lower())


def get_month_names(language: LanguageCode | str | None = None) -> list[str]:
    """Return the 12 month names, Baisakh first.

    Args:
        language: Language code, Nepali when omitted.

    Raises:
        ValueError: If the language code is unknown.
    """
    lang = _language(language)
    return [m.name(lang) for m in NEPALI_MONTHS]


def get_weekday_names(language: LanguageCode | str | None = None) -> list[str]:
    """Return the 7 weekday names, Sunday first.

    Args:
        language: Language code, Nepali when omitted.

    Raises:
        ValueError: If the language code is unknown.
    """
    lang = _language(language)
    return [d.name(lang) for d in NEPALI_WEEKDAYS]


__all__ = [
    "LanguageCode",
    "DEFAULT_LANGUAGE",
    "MonthDescriptor",
    "WeekdayDescriptor",
    "NEPALI_MONTHS",
    "NEPALI_WEEKDAYS",
    "MONTH_NAME_LOOKUP",
    "month_descriptor",
    "weekday_descriptor",
    "month_number_from_name",
    "get_month_names",
    "get_weekday_names",
]
