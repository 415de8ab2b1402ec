"""Template formatting of BS dates.

Supported Tokens:
    YYYY - full year (2077)
    YYY  - last three digits of the year (077)
    YY   - last two digits of the year (77)
    MMMM - month name (Baisakh)
    MM   - 2-digit month (01-12)
    DD   - 2-digit day (01-32)

Tokens are substituted year first, then month, then day, and the longer
form of a token before the shorter one. Any other text is copied through.

Examples:
    >>> from sambat import BikramSambat
    >>> format_date(BikramSambat("2077-05-12"), "DD MMMM YYYY")
    '12 Bhadra 2077'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sambat._internal.constants import INVALID_DATE
from sambat.data.names import LanguageCode, month_descriptor

if TYPE_CHECKING:
    from sambat.core.bikram_sambat import BikramSambat

# Month names default to English so formatted output stays ASCII
FORMAT_LANGUAGE = LanguageCode.EN


def format_date(
    bs_date: BikramSambat,
    template: str,
    language: LanguageCode | str = FORMAT_LANGUAGE,
) -> str:
    """Format a BS date using a token template.

    Args:
        bs_date: The date to format.
        template: Template containing YYYY/YYY/YY, MMMM/MM and DD tokens.
        language: Language of the MMMM month name.

    Returns:
        The formatted string, or "Invalid Date" if bs_date is unset or
        not a valid BS date.

    Examples:
        >>> from sambat import BikramSambat
        >>> format_date(BikramSambat("2077-01-01"), "YYYY-MM-DD")
        '2077-01-01'
        >>> format_date(BikramSambat("2077-01-01"), "YY/MM/DD")
        '77/01/01'
        >>> format_date(BikramSambat(), "YYYY-MM-DD")
        'Invalid Date'
    """
    if not bs_date.is_valid():
        return INVALID_DATE

    year = str(bs_date.year)
    month = bs_date.month
    day = bs_date.day

    result = template
    result = result.replace("YYYY", year)
    result = result.replace("YYY", year[-3:])
    result = result.replace("YY", year[-2:])
    result = result.replace("MMMM", month_descriptor(month).name(language))
    result = result.replace("MM", f"{month:02d}")
    result = result.replace("DD", f"{day:02d}")
    return result


__all__ = [
    "FORMAT_LANGUAGE",
    "format_date",
]
