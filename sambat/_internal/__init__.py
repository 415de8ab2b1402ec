"""Internal utilities for Sambat.

This module contains private implementation details:
    - calendar: day arithmetic (JDN conversions, BS day offsets)
    - resolver: New Year resolution for Gregorian dates
    - validation: checks of BS date components against the tables
    - constants: magic numbers

The submodules are imported directly; only constants are re-exported
here because the calendar tables depend on them.

Note: This module is not part of the public API.
"""

from __future__ import annotations

from sambat._internal.constants import (
    DAYS_IN_A_LEAP_YEAR,
    INVALID_DATE,
    MONTHS_IN_A_YEAR,
)

__all__: list[str] = [
    "DAYS_IN_A_LEAP_YEAR",
    "INVALID_DATE",
    "MONTHS_IN_A_YEAR",
]
