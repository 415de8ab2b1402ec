"""Core BS date type.

This module provides:
    - BikramSambat: a mutable date in the Bikram Sambat calendar
"""

from __future__ import annotations

from sambat.core.bikram_sambat import BikramSambat

__all__: list[str] = [
    "BikramSambat",
]
