from __future__ import annotations

from ..core.types import CalendarFields, CivilDatetime

SYNODIC_MONTHS_PER_YEAR = 12.3685
SYNODIC_MONTHS_PER_CENTURY = 1236.85


def approx_k(dt: CalendarFields) -> float:
    """
    Rough lunation index k (new moons since 2000-01-06).

    Uses the coarse fractional year year + month/12 + day/365.25, which is not
    calendar-aware; the result is only a seed for an iterative new-moon search.
    """
    c = CivilDatetime.from_fields(dt)
    # (month index + 1) with a 0-based month index
    year = c.year + c.month / 12 + c.day / 365.25
    return (year - 2000) * SYNODIC_MONTHS_PER_YEAR


def k_to_T(k: float) -> float:
    """Julian centuries from J2000.0 spanned by k synodic months."""
    return k / SYNODIC_MONTHS_PER_CENTURY
