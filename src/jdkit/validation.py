"""Optional strict checks layered over the non-validating conversions."""

from __future__ import annotations

from .core.errors import CalendarFieldError
from .core.time import GREGORIAN_CUTOVER, datetime_to_jd
from .core.types import CalendarFields, CivilDatetime

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int, *, gregorian: bool) -> bool:
    """Leap-year rule of the Julian (every 4th year) or Gregorian calendar."""
    if not gregorian:
        return year % 4 == 0
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int, *, gregorian: bool) -> int:
    if not 1 <= month <= 12:
        raise CalendarFieldError(f"month must be in 1..12, got {month}")
    if month == 2 and is_leap_year(year, gregorian=gregorian):
        return 29
    return _MONTH_DAYS[month - 1]


def validate_fields(dt: CalendarFields) -> CivilDatetime:
    """
    Check calendar fields and return them as a CivilDatetime.

    Month lengths follow the calendar the converter applies at that instant:
    Julian up to the 1582-10-15T12:00Z cutover, Gregorian afterwards.
    """
    c = CivilDatetime.from_fields(dt)
    if not 1 <= c.month <= 12:
        raise CalendarFieldError(f"month must be in 1..12, got {c.month}")

    n = days_in_month(c.year, c.month, gregorian=c > GREGORIAN_CUTOVER)
    if not 1 <= c.day <= n:
        raise CalendarFieldError(f"day must be in 1..{n} for {c.year:04d}-{c.month:02d}, got {c.day}")
    if not 0 <= c.hour <= 23:
        raise CalendarFieldError(f"hour must be in 0..23, got {c.hour}")
    if not 0 <= c.minute <= 59:
        raise CalendarFieldError(f"minute must be in 0..59, got {c.minute}")
    if not 0.0 <= c.second < 60.0:
        raise CalendarFieldError(f"second must be in [0, 60), got {c.second}")
    return c


def checked_datetime_to_jd(dt: CalendarFields) -> float:
    """validate_fields, then datetime_to_jd."""
    return datetime_to_jd(validate_fields(dt))
