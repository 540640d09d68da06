from __future__ import annotations

import math

from .types import CalendarFields, CivilDatetime


# ============================================================
# Epochs and constants
# ============================================================

JD_J2000 = 2451545.0  # 2000-01-01T12:00:00Z
DAYS_PER_JULIAN_CENTURY = 36525.0

# Last instant reckoned on the Julian calendar. Inputs strictly after it get
# the Gregorian correction; the instant itself does not.
GREGORIAN_CUTOVER = CivilDatetime(1582, 10, 15, 12, 0, 0.0)

# First JDN (integer day, Z = floor(JD + 0.5)) decoded on the Gregorian calendar.
GREGORIAN_CUTOVER_JDN = 2299161


# ============================================================
# Basic JD / JDN helpers
# ============================================================

def jd_to_jdn(jd: float) -> int:
    """
    Julian Date (days from noon) -> Julian Day Number (integer day starting at midnight).
      JDN = floor(JD + 0.5)
    """
    return int(math.floor(jd + 0.5))


def jdn_to_jd(jdn: int) -> float:
    """JD at midnight UTC of the given JDN."""
    return float(jdn) - 0.5


# ============================================================
# Civil datetime (UTC) <-> JD  (Meeus, Astronomical Algorithms ch. 7)
# ============================================================

def datetime_to_jd(dt: CalendarFields) -> float:
    """
    Civil datetime in UTC -> Julian Date.

    Instants at or before 1582-10-15T12:00:00Z are read as Julian-calendar
    dates, later ones as Gregorian. Fields are not validated: out-of-range
    values (day 32, month 0) flow through the arithmetic unchanged.
    """
    c = CivilDatetime.from_fields(dt)
    Y = c.year
    M = c.month
    D = c.fractional_day
    # Jan/Feb are months 13/14 of the previous year
    if M < 3:
        Y -= 1
        M += 12
    A = math.floor(Y / 100)
    B = 0
    if c > GREGORIAN_CUTOVER:
        B = 2 - A + math.floor(A / 4)
    return math.floor(365.25 * (Y + 4716)) + math.floor(30.6001 * (M + 1)) + D + B - 1524.5


def jd_to_datetime(jd: float) -> CivilDatetime:
    """
    Julian Date -> civil datetime in UTC.

    Hour, minute and second are each floor-truncated, so the result may lie up
    to just under one second before `jd`.
    """
    jd = jd + 0.5
    Z = math.floor(jd)
    F = jd - Z
    A = Z
    if Z >= GREGORIAN_CUTOVER_JDN:
        alpha = math.floor((Z - 1867216.25) / 36524.25)
        A += 1 + alpha - math.floor(alpha / 4)
    B = A + 1524
    C = math.floor((B - 122.1) / 365.25)
    D = math.floor(365.25 * C)
    E = math.floor((B - D) / 30.6001)

    frac_day = B - D - math.floor(30.6001 * E) + F
    day = math.floor(frac_day)
    h = (frac_day - day) * 24
    hours = math.floor(h)
    m = (h - hours) * 60
    minutes = math.floor(m)
    seconds = math.floor((m - minutes) * 60)

    month = E - 1
    if E > 13:
        month -= 12
    year = C - 4715
    if month > 2:
        year -= 1
    return CivilDatetime(int(year), int(month), int(day), int(hours), int(minutes), float(seconds))


# ============================================================
# Julian centuries from J2000.0
# ============================================================

def jd_to_T(jd: float) -> float:
    """
    T = (JD - 2451545.0) / 36525
    Julian centuries from J2000.0 (Meeus eq. 12.1).
    """
    return (jd - JD_J2000) / DAYS_PER_JULIAN_CENTURY


def T_to_jd(T: float) -> float:
    """JD = 2451545.0 + 36525*T"""
    return JD_J2000 + DAYS_PER_JULIAN_CENTURY * T


def datetime_to_T(dt: CalendarFields) -> float:
    """Civil datetime in UTC -> Julian centuries from J2000.0."""
    return jd_to_T(datetime_to_jd(dt))
