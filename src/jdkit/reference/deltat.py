from __future__ import annotations

"""
jdkit.reference.deltat

ΔT (= TT − UT) from the Espenak–Meeus (NASA) piecewise polynomials used for the
Five Millennium Canon of Solar Eclipses
(http://eclipse.gsfc.nasa.gov/SEcat5/deltatpoly.htm).

Dispatch
--------
The decimal year y selects exactly one branch of DELTA_T_BRANCHES, an ordered
tuple of right-open ranges [previous upper, upper). Each branch evaluates its
own polynomial in a locally shifted variable. The fits are empirical and
adjacent branches do not join continuously; values are reproduced as published.

Below y = -1999 there is no estimate. That outcome is returned as
NoDeltaTEstimate rather than a number so callers have to handle it.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Tuple
import logging
import math

from ..core.types import CalendarFields, CivilDatetime, DeltaTEstimate, DeltaTResult, NoDeltaTEstimate

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Utilities
# ---------------------------------------------------------------------------

def _poly(u: float, coeffs: Tuple[float, ...]) -> float:
    """Horner evaluation for Σ coeffs[k] u^k."""
    acc = 0.0
    for c in reversed(coeffs):
        acc = acc * u + c
    return acc


def year_decimal_mid_month(dt: CalendarFields) -> float:
    """
    y = year + (month - 0.5)/12, the middle of the calendar month.
    Day and time of day are ignored.
    """
    c = CivilDatetime.from_fields(dt)
    # month index is 0-based here
    return c.year + ((c.month - 1) + 0.5) / 12


# ---------------------------------------------------------------------------
# Branch polynomials
# ---------------------------------------------------------------------------

def _long_term_parabola(y: float) -> float:
    u = (y - 1820.0) / 100.0
    return -20.0 + 32.0 * u * u


def _bce500_ce500(y: float) -> float:
    # u = y/100
    return _poly(y / 100.0, (
        10583.6,
        -1014.41,
        33.78311,
        -5.952053,
        -0.1798452,
        0.022174192,
        0.0090316521,
    ))


def _ce500_1600(y: float) -> float:
    # u = (y-1000)/100
    return _poly((y - 1000.0) / 100.0, (
        1574.2,
        -556.01,
        71.23472,
        0.319781,
        -0.8503463,
        -0.005050998,
        0.0083572073,
    ))


def _ce1600_1700(y: float) -> float:
    t = y - 1600.0
    return 120.0 - 0.9808 * t - 0.01532 * t * t + (t ** 3) / 7129.0


def _ce1700_1800(y: float) -> float:
    t = y - 1700.0
    return 8.83 + 0.1603 * t - 0.0059285 * t * t + 0.00013336 * (t ** 3) - (t ** 4) / 1174000.0


def _ce1800_1860(y: float) -> float:
    return _poly(y - 1800.0, (
        13.72,
        -0.332447,
        0.0068612,
        0.0041116,
        -0.00037436,
        0.0000121272,
        -0.0000001699,
        0.000000000875,
    ))


def _ce1860_1900(y: float) -> float:
    t = y - 1860.0
    return (7.62 + 0.5737 * t - 0.251754 * (t ** 2) + 0.01680668 * (t ** 3)
            - 0.0004473624 * (t ** 4) + (t ** 5) / 233174.0)


def _ce1900_1920(y: float) -> float:
    t = y - 1900.0
    return -2.79 + 1.494119 * t - 0.0598939 * (t ** 2) + 0.0061966 * (t ** 3) - 0.000197 * (t ** 4)


def _ce1920_1941(y: float) -> float:
    t = y - 1920.0
    return 21.20 + 0.84493 * t - 0.076100 * (t ** 2) + 0.0020936 * (t ** 3)


def _ce1941_1961(y: float) -> float:
    t = y - 1950.0
    return 29.07 + 0.407 * t - (t ** 2) / 233.0 + (t ** 3) / 2547.0


def _ce1961_1986(y: float) -> float:
    t = y - 1975.0
    return 45.45 + 1.067 * t - (t ** 2) / 260.0 - (t ** 3) / 718.0


def _ce1986_2005(y: float) -> float:
    return _poly(y - 2000.0, (
        63.86,
        0.3345,
        -0.060374,
        0.0017275,
        0.000651814,
        0.00002373599,
    ))


def _ce2005_2050(y: float) -> float:
    t = y - 2000.0
    return 62.92 + 0.32217 * t + 0.005589 * (t ** 2)


def _ce2050_2150(y: float) -> float:
    # parabola minus the term that joins it to the 2005-2050 fit
    return _long_term_parabola(y) - 0.5628 * (2150.0 - y)


# ---------------------------------------------------------------------------
# Branch table
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DeltaTBranch:
    """One right-open range of the piecewise model: y < upper."""
    upper: float
    label: str
    evaluate: Optional[Callable[[float], float]]

    def __call__(self, y: float) -> float:
        if self.evaluate is None:
            raise ValueError(f"branch {self.label} has no polynomial")
        return float(self.evaluate(y))


DELTA_T_BRANCHES: Tuple[DeltaTBranch, ...] = (
    DeltaTBranch(-1999.0, "undefined", None),
    DeltaTBranch(-500.0, "-1999..-500", _long_term_parabola),
    DeltaTBranch(500.0, "-500..500", _bce500_ce500),
    DeltaTBranch(1600.0, "500..1600", _ce500_1600),
    DeltaTBranch(1700.0, "1600..1700", _ce1600_1700),
    DeltaTBranch(1800.0, "1700..1800", _ce1700_1800),
    DeltaTBranch(1860.0, "1800..1860", _ce1800_1860),
    DeltaTBranch(1900.0, "1860..1900", _ce1860_1900),
    DeltaTBranch(1920.0, "1900..1920", _ce1900_1920),
    DeltaTBranch(1941.0, "1920..1941", _ce1920_1941),
    DeltaTBranch(1961.0, "1941..1961", _ce1941_1961),
    DeltaTBranch(1986.0, "1961..1986", _ce1961_1986),
    DeltaTBranch(2005.0, "1986..2005", _ce1986_2005),
    DeltaTBranch(2050.0, "2005..2050", _ce2005_2050),
    DeltaTBranch(2150.0, "2050..2150", _ce2050_2150),
    DeltaTBranch(math.inf, "2150..", _long_term_parabola),
)


def branch_for_year(y: float) -> DeltaTBranch:
    """First branch whose right-open upper bound exceeds y."""
    for br in DELTA_T_BRANCHES:
        if y < br.upper:
            return br
    # only NaN gets here
    raise ValueError(f"no ΔT branch for y={y}")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def delta_t_for_year(y: float, *, apply_correction_c: bool = False) -> DeltaTResult:
    """
    ΔT(y) for a decimal year y.

    apply_correction_c:
        If True, apply the lunar-secular-acceleration correction
        c = -0.000012932 (y-1955)^2 outside 1955..2005, as described
        in the Canon documentation. (Many users can leave this False.)
    """
    br = branch_for_year(y)
    if br.evaluate is None:
        logger.debug("no ΔT estimate for y=%s", y)
        return NoDeltaTEstimate(y)

    dt = br(y)
    if apply_correction_c and (y < 1955.0 or y > 2005.0):
        dt += -0.000012932 * (y - 1955.0) ** 2

    logger.debug("ΔT(y=%s) = %s s via branch %s", y, dt, br.label)
    return DeltaTEstimate(float(dt), y, br.label)


def delta_t(dt: CalendarFields, *, apply_correction_c: bool = False) -> DeltaTResult:
    """
    ΔT for the calendar month containing `dt`.

    The year is centred in the month, y = year + (month - 0.5)/12, so every
    instant within one month gets the same value.
    """
    return delta_t_for_year(year_decimal_mid_month(dt), apply_correction_c=apply_correction_c)
