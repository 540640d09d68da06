from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Protocol, Tuple, Union

from .errors import CalendarRangeError, DeltaTUnavailableError


class CalendarFields(Protocol):
    """
    Calendar-field capability consumed by the conversion algorithms.

    Both CivilDatetime and stdlib datetime satisfy it. Fields are read in UTC;
    callers holding aware datetimes in other zones should convert first
    (CivilDatetime.from_datetime does this).
    """
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: float


@dataclass(frozen=True, order=True)
class CivilDatetime:
    """
    UTC civil datetime on the proleptic Julian/Gregorian calendar.

    Astronomical year numbering: year 0 exists and negative years are BC
    (year -4712 is 4713 BC). Field ordering makes comparison an instant
    comparison for well-formed values.

    `day` may carry a fraction (1957-10-04.81); hour and minute are normally
    integers but are not checked.
    """
    year: int
    month: int
    day: float
    hour: float = 0
    minute: float = 0
    second: float = 0.0

    @property
    def fractional_day(self) -> float:
        """Day of month plus the time of day as a fraction."""
        return self.day + (self.hour + (self.minute + self.second / 60) / 60) / 24

    def as_tuple(self) -> Tuple[int, int, float, float, float, float]:
        return (self.year, self.month, self.day, self.hour, self.minute, self.second)

    @classmethod
    def from_fields(cls, dt: CalendarFields) -> "CivilDatetime":
        """
        Copy calendar fields from anything shaped like CalendarFields.
        Values are taken unchanged, fractions included.
        """
        if isinstance(dt, cls):
            return dt
        if isinstance(dt, datetime):
            return cls.from_datetime(dt)
        return cls(dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second)

    @classmethod
    def from_datetime(cls, dt: datetime) -> "CivilDatetime":
        """
        stdlib datetime -> CivilDatetime.

        Aware values are moved to UTC first; naive values are taken as UTC.
        Microseconds become the fractional part of `second`.
        """
        if dt.tzinfo is not None:
            dt = dt.astimezone(timezone.utc)
        return cls(dt.year, dt.month, dt.day, dt.hour, dt.minute,
                   dt.second + dt.microsecond / 1_000_000)

    def to_datetime(self) -> datetime:
        """
        CivilDatetime -> timezone-aware UTC datetime.

        stdlib datetime only covers years 1..9999 of the proleptic Gregorian
        calendar; fields are copied as-is, so dates before the 1582 cutover keep
        their Julian-calendar labels. Seconds are truncated to whole
        microseconds, never rounded up into the next minute.
        """
        whole, micro = _split_second(self.second)
        try:
            return datetime(self.year, self.month, self.day, self.hour, self.minute,
                            whole, micro, tzinfo=timezone.utc)
        except (TypeError, ValueError) as e:
            raise CalendarRangeError(f"{self} is not representable as datetime: {e}") from e

    @classmethod
    def from_iso(cls, s: str) -> "CivilDatetime":
        """
        Parse [-]YYYY-MM-DD[THH:MM[:SS[.fff]]][Z].

        The year may be negative or longer than four digits; a space may
        replace the T separator.
        """
        m = _ISO_RE.match(s or "")
        if not m:
            raise CalendarRangeError(f"Invalid datetime '{s}': expected [-]YYYY-MM-DD[THH:MM[:SS]][Z]")
        sec = m.group("s")
        return cls(
            int(m.group("y")),
            int(m.group("mo")),
            int(m.group("d")),
            int(m.group("h") or 0),
            int(m.group("mi") or 0),
            float(sec) if sec else 0.0,
        )

    def isoformat(self) -> str:
        ys = f"-{-self.year:04d}" if self.year < 0 else f"{self.year:04d}"
        if float(self.second).is_integer():
            ss = f"{int(self.second):02d}"
        else:
            whole, micro = _split_second(self.second)
            ss = f"{whole:02d}.{micro:06d}"
        return (f"{ys}-{self.month:02d}-{_fmt_field(self.day)}"
                f"T{_fmt_field(self.hour)}:{_fmt_field(self.minute)}:{ss}Z")

    def __str__(self) -> str:
        return self.isoformat()


def _split_second(second: float) -> Tuple[int, int]:
    """(whole seconds, microseconds), microseconds truncated to 0..999999."""
    whole = math.floor(second)
    micro = min(math.floor((second - whole) * 1_000_000), 999_999)
    return int(whole), int(micro)


def _fmt_field(v: float) -> str:
    if float(v).is_integer():
        return f"{int(v):02d}"
    return f"{v:09.6f}"


_ISO_RE = re.compile(
    r"^\s*(?P<y>[+-]?\d{1,6})-(?P<mo>\d{1,2})-(?P<d>\d{1,2})"
    r"(?:[T ](?P<h>\d{1,2}):(?P<mi>\d{2})(?::(?P<s>\d{2}(?:\.\d+)?))?)?"
    r"\s*(?:Z|UTC)?\s*$"
)


# ============================================================
# ΔT outcome: estimate or no estimate
# ============================================================

@dataclass(frozen=True)
class DeltaTEstimate:
    """ΔT = TT - UT in seconds, with the decimal year and branch it came from."""
    seconds: float
    year_decimal: float
    branch: str

    def __bool__(self) -> bool:
        return True

    def __float__(self) -> float:
        return self.seconds

    def unwrap(self) -> float:
        return self.seconds


@dataclass(frozen=True)
class NoDeltaTEstimate:
    """The polynomial model has no estimate for this decimal year."""
    year_decimal: float
    reason: str = "no ΔT estimate before y = -1999"

    def __bool__(self) -> bool:
        return False

    def unwrap(self) -> float:
        raise DeltaTUnavailableError(f"{self.reason} (y={self.year_decimal})")


DeltaTResult = Union[DeltaTEstimate, NoDeltaTEstimate]


def delta_t_or_none(result: DeltaTResult) -> Optional[float]:
    """Seconds if an estimate exists, else None."""
    return result.seconds if isinstance(result, DeltaTEstimate) else None
