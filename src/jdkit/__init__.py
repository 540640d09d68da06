"""jdkit public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .core.errors import (
    JdkitError,
    CalendarFieldError,
    CalendarRangeError,
    DeltaTUnavailableError,
)
from .core.types import (
    CalendarFields,
    CivilDatetime,
    DeltaTEstimate,
    NoDeltaTEstimate,
    DeltaTResult,
)
from .core.time import (
    JD_J2000,
    GREGORIAN_CUTOVER,
    datetime_to_jd,
    jd_to_datetime,
    jd_to_T,
    T_to_jd,
    datetime_to_T,
    jd_to_jdn,
    jdn_to_jd,
)
from .reference.deltat import delta_t, delta_t_for_year
from .reference.lunation import approx_k, k_to_T
from .validation import checked_datetime_to_jd, validate_fields

__all__ = [
    "JdkitError",
    "CalendarFieldError",
    "CalendarRangeError",
    "DeltaTUnavailableError",
    "CalendarFields",
    "CivilDatetime",
    "DeltaTEstimate",
    "NoDeltaTEstimate",
    "DeltaTResult",
    "JD_J2000",
    "GREGORIAN_CUTOVER",
    "datetime_to_jd",
    "jd_to_datetime",
    "jd_to_T",
    "T_to_jd",
    "datetime_to_T",
    "jd_to_jdn",
    "jdn_to_jd",
    "delta_t",
    "delta_t_for_year",
    "approx_k",
    "k_to_T",
    "checked_datetime_to_jd",
    "validate_fields",
]
