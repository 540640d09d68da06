class JdkitError(Exception):
    """Base error."""

class CalendarFieldError(JdkitError, ValueError):
    """Raised by the validation layer when a calendar field is out of range."""

class CalendarRangeError(JdkitError, ValueError):
    """Raised when a civil datetime cannot be parsed or represented as a stdlib datetime."""

class DeltaTUnavailableError(JdkitError, LookupError):
    """Raised when unwrapping a ΔT result that carries no estimate."""
