"""dtrule: validation rule for `YYYY-MM-DD HH:MM:SS` datetime strings."""
from .validation import (
    DateTimeValidator,
    DateTimeFormat,
    DateTimeStr,
    UnexpectedTypeError,
    ValidationContext,
    ValidationError,
    ValidationMode,
    Violation,
    ViolationKind,
)

__version__ = "0.1.0"

__all__ = [
    "DateTimeValidator",
    "DateTimeFormat",
    "DateTimeStr",
    "UnexpectedTypeError",
    "ValidationContext",
    "ValidationError",
    "ValidationMode",
    "Violation",
    "ViolationKind",
]
