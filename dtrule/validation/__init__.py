"""Datetime Validation

Validates `YYYY-MM-DD HH:MM:SS` values: lexical format, Gregorian calendar
date and time of day. Findings are returned as Violation records; values
that cannot be stringified raise UnexpectedTypeError.

Key Features:
- Pure checks (parse_datetime_fields, is_valid_date, is_valid_time)
- DateTimeValidator returning zero to two violations per value
- ValidationContext accumulating violations (fail-fast or collect-all)
- Pydantic integration via DateTimeFormat / DateTimeStr

Usage:
    from dtrule.validation import DateTimeValidator, ValidationContext

    validator = DateTimeValidator()
    validator.validate("2023-02-29 10:00:00")
    # (Violation(kind=ViolationKind.INVALID_DATE, value='2023-02-29 10:00:00'),)

    with ValidationContext() as ctx:
        ctx.validate("starts_at", payload["starts_at"], validator)
"""

from .calendar import (
    MIN_YEAR,
    MAX_YEAR,
    is_leap_year,
    days_in_month,
    is_valid_date,
)

from .clock import is_valid_time

from .parsing import (
    DATETIME_PATTERN,
    DATETIME_FORMAT,
    ParsedFields,
    parse_datetime_fields,
)

from .errors import (
    ValidationMode,
    UnexpectedTypeError,
    ValidationError,
    ValidationErrorDetail,
    ValidationErrorAccumulator,
    FailFastAccumulator,
    CollectAllAccumulator,
    create_accumulator,
    ValidationContext,
)

from .violations import (
    DEFAULT_MESSAGE,
    ViolationKind,
    Violation,
    format_value,
    render_message,
)

from .validators import (
    AtomicValidator,
    DateTimeValidator,
    has_string_conversion,
)

from .annotated import (
    DateTimeFormat,
    DateTimeStr,
)

__all__ = [
    # Calendar / clock
    "MIN_YEAR",
    "MAX_YEAR",
    "is_leap_year",
    "days_in_month",
    "is_valid_date",
    "is_valid_time",
    # Parsing
    "DATETIME_PATTERN",
    "DATETIME_FORMAT",
    "ParsedFields",
    "parse_datetime_fields",
    # Errors
    "ValidationMode",
    "UnexpectedTypeError",
    "ValidationError",
    "ValidationErrorDetail",
    "ValidationErrorAccumulator",
    "FailFastAccumulator",
    "CollectAllAccumulator",
    "create_accumulator",
    "ValidationContext",
    # Violations
    "DEFAULT_MESSAGE",
    "ViolationKind",
    "Violation",
    "format_value",
    "render_message",
    # Validators
    "AtomicValidator",
    "DateTimeValidator",
    "has_string_conversion",
    # Pydantic
    "DateTimeFormat",
    "DateTimeStr",
]
