"""Validation Error Builders

Ergonomic constructors for typed validation errors. Each builder creates an
AppError with the appropriate code and wraps it in Err.
"""
from typing import Any

from .types import AppError, ErrorCode, ErrorContext, Err


def validation_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC,
    field: str | None = None,
    value: str | None = None,
    origin: str = "",
    **metadata,
) -> Err[AppError]:
    """Create validation error."""
    meta = {"field": field, "value": value, **metadata}
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
    ))


def invalid_format(
    field: str, expected: str, got: str | None = None, origin: str = ""
) -> Err[AppError]:
    msg = f"Invalid format for '{field}': expected {expected}"
    if got is not None:
        msg += f", got '{got}'"
    return validation_error(
        msg,
        code=ErrorCode.E2002_INVALID_FORMAT,
        field=field,
        value=got,
        expected=expected,
        origin=origin,
    )


def invalid_date(field: str, got: str, origin: str = "") -> Err[AppError]:
    return validation_error(
        f"Invalid calendar date for '{field}': '{got}'",
        code=ErrorCode.E2012_INVALID_DATE,
        field=field,
        value=got,
        origin=origin,
    )


def invalid_time(field: str, got: str, origin: str = "") -> Err[AppError]:
    return validation_error(
        f"Invalid time of day for '{field}': '{got}'",
        code=ErrorCode.E2013_INVALID_TIME,
        field=field,
        value=got,
        origin=origin,
    )


def invalid_type(value: Any, expected: str, origin: str = "") -> Err[AppError]:
    """Caller passed a value of a type the operation does not accept."""
    actual = type(value).__name__
    return validation_error(
        f"Expected argument of type '{expected}', '{actual}' given",
        code=ErrorCode.E2004_INVALID_TYPE,
        expected=expected,
        actual=actual,
        origin=origin,
    )
