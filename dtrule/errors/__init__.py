"""Error Handling

- Result[T, E]: container for success/failure
- AppError: error record with code, message, metadata and context
- ErrorCode: error code taxonomy
- Builders: ergonomic error construction
- AppErrorException: raising bridge for contract errors

Usage:
    from dtrule.errors import Ok, Err, invalid_format

    def parse(value: str) -> Result[str, AppError]:
        if not value:
            return invalid_format("created_at", "YYYY-MM-DD HH:MM:SS", value)
        return Ok(value)
"""
from .types import (
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
    ErrorContext,
)

from .builders import (
    validation_error,
    invalid_format,
    invalid_date,
    invalid_time,
    invalid_type,
)

from .handlers import (
    AppErrorException,
    raise_error,
    raise_result,
)

__all__ = [
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    "ErrorContext",
    "validation_error",
    "invalid_format",
    "invalid_date",
    "invalid_time",
    "invalid_type",
    "AppErrorException",
    "raise_error",
    "raise_result",
]
