"""Raising Helpers

Bridge between the Result container and code paths that must raise.
"""
from typing import NoReturn, TypeVar

from dtrule.logging import get_logger

from .types import AppError, Err, Ok, Result

T = TypeVar("T")

log = get_logger(__name__)


class AppErrorException(Exception):
    """Exception wrapper for AppError.

    Use this when an AppError has to be raised rather than returned, e.g.
    for caller-contract errors that must never be folded into results.
    """

    def __init__(self, error: AppError):
        self.error = error
        super().__init__(str(error))

    @property
    def code(self):
        return self.error.code


def raise_error(error: AppError) -> NoReturn:
    """Raise an AppError as an exception."""
    log.warning(
        "app_error_raised",
        error_code=error.code.name,
        message=error.message,
        correlation_id=error.context.correlation_id,
        origin=error.context.origin,
    )
    raise AppErrorException(error)


def raise_result(result: Result[T, AppError]) -> T:
    """Unwrap a Result, raising AppErrorException on Err."""
    match result:
        case Ok(value):
            return value
        case Err(error):
            raise_error(error)
