"""Violation records produced by the datetime rule.

A Violation is a data-level finding: which check failed and the string that
failed it. Rendering into a human-readable message happens in the reporting
context via `render_message`.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from dtrule.errors import AppError, invalid_date, invalid_format, invalid_time

from .errors import ValidationErrorDetail
from .parsing import DATETIME_FORMAT

DEFAULT_MESSAGE = "This value is not a valid datetime."
VALUE_PLACEHOLDER = "{{ value }}"


class ViolationKind(str, Enum):
    """Which part of the datetime check failed.

    Values are the stable constraint codes clients can match on.
    """
    INVALID_FORMAT = "1a9da513-2640-4f84-9b6a-4d99dcddc628"
    INVALID_DATE = "d52afa47-620d-4d99-9f08-f4d85b36e33c"
    INVALID_TIME = "5e797c9d-74f7-4098-baa3-94390c447b27"

    @property
    def code(self) -> str:
        return self.value

    @property
    def constraint(self) -> str:
        """Short constraint name for error details."""
        return _CONSTRAINTS[self]


_APP_ERRORS = {
    ViolationKind.INVALID_FORMAT: lambda field, value, origin: invalid_format(field, DATETIME_FORMAT, value, origin=origin),
    ViolationKind.INVALID_DATE: invalid_date,
    ViolationKind.INVALID_TIME: invalid_time,
}

_CONSTRAINTS = {
    ViolationKind.INVALID_FORMAT: "datetime_format",
    ViolationKind.INVALID_DATE: "datetime_date",
    ViolationKind.INVALID_TIME: "datetime_time",
}


def format_value(value: Any) -> str:
    """Format a value for interpolation into a violation message."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return f'"{value}"'
    return str(value)


def render_message(template: str, value: str) -> str:
    """Substitute the offending value into a message template."""
    return template.replace(VALUE_PLACEHOLDER, format_value(value))


@dataclass(frozen=True, slots=True)
class Violation:
    """One way an input failed the datetime rule."""
    kind: ViolationKind
    value: str

    @property
    def code(self) -> str: return self.kind.code

    def message(self, template: str = DEFAULT_MESSAGE) -> str:
        return render_message(template, self.value)

    def to_detail(self, field_path: str = "$", template: str = DEFAULT_MESSAGE) -> ValidationErrorDetail:
        """Convert to an error detail for accumulation in a ValidationContext."""
        return ValidationErrorDetail(field_path=field_path, constraint=self.kind.constraint,
            actual_value=self.value, message=self.message(template), code=self.kind.code)

    def to_app_error(self, field: str = "$", origin: str = "") -> AppError:
        """Build the typed AppError for this violation's kind."""
        return _APP_ERRORS[self.kind](field, self.value, origin=origin).unwrap_err().with_metadata(
            constraint=self.kind.constraint, code=self.kind.code)
