"""Datetime Validator

Checks `YYYY-MM-DD HH:MM:SS` strings: lexical format first, then calendar
date and time of day independently.

Two failure channels:
- Violations: returned from `validate`, zero to two per call
- UnexpectedTypeError: raised when the value cannot be turned into a string
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any

from dtrule.errors import Err, Ok, Result
from dtrule.logging import validation_logger

from .calendar import is_valid_date
from .clock import is_valid_time
from .errors import ValidationError, ValidationMode, UnexpectedTypeError
from .parsing import parse_datetime_fields
from .violations import DEFAULT_MESSAGE, Violation, ViolationKind

log = validation_logger()

_SCALAR_TYPES = (str, int, float, Decimal)


def has_string_conversion(value: Any) -> bool:
    """Scalars, or objects whose type defines its own __str__. Bytes are not text."""
    if isinstance(value, (bytes, bytearray, memoryview)):
        return False
    return isinstance(value, _SCALAR_TYPES) or type(value).__str__ is not object.__str__


class AtomicValidator(ABC):
    """Base class for validators producing violations."""

    @abstractmethod
    def validate(self, value: Any) -> tuple[Violation, ...]:
        """Validate a value. Returns the violations found, empty if valid."""

    @property
    @abstractmethod
    def constraint_name(self) -> str:
        """Constraint name for error details."""

    def __call__(self, value: Any) -> tuple[Violation, ...]: return self.validate(value)

    def is_valid(self, value: Any) -> bool: return not self.validate(value)


@dataclass(frozen=True, slots=True)
class DateTimeValidator(AtomicValidator):
    """Validate `YYYY-MM-DD HH:MM:SS` datetime strings.

    None, the empty string and `datetime` instances are skipped.
    """
    message: str = DEFAULT_MESSAGE

    @property
    def constraint_name(self) -> str:
        return "datetime"

    def validate(self, value: Any) -> tuple[Violation, ...]:
        if value is None or (isinstance(value, str) and not value) or isinstance(value, datetime):
            return ()

        if not has_string_conversion(value):
            log.warning("datetime_unexpected_type", actual=type(value).__name__)
            raise UnexpectedTypeError(value, "string")

        text = str(value)

        if (fields := parse_datetime_fields(text)) is None:
            return self._report(Violation(ViolationKind.INVALID_FORMAT, text))

        violations = []
        if not is_valid_date(*fields.date_part):
            violations.append(Violation(ViolationKind.INVALID_DATE, text))
        if not is_valid_time(*fields.time_part):
            violations.append(Violation(ViolationKind.INVALID_TIME, text))
        return self._report(*violations)

    def check(self, value: Any, field: str = "$") -> Result[str | datetime | None, ValidationError]:
        """Validate and wrap the outcome: Ok(string) when clean, Err(ValidationError) otherwise.

        Skipped inputs yield Ok(None), or Ok(value) for datetime instances.
        """
        if (violations := self.validate(value)):
            return Err(ValidationError(message="Validation failed",
                details=[v.to_detail(field, self.message) for v in violations], mode=ValidationMode.COLLECT_ALL))
        if value is None or (isinstance(value, str) and not value):
            return Ok(None)
        return Ok(value if isinstance(value, datetime) else str(value))

    @staticmethod
    def _report(*violations: Violation) -> tuple[Violation, ...]:
        for violation in violations:
            log.debug("datetime_violation", kind=violation.kind.name, code=violation.code, value=violation.value)
        return violations
