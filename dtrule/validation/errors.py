"""Validation Error System

Structured errors with JSON paths, constraint codes and offending values.
Supports both fail-fast and collect-all accumulation modes.

Error Format:
{
    "error": {
        "type": "validation_error",
        "message": "Validation failed",
        "mode": "collect_all",
        "errors": [
            {
                "field": "event.starts_at",
                "constraint": "datetime_date",
                "code": "d52afa47-620d-4d99-9f08-f4d85b36e33c",
                "value": "2023-02-29 10:00:00",
                "message": "This value is not a valid datetime."
            }
        ]
    }
}
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Sequence

from dtrule.errors import AppError, AppErrorException, ErrorCode, invalid_type

if TYPE_CHECKING:
    from .violations import Violation


class ValidationMode(str, Enum):
    """Validation accumulation strategy."""
    FAIL_FAST = "fail_fast"
    COLLECT_ALL = "collect_all"


class UnexpectedTypeError(AppErrorException, TypeError):
    """The value handed to a validator is not a supported input type.

    This is a programming error on the caller's side, raised instead of being
    reported as a violation.
    """

    def __init__(self, value: Any, expected_type: str):
        self.value, self.expected_type = value, expected_type
        super().__init__(invalid_type(value, expected_type, origin="dtrule.validation").unwrap_err())


@dataclass(frozen=True, slots=True)
class ValidationErrorDetail:
    """Validation error for a single field.

    - field_path: JSON path to offending field (e.g., "event.starts_at")
    - constraint: Constraint that failed (e.g., "datetime_format")
    - actual_value: The value that failed
    - message: Human-readable error message
    - code: Stable machine-readable code, if the constraint defines one
    """
    field_path: str
    constraint: str
    actual_value: Any = None
    message: str = ""
    code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for API responses."""
        result = {"field": self.field_path, "constraint": self.constraint, "message": self.message}
        if self.code: result["code"] = self.code
        if self.actual_value is not None: result["value"] = self.actual_value
        return result


@dataclass
class ValidationError(Exception):
    """Validation error carrying every accumulated detail."""
    message: str
    details: list[ValidationErrorDetail]
    mode: ValidationMode = ValidationMode.FAIL_FAST

    def __post_init__(self):
        super().__init__(self.message)

    def __str__(self) -> str:
        if not self.details: return self.message
        if len(self.details) == 1: return f"{(d := self.details[0]).field_path}: {d.message}"
        return f"{self.message} ({len(self.details)} errors)"

    @property
    def field_errors(self) -> dict[str, list[ValidationErrorDetail]]:
        """Group errors by field path."""
        result: dict[str, list[ValidationErrorDetail]] = {}
        for detail in self.details: result.setdefault(detail.field_path, []).append(detail)
        return result

    @property
    def first_error(self) -> ValidationErrorDetail | None: return self.details[0] if self.details else None

    def to_app_error(self) -> AppError:
        """Convert to AppError for the error handling system."""
        if len(self.details) == 1:
            d = self.details[0]
            return AppError(code=ErrorCode.E2000_VALIDATION_GENERIC, message=f"{d.field_path}: {d.message}",
                metadata={"field": d.field_path, "constraint": d.constraint, "code": d.code, "value": d.actual_value})
        return AppError(code=ErrorCode.E2000_VALIDATION_GENERIC, message=f"Validation failed: {len(self.details)} errors",
            metadata={"validation_mode": self.mode.value, "error_count": len(self.details),
                "errors": [d.to_dict() for d in self.details]})

    def to_dict(self) -> dict[str, Any]:
        return {"error": {"type": "validation_error", "message": self.message, "mode": self.mode.value,
            "error_count": len(self.details), "errors": [d.to_dict() for d in self.details]}}


class ValidationErrorAccumulator(ABC):
    """Abstract base for error accumulation strategies."""

    @abstractmethod
    def add_error(self, detail: ValidationErrorDetail) -> bool:
        """Add error detail. Returns True if should continue, False if should stop."""

    @abstractmethod
    def get_errors(self) -> list[ValidationErrorDetail]:
        """Get accumulated errors."""

    @abstractmethod
    def has_errors(self) -> bool:
        """Check if any errors accumulated."""

    @property
    @abstractmethod
    def mode(self) -> ValidationMode:
        """Get the accumulation mode."""

    def raise_if_errors(self, message: str = "Validation failed") -> None:
        """Raise ValidationError if errors exist."""
        if self.has_errors():
            raise ValidationError(message=message, details=self.get_errors(), mode=self.mode)


@dataclass
class FailFastAccumulator(ValidationErrorAccumulator):
    """Fail-fast accumulator: keeps the first error only."""
    _error: ValidationErrorDetail | None = None

    @property
    def mode(self) -> ValidationMode: return ValidationMode.FAIL_FAST

    def add_error(self, detail: ValidationErrorDetail) -> bool:
        if self._error is None: self._error = detail
        return False

    def get_errors(self) -> list[ValidationErrorDetail]: return [self._error] if self._error else []

    def has_errors(self) -> bool: return self._error is not None


@dataclass
class CollectAllAccumulator(ValidationErrorAccumulator):
    """Collect-all accumulator: gathers all errors up to max_errors."""
    _errors: list[ValidationErrorDetail] = field(default_factory=list)
    max_errors: int = 50

    @property
    def mode(self) -> ValidationMode: return ValidationMode.COLLECT_ALL

    def add_error(self, detail: ValidationErrorDetail) -> bool:
        if len(self._errors) < self.max_errors: self._errors.append(detail)
        return len(self._errors) < self.max_errors

    def get_errors(self) -> list[ValidationErrorDetail]: return self._errors.copy()

    def has_errors(self) -> bool: return len(self._errors) > 0


def create_accumulator(mode: ValidationMode, max_errors: int = 50) -> ValidationErrorAccumulator:
    """Factory for creating accumulators based on mode."""
    return FailFastAccumulator() if mode == ValidationMode.FAIL_FAST else CollectAllAccumulator(max_errors=max_errors)


class ValidationContext:
    """Context manager collecting violations as error details.

    Usage:
        with ValidationContext(mode=ValidationMode.COLLECT_ALL) as ctx:
            ctx.validate("starts_at", payload["starts_at"], DateTimeValidator())
            ctx.validate("ends_at", payload["ends_at"], DateTimeValidator())
        # Raises ValidationError if any errors accumulated
    """

    def __init__(self, mode: ValidationMode = ValidationMode.COLLECT_ALL, max_errors: int = 50,
                 message: str | None = None):
        from .violations import DEFAULT_MESSAGE

        self.accumulator, self.message, self._path_stack = create_accumulator(mode, max_errors), message or DEFAULT_MESSAGE, []
        self._stopped = False

    @classmethod
    def from_settings(cls, settings) -> ValidationContext:
        return cls(mode=ValidationMode(settings.VALIDATION_MODE), max_errors=settings.MAX_ERRORS,
            message=settings.DATETIME_MESSAGE)

    def __enter__(self) -> ValidationContext: return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type is None: self.accumulator.raise_if_errors()
        return False

    def push_path(self, segment: str | int) -> None: self._path_stack.append(str(segment))

    def pop_path(self) -> str | None: return self._path_stack.pop() if self._path_stack else None

    @property
    def current_path(self) -> str: return ".".join(self._path_stack) if self._path_stack else "$"

    def _full_path(self, field: str) -> str:
        return f"{self.current_path}.{field}" if self._path_stack else field

    def validate(self, field: str, value: Any, validator: Callable[[Any], Sequence[Violation]]) -> bool:
        """Run a validator and record its violations. Returns True if the value passed.

        Once a fail-fast context has recorded an error, further violations are dropped.
        """
        violations = validator(value)
        if not violations: return True
        path = self._full_path(field)
        for violation in violations:
            if self._stopped: break
            self._stopped = not self.accumulator.add_error(violation.to_detail(path, self.message))
        return False

    def add_error(self, field: str, message: str, *, constraint: str = "custom",
                  actual_value: Any = None, code: str | None = None) -> bool:
        """Manually add a validation error."""
        if self._stopped: return False
        self._stopped = not self.accumulator.add_error(ValidationErrorDetail(field_path=self._full_path(field),
            constraint=constraint, actual_value=actual_value, message=message, code=code))
        return not self._stopped

    @property
    def has_errors(self) -> bool: return self.accumulator.has_errors()

    @property
    def errors(self) -> list[ValidationErrorDetail]: return self.accumulator.get_errors()
