from __future__ import annotations

import pytest

from dtrule.config import Settings
from dtrule.errors import ErrorCode
from dtrule.validation import (
    DEFAULT_MESSAGE,
    CollectAllAccumulator,
    DateTimeValidator,
    FailFastAccumulator,
    ValidationContext,
    ValidationError,
    ValidationMode,
    Violation,
    ViolationKind,
    format_value,
    render_message,
)


def test_context_passes_without_errors():
    with ValidationContext() as ctx:
        assert ctx.validate("starts_at", "2024-01-01 10:00:00", DateTimeValidator())
        assert ctx.validate("ends_at", None, DateTimeValidator())
    assert not ctx.has_errors


def test_context_collects_all_violations():
    with pytest.raises(ValidationError) as exc_info:
        with ValidationContext(mode=ValidationMode.COLLECT_ALL) as ctx:
            ctx.validate("starts_at", "2024-13-01 25:00:00", DateTimeValidator())
            ctx.validate("ends_at", "tomorrow", DateTimeValidator())

    error = exc_info.value
    assert error.mode == ValidationMode.COLLECT_ALL
    assert [(d.field_path, d.constraint) for d in error.details] == [
        ("starts_at", "datetime_date"),
        ("starts_at", "datetime_time"),
        ("ends_at", "datetime_format"),
    ]
    assert error.details[2].code == ViolationKind.INVALID_FORMAT.code
    assert error.details[2].actual_value == "tomorrow"
    assert error.details[2].message == DEFAULT_MESSAGE
    assert str(error) == "Validation failed (3 errors)"


def test_fail_fast_context_keeps_first_violation():
    ctx = ValidationContext(mode=ValidationMode.FAIL_FAST)
    assert not ctx.validate("starts_at", "2024-13-01 25:00:00", DateTimeValidator())
    assert not ctx.validate("ends_at", "tomorrow", DateTimeValidator())
    assert [d.constraint for d in ctx.errors] == ["datetime_date"]
    assert isinstance(ctx.accumulator, FailFastAccumulator)


def test_collect_all_respects_max_errors():
    ctx = ValidationContext(mode=ValidationMode.COLLECT_ALL, max_errors=2)
    for i in range(3):
        ctx.validate(f"field_{i}", "bad", DateTimeValidator())
    assert len(ctx.errors) == 2
    assert isinstance(ctx.accumulator, CollectAllAccumulator)


def test_nested_paths():
    ctx = ValidationContext()
    ctx.push_path("event")
    ctx.push_path(0)
    ctx.validate("starts_at", "2024-01-01", DateTimeValidator())
    assert ctx.pop_path() == "0"
    assert ctx.current_path == "event"
    ctx.pop_path()
    assert ctx.current_path == "$"
    assert ctx.errors[0].field_path == "event.0.starts_at"


def test_custom_message_template_is_rendered():
    ctx = ValidationContext(message="{{ value }} is not a datetime")
    ctx.validate("at", "2024-01-01", DateTimeValidator())
    assert ctx.errors[0].message == '"2024-01-01" is not a datetime'


def test_manual_error():
    ctx = ValidationContext()
    assert ctx.add_error("at", "Required", constraint="required")
    assert ctx.errors[0].to_dict() == {"field": "at", "constraint": "required", "message": "Required"}


def test_context_does_not_swallow_exceptions():
    with pytest.raises(RuntimeError):
        with ValidationContext() as ctx:
            ctx.validate("at", "bad", DateTimeValidator())
            raise RuntimeError("boom")


def test_context_from_settings():
    settings = Settings(VALIDATION_MODE="fail_fast", MAX_ERRORS=3, DATETIME_MESSAGE="Bad: {{ value }}")
    ctx = ValidationContext.from_settings(settings)
    assert ctx.accumulator.mode == ValidationMode.FAIL_FAST
    assert ctx.message == "Bad: {{ value }}"


def test_validation_error_to_app_error():
    error = DateTimeValidator().check("2024-01-01", field="at").unwrap_err()
    app_error = error.to_app_error()
    assert app_error.code == ErrorCode.E2000_VALIDATION_GENERIC
    assert app_error.metadata["constraint"] == "datetime_format"
    assert error.field_errors.keys() == {"at"}
    assert error.first_error is error.details[0]


def test_format_value():
    assert format_value("x") == '"x"'
    assert format_value(None) == "null"
    assert format_value(True) == "true"
    assert format_value(12) == "12"
    assert render_message("Value {{ value }} rejected", "abc") == 'Value "abc" rejected'


def test_violation_to_app_error():
    app_error = Violation(ViolationKind.INVALID_TIME, "2024-01-01 25:00:00").to_app_error(origin="api")
    assert app_error.code == ErrorCode.E2013_INVALID_TIME
    assert app_error.code.category == "validation"
    assert app_error.code.http_status == 400
    assert app_error.metadata["code"] == "5e797c9d-74f7-4098-baa3-94390c447b27"
    assert app_error.context.origin == "api"


@pytest.mark.parametrize(
    ("kind", "code"),
    [
        (ViolationKind.INVALID_FORMAT, ErrorCode.E2002_INVALID_FORMAT),
        (ViolationKind.INVALID_DATE, ErrorCode.E2012_INVALID_DATE),
        (ViolationKind.INVALID_TIME, ErrorCode.E2013_INVALID_TIME),
    ],
)
def test_violation_to_app_error_uses_kind_builder(kind, code):
    app_error = Violation(kind, "2024-13-01 25:00").to_app_error(field="starts_at")
    assert app_error.code == code
    assert app_error.metadata["field"] == "starts_at"
    assert app_error.metadata["value"] == "2024-13-01 25:00"
    assert app_error.metadata["constraint"] == kind.constraint
    assert app_error.metadata["code"] == kind.code
    assert "starts_at" in app_error.message


def test_format_violation_app_error_names_expected_layout():
    app_error = Violation(ViolationKind.INVALID_FORMAT, "tomorrow").to_app_error(field="at")
    assert app_error.metadata["expected"] == "YYYY-MM-DD HH:MM:SS"
