"""Pydantic integration for the datetime rule.

Usage:
    from typing import Annotated
    from pydantic import BaseModel
    from dtrule.validation import DateTimeFormat, DateTimeStr

    class Event(BaseModel):
        starts_at: DateTimeStr
        ends_at: Annotated[str | None, DateTimeFormat(message="Bad end time: {{ value }}")] = None
"""
from __future__ import annotations

from typing import Annotated, Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import CoreSchema, PydanticCustomError, core_schema

from .parsing import DATETIME_FORMAT, DATETIME_PATTERN
from .validators import DateTimeValidator
from .violations import DEFAULT_MESSAGE


class DateTimeFormat:
    """Annotated marker running DateTimeValidator after the wrapped type's own validation."""
    __slots__ = ("message", "_validator")

    def __init__(self, message: str = DEFAULT_MESSAGE):
        self.message, self._validator = message, DateTimeValidator(message=message)

    def __get_pydantic_core_schema__(self, source_type: type, handler: GetCoreSchemaHandler) -> CoreSchema:
        return core_schema.no_info_after_validator_function(self._validate, handler(source_type))

    def _validate(self, v: Any) -> Any:
        if not (violations := self._validator.validate(v)): return v
        first = violations[0]
        raise PydanticCustomError(first.kind.constraint, "{message}", {"message": first.message(self.message),
            "code": first.code, "kinds": [violation.kind.name for violation in violations]})

    def __get_pydantic_json_schema__(self, core_schema: CoreSchema, handler: GetJsonSchemaHandler) -> JsonSchemaValue:
        return {**handler(core_schema), "pattern": f"^{DATETIME_PATTERN}$", "description": f"Datetime as {DATETIME_FORMAT}",
            "examples": ["2024-01-15 10:30:00"]}


DateTimeStr = Annotated[str, DateTimeFormat()]
