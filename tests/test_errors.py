from __future__ import annotations

import pytest

from dtrule.errors import (
    AppErrorException,
    Err,
    ErrorCode,
    Ok,
    invalid_date,
    invalid_format,
    invalid_time,
    invalid_type,
    raise_result,
)


def test_result_variants():
    assert Ok(1).map(lambda v: v + 1).unwrap() == 2
    assert Err("x").map(lambda v: v + 1).unwrap_or(0) == 0
    assert Err("x").map_err(str.upper).unwrap_err() == "X"
    assert Ok(2).and_then(lambda v: Err(v)).is_err()
    with pytest.raises(ValueError):
        Err("x").unwrap()


def test_builders_set_codes_and_metadata():
    error = invalid_format("at", "YYYY-MM-DD HH:MM:SS", "nope").unwrap_err()
    assert error.code == ErrorCode.E2002_INVALID_FORMAT
    assert error.metadata == {"field": "at", "value": "nope", "expected": "YYYY-MM-DD HH:MM:SS"}
    assert invalid_date("at", "2023-02-29 10:00:00").unwrap_err().code == ErrorCode.E2012_INVALID_DATE
    assert invalid_time("at", "2024-01-01 25:00:00").unwrap_err().code == ErrorCode.E2013_INVALID_TIME
    assert invalid_type([], "string").unwrap_err().metadata["actual"] == "list"


def test_raise_result():
    assert raise_result(Ok("v")) == "v"
    with pytest.raises(AppErrorException) as exc_info:
        raise_result(invalid_format("at", "YYYY-MM-DD HH:MM:SS"))
    assert exc_info.value.error.to_dict()["error"]["code"] == "E2002_INVALID_FORMAT"
