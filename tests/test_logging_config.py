from __future__ import annotations

import json
import logging

import structlog
from structlog.testing import LogCapture, capture_logs

from dtrule.config import Settings, get_settings
from dtrule.logging import (
    bind_context,
    clear_context,
    configure_from_settings,
    configure_logging,
    validation_logger,
)
from dtrule.validation import DateTimeValidator


def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("DTRULE_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("DTRULE_MAX_ERRORS", "7")
    settings = Settings()
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.MAX_ERRORS == 7
    assert settings.VALIDATION_MODE == "collect_all"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_configure_logging_sets_root_level(restore_logging):
    configure_logging(level="warning", json_logs=True)
    assert logging.getLogger().level == logging.WARNING
    configure_from_settings(Settings(LOG_LEVEL="INFO"))
    assert logging.getLogger().level == logging.INFO


def test_violations_are_logged_at_debug():
    with capture_logs() as logs:
        DateTimeValidator().validate("2024-01-01")
    assert logs == [
        {
            "event": "datetime_violation",
            "log_level": "debug",
            "kind": "INVALID_FORMAT",
            "code": "1a9da513-2640-4f84-9b6a-4d99dcddc628",
            "value": "2024-01-01",
        }
    ]


def test_json_logs_render_service_info(capsys, restore_logging):
    configure_logging(level="DEBUG", json_logs=True)
    logging.getLogger("dtrule.test").warning("plain stdlib record")
    line = capsys.readouterr().out.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["event"] == "plain stdlib record"
    assert record["service"] == "dtrule"
    assert validation_logger() is validation_logger()


def test_bound_context_appears_on_violation_events(restore_logging):
    capture = LogCapture()
    structlog.configure(processors=[structlog.contextvars.merge_contextvars, capture])
    try:
        bind_context(request_id="req-42")
        DateTimeValidator().validate("2024-13-01 10:00:00")
        clear_context()
        DateTimeValidator().validate("2024-01-01 25:00:00")
    finally:
        clear_context()

    bound, cleared = capture.entries
    assert bound["event"] == "datetime_violation"
    assert bound["kind"] == "INVALID_DATE"
    assert bound["request_id"] == "req-42"
    assert cleared["kind"] == "INVALID_TIME"
    assert "request_id" not in cleared
