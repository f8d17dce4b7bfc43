"""Structured logging — JSON formatter surfaces request extras."""

import json
import logging

from app.infrastructure import observability
from app.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "app.services.place_service", logging.INFO, __file__, 1,
        "Place saved", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_extras():
    line = JSONFormatter().format(_record(user_id="u-1", place_id="abc123"))
    log = json.loads(line)
    assert log["message"] == "Place saved"
    assert log["level"] == "INFO"
    assert log["user_id"] == "u-1"
    assert log["place_id"] == "abc123"


def test_json_formatter_skips_missing_extras():
    log = json.loads(JSONFormatter().format(_record()))
    assert "user_id" not in log
    assert "error_code" not in log


def test_setup_logging_does_not_stack_handlers():
    setup_logging("INFO", "json")
    count = len(logging.root.handlers)
    setup_logging("DEBUG", "text")
    try:
        assert len(logging.root.handlers) == count
        assert logging.root.level == logging.DEBUG
    finally:
        logging.root.removeHandler(observability._handler)
        observability._handler = None
        logging.root.setLevel(logging.WARNING)
