"""Structured Logging: JSON formatter output shape."""

import json
import logging

from lotus_ledger.infrastructure.observability import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "lotus_ledger.test", logging.INFO, __file__, 1, "Game %s", ("created",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "lotus_ledger.test"
    assert log["message"] == "Game created"
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras_only():
    log = json.loads(JSONFormatter().format(
        _record(game_id="abc", operation="delete", unrelated="skip"),
    ))
    assert log["game_id"] == "abc"
    assert log["operation"] == "delete"
    assert "unrelated" not in log
