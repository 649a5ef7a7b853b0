"""Structured Logging — verifies JSON formatter output and extra fields."""

import json
import logging

from crowdfund.infrastructure.observability import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "crowdfund.test", logging.INFO, __file__, 1, "Donation applied", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "crowdfund.test"
    assert log["message"] == "Donation applied"
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras():
    log = json.loads(JSONFormatter().format(
        _record(project_id="p1", amount=50, unrelated="hidden"),
    ))
    assert log["project_id"] == "p1"
    assert log["amount"] == 50
    assert "unrelated" not in log
