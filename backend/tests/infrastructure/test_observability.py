"""Structured Logging — JSON formatter output and handler setup."""

import json
import logging

from beerstock.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "beerstock.services.beer_ledger", logging.INFO, __file__, 1,
        "Stock increment applied", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "beerstock.services.beer_ledger"
    assert log["message"] == "Stock increment applied"


def test_json_formatter_surfaces_known_extras_only():
    log = json.loads(JSONFormatter().format(
        _record(beer_id=3, delta=10, unrelated="x"),
    ))
    assert log["beer_id"] == 3
    assert log["delta"] == 10
    assert "unrelated" not in log


def test_setup_logging_does_not_stack_handlers():
    before = len(logging.root.handlers)
    setup_logging("DEBUG", "text")
    setup_logging("WARNING", "json")
    assert len(logging.root.handlers) == before + 1
    assert logging.root.level == logging.WARNING
