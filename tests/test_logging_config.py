from __future__ import annotations

import json
import logging

from term_deposit.logging_config import JSONFormatter, setup_logging


def make_record(**attrs) -> logging.LogRecord:
    record = logging.LogRecord("term_deposit.test", logging.WARNING, __file__, 10, "rate %s", ("1.20%",), None)
    for key, value in attrs.items():
        setattr(record, key, value)
    return record


def test_json_formatter_emits_core_fields():
    entry = json.loads(JSONFormatter().format(make_record()))

    assert entry["level"] == "WARNING"
    assert entry["logger"] == "term_deposit.test"
    assert entry["message"] == "rate 1.20%"
    assert "timestamp" in entry
    assert "extra" not in entry


def test_json_formatter_includes_extra_payload():
    entry = json.loads(JSONFormatter().format(make_record(action="calculate", extra={"months": 3})))

    assert entry["action"] == "calculate"
    assert entry["extra"] == {"months": 3}


def test_setup_logging_is_idempotent():
    logger = setup_logging("DEBUG", "term_deposit.tests.setup", "json")
    setup_logging("DEBUG", "term_deposit.tests.setup", "json")

    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, JSONFormatter)
    assert logger.level == logging.DEBUG
    assert logger.propagate is False


def test_setup_logging_text_format():
    logger = setup_logging("info", "term_deposit.tests.text", "text")

    assert not isinstance(logger.handlers[0].formatter, JSONFormatter)
    assert logger.level == logging.INFO
