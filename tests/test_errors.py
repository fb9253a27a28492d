from __future__ import annotations

import logging

import pytest

from term_deposit.domain.errors import (
    CALCULATION_USER_MESSAGE,
    CalculationError,
    CompositeErrorLogger,
    ErrorSeverity,
    ErrorType,
    LoggingErrorLogger,
    NoOpErrorLogger,
    UnknownError,
    ValidationError,
    create_calculation_error,
    create_context,
    create_unknown_error,
    create_validation_error,
)


@pytest.fixture()
def context():
    return create_context("Calculator", "calculate", source="test")


def test_context_carries_component_action_and_timestamp(context):
    assert context["component"] == "Calculator"
    assert context["action"] == "calculate"
    assert context["source"] == "test"
    assert "T" in context["timestamp"]


def test_validation_error_uses_message_for_users(context):
    error = create_validation_error("principal", 0, "Amount too small", context)

    assert isinstance(error, ValidationError)
    assert error.user_message == "Amount too small"
    assert error.type is ErrorType.VALIDATION
    assert error.severity is ErrorSeverity.MEDIUM
    assert error.field == "principal"
    assert error.value == 0


def test_calculation_error_defaults_to_high_severity(context):
    error = create_calculation_error("monthly", "overflow", context)

    assert isinstance(error, CalculationError)
    assert error.user_message == CALCULATION_USER_MESSAGE
    assert error.severity is ErrorSeverity.HIGH
    assert error.calculation_type == "monthly"


def test_unknown_error_wraps_original(context):
    original = RuntimeError("boom")
    error = create_unknown_error(original, context)

    assert isinstance(error, UnknownError)
    assert error.original_error is original
    assert error.message == "boom"
    assert error.to_dict()["type"] == "UNKNOWN"


@pytest.mark.parametrize(
    "severity, level",
    [
        (ErrorSeverity.CRITICAL, logging.ERROR),
        (ErrorSeverity.HIGH, logging.ERROR),
        (ErrorSeverity.MEDIUM, logging.WARNING),
        (ErrorSeverity.LOW, logging.INFO),
    ],
)
def test_logging_error_logger_maps_severity_to_level(caplog, context, severity, level):
    logger = logging.getLogger("tests.error_logger")
    error = create_calculation_error("monthly", "something broke", context, severity=severity)

    with caplog.at_level(logging.DEBUG, logger="tests.error_logger"):
        LoggingErrorLogger(logger).log(error)

    assert len(caplog.records) == 1
    record = caplog.records[0]
    assert record.levelno == level
    assert "something broke" in record.getMessage()
    assert record.extra["severity"] == severity.value


def test_composite_logger_fans_out(context):
    seen = []

    class Recorder:
        def log(self, error):
            seen.append(error)

    composite = CompositeErrorLogger([Recorder(), NoOpErrorLogger()])
    composite.add_logger(Recorder())
    error = create_validation_error("months", 2, "too short", context)

    composite.log(error)

    assert seen == [error, error]
