"""Domain error types and error-reporting helpers for the calculator."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Protocol


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses keep ValueError compatibility so callers that only know about
    ValueError still catch them.
    """


class RangeViolationError(DomainError):
    """A value object input falls outside its allowed closed interval."""


class InvalidNumberError(RangeViolationError):
    """A value object input is NaN or infinite."""


class NonIntegralDurationError(DomainError):
    """A duration that must be whole months has a fractional part."""


class UnknownFrequencyError(DomainError):
    """A reinvestment frequency name is not recognised."""


class ErrorType(str, Enum):
    VALIDATION = "VALIDATION"
    CALCULATION = "CALCULATION"
    UNKNOWN = "UNKNOWN"


class ErrorSeverity(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


ErrorContext = Dict[str, Any]


class CalculatorError(Exception):
    """Structured error reported at the calculator service boundary."""

    def __init__(
        self,
        message: str,
        user_message: str,
        error_type: ErrorType,
        severity: ErrorSeverity,
        context: ErrorContext,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message
        self.type = error_type
        self.severity = severity
        self.context = context

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": type(self).__name__,
            "message": self.message,
            "userMessage": self.user_message,
            "type": self.type.value,
            "severity": self.severity.value,
            "context": self.context,
        }


class ValidationError(CalculatorError):
    """User input failed validation."""

    def __init__(self, field: str, value: Any, message: str, user_message: str, context: ErrorContext):
        super().__init__(message, user_message, ErrorType.VALIDATION, ErrorSeverity.MEDIUM, context)
        self.field = field
        self.value = value


class CalculationError(CalculatorError):
    """The schedule computation itself failed."""

    def __init__(
        self,
        calculation_type: str,
        message: str,
        user_message: str,
        context: ErrorContext,
        severity: ErrorSeverity = ErrorSeverity.HIGH,
    ):
        super().__init__(message, user_message, ErrorType.CALCULATION, severity, context)
        self.calculation_type = calculation_type


class UnknownError(CalculatorError):
    """Wraps an unexpected exception."""

    def __init__(self, original_error: BaseException, message: str, user_message: str, context: ErrorContext):
        super().__init__(message, user_message, ErrorType.UNKNOWN, ErrorSeverity.HIGH, context)
        self.original_error = original_error


CALCULATION_USER_MESSAGE = "Unable to calculate results. Please check your input values and try again."
UNKNOWN_USER_MESSAGE = (
    "An unexpected error occurred. Please try again or contact support if the problem persists."
)


def create_context(component: str, action: str, **extra: Any) -> ErrorContext:
    """Build an error context stamped with the current UTC time."""
    return {
        "component": component,
        "action": action,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        **extra,
    }


def create_validation_error(field: str, value: Any, message: str, context: ErrorContext) -> ValidationError:
    # validation messages are already written for end users
    return ValidationError(field, value, message, message, context)


def create_calculation_error(
    calculation_type: str,
    message: str,
    context: ErrorContext,
    severity: ErrorSeverity = ErrorSeverity.HIGH,
) -> CalculationError:
    return CalculationError(calculation_type, message, CALCULATION_USER_MESSAGE, context, severity)


def create_unknown_error(original_error: BaseException, context: ErrorContext) -> UnknownError:
    return UnknownError(original_error, str(original_error), UNKNOWN_USER_MESSAGE, context)


class ErrorLogger(Protocol):
    def log(self, error: CalculatorError) -> None:
        ...


class LoggingErrorLogger:
    """Send calculator errors to a stdlib logger at a severity-matched level."""

    def __init__(self, logger: Optional[logging.Logger] = None, prefix: str = "Calculator"):
        self.logger = logger or logging.getLogger("term_deposit.errors")
        self.prefix = prefix

    def log(self, error: CalculatorError) -> None:
        payload = error.to_dict()
        if error.severity in (ErrorSeverity.CRITICAL, ErrorSeverity.HIGH):
            self.logger.error("%s Error: %s", self.prefix, error.message, extra={"extra": payload})
        elif error.severity is ErrorSeverity.MEDIUM:
            self.logger.warning("%s Warning: %s", self.prefix, error.message, extra={"extra": payload})
        else:
            self.logger.info("%s Info: %s", self.prefix, error.message, extra={"extra": payload})


class NoOpErrorLogger:
    def log(self, error: CalculatorError) -> None:
        return None


class CompositeErrorLogger:
    """Fan an error out to several loggers in order."""

    def __init__(self, loggers: Iterable[ErrorLogger] = ()):
        self.loggers: List[ErrorLogger] = list(loggers)

    def add_logger(self, logger: ErrorLogger) -> None:
        self.loggers.append(logger)

    def log(self, error: CalculatorError) -> None:
        for logger in self.loggers:
            logger.log(error)
