"""Form-level input checks that report problems instead of raising.

These mirror the value object bounds but use shorter, field-oriented
messages, and the duration check insists on whole months.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Optional

from term_deposit.domain.value_objects import (
    DESCRIPTION_MAX_ALLOWED_INTEREST_RATE,
    DESCRIPTION_MAX_ALLOWED_PRINCIPAL,
    DESCRIPTION_MIN_ALLOWED_INTEREST_RATE,
    DESCRIPTION_MIN_ALLOWED_PRINCIPAL,
    MAX_ALLOWED_COMPOUNDING_MONTHS,
    MAX_ALLOWED_INTEREST_RATE,
    MAX_ALLOWED_PRINCIPAL,
    MIN_ALLOWED_COMPOUNDING_MONTHS,
    MIN_ALLOWED_INTEREST_RATE,
    MIN_ALLOWED_PRINCIPAL,
    WHOLE_MONTHS_MESSAGE,
)


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    error: Optional[str] = None


VALID = ValidationResult(is_valid=True)


def _invalid(message: str) -> ValidationResult:
    return ValidationResult(is_valid=False, error=message)


def validate_principal(value: float) -> ValidationResult:
    if math.isnan(value) or value == 0:
        return _invalid("Please enter a valid amount")
    if value < MIN_ALLOWED_PRINCIPAL:
        return _invalid(f"Amount must be at least {DESCRIPTION_MIN_ALLOWED_PRINCIPAL}")
    if value > MAX_ALLOWED_PRINCIPAL:
        return _invalid(f"Amount cannot exceed {DESCRIPTION_MAX_ALLOWED_PRINCIPAL}")
    return VALID


def validate_interest_rate(value: float) -> ValidationResult:
    if math.isnan(value):
        return _invalid("Please enter a valid interest rate")
    if value < MIN_ALLOWED_INTEREST_RATE:
        return _invalid(f"Rate must be at least {DESCRIPTION_MIN_ALLOWED_INTEREST_RATE}")
    if value > MAX_ALLOWED_INTEREST_RATE:
        return _invalid(f"Rate cannot exceed {DESCRIPTION_MAX_ALLOWED_INTEREST_RATE}")
    return VALID


def validate_duration(value: float) -> ValidationResult:
    if math.isnan(value) or value == 0:
        return _invalid("Please enter a valid duration")
    if not math.isfinite(value) or not float(value).is_integer():
        return _invalid(WHOLE_MONTHS_MESSAGE)
    if value < MIN_ALLOWED_COMPOUNDING_MONTHS:
        return _invalid(f"Duration must be at least {MIN_ALLOWED_COMPOUNDING_MONTHS} months")
    if value > MAX_ALLOWED_COMPOUNDING_MONTHS:
        return _invalid(f"Duration cannot exceed {MAX_ALLOWED_COMPOUNDING_MONTHS} months")
    return VALID


def validate_inputs(principal: float, annual_rate: float, months: float) -> Dict[str, ValidationResult]:
    """Check every form field independently."""
    return {
        "principal": validate_principal(principal),
        "annualRate": validate_interest_rate(annual_rate),
        "months": validate_duration(months),
    }
