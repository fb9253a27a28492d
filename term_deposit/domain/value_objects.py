"""Validated input value objects for the compounding calculator.

Each ``create_*`` function takes a raw number and either returns it unchanged,
typed as the matching branded alias, or raises a ``RangeViolationError``
carrying a message ready to show to the user. The aliases are ``NewType``s,
so there is no runtime wrapper: a validated principal *is* the float that was
passed in. Only the functions in this module should produce them.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Callable, NewType, Optional

from term_deposit.domain.errors import (
    InvalidNumberError,
    NonIntegralDurationError,
    RangeViolationError,
)

PrincipalAmount = NewType("PrincipalAmount", float)
AnnualInterestRate = NewType("AnnualInterestRate", float)
DurationMonths = NewType("DurationMonths", float)

Formatter = Callable[[float], str]
Check = Callable[[float], None]

MIN_ALLOWED_PRINCIPAL = 1
MAX_ALLOWED_PRINCIPAL = 10_000_000
MIN_ALLOWED_INTEREST_RATE = 0
MAX_ALLOWED_INTEREST_RATE = 15
MIN_ALLOWED_COMPOUNDING_MONTHS = 3
MAX_ALLOWED_COMPOUNDING_MONTHS = 5 * 12

WHOLE_MONTHS_MESSAGE = "Duration must be a whole number of months"

# wide enough to quantize any finite float to thousandths
_CURRENCY_CONTEXT = Context(prec=400)


def describe_number(value: float) -> str:
    """Render a number the way it reads in messages: ``2`` not ``2.0``."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    # large magnitudes read in exponent form, e.g. 1e+21
    if abs(value) >= 1e21:
        return repr(float(value))
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_currency(value: float) -> str:
    """``$`` plus a grouped amount with at most three decimals (``$10,000``)."""
    if not math.isfinite(value):
        return f"${describe_number(value)}"
    # half-up on the shortest decimal form, so 1.0005 reads $1.001
    amount = Decimal(repr(float(value))).quantize(
        Decimal("0.001"), rounding=ROUND_HALF_UP, context=_CURRENCY_CONTEXT
    )
    grouped = f"{amount:,.3f}".rstrip("0").rstrip(".")
    if grouped == "-0":
        grouped = "0"
    return f"${grouped}"


def make_percentage_formatter(decimal_places: int = 2) -> Formatter:
    def format_percentage(value: float) -> str:
        return f"{value:.{decimal_places}f}%"

    return format_percentage


def make_unit_formatter(singular: str, plural: Optional[str] = None) -> Formatter:
    """Return a formatter like ``1 month`` / ``5 months``."""

    def format_unit(value: float) -> str:
        unit = singular if value == 1 else (plural or f"{singular}s")
        return f"{describe_number(value)} {unit}"

    return format_unit


def make_number_check(display_name: str) -> Check:
    """Reject NaN and infinities before any range check runs."""

    def check_number(value: float) -> None:
        if math.isnan(value) or not math.isfinite(value):
            raise InvalidNumberError(
                f"{display_name} must be a valid number. Received: {describe_number(value)}"
            )

    return check_number


def make_value_object_factory(
    *,
    minimum: float,
    maximum: float,
    display_name: str,
    format_value: Optional[Formatter] = None,
    format_description: Optional[Formatter] = None,
    format_minimum: Optional[Formatter] = None,
    custom_validation: Optional[Check] = None,
) -> Callable[[float], float]:
    """Build a validator for a closed ``[minimum, maximum]`` interval.

    ``custom_validation`` runs first and raises on its own; the inclusive
    range check runs after it, so both bounds are accepted values.
    ``format_minimum`` overrides ``format_description`` for the lower bound
    only, for messages like ``between 3 and 60 months``.
    """
    describe = format_description or describe_number
    describe_minimum = format_minimum or describe
    render = format_value or describe_number

    def create_value_object(value: float) -> float:
        if custom_validation is not None:
            custom_validation(value)

        if value < minimum or value > maximum:
            raise RangeViolationError(
                f"{display_name} must be between {describe_minimum(minimum)} and {describe(maximum)}. "
                f"Received: {render(value)}"
            )
        return value

    return create_value_object


DESCRIPTION_MIN_ALLOWED_PRINCIPAL = format_currency(MIN_ALLOWED_PRINCIPAL)
DESCRIPTION_MAX_ALLOWED_PRINCIPAL = format_currency(MAX_ALLOWED_PRINCIPAL)

_format_rate = make_percentage_formatter(2)
DESCRIPTION_MIN_ALLOWED_INTEREST_RATE = _format_rate(MIN_ALLOWED_INTEREST_RATE)
DESCRIPTION_MAX_ALLOWED_INTEREST_RATE = _format_rate(MAX_ALLOWED_INTEREST_RATE)

_principal = make_value_object_factory(
    minimum=MIN_ALLOWED_PRINCIPAL,
    maximum=MAX_ALLOWED_PRINCIPAL,
    display_name="Principal amount",
    format_value=format_currency,
    format_description=format_currency,
    custom_validation=make_number_check("Principal amount"),
)

_annual_interest_rate = make_value_object_factory(
    minimum=MIN_ALLOWED_INTEREST_RATE,
    maximum=MAX_ALLOWED_INTEREST_RATE,
    display_name="Interest rate",
    format_value=_format_rate,
    format_description=_format_rate,
    custom_validation=make_number_check("Interest rate"),
)

_check_duration_number = make_number_check("Duration")


def _check_whole_duration(value: float) -> None:
    _check_duration_number(value)
    if not float(value).is_integer():
        raise NonIntegralDurationError(WHOLE_MONTHS_MESSAGE)


def _duration_factory(custom_validation: Check) -> Callable[[float], float]:
    return make_value_object_factory(
        minimum=MIN_ALLOWED_COMPOUNDING_MONTHS,
        maximum=MAX_ALLOWED_COMPOUNDING_MONTHS,
        display_name="Duration",
        format_value=make_unit_formatter("month"),
        format_description=lambda value: f"{describe_number(value)} months",
        format_minimum=describe_number,
        custom_validation=custom_validation,
    )


_duration_months = _duration_factory(_check_duration_number)
_whole_duration_months = _duration_factory(_check_whole_duration)


def create_principal(raw: float) -> PrincipalAmount:
    """Validate a principal amount between $1 and $10,000,000."""
    return PrincipalAmount(_principal(raw))


def create_annual_interest_rate(raw: float) -> AnnualInterestRate:
    """Validate an annual percentage rate between 0.00% and 15.00%."""
    return AnnualInterestRate(_annual_interest_rate(raw))


def create_duration_months(raw: float, whole_months: bool = False) -> DurationMonths:
    """Validate a term between 3 and 60 months.

    Fractional months pass unless ``whole_months`` is set, in which case they
    raise ``NonIntegralDurationError`` ahead of the range check.
    """
    factory = _whole_duration_months if whole_months else _duration_months
    return DurationMonths(factory(raw))
