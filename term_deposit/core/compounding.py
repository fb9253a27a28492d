"""Compound interest schedule engine.

Every row is evaluated from the closed-form formula at ``t = month / 12``
rather than by compounding the previous row forward, so rounding never
accumulates and any row can be reproduced on its own.

Inputs are trusted: validation belongs to ``term_deposit.domain.value_objects``.
The engine never raises on numeric input; degenerate terms or rates yield an
empty schedule or NaN/infinite rows instead.
"""

import math
from typing import Dict, List

from term_deposit.core.rounding import round_to_cents
from term_deposit.domain.value_objects import AnnualInterestRate, DurationMonths
from term_deposit.schemas.schedule import CalculationResult

COMPOUNDING_PERIODS: Dict[str, int] = {
    "monthly": 12,
    "quarterly": 4,
    "annually": 1,
}


def _divide(numerator: float, denominator: float) -> float:
    """IEEE division: ``x / 0`` is a signed infinity and ``0 / 0`` is NaN."""
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _raw_balance_for_month(principal: float, rate: float, month: int, periods_per_year: float) -> float:
    years = month / 12
    try:
        growth = (1 + _divide(rate, periods_per_year)) ** (periods_per_year * years)
    except (OverflowError, ZeroDivisionError):
        growth = math.inf
    # a negative base to a fractional power has no real value
    if isinstance(growth, complex):
        return math.nan
    return principal * growth


def compute_schedule(
    principal: float,
    annual_rate: AnnualInterestRate,
    months: DurationMonths,
    periods_per_year: float,
) -> List[CalculationResult]:
    """Compute one row per month, ``1..months`` inclusive.

    A fractional term only yields its whole months; a zero, negative or NaN
    term yields no rows.
    """
    rate = annual_rate / 100
    schedule: List[CalculationResult] = []

    month = 1
    while month <= months:
        balance = _raw_balance_for_month(principal, rate, month, periods_per_year)
        schedule.append(
            CalculationResult(
                month=month,
                annual_rate=annual_rate,
                interest=round_to_cents(balance - principal),
                balance=round_to_cents(balance),
            )
        )
        month += 1

    return schedule


def compute_monthly(
    principal: float, annual_rate: AnnualInterestRate, months: DurationMonths
) -> List[CalculationResult]:
    return compute_schedule(principal, annual_rate, months, COMPOUNDING_PERIODS["monthly"])


def compute_quarterly(
    principal: float, annual_rate: AnnualInterestRate, months: DurationMonths
) -> List[CalculationResult]:
    return compute_schedule(principal, annual_rate, months, COMPOUNDING_PERIODS["quarterly"])


def compute_annually(
    principal: float, annual_rate: AnnualInterestRate, months: DurationMonths
) -> List[CalculationResult]:
    return compute_schedule(principal, annual_rate, months, COMPOUNDING_PERIODS["annually"])


def compute_at_maturity(
    principal: float, annual_rate: AnnualInterestRate, months: DurationMonths
) -> List[CalculationResult]:
    """Compound exactly once, at the end of the term."""
    return compute_schedule(principal, annual_rate, months, _divide(12, months))
