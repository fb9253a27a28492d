"""Calculator service: validate raw inputs, pick a frequency, build a schedule."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from term_deposit.config import Settings, get_settings
from term_deposit.core.compounding import (
    compute_annually,
    compute_at_maturity,
    compute_monthly,
    compute_quarterly,
)
from term_deposit.domain.errors import (
    CalculatorError,
    DomainError,
    ErrorLogger,
    LoggingErrorLogger,
    UnknownFrequencyError,
    create_calculation_error,
    create_context,
    create_unknown_error,
    create_validation_error,
)
from term_deposit.domain.value_objects import (
    AnnualInterestRate,
    DurationMonths,
    PrincipalAmount,
    create_annual_interest_rate,
    create_duration_months,
    create_principal,
)
from term_deposit.schemas.schedule import CalculationResult, PayFrequency, ScheduleSummary

logger = logging.getLogger(__name__)

ScheduleFunction = Callable[[float, AnnualInterestRate, DurationMonths], List[CalculationResult]]

SCHEDULES_BY_FREQUENCY: Dict[str, ScheduleFunction] = {
    "monthly": compute_monthly,
    "quarterly": compute_quarterly,
    "annually": compute_annually,
    "atMaturity": compute_at_maturity,
}


@dataclass(frozen=True)
class CalculatorInputs:
    principal: float
    annual_rate: float
    months: float
    frequency: PayFrequency = "monthly"


@dataclass
class CalculatorOutcome:
    inputs: CalculatorInputs
    schedule: List[CalculationResult] = field(default_factory=list)
    error: Optional[CalculatorError] = None

    @property
    def summary(self) -> ScheduleSummary:
        return summarize(self.schedule)


def compute_for_frequency(
    principal: PrincipalAmount,
    annual_rate: AnnualInterestRate,
    months: DurationMonths,
    frequency: str,
) -> List[CalculationResult]:
    try:
        schedule_for = SCHEDULES_BY_FREQUENCY[frequency]
    except KeyError:
        raise UnknownFrequencyError(f"Unknown frequency: {frequency}") from None
    return schedule_for(principal, annual_rate, months)


def summarize(schedule: List[CalculationResult]) -> ScheduleSummary:
    """Headline figures come from the last row; an empty schedule sums to zero."""
    if not schedule:
        return ScheduleSummary()
    last = schedule[-1]
    return ScheduleSummary(final_balance=last.balance, total_interest_earned=last.interest)


class Calculator:
    """
    Turns raw form values into a schedule.

    Failures never raise out of ``calculate``: they come back on the outcome
    with an empty schedule and are handed to the injected error logger.
    """

    component = "Calculator"

    def __init__(self, error_logger: Optional[ErrorLogger] = None, settings: Optional[Settings] = None):
        self.error_logger = error_logger or LoggingErrorLogger()
        self.settings = settings or get_settings()

    def default_inputs(self) -> CalculatorInputs:
        return CalculatorInputs(
            principal=self.settings.default_principal,
            annual_rate=self.settings.default_interest_rate,
            months=self.settings.default_duration_months,
            frequency=self.settings.default_frequency,
        )

    def initial_state(self) -> CalculatorOutcome:
        return self._run(self.default_inputs(), action="initialize")

    def calculate(self, inputs: CalculatorInputs) -> CalculatorOutcome:
        return self._run(inputs, action="calculate")

    def _run(self, inputs: CalculatorInputs, action: str) -> CalculatorOutcome:
        try:
            principal = create_principal(inputs.principal)
            annual_rate = create_annual_interest_rate(inputs.annual_rate)
            months = create_duration_months(inputs.months)
            schedule = compute_for_frequency(principal, annual_rate, months, inputs.frequency)
        except DomainError as exc:
            error: CalculatorError = create_validation_error(
                "input",
                {
                    "principal": inputs.principal,
                    "annualRate": inputs.annual_rate,
                    "months": inputs.months,
                    "frequency": inputs.frequency,
                },
                str(exc),
                create_context(self.component, action),
            )
        except ArithmeticError as exc:
            error = create_calculation_error(inputs.frequency, str(exc), create_context(self.component, action))
        except Exception as exc:
            logger.exception("Unexpected failure while computing schedule")
            error = create_unknown_error(exc, create_context(self.component, action))
        else:
            logger.debug(
                "Computed %d-month %s schedule", len(schedule), inputs.frequency
            )
            return CalculatorOutcome(inputs=inputs, schedule=schedule)

        self.error_logger.log(error)
        return CalculatorOutcome(inputs=inputs, error=error)
