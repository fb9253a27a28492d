"""Data contracts for compounding schedule calculations."""

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

PayFrequency = Literal["monthly", "quarterly", "annually", "atMaturity"]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CalculationResult(CamelModel):
    """Single month of a compounding schedule."""

    model_config = ConfigDict(frozen=True)

    month: int = Field(..., ge=1)
    annual_rate: float
    interest: float = Field(..., description="Cumulative interest to date, rounded to cents.")
    balance: float = Field(..., description="Principal plus interest, rounded to cents.")


class ScheduleRequest(CamelModel):
    """Raw calculator inputs; range checks happen in the value objects."""

    model_config = ConfigDict(extra="forbid")

    principal: float
    annual_rate: float
    months: float
    frequency: PayFrequency = "monthly"


class ScheduleSummary(CamelModel):
    final_balance: float = 0.0
    total_interest_earned: float = 0.0


class ScheduleResponse(ScheduleSummary):
    """Computed schedule plus its headline figures."""

    schedule: List[CalculationResult]


class FieldValidation(CamelModel):
    is_valid: bool
    error: Optional[str] = None


class ValidationResponse(CamelModel):
    is_valid: bool
    fields: Dict[str, FieldValidation]


class DefaultsResponse(ScheduleResponse):
    principal: float
    annual_rate: float
    months: float
    frequency: PayFrequency
