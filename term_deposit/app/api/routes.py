"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from term_deposit.core.calculator import Calculator, CalculatorInputs, CalculatorOutcome
from term_deposit.core.ping import get_ping_message
from term_deposit.domain.errors import ErrorType
from term_deposit.domain.input_validation import validate_inputs
from term_deposit.schemas.ping import PingResponse
from term_deposit.schemas.schedule import (
    DefaultsResponse,
    FieldValidation,
    ScheduleRequest,
    ScheduleResponse,
    ValidationResponse,
)

api_bp = Blueprint("api", __name__)


def _calculator() -> Calculator:
    return current_app.extensions["calculator"]


def _schedule_body(outcome: CalculatorOutcome) -> Dict[str, Any]:
    summary = outcome.summary
    return {
        "schedule": outcome.schedule,
        "final_balance": summary.final_balance,
        "total_interest_earned": summary.total_interest_earned,
    }


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    settings = current_app.config["SETTINGS"]
    response = PingResponse(message=get_ping_message(), service=settings.app_name)
    return jsonify(response.model_dump())


@api_bp.get("/calc/defaults")
def defaults() -> Any:
    """Default inputs and the schedule they produce."""
    outcome = _calculator().initial_state()
    inputs = outcome.inputs
    response = DefaultsResponse(
        principal=inputs.principal,
        annual_rate=inputs.annual_rate,
        months=inputs.months,
        frequency=inputs.frequency,
        **_schedule_body(outcome),
    )
    return jsonify(response.model_dump(by_alias=True))


@api_bp.post("/calc/validate")
def validate() -> Any:
    """Per-field form validation; never fails the request for bad values."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = ScheduleRequest.model_validate(raw_payload)
    results = validate_inputs(payload.principal, payload.annual_rate, payload.months)
    response = ValidationResponse(
        is_valid=all(result.is_valid for result in results.values()),
        fields={
            name: FieldValidation(is_valid=result.is_valid, error=result.error)
            for name, result in results.items()
        },
    )
    return jsonify(response.model_dump(by_alias=True))


@api_bp.post("/calc/schedule")
def schedule() -> Any:
    """Compute the compounding schedule for one set of inputs."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = ScheduleRequest.model_validate(raw_payload)
    outcome = _calculator().calculate(
        CalculatorInputs(
            principal=payload.principal,
            annual_rate=payload.annual_rate,
            months=payload.months,
            frequency=payload.frequency,
        )
    )
    if outcome.error is not None:
        body = {"error": outcome.error.user_message, "type": outcome.error.type.value}
        status = (
            HTTPStatus.UNPROCESSABLE_ENTITY
            if outcome.error.type is ErrorType.VALIDATION
            else HTTPStatus.INTERNAL_SERVER_ERROR
        )
        return jsonify(body), status

    response = ScheduleResponse(**_schedule_body(outcome))
    return jsonify(response.model_dump(by_alias=True))
