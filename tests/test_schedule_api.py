from __future__ import annotations

from flask.testing import FlaskClient


def schedule_payload(**overrides) -> dict:
    payload = {"principal": 10_000, "annualRate": 1.2, "months": 3, "frequency": "monthly"}
    payload.update(overrides)
    return payload


def test_schedule_returns_rows_and_summary(client: FlaskClient):
    resp = client.post("/api/calc/schedule", json=schedule_payload())

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["schedule"] == [
        {"month": 1, "annualRate": 1.2, "interest": 10.0, "balance": 10010.0},
        {"month": 2, "annualRate": 1.2, "interest": 20.01, "balance": 10020.01},
        {"month": 3, "annualRate": 1.2, "interest": 30.03, "balance": 10030.03},
    ]
    assert body["finalBalance"] == 10030.03
    assert body["totalInterestEarned"] == 30.03


def test_schedule_at_maturity(client: FlaskClient):
    resp = client.post("/api/calc/schedule", json=schedule_payload(months=5, frequency="atMaturity"))

    assert resp.status_code == 200
    assert resp.get_json()["finalBalance"] == 10050


def test_out_of_range_input_returns_422_with_message(client: FlaskClient, error_logger):
    resp = client.post("/api/calc/schedule", json=schedule_payload(months=2))

    assert resp.status_code == 422
    assert resp.get_json() == {
        "error": "Duration must be between 3 and 60 months. Received: 2 months",
        "type": "VALIDATION",
    }
    assert len(error_logger.errors) == 1


def test_malformed_payload_returns_pydantic_detail(client: FlaskClient):
    resp = client.post("/api/calc/schedule", json={"principal": 10_000})

    assert resp.status_code == 422
    body = resp.get_json()
    assert "detail" in body
    missing = {tuple(error["loc"]) for error in body["detail"]}
    assert ("annualRate",) in missing
    assert ("months",) in missing


def test_unknown_frequency_is_rejected_by_schema(client: FlaskClient):
    resp = client.post("/api/calc/schedule", json=schedule_payload(frequency="weekly"))

    assert resp.status_code == 422
    assert "detail" in resp.get_json()


def test_defaults_endpoint(client: FlaskClient):
    resp = client.get("/api/calc/defaults")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["principal"] == 10_000
    assert body["annualRate"] == 1.2
    assert body["months"] == 3
    assert body["frequency"] == "monthly"
    assert len(body["schedule"]) == 3
    assert body["finalBalance"] == 10030.03


def test_validate_endpoint_reports_each_field(client: FlaskClient):
    resp = client.post("/api/calc/validate", json=schedule_payload(principal=0, months=4.5))

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["isValid"] is False
    assert body["fields"]["principal"] == {"isValid": False, "error": "Please enter a valid amount"}
    assert body["fields"]["annualRate"] == {"isValid": True, "error": None}
    assert body["fields"]["months"]["error"] == "Duration must be a whole number of months"


def test_validate_endpoint_all_valid(client: FlaskClient):
    resp = client.post("/api/calc/validate", json=schedule_payload())

    assert resp.get_json()["isValid"] is True
