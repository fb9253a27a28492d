from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from term_deposit.app import create_app
from term_deposit.config import Settings
from term_deposit.domain.errors import CalculatorError


class RecordingErrorLogger:
    def __init__(self):
        self.errors: list[CalculatorError] = []

    def log(self, error: CalculatorError) -> None:
        self.errors.append(error)


@pytest.fixture()
def settings() -> Settings:
    return Settings(log_level="WARNING", log_format="text")


@pytest.fixture()
def error_logger() -> RecordingErrorLogger:
    return RecordingErrorLogger()


@pytest.fixture()
def client(settings, error_logger) -> FlaskClient:
    app = create_app(settings=settings, error_logger=error_logger)
    with app.test_client() as test_client:
        yield test_client
