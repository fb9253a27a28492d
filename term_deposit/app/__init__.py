"""Application factory and app-wide configuration."""

from typing import Optional

from flask import Flask
from flask_cors import CORS

from term_deposit.app.api.routes import api_bp
from term_deposit.config import Settings, get_settings
from term_deposit.core.calculator import Calculator
from term_deposit.domain.errors import ErrorLogger
from term_deposit.logging_config import setup_logging


def create_app(settings: Optional[Settings] = None, error_logger: Optional[ErrorLogger] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, "term_deposit", settings.log_format)

    app = Flask(__name__)
    app.config["SETTINGS"] = settings
    app.extensions["calculator"] = Calculator(error_logger=error_logger, settings=settings)

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.cors_origins}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
