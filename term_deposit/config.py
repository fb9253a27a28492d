"""Application configuration backed by environment variables."""

from functools import lru_cache
from typing import List, Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Calculator service settings, overridable via ``TERM_DEPOSIT_*`` env vars."""

    app_name: str = "Term Deposit Calculator"

    # Logging configuration
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    # API configuration
    cors_origins: List[str] = ["http://localhost:5173", "http://127.0.0.1:5173"]

    # Calculator defaults shown before the user edits anything
    default_principal: float = 10_000
    default_interest_rate: float = 1.2
    default_duration_months: float = 3
    default_frequency: Literal["monthly", "quarterly", "annually", "atMaturity"] = "monthly"

    model_config = SettingsConfigDict(env_prefix="TERM_DEPOSIT_", env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()
