"""Application configuration managed via environment variables."""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "NourishPlate Meal Planner"
    debug: bool = False
    log_level: str = "INFO"
    database_url: str = "postgresql+psycopg2://nourishplate@localhost:5432/nourishplate"
    opik_enabled: bool = False
    opik_api_key: str | None = None
    opik_project: str = "nourishplate"
    model_provider: str = "openai"
    openai_api_key: str | None = None
    openai_model: str = "gpt-4o"
    gemini_api_key: str | None = None
    gemini_api_url: str = "https://generativelanguage.googleapis.com/v1beta/models"
    gemini_model: str = "gemini-1.5-flash"
    oracle_timeout_seconds: float = 90.0
    plan_min_days: int = 1
    plan_max_days: int = 90
    auto_activate_new_plans: bool = True
    activation_max_attempts: int = 3
    notifications_enabled: bool = False
    notifications_provider: str = "noop"
    notifications_webhook_url: str | None = None
    reminder_timezone: str = "UTC"


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()


settings = get_settings()
