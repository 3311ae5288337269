"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    off_search_url: str = "https://world.openfoodfacts.org/cgi/search.pl"
    off_timeout_seconds: float = 5.0
    off_user_agent: str = "NutriAI/0.1"
    environment: str = _ENVIRONMENT
    debug: bool = False

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
