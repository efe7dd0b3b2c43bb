"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    supabase_table: str = "pasta"
    openai_api_key: str
    openai_model: str = "gpt-4o-mini"
    openai_store: bool = False
    catalog_base_url: str = "https://world.openfoodfacts.net"
    catalog_username: str = "off"
    catalog_password: str = "off"
    catalog_timeout_seconds: float = 10.0
    inference_timeout_seconds: float = 30.0
    fallback_cooking_minutes: int = 1
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
