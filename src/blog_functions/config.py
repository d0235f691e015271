"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    blob_table: str = "blobs"
    algolia_app_id: str
    algolia_api_key: str
    algolia_index_name: str = "raymondcamden"
    buttondown_api_key: str
    buttondown_base_url: str = "https://api.buttondown.email/v1"
    site_base_url: str = "https://www.raymondcamden.com"
    recommendations_ttl_seconds: int = 86400
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
