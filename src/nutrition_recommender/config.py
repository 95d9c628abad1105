"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

CATALOG_BACKENDS = {"static", "supabase", "http"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    catalog_backend: str = "static"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    catalog_table: str = "indian_foods"
    catalog_api_url: str | None = None
    catalog_api_key: str | None = None
    catalog_cache_ttl_seconds: int = 3600
    default_region: str = "North Indian"
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def resolve_catalog_backend(raw: str | None) -> str:
    """Normalize the configured catalog backend name."""
    backend = (raw or "static").strip().lower()
    if backend not in CATALOG_BACKENDS:
        raise ValueError(f"Unknown catalog backend: {raw}")
    return backend
