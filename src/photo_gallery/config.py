"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    storage_bucket: str = "photos"
    storage_folder: str = "lumiere-visuals-photos"
    operator_email: str
    operator_password: str
    allowed_formats: str = "jpg,jpeg,png,gif"
    max_upload_files: int = 10
    max_file_bytes: int = 10 * 1024 * 1024
    port: int = 3000
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_allowed_formats(raw: str | None) -> frozenset[str]:
    """Parse the comma-separated list of accepted image extensions."""
    if raw is None:
        return frozenset()
    formats: set[str] = set()
    for chunk in raw.split(","):
        value = chunk.strip().lower().lstrip(".")
        if value:
            formats.add(value)
    return frozenset(formats)
