"""CLI configuration using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class AdminSettings(BaseSettings):
    """Connection settings read from ``COMPASS_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="COMPASS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_url: str = "http://localhost:8000/api/v1"
    token: str | None = None
    tenant_id: str | None = None
    timeout_seconds: float = 10.0


@lru_cache
def get_admin_settings() -> AdminSettings:
    """Get cached CLI settings."""
    return AdminSettings()
