"""Application configuration."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

from compound_xref.constants import DEFAULT_CONCURRENCY, UNICHEM_BASE_URL


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # UniChem
    unichem_base_url: str = UNICHEM_BASE_URL
    timeout_seconds: float | None = None  # None keeps aiohttp's default

    # Pipeline
    concurrency: int = Field(default=DEFAULT_CONCURRENCY, ge=1)

    # App Settings
    log_level: str = "INFO"

    class Config:
        env_prefix = "COMPOUND_XREF_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        frozen = True


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
