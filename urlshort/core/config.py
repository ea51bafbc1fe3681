"""Application configuration settings."""

from pathlib import Path
from functools import lru_cache
from typing import Literal, Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="URLSHORT_",
        env_file=".env",
        extra="ignore",
    )

    # Application
    app_title: str = "URL Redirect Service"
    app_version: str = "0.1.0"
    app_description: str = "Redirects configured request paths to their destination URLs"

    # Redirects
    redirects: dict[str, str] = {}
    redirects_file: Optional[Path] = None
    redirects_format: Optional[Literal["yaml", "json"]] = None

    # Logging
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        """Upper-case the level so logging accepts names like "info"."""
        return value.upper()


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
