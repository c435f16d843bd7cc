"""FastAPI application settings."""

from pydantic_settings import BaseSettings
from functools import lru_cache
import os


def _parse_cors_origins() -> list[str]:
    """Parse CORS origins from environment variable."""
    cors_env = os.getenv("METER_ALLOWED_ORIGINS", "")
    if cors_env:
        return [origin.strip() for origin in cors_env.split(",")]
    # Default development origins
    return ["http://localhost:3000", "http://localhost:5173"]


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # App info
    app_name: str = "Meter Dashboard API"
    version: str = "1.0.0"
    debug: bool = False

    # CORS - configurable via environment variable
    cors_origins: list[str] = _parse_cors_origins()

    class Config:
        env_prefix = "METER_"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
