"""
Configuration - environment variables for the product API.

Values are read from the process environment and an optional .env file.

Usage:
    from product_api.config import get_settings

    port = get_settings().PORT
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Server
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=3000)

    # Shared secret expected in the x-api-key header of mutating requests
    API_KEY: str = Field(default="your-secret-api-key")

    # Logging
    LOG_LEVEL: str = Field(default="INFO")

    # Application metadata
    APP_NAME: str = Field(default="product-api")
    APP_VERSION: str = Field(default="0.1.0")


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
