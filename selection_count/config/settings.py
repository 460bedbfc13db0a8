"""Environment-based application settings. Read-only; no business logic."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="selection-count-service", description="Service name")
    environment: Literal["development", "staging", "production"] = Field(
        default="development", description="Runtime environment"
    )
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Log level name")

    # Server
    host: str = Field(default="0.0.0.0", description="Listen host")
    port: int = Field(default=8000, ge=1, le=65535, description="Listen port")

    # Counting (see config/counting/static for profile semantics)
    counting_profile: str = Field(
        default="active",
        description="Counting profile name from static.json, or 'active'",
    )
    enable_debug_logging: bool = Field(
        default=False,
        description="Emit filter diagnostics for every count regardless of profile",
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance. Use for app lifetime."""
    return Settings()
