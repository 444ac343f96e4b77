"""Library settings using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """pomkit configuration from ``POMKIT_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="POMKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
    )

    # Application under test
    base_url: str = Field(
        default="http://localhost:3000", description="Base URL of the application under test"
    )

    # Timeouts (in milliseconds, Playwright convention)
    default_timeout_ms: int = Field(
        default=30_000, ge=1, description="Timeout for element waits, clicks and assertions"
    )
    navigation_timeout_ms: int = Field(
        default=60_000, ge=1, description="Timeout for page navigations"
    )
    poll_interval_ms: int = Field(
        default=500, ge=1, description="Interval between polls in wait_until()"
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging level"
    )
    debug: bool = Field(default=False, description="Pretty console logs instead of JSON")

    # Browser launch
    headless: bool = Field(default=True, description="Run the browser headless")
    slow_mo: int = Field(default=0, ge=0, description="Milliseconds to slow each browser action")

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate base URL format."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Base URL must start with http:// or https://")
        return v.rstrip("/")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
