"""Application configuration settings."""

from __future__ import annotations

from datetime import time
from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./adoption.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    secret_key: str = Field(
        description="Shared secret used to verify caller tokens issued by the auth service",
        min_length=1,
    )
    access_token_expire_minutes: int = Field(
        default=60,
        description="Number of minutes before access tokens expire",
        gt=0,
    )
    app_timezone: str | None = Field(
        default=None,
        description="IANA timezone name (or UTC offset) used for 'today' and timestamps",
    )
    business_hours_start: time = Field(
        default=time(9, 0),
        description="First candidate interview slot of the day",
    )
    business_hours_end: time = Field(
        default=time(19, 30),
        description="Last candidate interview slot of the day (inclusive)",
    )
    slot_interval_minutes: int = Field(
        default=30,
        description="Granularity of generated availability slots",
        gt=0,
    )
    default_interview_duration_minutes: int = Field(
        default=60,
        description="Duration assumed for stored interviews without one",
        gt=0,
    )
    read_retry_attempts: int = Field(
        default=3,
        description="Attempts made by idempotent reads when the store is unavailable",
        ge=1,
    )
    read_retry_delay_seconds: float = Field(
        default=0.2,
        description="Delay between retried reads",
        ge=0,
    )
    reminder_lead_hours: int = Field(
        default=24,
        description="How far ahead of an interview the adopter reminder is created",
        gt=0,
    )
    log_level: str = Field(default="INFO", description="Root logging level")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        description="Origins allowed to call the API from a browser",
    )

    @model_validator(mode="after")
    def _validate_business_hours(self) -> "Settings":
        if self.business_hours_end < self.business_hours_start:
            raise ValueError(
                "BUSINESS_HOURS_END must not be earlier than BUSINESS_HOURS_START"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
