"""Application configuration settings."""

from __future__ import annotations

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
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    secret_key: str = Field(
        description="Secret key used to verify bearer tokens", min_length=1
    )
    access_token_expire_minutes: int = Field(
        default=60,
        description="Number of minutes before access tokens expire",
        gt=0,
    )
    app_timezone: str = Field(
        default="UTC",
        description="IANA timezone name (or UTC+HH:MM offset) used for wall-clock jobs",
    )
    daily_reminder_hour: int = Field(
        default=7,
        description="Local hour of the day at which the daily appointment reminder fires",
    )
    daily_reminder_poll_minutes: int = Field(
        default=60,
        description="Polling interval of the daily appointment reminder job",
        gt=0,
    )
    medicine_reminder_interval_minutes: int = Field(
        default=5,
        description="Polling interval of the medicine reminder job",
        gt=0,
    )
    medicine_reminder_window_minutes: int = Field(
        default=5,
        description="Window after a reminder time during which an unscheduled reminder is due",
        gt=0,
    )
    reminder_jobs_enabled: bool = Field(
        default=True,
        description="Start the periodic reminder jobs together with the API process",
    )
    date_display_format: str = Field(
        default="%m/%d/%Y",
        description="strftime pattern used to render dates inside notification messages",
        min_length=1,
    )

    @model_validator(mode="after")
    def _validate_reminder_hour(self) -> "Settings":
        if not 0 <= self.daily_reminder_hour <= 23:
            raise ValueError("DAILY_REMINDER_HOUR must be between 0 and 23")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
