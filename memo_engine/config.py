"""Centralised configuration loaded from environment variables / .env file."""

from __future__ import annotations

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MEMO_",
        extra="ignore",
        validate_assignment=True,
    )

    # Logging
    log_level: str = "INFO"

    # Display
    display_timezone: str = "UTC"

    # Attendee background window
    recency_window_days: int = 90
    max_rendered_interactions: int = 3
    max_background_priorities: int = 3

    # Confidence thresholds
    recent_contact_threshold_days: int = 60
    news_freshness_threshold_days: int = 30

    # Recent developments section
    max_recent_developments: int = 3

    @field_validator("display_timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        """Reject zone names the tz database cannot resolve."""
        if not value or value.upper() == "UTC":
            return "UTC"
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"unknown time zone: {value!r}") from exc
        return value


settings = Settings()
