import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    # Data Sources (local path or http(s) URL)
    teams_source: str = Field(
        "teams.json", description="Location of the teams JSON document."
    )
    games_source: str = Field(
        "games.json", description="Location of the games JSON document."
    )

    # HTTP Fetching
    http_timeout_seconds: float = Field(
        30.0, gt=0, description="Timeout for a single HTTP request, in seconds."
    )
    fetch_attempts: int = Field(
        4,
        ge=1,
        description="Total attempts for an HTTP fetch, including the first one.",
    )

    # Presentation
    playoff_dates_label: str = Field(
        "Friday 5/1/26 (Play-in Games) • Saturday 5/2/26 - Semifinals 10:30 AM • Championship 12:00 PM",
        description="Dates line shown above the playoff bracket.",
    )

    # Logging Configuration
    log_level: str = Field(
        "INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."
    )

    # Pydantic Settings Configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )


def load_settings() -> AppSettings:
    """Loads and validates application settings."""
    try:
        settings = AppSettings()
        log_level_upper = settings.log_level.upper()
        # Validate log_level even if loaded from .env
        if log_level_upper not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            logging.warning(
                f"Invalid LOG_LEVEL '{settings.log_level}' found in .env or default. Using INFO."
            )
            settings.log_level = "INFO"
        else:
            settings.log_level = log_level_upper
        return settings
    except Exception as e:
        logging.exception(f"Error loading application settings: {e}")
        raise SystemExit("Failed to load application settings. Exiting.")


settings: AppSettings = load_settings()
