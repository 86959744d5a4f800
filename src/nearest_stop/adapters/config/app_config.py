"""12-factor configuration adapter using environment variables."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

NOMINATIM_SEARCH_URL = "https://nominatim.openstreetmap.org/search"


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Route dataset
    routes_file: str = Field(
        default="routes.json",
        description="Path or http(s) URL of the routes JSON document",
    )
    dataset_timeout: float = Field(
        default=10.0, description="Timeout for fetching a remote routes document in seconds"
    )

    # Geocoding configuration
    geocoder_url: str = Field(
        default=NOMINATIM_SEARCH_URL,
        description="Nominatim-compatible search endpoint used for address lookups",
    )
    geocoder_timeout: float = Field(
        default=10.0, description="Timeout for geocoding requests in seconds"
    )
    geocoder_user_agent: str = Field(
        default="nearest-stop/0.1",
        description="User-Agent sent to the geocoding service (required by Nominatim policy)",
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Root log level name")

    @field_validator("dataset_timeout", "geocoder_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate timeouts are positive."""
        if v <= 0:
            raise ValueError("timeouts must be greater than 0 seconds")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(
                "log_level must be one of 'DEBUG', 'INFO', 'WARNING', 'ERROR' or 'CRITICAL'"
            )
        return level

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)
