"""Configuration management using pydantic-settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from mtg_pricer import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Scryfall API
    scryfall_api_url: str = Field(
        default="https://api.scryfall.com",
        description="Base URL of the Scryfall REST API",
    )
    user_agent: str = Field(
        default=f"mtg-deck-pricer/{__version__}",
        description="User-Agent header sent with every Scryfall request",
    )

    # Throttling
    request_interval_ms: int = Field(
        default=100,
        gt=0,
        description="Minimum milliseconds between the start of two Scryfall requests",
    )
    request_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout for a single Scryfall request",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )


# Singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get application settings (cached singleton)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
