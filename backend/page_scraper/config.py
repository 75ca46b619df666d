"""Application configuration using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from page_scraper.services.web_scraper.constants import (
    DEFAULT_USER_AGENT,
    MAX_CONTENT_LENGTH,
    MIN_CONTENT_LENGTH,
    PAGE_TIMEOUT_SECONDS,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Fetching
    scraper_user_agent: str = DEFAULT_USER_AGENT
    scraper_timeout: float = PAGE_TIMEOUT_SECONDS

    # Extraction thresholds (characters)
    max_content_length: int = MAX_CONTENT_LENGTH
    min_content_length: int = MIN_CONTENT_LENGTH

    # Logging
    log_level: str = "INFO"

    # CORS
    cors_origins: str = "http://localhost:3000"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get cached settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings for testing."""
    global _settings
    _settings = None
