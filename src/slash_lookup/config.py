"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from slash_lookup.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Slack
    slack_secret: str = ""

    # Knowledge Graph Search API
    kg_api_key: str = ""
    kg_language: str | None = None
    lookup_timeout_seconds: float = 10.0

    # App
    environment: str = "development"
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings. Lazy initialization to avoid import-time errors."""
    return Settings()


def require_slack_secret(settings: Settings) -> str:
    """Return the configured signing secret or fail startup.

    A missing secret is a deployment problem, so it surfaces once when the
    process boots rather than as a 403 on every request.
    """
    if not settings.slack_secret:
        raise ConfigurationError("SLACK_SECRET is not set")
    return settings.slack_secret
