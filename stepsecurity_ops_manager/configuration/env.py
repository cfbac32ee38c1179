"""Pydantic Settings model for application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from stepsecurity_ops_manager.utils.constants import DEFAULT_API_BASE_URL


class Settings(BaseSettings):
    """Environment variable settings for the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Generic application-wide settings
    DEBUG: bool = False

    # StepSecurity API settings
    STEPSECURITY_API_BASE_URL: str = DEFAULT_API_BASE_URL
    STEPSECURITY_API_KEY: str | None = None
    STEPSECURITY_CUSTOMER: str | None = None
