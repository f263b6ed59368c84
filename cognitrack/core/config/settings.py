"""
Application settings module.

This module provides configuration settings for the scoring and analytics
engine, loaded from the environment (and an optional ``.env`` file).
"""

import logging
import os

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings using Pydantic for validation and environment variable loading."""

    # Project Information
    PROJECT_NAME: str = "Cognitrack"
    PROJECT_DESCRIPTION: str = "Dementia and depression screening analytics"
    VERSION: str = "0.1.0"

    # Environment
    TESTING: bool = False
    ENVIRONMENT: str = "development"  # development, staging, production, test

    # Logging Settings
    LOG_LEVEL: str = "INFO"

    # Analytics Settings
    CORRELATION_WINDOW_DAYS: int = Field(default=14, ge=0)
    PROGRESSION_DEFAULT_DAYS: int = Field(default=365, gt=0)
    TREND_WINDOW_SIZE: int = Field(default=3, ge=2)
    TREND_DIRECTION_THRESHOLD: float = Field(default=0.5, ge=0)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate that log level is one of the valid levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()


# Create a global settings instance
settings = Settings()


def get_settings() -> Settings:
    """
    Factory function to get the application settings.

    Callers that orchestrate analytics take their defaults from here, which
    keeps a single place to substitute test-specific settings.

    Returns:
        The application settings instance
    """
    if os.environ.get("ENVIRONMENT") == "test" or os.environ.get("PYTEST_CURRENT_TEST"):
        global settings
        if not settings.TESTING:
            logger.info("Running in TEST environment")
        settings.TESTING = True
        settings.ENVIRONMENT = "test"

    return settings
