"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from feedback_views.configs.base import BaseSettings
from feedback_views.configs.presentation import PresentationSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    presentation: PresentationSettings = Field(default_factory=PresentationSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Environment variables are loaded once, on first call.

    Returns:
        Settings: Application settings instance

    Usage:
        from feedback_views.configs import get_settings
        settings = get_settings()
    """
    return Settings()
