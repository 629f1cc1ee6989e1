"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from feedback_views.configs.presentation import PresentationSettings
from feedback_views.configs.settings import Settings, get_settings

__all__ = ["PresentationSettings", "Settings", "get_settings"]
