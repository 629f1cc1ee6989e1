"""
Presentation configuration settings.

Settings for list rendering and credential link handling.

Dependencies: pydantic_settings
System role: Presentation layer configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PresentationSettings(BaseSettings):
    """Presentation configuration for student lists and access links."""

    model_config = SettingsConfigDict(
        env_prefix="FEEDBACK_VIEWS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    access_key_param: str = Field(
        default="key",
        min_length=1,
        description="Query parameter carrying the student access key",
    )
    no_section_name: str = Field(
        default="None",
        description="Section name the server uses for students without a section",
    )
    hide_links_on_load: bool = Field(
        default=True,
        description="Collapse student links when admin search results load",
    )
