"""
Configuration management for issue-engine.
"""

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .tracker.enums import GroupBy, SortDirection, SortField


class Settings(BaseSettings):
    """Application settings, read from ``ISSUE_ENGINE_*`` variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="ISSUE_ENGINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO")
    log_format: Literal["console", "json"] = Field(default="console")

    # Snapshot file used by the CLI when no path is given
    snapshot_path: str = Field(default="issues.json")

    # Query defaults
    default_sort_field: SortField = Field(default=SortField.CREATED)
    default_sort_direction: SortDirection = Field(default=SortDirection.DESC)
    default_group_by: GroupBy = Field(default=GroupBy.NONE)


# Global settings instance
settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get application settings."""
    global settings
    if settings is None:
        settings = Settings()
    return settings


def reset_settings() -> None:
    """Drop the cached settings so the next ``get_settings`` re-reads the environment."""
    global settings
    settings = None
