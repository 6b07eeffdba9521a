# GridBoard - Dashboard Grid Layout Engine
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Configuration management using Pydantic Settings."""

from beartype import beartype
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings with immutable configuration.

    Values are read from ``GRIDBOARD_*`` environment variables. Grid range
    limits are not configurable; they are part of the document format.
    """

    model_config = SettingsConfigDict(
        env_prefix="GRIDBOARD_",
        env_file=None,
        env_file_encoding="utf-8",
        frozen=True,
        validate_default=True,
        extra="forbid",
    )

    # Document defaults
    document_version: str = Field(
        default="1.0",
        min_length=1,
        description="Version string stamped on newly created dashboards",
    )
    default_theme: str = Field(
        default="default",
        min_length=1,
        description="Theme used when a document does not name one",
    )
    default_title: str = Field(
        default="Untitled Dashboard",
        min_length=1,
        description="Title used when an incoming document does not name one",
    )
    new_dashboard_title: str = Field(
        default="New Dashboard",
        min_length=1,
        description="Title given to freshly created dashboards",
    )

    # Serialization
    json_indent: int = Field(
        default=2,
        ge=0,
        le=8,
        description="Indentation used by pretty serialization",
    )
    backup_prefix: str = Field(
        default="dashboard-backup",
        min_length=1,
        pattern=r"^[A-Za-z0-9_-]+$",
        description="Filename prefix for dashboard backups",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Root log level for the gridboard logger",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls: type["Settings"], v: str) -> str:
        """Ensure the log level is one the logging module understands."""
        level = v.upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Invalid log level: {v}")
        return level


_settings: Settings | None = None


@beartype
def get_settings() -> Settings:
    """Get cached settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


@beartype
def clear_settings_cache() -> None:
    """Clear settings cache (for testing)."""
    global _settings
    _settings = None
