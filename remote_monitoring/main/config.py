"""
Application Settings - Main Layer

Pydantic Settings for the device schema package, read from environment
variables, a ``.env`` file and default values.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from remote_monitoring.shared import EnumEnvironment, EnumLogLevel
from remote_monitoring.shared.logging import update_logging_from_settings


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """Build a fresh settings instance; tests patch the environment first."""
    return AppSettings()


def init_logging(settings: Optional[AppSettings] = None) -> AppSettings:
    """Apply the logging section of ``settings`` and return the settings used."""
    settings = settings or get_settings()
    update_logging_from_settings(settings)
    return settings
