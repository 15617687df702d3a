"""
Configuration management for HirePanel.

Uses Pydantic Settings for type-safe configuration with environment variable support.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Base paths
ROOT_DIR = Path(__file__).parent.parent.parent
PACKAGE_DIR = ROOT_DIR / "hirepanel"
LOGS_DIR = ROOT_DIR / "logs"


class DatabaseSettings(BaseSettings):
    """Backend row store (MongoDB) configuration."""

    model_config = SettingsConfigDict(env_prefix="DB_")

    host: str = "localhost"
    port: int = 27017
    name: str = "hirepanel"
    username: str | None = None
    password: str | None = None
    server_selection_timeout_ms: int = 5000


class SessionSettings(BaseSettings):
    """
    Default viewer for the desktop shell and CLI.

    Only the entry points read these values; screens receive the resulting
    Viewer explicitly.
    """

    model_config = SettingsConfigDict(env_prefix="SESSION_")

    viewer_id: str | None = None
    viewer_role: str = "recruiter"


class UISettings(BaseSettings):
    """User interface configuration."""

    model_config = SettingsConfigDict(env_prefix="UI_")

    theme: Literal["light", "dark", "system"] = "system"
    window_width: int = 1400
    window_height: int = 900
    font_size: int = 10


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
    file_path: Path = LOGS_DIR / "hirepanel.log"
    rotation: str = "10 MB"
    retention: str = "30 days"
    console_output: bool = True


class AppSettings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    name: str = "HirePanel"
    version: str = "0.1.0"
    description: str = "Hiring dashboards and interview scheduling"
    debug: bool = False

    # Environment
    environment: Literal["development", "production", "testing"] = "development"

    # Nested settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    session: SessionSettings = Field(default_factory=SessionSettings)
    ui: UISettings = Field(default_factory=UISettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


_settings: AppSettings | None = None


def get_settings() -> AppSettings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = AppSettings()
    return _settings


def reload_settings() -> AppSettings:
    """Force reload settings from environment."""
    global _settings
    _settings = AppSettings()
    return _settings
