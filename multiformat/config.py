"""
Configuration management using pydantic-settings.

Settings only tune diagnostics (log level, tracebacks); the rendered
output never depends on them.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="MULTIFORMAT_",
        extra="ignore",
    )

    log_level: str = Field(default="warning", description="Diagnostic log level on stderr")
    rich_tracebacks: bool = Field(default=True, description="Render uncaught exceptions with Rich")


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """Reload settings from the environment."""
    global _settings
    _settings = Settings()
    return _settings
