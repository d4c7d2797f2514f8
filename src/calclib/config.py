"""
Configuration management for calclib.
"""

from pathlib import Path
from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Levels loguru knows out of the box
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Main library settings."""

    model_config = SettingsConfigDict(
        env_prefix="CALCLIB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = "WARNING"
    log_file: Optional[Path] = None

    # Emit a DEBUG line for every arithmetic operation
    trace_operations: bool = Field(default=False)

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {value!r}. Choose one of: {', '.join(LOG_LEVELS)}")
        return level


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get the global settings instance."""
    return settings


def update_settings(**kwargs: Any) -> Settings:
    """Update settings with new values."""
    global settings
    settings = Settings(**kwargs)
    return settings
