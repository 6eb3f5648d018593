"""
Configuration management for the timesheet tracker.
"""

from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.utils.logging_utils import sanitize_sensitive_data


class TimesheetConfig(BaseSettings):
    """Configuration settings for the timesheet tracker."""

    # Database Configuration
    database_url: str = Field(default="sqlite:///timesheets.db", alias="DATABASE_URL")
    sql_echo: bool = Field(default=False, alias="SQL_ECHO")

    # Application Configuration
    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Dashboard Configuration
    recent_entries_limit: int = Field(default=10, alias="RECENT_ENTRIES_LIMIT")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        populate_by_name=True,
    )

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v):
        """Ensure a database URL is present."""
        if not v or not v.strip():
            raise ValueError("DATABASE_URL cannot be empty")
        return v.strip()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Ensure log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Ensure environment is valid."""
        valid_envs = ["development", "testing", "production"]
        if v.lower() not in valid_envs:
            raise ValueError(f"Environment must be one of: {valid_envs}")
        return v.lower()

    @field_validator("recent_entries_limit")
    @classmethod
    def validate_recent_entries_limit(cls, v):
        """Ensure the dashboard shows at least one recent entry."""
        if v < 1:
            raise ValueError("RECENT_ENTRIES_LIMIT must be a positive integer")
        return v

    def safe_dump(self) -> Dict[str, Any]:
        """Get settings as a dictionary with credentials redacted."""
        return sanitize_sensitive_data(self.model_dump())


def load_config(env_file: Optional[str] = None) -> TimesheetConfig:
    """Load configuration from environment variables and .env file."""
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    return TimesheetConfig()


# Global configuration instance
_config: Optional[TimesheetConfig] = None


def get_config() -> TimesheetConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config(env_file: Optional[str] = None) -> TimesheetConfig:
    """Reload configuration (useful for testing)."""
    global _config
    _config = load_config(env_file)
    return _config
