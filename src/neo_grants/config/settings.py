"""
Settings for neo-grants.

Values are read from ``NEO_GRANTS_*`` environment variables or a ``.env``
file. Use :func:`get_settings` rather than instantiating directly so every
module sees the same values.
"""
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import LogFormat, LogVerbosity


class GrantSettings(BaseSettings):
    """Runtime settings for grant sets and logging."""

    model_config = SettingsConfigDict(
        env_prefix="NEO_GRANTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Logging Configuration
    configure_logging: bool = Field(default=True, description="Configure logging when the package is imported")
    log_verbosity: LogVerbosity = Field(default=LogVerbosity.NORMAL, description="Verbosity mode")
    log_format: LogFormat = Field(default=LogFormat.SIMPLE, description="Log line format")

    # Record Loading
    strict_records: bool = Field(
        default=False,
        description="Reject records without a name instead of skipping them"
    )

    @field_validator("log_verbosity", mode="before")
    @classmethod
    def normalize_verbosity(cls, value):
        return value.upper() if isinstance(value, str) else value

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_format(cls, value):
        return value.lower() if isinstance(value, str) else value


@lru_cache()
def get_settings() -> GrantSettings:
    """Get cached settings instance."""
    return GrantSettings()
