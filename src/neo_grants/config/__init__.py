"""Configuration module for neo-grants."""

from .constants import Scopes, RecordFields, LogVerbosity, LogFormat
from .settings import GrantSettings, get_settings
from .logging_config import (
    LoggingConfig,
    setup_logging,
    get_log_level_from_verbosity,
)

__all__ = [
    # Constants
    "Scopes",
    "RecordFields",
    "LogVerbosity",
    "LogFormat",

    # Settings
    "GrantSettings",
    "get_settings",

    # Logging configuration
    "LoggingConfig",
    "setup_logging",
    "get_log_level_from_verbosity",
]
