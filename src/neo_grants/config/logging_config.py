"""Centralized logging configuration for neo-grants.

Verbosity, format and level come from :class:`GrantSettings`, so an
embedding service controls them through ``NEO_GRANTS_*`` variables.
"""

import logging
import logging.config
from typing import Any, Dict, Optional

from .constants import LogFormat, LogVerbosity
from .settings import GrantSettings, get_settings


VERBOSITY_LEVELS = {
    LogVerbosity.QUIET: "ERROR",
    LogVerbosity.NORMAL: "WARNING",
    LogVerbosity.VERBOSE: "INFO",
    LogVerbosity.DEBUG: "DEBUG",
}

FORMATS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}


def get_log_level_from_verbosity(verbosity: LogVerbosity) -> str:
    """Map verbosity mode to log level."""
    return VERBOSITY_LEVELS.get(LogVerbosity(verbosity), "WARNING")


class LoggingConfig:
    """Centralized logging configuration manager."""

    # Catalog materialization is chatty at DEBUG; keep it at INFO unless asked
    QUIET_MODULES = [
        "neo_grants.features.permissions.catalog",
    ]

    @classmethod
    def build(cls, settings: Optional[GrantSettings] = None) -> Dict[str, Any]:
        """Build a ``dictConfig`` mapping from settings."""
        settings = settings or get_settings()
        effective_log_level = get_log_level_from_verbosity(settings.log_verbosity)

        logging_config: Dict[str, Any] = {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": FORMATS[LogFormat(settings.log_format)],
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": effective_log_level,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "root": {
                "level": effective_log_level,
                "handlers": ["console"],
            },
            "loggers": {},
        }

        for module in cls.QUIET_MODULES:
            logging_config["loggers"][module] = {
                "level": "INFO" if effective_log_level == "DEBUG" else effective_log_level,
            }

        return logging_config

    @classmethod
    def configure(cls, settings: Optional[GrantSettings] = None) -> None:
        """Configure logging based on settings."""
        settings = settings or get_settings()
        logging.config.dictConfig(cls.build(settings))

        logger = logging.getLogger(__name__)
        logger.debug(
            f"Logging configured: verbosity={settings.log_verbosity.value}, "
            f"format={settings.log_format.value}"
        )

    @classmethod
    def set_module_level(cls, module_name: str, level: str) -> None:
        """Set log level for a specific module.

        Args:
            module_name: Name of the module
            level: Log level to set
        """
        logging.getLogger(module_name).setLevel(getattr(logging, level.upper()))

    @classmethod
    def silence_module(cls, module_name: str) -> None:
        """Silence all logging from a module."""
        cls.set_module_level(module_name, "CRITICAL")


def setup_logging() -> None:
    """Setup logging configuration from settings.

    Called once on package import unless ``NEO_GRANTS_CONFIGURE_LOGGING``
    is false.
    """
    if get_settings().configure_logging:
        LoggingConfig.configure()
