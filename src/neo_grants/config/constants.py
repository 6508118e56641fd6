"""Constants and enums for neo-grants.

Reserved scope names and the log option enums shared by the settings and
logging modules.
"""

from enum import Enum
from typing import Final


class Scopes:
    """Reserved scope names for scoped grant sets."""

    DEFAULT: Final[str] = ""
    ALL: Final[str] = "*"


class RecordFields:
    """Field names of the serialized grant records."""

    NAME: Final[str] = "name"
    OBJECT_ID: Final[str] = "object_id"
    SCOPE: Final[str] = "scope"


class LogVerbosity(str, Enum):
    """Log verbosity modes."""
    QUIET = "QUIET"      # Only errors and critical
    NORMAL = "NORMAL"    # Warnings and above
    VERBOSE = "VERBOSE"  # Info level logging
    DEBUG = "DEBUG"      # Full debug logging


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"
