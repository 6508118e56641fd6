"""Exception hierarchy for neo-grants."""

from .base import NeoGrantsError
from .domain import (
    InvalidArgumentError,
    InvalidTargetError,
    ReservedScopeError,
    DeserializationError,
)

__all__ = [
    "NeoGrantsError",
    "InvalidArgumentError",
    "InvalidTargetError",
    "ReservedScopeError",
    "DeserializationError",
]
