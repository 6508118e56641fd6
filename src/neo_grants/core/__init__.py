"""Core shared components for neo-grants."""

from .exceptions import (
    NeoGrantsError,
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
