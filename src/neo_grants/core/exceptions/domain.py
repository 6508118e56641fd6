"""Domain-specific exceptions for grant sets."""

from typing import Any, Optional

from .base import NeoGrantsError


# Argument Errors
class InvalidArgumentError(NeoGrantsError):
    """Raised when an operation receives an argument of unsupported shape."""
    pass


class InvalidTargetError(InvalidArgumentError):
    """Raised when a permission target is neither null, a type, nor an object."""

    def __init__(self, target: Any, **kwargs):
        target_type = type(target).__name__
        super().__init__(
            f"Target must be None, a type identifier, a type or an object, {target_type} given.",
            **kwargs
        )
        self.details["target_type"] = target_type


class ReservedScopeError(InvalidArgumentError):
    """Raised when the wildcard selector is used as a concrete scope name."""

    def __init__(self, scope: str, **kwargs):
        super().__init__(f"Cannot use '{scope}' as a scope name.", **kwargs)
        self.details["scope"] = scope


# Serialization Errors
class DeserializationError(NeoGrantsError):
    """Raised when serialized grant records cannot be decoded."""

    def __init__(self, message: str, error: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        if error:
            self.details["error"] = error
