"""Base exceptions for neo-grants.

All exceptions inherit from NeoGrantsError and carry an error code and a
details mapping for structured reporting by the embedding service.
"""

from typing import Any, Dict, Optional


class NeoGrantsError(Exception):
    """Base exception for all neo-grants errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
