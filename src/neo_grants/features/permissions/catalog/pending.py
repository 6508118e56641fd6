"""Pending permission definitions.

Registrations are merged here until the catalog is next queried. The first
label registered for a name wins.
"""

from typing import Dict, Iterator, Mapping, Optional, Tuple, Union

from ..entities.permission import Label
from .aliases import normalize_type


class PendingDefinitions:
    """Mutable builder of ``type identifier -> {name: label}`` definitions."""

    def __init__(self):
        self._definitions: Dict[str, Dict[str, Label]] = {}

    def add(self, object_type: Union[str, type, None], permissions: Mapping[str, Label]) -> None:
        # "" holds the global permissions
        identifier = normalize_type(object_type) or ""
        merged = self._definitions.setdefault(identifier, {})
        for name, label in permissions.items():
            merged.setdefault(name, label)

    def drain(self) -> Iterator[Tuple[Optional[str], str, Label]]:
        """Yield ``(object_type, name, label)`` and empty the builder."""
        definitions, self._definitions = self._definitions, {}
        for identifier, permissions in definitions.items():
            for name, label in permissions.items():
                yield identifier or None, name, label

    def clear(self) -> None:
        self._definitions.clear()

    def __bool__(self) -> bool:
        return bool(self._definitions)
