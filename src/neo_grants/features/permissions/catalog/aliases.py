"""Type alias registry.

Maps short aliases such as ``"document"`` to full type identifiers. The
alias of a type is the qualifier of every permission registered for it;
unmapped types are qualified by their full identifier.
"""

import logging
from typing import Dict, Mapping, Optional, Union

from ..entities.protocols import type_identifier

logger = logging.getLogger(__name__)


def normalize_type(object_type: Union[str, type, None]) -> Optional[str]:
    """Turn a class or identifier into an identifier; empty means global."""
    if object_type is None or object_type == "":
        return None
    if isinstance(object_type, str):
        return object_type
    return type_identifier(object_type)


class TypeAliasRegistry:
    """Bidirectional alias <-> type identifier map."""

    def __init__(self, aliases: Optional[Mapping[str, Union[str, type]]] = None):
        self._types: Dict[str, str] = {}
        self._aliases: Dict[str, str] = {}
        if aliases:
            self.register(aliases)

    def register(self, aliases: Mapping[str, Union[str, type]]) -> None:
        """Register aliases; a later alias for the same type replaces the earlier one."""
        for alias, object_type in aliases.items():
            identifier = normalize_type(object_type)
            previous = self._types.get(alias)
            if previous is not None and previous != identifier:
                self._aliases.pop(previous, None)
            self._types[alias] = identifier
            self._aliases[identifier] = alias
            logger.debug(f"Registered type alias {alias} -> {identifier}")

    def alias_for(self, object_type: Union[str, type]) -> str:
        """Alias of a type, or its identifier when it has none."""
        identifier = normalize_type(object_type)
        return self._aliases.get(identifier, identifier)

    def type_for(self, alias: str) -> Optional[str]:
        """Type identifier registered for an alias."""
        return self._types.get(alias)

    def clear(self) -> None:
        self._types.clear()
        self._aliases.clear()


_type_aliases: Optional[TypeAliasRegistry] = None


def get_type_aliases() -> TypeAliasRegistry:
    """Get the process-wide alias registry."""
    global _type_aliases
    if _type_aliases is None:
        _type_aliases = TypeAliasRegistry()
    return _type_aliases
