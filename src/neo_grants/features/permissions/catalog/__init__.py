"""Permission catalog package."""

from .aliases import TypeAliasRegistry, get_type_aliases
from .pending import PendingDefinitions
from .catalog import PermissionCatalog, get_permission_catalog

__all__ = [
    "TypeAliasRegistry",
    "get_type_aliases",
    "PendingDefinitions",
    "PermissionCatalog",
    "get_permission_catalog",
]
