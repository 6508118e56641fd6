"""Permissions feature for neo-grants.

- entities/: Permission value object, targets, protocols and records
- catalog/: Permission registry and type aliases
- services/: Grant sets, unscoped and scoped
"""

from .entities import (
    Permission, Label, Target, TargetKind, HasIdentifier, type_identifier,
    PermissionRecord, ScopedPermissionRecord,
)
from .catalog import (
    PermissionCatalog, PendingDefinitions, TypeAliasRegistry,
    get_permission_catalog, get_type_aliases,
)
from .services import Permissions, ScopedPermissions, GrantLevel, ALL
from .mixins import HasPermissions

__all__ = [
    # Entities
    "Permission",
    "Label",
    "Target",
    "TargetKind",
    "HasIdentifier",
    "type_identifier",
    "PermissionRecord",
    "ScopedPermissionRecord",

    # Catalog
    "PermissionCatalog",
    "PendingDefinitions",
    "TypeAliasRegistry",
    "get_permission_catalog",
    "get_type_aliases",

    # Grant sets
    "Permissions",
    "ScopedPermissions",
    "GrantLevel",
    "ALL",

    # Mixins
    "HasPermissions",
]
