"""Neo-Grants - permission grant sets for the NeoMultiTenant platform.

Grant permissions globally, per type or per object, optionally within
tenant scopes, and check them with ``can``/``has``.
"""

from .__version__ import __version__

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .config import Scopes, GrantSettings, get_settings

from .core.exceptions import (
    NeoGrantsError,
    InvalidArgumentError,
    InvalidTargetError,
    ReservedScopeError,
    DeserializationError,
)

from .features.permissions import (
    # Entities
    Permission,
    Target,
    TargetKind,
    HasIdentifier,
    type_identifier,
    PermissionRecord,
    ScopedPermissionRecord,

    # Catalog
    PermissionCatalog,
    TypeAliasRegistry,
    get_permission_catalog,
    get_type_aliases,

    # Grant sets
    Permissions,
    ScopedPermissions,
    ALL,

    # Mixins
    HasPermissions,
)

__all__ = [
    "__version__",

    # Configuration
    "Scopes",
    "GrantSettings",
    "get_settings",
    "setup_logging",

    # Exceptions
    "NeoGrantsError",
    "InvalidArgumentError",
    "InvalidTargetError",
    "ReservedScopeError",
    "DeserializationError",

    # Entities
    "Permission",
    "Target",
    "TargetKind",
    "HasIdentifier",
    "type_identifier",
    "PermissionRecord",
    "ScopedPermissionRecord",

    # Catalog
    "PermissionCatalog",
    "TypeAliasRegistry",
    "get_permission_catalog",
    "get_type_aliases",

    # Grant sets
    "Permissions",
    "ScopedPermissions",
    "ALL",

    # Mixins
    "HasPermissions",
]
