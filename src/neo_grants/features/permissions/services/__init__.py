"""Grant set services."""

from .permissions import Permissions, GrantLevel, ALL, permission_key
from .scoped_permissions import ScopedPermissions
from .serialization import RecordSerializable, decode_records

__all__ = [
    "Permissions",
    "ScopedPermissions",
    "GrantLevel",
    "ALL",
    "permission_key",
    "RecordSerializable",
    "decode_records",
]
