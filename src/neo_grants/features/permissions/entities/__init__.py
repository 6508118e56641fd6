"""Permission entities package.

Value objects, targets, protocols and serialized record models.
"""

from .protocols import HasIdentifier, stringify_identifier, type_identifier
from .target import Target, TargetKind
from .permission import Permission, Label
from .record import PermissionRecord, ScopedPermissionRecord, parse_records

__all__ = [
    # Value objects
    "Permission",
    "Label",
    "Target",
    "TargetKind",

    # Protocols
    "HasIdentifier",
    "type_identifier",
    "stringify_identifier",

    # Records
    "PermissionRecord",
    "ScopedPermissionRecord",
    "parse_records",
]
