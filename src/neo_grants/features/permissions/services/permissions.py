"""Grant set for a single namespace.

Each permission key maps either to ``ALL`` (granted for every object the
permission applies to, or simply granted for global permissions) or to an
ordered set of object ids.
"""

import logging
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Union

from ..catalog.catalog import PermissionCatalog, get_permission_catalog
from ..entities.permission import Permission
from ..entities.protocols import stringify_identifier
from ..entities.record import PermissionRecord, parse_records
from ..entities.target import Target
from .serialization import RecordSerializable

logger = logging.getLogger(__name__)


class GrantLevel(Enum):
    ALL = "all"


ALL = GrantLevel.ALL

PermissionRef = Union[Permission, str]


def permission_key(permission: PermissionRef) -> str:
    """Key of a permission, which may already be given as a key."""
    return permission if isinstance(permission, str) else permission.key


def normalize_object_id(object_id: Any) -> Optional[str]:
    return stringify_identifier(object_id)


class Permissions(RecordSerializable):
    """Permissions granted in one namespace."""

    def __init__(
        self,
        items: Optional[Iterable[Any]] = None,
        catalog: Optional[PermissionCatalog] = None
    ):
        """Create a grant set and load initial records.

        Args:
            items: Records as produced by :meth:`to_list`
            catalog: Catalog used by :meth:`can`; the process-wide one by default
        """
        # Object ids are dict keys so the set keeps insertion order
        self._grants: Dict[str, Union[GrantLevel, Dict[str, None]]] = {}
        self._catalog = catalog
        if items:
            self.load(items)

    @property
    def catalog(self) -> PermissionCatalog:
        return self._catalog if self._catalog is not None else get_permission_catalog()

    def load(self, items: Iterable[Any]) -> "Permissions":
        """Merge records into this grant set.

        Records are validated first; an invalid record leaves the grant set
        untouched.
        """
        for record in parse_records(items, PermissionRecord):
            self._grant(record.name, record.object_id)
        return self

    def can(self, ability: str, target: Any = None) -> Optional[bool]:
        """Check an ability by name against a target.

        Args:
            ability: Unqualified permission name
            target: A :class:`Target`, or anything ``Target.of`` accepts

        Returns:
            None if no such permission is registered for the target's type,
            otherwise whether it is granted
        """
        target = Target.of(target)
        permission = self.catalog.resolve(ability, target.object_type)
        if permission is None:
            return None
        return self.has(permission, target.object_id)

    def has(self, permission: PermissionRef, object_id: Any = None) -> bool:
        """Check if a permission is granted for an object id, or at class level."""
        entry = self._grants.get(permission_key(permission))
        if entry is None:
            return False
        if entry is ALL:
            return True
        object_id = normalize_object_id(object_id)
        return object_id is not None and object_id in entry

    def grant(self, permission: PermissionRef, object_id: Any = None) -> "Permissions":
        """Grant a permission for an object id, or for all objects when None.

        A class-level grant replaces any object-level grants of the same
        permission.
        """
        key = permission_key(permission)
        self._grant(key, normalize_object_id(object_id))
        logger.debug(f"Granted {key} for {object_id if object_id is not None else 'all objects'}")
        return self

    def revoke(self, permission: PermissionRef, object_id: Any = None) -> "Permissions":
        """Revoke a permission for an object id, or the class-level grant when None.

        Revoking the class-level grant leaves object-level grants alone, and
        an object-level revoke cannot narrow a class-level grant.
        """
        key = permission_key(permission)
        entry = self._grants.get(key)
        if entry is None:
            return self
        object_id = normalize_object_id(object_id)
        if entry is ALL:
            if object_id is None:
                del self._grants[key]
        elif object_id is not None and object_id in entry:
            del entry[object_id]
            if not entry:
                del self._grants[key]
        logger.debug(f"Revoked {key} for {object_id if object_id is not None else 'all objects'}")
        return self

    def revoke_all(self, permission: Optional[PermissionRef] = None) -> "Permissions":
        """Revoke every grant of a permission, or every grant when None."""
        if permission is None:
            self._grants.clear()
        else:
            self._grants.pop(permission_key(permission), None)
        return self

    def to_list(self) -> List[Dict[str, Any]]:
        """Flatten into records, one per object id or one for a class-level grant."""
        records = []
        for key, entry in self._grants.items():
            if entry is ALL:
                records.append(PermissionRecord(name=key, object_id=None))
            else:
                records.extend(PermissionRecord(name=key, object_id=object_id) for object_id in entry)
        return [record.model_dump() for record in records]

    def debug_info(self) -> Dict[str, Optional[List[str]]]:
        return {
            key: None if entry is ALL else list(entry)
            for key, entry in self._grants.items()
        }

    def _grant(self, key: str, object_id: Optional[str]) -> None:
        if object_id is None:
            self._grants[key] = ALL
            return
        entry = self._grants.setdefault(key, {})
        if entry is not ALL:
            entry[object_id] = None

    def __repr__(self) -> str:
        return f"Permissions({self.debug_info()!r})"
