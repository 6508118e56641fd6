"""Permission catalog.

Process-wide registry of permission definitions. Definitions are collected
by :meth:`PermissionCatalog.register` and turned into immutable
:class:`Permission` instances on the next lookup; an instance, once built,
is kept until :meth:`PermissionCatalog.reset`.
"""

import logging
import threading
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Union

from ..entities.permission import Label, Permission
from .aliases import TypeAliasRegistry, get_type_aliases, normalize_type
from .pending import PendingDefinitions

logger = logging.getLogger(__name__)


class PermissionCatalog:
    """Registry of permissions keyed by ``qualifier.name``."""

    def __init__(self, aliases: Optional[TypeAliasRegistry] = None):
        self._aliases = aliases
        self._pending = PendingDefinitions()
        self._instances: Dict[str, Permission] = {}
        self._lock = threading.RLock()

    @property
    def aliases(self) -> TypeAliasRegistry:
        return self._aliases if self._aliases is not None else get_type_aliases()

    def register(self, object_type: Union[str, type, None], permissions: Mapping[str, Label]) -> None:
        """Register permissions for a type.

        Args:
            object_type: Class or type identifier, or None for global permissions
            permissions: Permission names mapped to labels or label producers
        """
        with self._lock:
            self._pending.add(object_type, permissions)

    def find(self, key: str) -> Optional[Permission]:
        """Find a permission by its key."""
        self._materialize()
        return self._instances.get(key)

    def resolve(self, name: str, object_type: Union[str, type, None]) -> Optional[Permission]:
        """Resolve a permission by name and the type it applies to.

        Args:
            name: Permission name, unqualified
            object_type: Class, type identifier or alias, or None for global permissions
        """
        identifier = normalize_type(object_type)
        if identifier is None:
            return self.find(name)
        return self.find(f"{self.aliases.alias_for(identifier)}.{name}")

    def all(self) -> Mapping[str, Permission]:
        """All permissions by key."""
        self._materialize()
        return MappingProxyType(dict(self._instances))

    def for_type(self, object_type: Union[str, type, None]) -> Dict[str, Permission]:
        """Permissions of one type by unqualified name; None selects global ones."""
        self._materialize()
        identifier = normalize_type(object_type)
        return {
            permission.name: permission
            for permission in self._instances.values()
            if permission.object_type == identifier
        }

    def reset(self) -> None:
        """Forget all registered permissions."""
        with self._lock:
            self._pending.clear()
            self._instances.clear()

    def _materialize(self) -> None:
        if not self._pending:
            return
        with self._lock:
            created = 0
            for object_type, name, label in self._pending.drain():
                qualifier = self.aliases.alias_for(object_type) if object_type else None
                permission = Permission(qualifier, name, label, object_type, self._aliases)
                if permission.key in self._instances:
                    continue
                self._instances[permission.key] = permission
                created += 1
            logger.debug(f"Materialized {created} permissions ({len(self._instances)} total)")


_permission_catalog: Optional[PermissionCatalog] = None


def get_permission_catalog() -> PermissionCatalog:
    """Get the process-wide permission catalog."""
    global _permission_catalog
    if _permission_catalog is None:
        _permission_catalog = PermissionCatalog()
    return _permission_catalog
