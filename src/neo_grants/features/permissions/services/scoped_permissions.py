"""Grant sets partitioned by scope.

Every scope holds an independent :class:`Permissions`. Checks always
include the default scope ``""`` as well as the requested ones, so grants
made without a scope are visible from every scope. The wildcard ``"*"``
selects the scopes that exist at call time.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Union

from ....config.constants import Scopes
from ....core.exceptions import ReservedScopeError
from ..catalog.catalog import PermissionCatalog, get_permission_catalog
from ..entities.record import ScopedPermissionRecord, parse_records
from ..entities.target import Target
from .permissions import PermissionRef, Permissions
from .serialization import RecordSerializable

logger = logging.getLogger(__name__)

ScopeSelector = Union[str, Iterable[str]]


class ScopedPermissions(RecordSerializable):
    """Permissions granted per scope, with a default scope fallback."""

    DEFAULT_SCOPE = Scopes.DEFAULT
    ALL_SCOPES = Scopes.ALL

    def __init__(
        self,
        items: Optional[Iterable[Any]] = None,
        catalog: Optional[PermissionCatalog] = None
    ):
        """Create a scoped grant set and load initial records.

        Args:
            items: Records as produced by :meth:`to_list`
            catalog: Catalog used by :meth:`can`; the process-wide one by default
        """
        self._scoped: Dict[str, Permissions] = {}
        self._catalog = catalog
        if items:
            self.load(items)

    @property
    def catalog(self) -> PermissionCatalog:
        return self._catalog if self._catalog is not None else get_permission_catalog()

    def load(self, items: Iterable[Any]) -> "ScopedPermissions":
        """Merge records into this grant set, grouped by scope.

        A ``None`` scope is the default scope. Records are validated first;
        an invalid record leaves the grant set untouched.
        """
        grouped: Dict[str, List[ScopedPermissionRecord]] = {}
        for record in parse_records(items, ScopedPermissionRecord):
            scope = record.scope if record.scope is not None else self.DEFAULT_SCOPE
            grouped.setdefault(scope, []).append(record)

        for scope, records in grouped.items():
            self.scope(scope).load(records)
        return self

    def can(self, ability: str, target: Any = None, scopes: ScopeSelector = Scopes.DEFAULT) -> Optional[bool]:
        """Check an ability by name against a target in the given scopes.

        Returns:
            None if no such permission is registered for the target's type,
            otherwise whether it is granted in any of the scopes or the
            default scope
        """
        target = Target.of(target)
        permission = self.catalog.resolve(ability, target.object_type)
        if permission is None:
            return None
        return self.has(permission, target.object_id, scopes)

    def has(self, permission: PermissionRef, object_id: Any = None, scopes: ScopeSelector = Scopes.DEFAULT) -> bool:
        """Check if a permission is granted in any of the scopes or the default scope."""
        scopes = self._resolve_scopes(scopes)
        if self.DEFAULT_SCOPE not in scopes:
            scopes.append(self.DEFAULT_SCOPE)
        for scope in scopes:
            permissions = self._scoped.get(scope)
            if permissions is not None and permissions.has(permission, object_id):
                return True
        return False

    def grant(self, permission: PermissionRef, object_id: Any = None, scopes: ScopeSelector = Scopes.DEFAULT) -> "ScopedPermissions":
        """Grant a permission in each of the scopes, creating them as needed.

        The wildcard only reaches scopes that already exist. An explicit
        list holding the wildcard is rejected before any scope is touched.

        Raises:
            ReservedScopeError: If ``scopes`` is a list containing the wildcard
        """
        resolved = self._resolve_scopes(scopes)
        if self.ALL_SCOPES in resolved:
            raise ReservedScopeError(self.ALL_SCOPES)
        for scope in resolved:
            self.scope(scope).grant(permission, object_id)
        return self

    def revoke(self, permission: PermissionRef, object_id: Any = None, scopes: ScopeSelector = Scopes.DEFAULT) -> "ScopedPermissions":
        """Revoke a permission in each of the scopes that exist."""
        for scope in self._resolve_scopes(scopes):
            permissions = self._scoped.get(scope)
            if permissions is not None:
                permissions.revoke(permission, object_id)
        return self

    def revoke_all(self, permission: Optional[PermissionRef] = None, scopes: ScopeSelector = Scopes.ALL) -> "ScopedPermissions":
        """Revoke every grant of a permission in the scopes.

        Without a permission the scopes themselves are removed.
        """
        for scope in self._resolve_scopes(scopes):
            if scope not in self._scoped:
                continue
            if permission is None:
                del self._scoped[scope]
                logger.debug(f"Removed scope '{scope}'")
            else:
                self._scoped[scope].revoke_all(permission)
        return self

    def scope(self, scope: str) -> Permissions:
        """Get or create the grant set of a scope.

        Raises:
            ReservedScopeError: If ``scope`` is the wildcard
        """
        if scope == self.ALL_SCOPES:
            raise ReservedScopeError(scope)
        permissions = self._scoped.get(scope)
        if permissions is None:
            permissions = self._scoped[scope] = Permissions(catalog=self._catalog)
            logger.debug(f"Created scope '{scope}'")
        return permissions

    def scope_names(self) -> List[str]:
        """Existing scopes in creation order."""
        return list(self._scoped)

    def to_list(self) -> List[Dict[str, Any]]:
        """Flatten every scope into records; the default scope is written as None."""
        records = []
        for scope, permissions in self._scoped.items():
            for item in permissions.to_list():
                record = ScopedPermissionRecord(**item, scope=scope or None)
                records.append(record.model_dump())
        return records

    def debug_info(self) -> Dict[str, Dict[str, Optional[List[str]]]]:
        return {scope: permissions.debug_info() for scope, permissions in self._scoped.items()}

    def _resolve_scopes(self, scopes: ScopeSelector) -> List[str]:
        if scopes == self.ALL_SCOPES:
            resolved = self.scope_names()
            if not resolved:
                logger.debug("Wildcard scope matched no scopes")
            return resolved
        if isinstance(scopes, str):
            return [scopes]
        return list(scopes)

    def __repr__(self) -> str:
        return f"ScopedPermissions({self.debug_info()!r})"
