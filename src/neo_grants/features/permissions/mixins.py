"""Class mixin exposing the permissions registered for a model type."""

from typing import Dict, Optional

from .catalog.catalog import get_permission_catalog
from .entities.permission import Permission


class HasPermissions:
    """Give a model class direct access to its catalog permissions."""

    @classmethod
    def get_permissions(cls) -> Dict[str, Permission]:
        """Permissions registered for this class, by name."""
        return get_permission_catalog().for_type(cls)

    @classmethod
    def get_permission(cls, name: str) -> Optional[Permission]:
        return get_permission_catalog().resolve(name, cls)
