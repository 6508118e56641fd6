"""Permission value object.

Permissions are created by the catalog and never mutated. Their key,
``"{qualifier}.{name}"`` or the bare name for global permissions, is the
only identity grant sets care about.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Union, TYPE_CHECKING

from ....core.exceptions import InvalidTargetError
from .protocols import type_identifier
from .target import Target

if TYPE_CHECKING:
    from ..catalog.aliases import TypeAliasRegistry


Label = Union[str, Callable[[], str]]


@dataclass(frozen=True, eq=False)
class Permission:
    """A permission type that can be granted, revoked or checked."""

    qualifier: Optional[str]
    name: str
    label: Label = field(repr=False)
    object_type: Optional[str] = None
    aliases: Optional["TypeAliasRegistry"] = field(default=None, repr=False)

    @property
    def key(self) -> str:
        """Qualified key of the permission."""
        return f"{self.qualifier}.{self.name}" if self.qualifier else self.name

    def get_key(self) -> str:
        return self.key

    def get_label(self) -> str:
        """Human-readable label, evaluated on every call so lazy labels can
        follow the current locale."""
        label = self.label
        if callable(label):
            return label()
        return label

    @property
    def is_global(self) -> bool:
        return self.object_type is None

    def is_applicable_to(self, target: Any) -> bool:
        """Check if the permission can be checked against ``target``.

        Args:
            target: Anything ``Target.of`` accepts.
        """
        try:
            target = Target.of(target)
        except InvalidTargetError:
            return False
        if target.is_global:
            return self.is_global
        if self.is_global:
            return False
        if target.object_class is not None:
            return any(
                type_identifier(cls) == self.object_type
                for cls in target.object_class.__mro__
            )
        return self._aliases().alias_for(target.object_type) == self.qualifier

    def is_not_applicable_to(self, target: Any) -> bool:
        return not self.is_applicable_to(target)

    def _aliases(self) -> "TypeAliasRegistry":
        if self.aliases is not None:
            return self.aliases
        from ..catalog.aliases import get_type_aliases
        return get_type_aliases()

    def debug_info(self) -> Dict[str, Any]:
        return {
            "id": self.key,
            "object_type": self.object_type,
            "name": self.name,
            "label": self.get_label(),
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Permission):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        return self.key
