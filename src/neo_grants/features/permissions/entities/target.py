"""Tagged targets for permission checks.

A check is made either globally, against a type, or against a single
instance of a type. Callers can build a :class:`Target` explicitly or hand
``Target.of`` whatever they have: ``None``, a type identifier string, a
class, or a model instance.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

from ....core.exceptions import InvalidTargetError
from .protocols import HasIdentifier, stringify_identifier, type_identifier


# Values that can never name a type or an object
_PRIMITIVE_TYPES = (bool, int, float, complex, bytes, bytearray, list, tuple, dict, set, frozenset)


class TargetKind(str, Enum):
    """What a permission check is made against."""
    GLOBAL = "global"
    TYPE = "type"
    INSTANCE = "instance"


@dataclass(frozen=True)
class Target:
    """Immutable description of what a permission is checked against."""

    kind: TargetKind
    object_type: Optional[str] = None
    object_id: Optional[str] = None
    object_class: Optional[type] = field(default=None, compare=False, repr=False)

    @classmethod
    def global_target(cls) -> "Target":
        """Target for global permissions (no type, no object)."""
        return cls(TargetKind.GLOBAL)

    @classmethod
    def for_type(cls, object_type: Union[str, type]) -> "Target":
        """Target for class-level checks against a type."""
        if isinstance(object_type, str):
            return cls(TargetKind.TYPE, object_type)
        return cls(TargetKind.TYPE, type_identifier(object_type), object_class=object_type)

    @classmethod
    def for_instance(cls, object_type: Union[str, type], object_id: Any = None) -> "Target":
        """Target for a single object; a missing id degrades to class level."""
        object_id = stringify_identifier(object_id)
        if isinstance(object_type, str):
            return cls(TargetKind.INSTANCE, object_type, object_id)
        return cls(TargetKind.INSTANCE, type_identifier(object_type), object_id, object_type)

    @classmethod
    def of(cls, value: Any) -> "Target":
        """Build a target from a raw value.

        Args:
            value: ``None``, a type identifier string, a class, a ``Target``
                or an object. Objects satisfying :class:`HasIdentifier`
                contribute their key as the object id.

        Raises:
            InvalidTargetError: If ``value`` is a number, boolean, bytes or
                builtin collection.
        """
        if value is None:
            return cls.global_target()
        if isinstance(value, Target):
            return value
        if isinstance(value, (str, type)):
            return cls.for_type(value)
        if isinstance(value, _PRIMITIVE_TYPES):
            raise InvalidTargetError(value)

        object_id = value.get_key() if isinstance(value, HasIdentifier) else None
        return cls.for_instance(type(value), object_id)

    @property
    def is_global(self) -> bool:
        return self.kind == TargetKind.GLOBAL
