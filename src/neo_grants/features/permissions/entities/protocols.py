"""Protocol interfaces consumed by the permissions feature."""

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class HasIdentifier(Protocol):
    """Objects that can report the identifier grants are recorded against.

    The returned value is stringified before it is compared with granted
    object ids, so integer primary keys and UUIDs work unchanged.
    """

    def get_key(self) -> Any:
        ...


def type_identifier(cls: type) -> str:
    """Full type identifier for a class, e.g. ``"app.models.Document"``."""
    return f"{cls.__module__}.{cls.__qualname__}"


def stringify_identifier(value: Any) -> Optional[str]:
    """String form of an object id as it is stored in grant sets.

    Booleans become ``"1"``/``""`` and integral floats lose their
    fractional part, so ``1``, ``1.0``, ``True`` and ``"1"`` all name the
    same object.
    """
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
