"""
Serialized grant records.

A grant set flattens to a list of these records for storage; scoped grant
sets add the scope name, with ``None`` standing for the default scope.
"""
import logging
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ....config.constants import RecordFields, Scopes
from ....config.settings import get_settings
from ....core.exceptions import DeserializationError
from .protocols import stringify_identifier

logger = logging.getLogger(__name__)


class PermissionRecord(BaseModel):
    """One granted permission, for one object or for all of them."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(description="Permission key")
    object_id: Optional[str] = Field(None, description="Object identifier, None for class or global level")

    @field_validator("object_id", mode="before")
    @classmethod
    def stringify_object_id(cls, value: Any) -> Any:
        """Object ids are stored as strings whatever the key type."""
        if isinstance(value, (bool, int, float)):
            return stringify_identifier(value)
        return value


class ScopedPermissionRecord(PermissionRecord):
    """A granted permission inside a named scope."""

    scope: Optional[str] = Field(None, description="Scope name, None for the default scope")

    @field_validator("scope")
    @classmethod
    def reject_wildcard_scope(cls, value: Optional[str]) -> Optional[str]:
        """The wildcard selects scopes, it never names one."""
        if value == Scopes.ALL:
            raise ValueError(f"'{Scopes.ALL}' is not a valid scope name")
        return value


R = TypeVar("R", bound=PermissionRecord)


def parse_records(items: Iterable[Any], model: Type[R]) -> List[R]:
    """Validate raw items into records.

    Every item is validated before any is returned, so callers can apply
    the result without risking a half-loaded grant set.

    Args:
        items: Mappings or record instances
        model: Record model to validate against

    Returns:
        Validated records; nameless mappings are skipped unless
        ``strict_records`` is set

    Raises:
        DeserializationError: If an item is not a mapping or fails validation
    """
    strict = get_settings().strict_records
    records: List[R] = []
    for index, item in enumerate(items):
        if isinstance(item, model):
            records.append(item)
            continue
        if not isinstance(item, Mapping):
            raise DeserializationError(
                f"Record {index} must be a mapping, {type(item).__name__} given",
                details={"index": index}
            )
        if item.get(RecordFields.NAME) is None:
            if strict:
                raise DeserializationError(f"Record {index} has no name", details={"index": index})
            logger.warning(f"Skipping record {index} without a name: {dict(item)}")
            continue
        try:
            records.append(model.model_validate(item))
        except ValidationError as e:
            raise DeserializationError(
                f"Invalid record {index}", error=str(e), details={"index": index}
            ) from e
    return records
