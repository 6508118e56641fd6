"""Shared list and JSON (de)serialization for grant sets."""

import json
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional, Type, TypeVar, Union

from ....core.exceptions import DeserializationError

G = TypeVar("G", bound="RecordSerializable")


def decode_records(data: Union[str, bytes, bytearray]) -> List[Any]:
    """Decode a JSON document into a list of raw records.

    Raises:
        DeserializationError: If the JSON is malformed or not a list
    """
    try:
        items = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DeserializationError(f"Invalid JSON provided: {e}", error=str(e)) from e

    if not isinstance(items, list):
        raise DeserializationError(
            "JSON must decode to a list",
            error=f"decoded to {type(items).__name__}"
        )
    return items


class RecordSerializable(ABC):
    """Mixin giving grant sets ``from_list``/``from_json``/``to_json``.

    Subclasses implement ``load`` and ``to_list`` and accept
    ``(items, catalog=...)`` in their constructor.
    """

    @abstractmethod
    def load(self: G, items: Iterable[Any]) -> G:
        """Merge records into the grant set."""
        ...

    @abstractmethod
    def to_list(self) -> List[Dict[str, Any]]:
        """Flatten the grant set into records."""
        ...

    def to_json(self, indent: Optional[int] = None) -> str:
        """Encode the records as JSON, preserving their order."""
        return json.dumps(self.to_list(), indent=indent)

    @classmethod
    def from_list(cls: Type[G], items: List[Any], catalog=None) -> G:
        return cls(items, catalog=catalog)

    @classmethod
    def from_json(cls: Type[G], data: Union[str, bytes, bytearray], catalog=None) -> G:
        """Build a grant set from its JSON encoding.

        Raises:
            DeserializationError: If the JSON is malformed, not a list, or
                holds invalid records
        """
        return cls(decode_records(data), catalog=catalog)
