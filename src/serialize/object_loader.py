"""Graph reassembly from stored records.

This module follows reference payloads back into their records and
joins chunked arrays, returning plain nested data.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, cast

from core.constants import (
    CHUNK_DATA_FIELD,
    CLOSURE_FIELD,
    DATA_CHUNK_TYPE,
    REFERENCE_TYPE,
    REFERENCED_ID_FIELD,
    TOTAL_CHILDREN_COUNT_FIELD,
    TYPE_FIELD,
)
from core.errors import SerializationError, StorageError

if TYPE_CHECKING:
    from store.transport import Transport

_BOOKKEEPING_FIELDS = (CLOSURE_FIELD, TOTAL_CHILDREN_COUNT_FIELD)


class ObjectLoader:
    """Loads a serialized graph back from one transport."""

    def __init__(self, transport: Transport) -> None:
        """Create a loader.

        Args:
            transport: Transport holding the records.
        """
        self._transport = transport

    def load(self, object_id: str) -> dict[str, object]:
        """Reassemble the graph rooted at a record id.

        Args:
            object_id: Root record id.

        Returns:
            Nested data with references resolved and chunks joined.
            Closure bookkeeping fields are dropped; ``id`` is kept.

        Raises:
            StorageError: If a referenced record is missing.
            SerializationError: If a stored record is not a JSON object.
        """
        return self._resolve_record(self.read_record(object_id))

    def read_record(self, object_id: str) -> dict[str, Any]:
        """Read and parse one stored record.

        Args:
            object_id: Record id.

        Returns:
            Parsed record fields in stored order.

        Raises:
            StorageError: If the record is missing.
            SerializationError: If the record JSON is invalid.
        """
        json_text = self._transport.get_object(object_id)
        if json_text is None:
            raise StorageError(
                f"Object {object_id} not found in transport '{self._transport.name}'. "
                "Serialize the graph into this transport before loading it."
            )
        try:
            payload = json.loads(json_text)
        except json.JSONDecodeError as error:
            raise SerializationError(
                f"Failed to parse object {object_id}: {error.msg}. "
                "The stored record is corrupt; serialize the graph again."
            ) from error
        if not isinstance(payload, dict):
            raise SerializationError(
                f"Failed to parse object {object_id}: expected a JSON object at top level."
            )
        return payload

    def _resolve_record(self, record: dict[str, Any]) -> dict[str, object]:
        return {
            key: self._resolve_value(value)
            for key, value in record.items()
            if key not in _BOOKKEEPING_FIELDS
        }

    def _resolve_value(self, value: object) -> object:
        if isinstance(value, list):
            return self._resolve_list(value)
        if isinstance(value, dict):
            if _is_reference(value):
                return self.load(str(value[REFERENCED_ID_FIELD]))
            return {key: self._resolve_value(item) for key, item in value.items()}
        return value

    def _resolve_list(self, values: list[object]) -> list[object]:
        if not values or not all(_is_reference(value) for value in values):
            return [self._resolve_value(value) for value in values]
        records = [
            self.read_record(str(cast(dict[str, Any], value)[REFERENCED_ID_FIELD]))
            for value in values
        ]
        if not all(_is_data_chunk(record) for record in records):
            return [self._resolve_record(record) for record in records]
        joined: list[object] = []
        for record in records:
            joined.extend(cast(list[object], self._resolve_value(record[CHUNK_DATA_FIELD])))
        return joined


def _is_reference(value: object) -> bool:
    return (
        isinstance(value, dict)
        and value.get(TYPE_FIELD) == REFERENCE_TYPE
        and REFERENCED_ID_FIELD in value
    )


def _is_data_chunk(value: object) -> bool:
    return isinstance(value, dict) and value.get(TYPE_FIELD) == DATA_CHUNK_TYPE
