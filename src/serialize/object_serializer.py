"""Recursive object graph serializer.

This module walks an object's members depth-first, detaches ``@``-marked
members and oversized arrays into their own records, and keeps a closure
table per in-flight object so every record lists all its descendants.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence, cast

from core.logging_config import get_logger
from core.types import ClosureTable, ObjectReference, SerializedObject
from serialize.chunking import chunk_sequence, needs_chunking
from serialize.keys import clean_key, is_detachable_key
from serialize.record_builder import RecordBuilder
from serialize.value_kinds import classify_value, member_items

if TYPE_CHECKING:
    from store.transport import Transport

_LOGGER = get_logger(__name__)


class ObjectSerializer:
    """Content-addressed serializer for nested object graphs.

    Children are finished and saved before their parent id is computed,
    so every reference points at an already persisted record.
    """

    def __init__(self, transports: Sequence[Transport]) -> None:
        """Create a serializer.

        Args:
            transports: Transports that receive every finished record.
        """
        self._builder = RecordBuilder(transports)

    @property
    def records_written(self) -> int:
        """Number of records saved by the most recent ``serialize`` call."""
        return self._builder.records_written

    def serialize(self, obj: object) -> SerializedObject:
        """Serialize an object and all detached descendants.

        Args:
            obj: Root mapping or Base object.

        Returns:
            Root record id and canonical JSON.

        Raises:
            SerializationError: If a value in the graph is not representable.
            StorageError: If a transport save fails.
        """
        self._builder.records_written = 0
        serialized = self._serialize_with_closures(obj, [])
        _LOGGER.info(
            "graph_serialized",
            object_id=serialized.id,
            records_written=self._builder.records_written,
        )
        return serialized

    def _serialize_with_closures(
        self,
        obj: object,
        closures: list[ClosureTable],
    ) -> SerializedObject:
        """Flatten one object into its own record.

        Args:
            obj: Object to flatten.
            closures: Ancestor closure chain owned by this call.

        Returns:
            Finished record id and canonical JSON.
        """
        own_closure: ClosureTable = {}
        closures.append(own_closure)
        fields = self._preserialize_members(obj, closures)
        serialized = self._builder.finish(fields, closures)
        _LOGGER.debug(
            "object_serialized",
            object_id=serialized.id,
            depth=len(closures) - 1,
            total_children_count=len(own_closure),
        )
        return serialized

    def _preserialize_members(
        self,
        obj: object,
        closures: list[ClosureTable],
    ) -> dict[str, object]:
        """Pre-serialize every member of an object under its sanitized key."""
        converted: dict[str, object] = {}
        for key, value in member_items(obj):
            converted[clean_key(key)] = self._preserialize_value(
                value, closures, detachable=is_detachable_key(key)
            )
        return converted

    def _preserialize_value(
        self,
        value: object,
        closures: list[ClosureTable],
        detachable: bool = False,
    ) -> object:
        """Convert one value into its JSON-ready form.

        Args:
            value: Member value or sequence element.
            closures: Current ancestor closure chain.
            detachable: Whether the owning member requests detachment.

        Returns:
            Scalar, list, inline mapping, or reference payload.
        """
        kind = classify_value(value, detachable)
        if kind == "scalar":
            return value
        if kind in ("detached", "chunk"):
            serialized = self._serialize_with_closures(value, list(closures))
            return ObjectReference(serialized.id).to_payload()
        if kind == "sequence":
            elements = cast(Sequence[object], value)
            if needs_chunking(elements):
                return self._preserialize_value(chunk_sequence(elements), closures)
            return [self._preserialize_value(element, closures) for element in elements]
        return self._preserialize_members(value, closures)
