"""Record finishing and persistence.

This module turns a decomposed field map into a finished record:
content id, closure bookkeeping, canonical JSON, and transport saves.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from core.constants import CLOSURE_FIELD, ID_FIELD, TOTAL_CHILDREN_COUNT_FIELD
from core.errors import StorageError
from core.types import ClosureTable, SerializedObject
from serialize.canonical_json import canonicalize, compute_object_id

if TYPE_CHECKING:
    from store.transport import Transport


class RecordBuilder:
    """Finishes records and offers each one to every transport."""

    def __init__(self, transports: Sequence[Transport]) -> None:
        """Create a builder.

        Args:
            transports: Transports that receive every finished record.
        """
        self._transports = tuple(transports)
        self.records_written = 0

    def finish(self, fields: dict[str, object], closures: list[ClosureTable]) -> SerializedObject:
        """Compute the id, attach closure data, and persist one record.

        The id is the digest of the decomposed fields; ``id``,
        ``__closure`` and ``totalChildrenCount`` are appended afterwards.

        Args:
            fields: Decomposed member fields of the object.
            closures: Ancestor closure tables; the last one is the object's own.

        Returns:
            Finished record id and canonical JSON.

        Raises:
            SerializationError: If fields are not JSON-representable.
            StorageError: If any transport fails to save the record.
        """
        own_closure = closures[-1]
        object_id = compute_object_id(canonicalize(fields))
        record = dict(fields)
        record[ID_FIELD] = object_id
        add_to_parent_closures(object_id, closures)
        if own_closure:
            record[CLOSURE_FIELD] = dict(own_closure)
        record[TOTAL_CHILDREN_COUNT_FIELD] = len(own_closure)
        json_text = canonicalize(record)
        self._store(object_id, record)
        return SerializedObject(id=object_id, json=json_text)

    def _store(self, object_id: str, record: dict[str, object]) -> None:
        """Save a finished record to each transport in order.

        Args:
            object_id: Record content id.
            record: Finished record fields.

        Raises:
            StorageError: If a transport save fails.
        """
        for transport in self._transports:
            try:
                transport.save_object(record)
            except StorageError:
                raise
            except Exception as error:
                raise StorageError(
                    f"Failed to save object {object_id} to transport '{transport.name}': {error}. "
                    "Check the transport backend and retry serialization."
                ) from error
        self.records_written += 1


def add_to_parent_closures(object_id: str, closures: list[ClosureTable]) -> None:
    """Register an object id in every ancestor closure table.

    The table directly above the object's own table receives depth 1,
    the next one up depth 2, and so on.

    Args:
        object_id: Content id of the finished object.
        closures: Closure chain whose last table belongs to the object.
    """
    parent_count = len(closures) - 1
    for level in range(parent_count):
        closures[level][object_id] = parent_count - level
