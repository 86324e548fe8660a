"""Shared typed models.

This module defines immutable value types passed between the
serializer, transports, and the SDK client.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.constants import REFERENCE_TYPE, REFERENCED_ID_FIELD, TYPE_FIELD

ClosureTable = dict[str, int]


@dataclass(frozen=True)
class SerializedObject:
    """Finished record produced by one flattening call.

    Attributes:
        id: Content id of the record.
        json: Canonical JSON of the finished record, bookkeeping included.
    """

    id: str
    json: str


@dataclass(frozen=True)
class ObjectReference:
    """Pointer to a detached record.

    Attributes:
        referenced_id: Content id of the detached record.
    """

    referenced_id: str

    def to_payload(self) -> dict[str, object]:
        """Return the wire payload embedded in the parent record."""
        return {TYPE_FIELD: REFERENCE_TYPE, REFERENCED_ID_FIELD: self.referenced_id}


@dataclass(frozen=True)
class SerializeResult:
    """Outcome of a client-level serialize call.

    Attributes:
        object_id: Content id of the root record.
        records_written: Number of records offered to the transports.
    """

    object_id: str
    records_written: int
