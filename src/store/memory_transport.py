"""In-process transport keeping records in a dictionary."""

from __future__ import annotations

from typing import Mapping

from core.constants import ID_FIELD
from serialize.canonical_json import canonicalize


class MemoryTransport:
    """Transport holding canonical record JSON in memory.

    Attributes:
        name: Transport name.
        objects: Canonical JSON keyed by record id.
        saved_ids: Record ids in save order, repeats included.
    """

    def __init__(self, name: str = "memory") -> None:
        self.name = name
        self.objects: dict[str, str] = {}
        self.saved_ids: list[str] = []

    def save_object(self, record: Mapping[str, object]) -> None:
        """Keep one finished record.

        Args:
            record: Finished record fields including ``id``.
        """
        object_id = str(record[ID_FIELD])
        self.objects.setdefault(object_id, canonicalize(record))
        self.saved_ids.append(object_id)

    def get_object(self, object_id: str) -> str | None:
        """Return stored record JSON, or ``None`` when unknown."""
        return self.objects.get(object_id)

    def has_object(self, object_id: str) -> bool:
        """Return whether a record id is stored."""
        return object_id in self.objects
