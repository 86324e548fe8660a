"""Transport contract consumed by the serializer and loader."""

from __future__ import annotations

from typing import Mapping, Protocol


class Transport(Protocol):
    """Storage collaborator that persists finished records.

    Attributes:
        name: Human-readable transport name used in logs and errors.
    """

    name: str

    def save_object(self, record: Mapping[str, object]) -> None: ...

    def get_object(self, object_id: str) -> str | None: ...
