"""Python SDK for object graph storage.

This module exposes high-level serialize and load operations backed by
a disk transport rooted at the configured data root.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Any, Sequence

from core.config import BaseGraphConfig
from core.logging_config import configure_log_level
from core.types import SerializeResult
from serialize.object_loader import ObjectLoader
from serialize.object_serializer import ObjectSerializer
from store.disk_transport import DiskTransport
from store.transport import Transport


class BaseGraphClient:
    """Primary SDK entry point for serializing and loading graphs."""

    def __init__(self, config: BaseGraphConfig | None = None) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
        """
        self._config = config or BaseGraphConfig.from_env()
        configure_log_level(self._config.log_level)
        self._disk = DiskTransport(self._config.data_root)

    @property
    def config(self) -> BaseGraphConfig:
        """Return the runtime configuration."""
        return self._config

    def serialize(
        self,
        obj: object,
        extra_transports: Sequence[Transport] = (),
    ) -> SerializeResult:
        """Serialize an object graph into the disk transport.

        Args:
            obj: Root mapping or Base object.
            extra_transports: Additional transports offered every record.

        Returns:
            Root id and number of records written.

        Raises:
            SerializationError: If the graph holds unsupported values.
            StorageError: If any transport save fails.
        """
        serializer = ObjectSerializer([self._disk, *extra_transports])
        serialized = serializer.serialize(obj)
        return SerializeResult(object_id=serialized.id, records_written=serializer.records_written)

    def load(self, object_id: str) -> dict[str, object]:
        """Reassemble a stored graph.

        Args:
            object_id: Root record id.

        Returns:
            Nested data with references resolved and chunks joined.
        """
        return ObjectLoader(self._disk).load(object_id)

    def get_record(self, object_id: str) -> dict[str, Any]:
        """Read one stored record without resolving references.

        Args:
            object_id: Record id.

        Returns:
            Parsed record fields.
        """
        return ObjectLoader(self._disk).read_record(object_id)

    def get_record_json(self, object_id: str) -> str | None:
        """Return stored record JSON text, or ``None`` when unknown."""
        return self._disk.get_object(object_id)

    def has_object(self, object_id: str) -> bool:
        """Return whether a record id is stored on disk."""
        return self._disk.has_object(object_id)

    def with_data_root(self, data_root: str) -> "BaseGraphClient":
        """Clone the client with a different local data root.

        Args:
            data_root: New data root path.

        Returns:
            New SDK client instance.
        """
        resolved_root = Path(data_root).expanduser().resolve()
        return BaseGraphClient(replace(self._config, data_root=resolved_root))
