"""Content-addressed record files on local disk.

Each record is written once to ``objects/<id[:2]>/<id>.json`` under the
transport root. Files are written to a temporary sibling and renamed into
place, so an existing file is always complete and is left untouched.
"""

from __future__ import annotations

import contextlib
import os
import uuid
from pathlib import Path
from typing import Mapping

from core.constants import (
    ID_FIELD,
    OBJECT_FILE_SUFFIX,
    OBJECT_SHARD_PREFIX_LENGTH,
    OBJECTS_DIR_NAME,
)
from core.errors import StorageError
from core.logging_config import get_logger
from serialize.canonical_json import canonicalize

_LOGGER = get_logger(__name__)


class DiskTransport:
    """Transport persisting one JSON file per record id."""

    def __init__(self, root: Path, name: str = "disk") -> None:
        """Initialize the transport and its objects directory.

        Args:
            root: Data root directory.
            name: Transport name used in logs and errors.
        """
        self.name = name
        self._objects_root = root / OBJECTS_DIR_NAME
        self._objects_root.mkdir(parents=True, exist_ok=True)

    def save_object(self, record: Mapping[str, object]) -> None:
        """Write a finished record unless its file already exists.

        Args:
            record: Finished record fields including ``id``.

        Raises:
            StorageError: If the record file cannot be written.
        """
        object_id = str(record[ID_FIELD])
        object_path = self.object_path(object_id)
        if object_path.exists():
            return
        json_text = canonicalize(record)
        temp_path = object_path.with_name(f"{object_path.name}.{uuid.uuid4().hex}.tmp")
        try:
            object_path.parent.mkdir(parents=True, exist_ok=True)
            temp_path.write_text(json_text, encoding="utf-8")
            os.replace(temp_path, object_path)
        except OSError as error:
            with contextlib.suppress(OSError):
                temp_path.unlink(missing_ok=True)
            raise StorageError(
                f"Failed to write object {object_id} at {object_path}: {error}. "
                "Check write permissions and available disk space."
            ) from error
        _LOGGER.debug("object_written", object_id=object_id, path=str(object_path))

    def get_object(self, object_id: str) -> str | None:
        """Read record JSON by id.

        Args:
            object_id: Record id.

        Returns:
            Stored JSON text, or ``None`` when the file does not exist.

        Raises:
            StorageError: If the record file exists but cannot be read.
        """
        object_path = self.object_path(object_id)
        if not object_path.exists():
            return None
        try:
            return object_path.read_text(encoding="utf-8")
        except OSError as error:
            raise StorageError(
                f"Failed to read object {object_id} at {object_path}: {error}. "
                "Check read permissions on the data root."
            ) from error

    def has_object(self, object_id: str) -> bool:
        """Return whether a record file exists for an id."""
        return self.object_path(object_id).exists()

    def object_path(self, object_id: str) -> Path:
        """Return the file path for a record id."""
        shard = object_id[:OBJECT_SHARD_PREFIX_LENGTH]
        return self._objects_root / shard / f"{object_id}{OBJECT_FILE_SUFFIX}"
