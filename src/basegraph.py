"""Public SDK surface for basegraph.

This module provides a stable import path for library users.
It re-exports the client, serializer, object model, and transports.
"""

from __future__ import annotations

from core.config import BaseGraphConfig
from core.errors import BaseGraphError, SerializationError, StorageError
from core.types import ObjectReference, SerializedObject, SerializeResult
from model.base import Base, DataChunk, SerializableObject
from serialize.object_loader import ObjectLoader
from serialize.object_serializer import ObjectSerializer
from store.disk_transport import DiskTransport
from store.graph_sdk import BaseGraphClient
from store.memory_transport import MemoryTransport
from store.transport import Transport

__all__ = [
    "Base",
    "BaseGraphClient",
    "BaseGraphConfig",
    "BaseGraphError",
    "DataChunk",
    "DiskTransport",
    "MemoryTransport",
    "ObjectLoader",
    "ObjectReference",
    "ObjectSerializer",
    "SerializableObject",
    "SerializationError",
    "SerializeResult",
    "SerializedObject",
    "StorageError",
    "Transport",
]
