"""Unit tests for graph reassembly."""

from __future__ import annotations

import pytest

from core.errors import SerializationError, StorageError
from serialize.object_loader import ObjectLoader
from serialize.object_serializer import ObjectSerializer
from store.memory_transport import MemoryTransport


def _store(obj: object) -> tuple[str, MemoryTransport]:
    transport = MemoryTransport()
    return ObjectSerializer([transport]).serialize(obj).id, transport


def test_load_resolves_references() -> None:
    """Detached children should be loaded in place of references."""
    root_id, transport = _store({"name": "x", "@child": {"name": "y"}})

    graph = ObjectLoader(transport).load(root_id)

    assert graph["child"] == {"name": "y", "id": graph["child"]["id"]}  # type: ignore[index]


def test_load_drops_closure_bookkeeping() -> None:
    """Closure fields should not appear in reassembled objects."""
    root_id, transport = _store({"name": "x", "@child": {"name": "y"}})

    graph = ObjectLoader(transport).load(root_id)

    assert list(graph) == ["name", "child", "id"]


def test_load_joins_chunked_arrays() -> None:
    """Chunk references should be joined back into one list."""
    root_id, transport = _store({"values": list(range(12000))})

    graph = ObjectLoader(transport).load(root_id)

    assert graph["values"] == list(range(12000))


def test_load_raises_for_missing_record() -> None:
    """Unknown ids should raise StorageError."""
    with pytest.raises(StorageError, match="not found"):
        ObjectLoader(MemoryTransport()).load("0" * 32)


def test_read_record_raises_for_corrupt_json() -> None:
    """Invalid stored JSON should raise SerializationError."""
    transport = MemoryTransport()
    transport.objects["broken"] = "{not json"

    with pytest.raises(SerializationError):
        ObjectLoader(transport).read_record("broken")

    assert transport.has_object("broken")


def test_load_keeps_inline_chunk_look_alikes() -> None:
    """Inline mappings shaped like chunks should not be joined."""
    look_alike = {"speckle_type": "Speckle.Core.Models.DataChunk", "data": [1, 2]}
    root_id, transport = _store({"items": [look_alike]})

    graph = ObjectLoader(transport).load(root_id)

    assert graph["items"] == [look_alike]


def test_load_resolves_reference_lists_that_are_not_chunks() -> None:
    """Lists of references to ordinary records should load each record."""
    transport = MemoryTransport()
    transport.objects["child"] = '{"n":1,"id":"child","totalChildrenCount":0}'
    transport.objects["root"] = (
        '{"items":[{"speckle_type":"reference","referencedId":"child"}],'
        '"id":"root","totalChildrenCount":1}'
    )

    graph = ObjectLoader(transport).load("root")

    assert graph["items"] == [{"n": 1, "id": "child"}]
