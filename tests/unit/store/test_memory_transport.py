"""Unit tests for the in-memory transport."""

from __future__ import annotations

from store.memory_transport import MemoryTransport


def test_save_object_keeps_canonical_json() -> None:
    """Saved records should be stored as compact JSON."""
    transport = MemoryTransport()

    transport.save_object({"name": "y", "id": "abc", "totalChildrenCount": 0})

    assert transport.get_object("abc") == '{"name":"y","id":"abc","totalChildrenCount":0}'


def test_save_object_records_repeated_saves() -> None:
    """Re-saving a known id should keep one copy but log the save."""
    transport = MemoryTransport()
    record = {"id": "abc", "totalChildrenCount": 0}

    transport.save_object(record)
    transport.save_object(record)

    assert transport.saved_ids == ["abc", "abc"] and len(transport.objects) == 1


def test_get_object_returns_none_for_unknown_id() -> None:
    """Unknown ids should return None."""
    assert MemoryTransport().get_object("missing") is None
