"""Integration tests for serialize and load workflows."""

from __future__ import annotations

import hashlib
import json
from dataclasses import replace
from pathlib import Path

from core.config import BaseGraphConfig
from model.base import Base
from store.graph_sdk import BaseGraphClient
from store.memory_transport import MemoryTransport


def _md5(text: str) -> str:
    return hashlib.md5(text.encode("utf-8")).hexdigest()


def test_end_to_end_records_match_wire_format(tmp_path: Path) -> None:
    """Parent and child records should match the documented wire format."""
    client = BaseGraphClient(replace(BaseGraphConfig.from_env(), data_root=tmp_path))
    memory = MemoryTransport()

    result = client.serialize({"name": "x", "@child": {"name": "y"}}, extra_transports=[memory])
    child_id = _md5('{"name":"y"}')
    reference = {"speckle_type": "reference", "referencedId": child_id}
    root_fields = json.dumps({"name": "x", "child": reference}, separators=(",", ":"))

    assert memory.saved_ids == [child_id, result.object_id]
    assert client.get_record_json(child_id) == (
        f'{{"name":"y","id":"{child_id}","totalChildrenCount":0}}'
    )
    assert client.get_record_json(result.object_id) == (
        f'{root_fields[:-1]},"id":"{_md5(root_fields)}",'
        f'"__closure":{{"{child_id}":1}},"totalChildrenCount":1}}'
    )


def test_base_graph_roundtrip_restores_nested_values(tmp_path: Path) -> None:
    """Loading a serialized Base graph should restore members and arrays."""
    client = BaseGraphClient(replace(BaseGraphConfig.from_env(), data_root=tmp_path))
    mesh = Base(name="mesh", vertices=[float(index) for index in range(15000)])
    model = Base(name="model")
    model["@mesh"] = mesh
    model["@@tag"] = {"note": "literal marker"}

    result = client.serialize(model)
    graph = client.load(result.object_id)

    assert graph["mesh"]["vertices"] == mesh.vertices  # type: ignore[attr-defined,index]
    assert graph["@tag"] == {"note": "literal marker"}


def test_reserializing_unchanged_graph_is_idempotent(tmp_path: Path) -> None:
    """Serializing the same graph again should write no new files."""
    client = BaseGraphClient(replace(BaseGraphConfig.from_env(), data_root=tmp_path))
    graph = {"@a": {"@b": {"v": list(range(5001))}}}
    first = client.serialize(graph)
    files_before = sorted(path.name for path in tmp_path.rglob("*.json"))

    second = client.serialize(graph)

    assert second.object_id == first.object_id
    assert sorted(path.name for path in tmp_path.rglob("*.json")) == files_before
