"""Unit tests for the disk transport."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.errors import StorageError
from store.disk_transport import DiskTransport

_OBJECT_ID = "ab" + "0" * 30


def _record(object_id: str = _OBJECT_ID) -> dict[str, object]:
    return {"name": "y", "id": object_id, "totalChildrenCount": 0}


def test_save_object_writes_sharded_file(tmp_path: Path) -> None:
    """Records should be written under a two-character shard directory."""
    transport = DiskTransport(tmp_path)

    transport.save_object(_record())

    assert (tmp_path / "objects" / "ab" / f"{_OBJECT_ID}.json").is_file()


def test_get_object_reads_back_saved_json(tmp_path: Path) -> None:
    """Saved records should read back as canonical JSON."""
    transport = DiskTransport(tmp_path)
    transport.save_object(_record())

    json_text = transport.get_object(_OBJECT_ID)

    assert json_text == f'{{"name":"y","id":"{_OBJECT_ID}","totalChildrenCount":0}}'


def test_save_object_leaves_existing_file_untouched(tmp_path: Path) -> None:
    """A second save of a known id should not rewrite the file."""
    transport = DiskTransport(tmp_path)
    transport.save_object(_record())
    transport.object_path(_OBJECT_ID).write_text("sentinel", encoding="utf-8")

    transport.save_object(_record())

    assert transport.get_object(_OBJECT_ID) == "sentinel"


def test_get_object_returns_none_for_unknown_id(tmp_path: Path) -> None:
    """Unknown ids should return None."""
    transport = DiskTransport(tmp_path)

    assert transport.get_object(_OBJECT_ID) is None and not transport.has_object(_OBJECT_ID)


def test_save_object_raises_storage_error_on_write_failure(tmp_path: Path) -> None:
    """File system failures should surface as StorageError."""
    transport = DiskTransport(tmp_path)
    (tmp_path / "objects" / "ab").write_text("not a directory", encoding="utf-8")

    with pytest.raises(StorageError):
        transport.save_object(_record())

    assert not transport.has_object(_OBJECT_ID)


def _fail_first_write(monkeypatch: pytest.MonkeyPatch) -> None:
    original_write_text = Path.write_text
    calls: list[Path] = []

    def _write_text(self: Path, data: str, *args: object, **kwargs: object) -> int:
        if not calls:
            calls.append(self)
            original_write_text(self, data[:5], *args, **kwargs)  # type: ignore[arg-type]
            raise OSError(28, "No space left on device")
        return original_write_text(self, data, *args, **kwargs)  # type: ignore[arg-type]

    monkeypatch.setattr(Path, "write_text", _write_text)


def test_save_object_leaves_no_partial_file_after_failed_write(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """A write that fails midway should leave neither the record nor a temp file."""
    transport = DiskTransport(tmp_path)
    _fail_first_write(monkeypatch)

    with pytest.raises(StorageError):
        transport.save_object(_record())

    assert not transport.has_object(_OBJECT_ID) and not list(tmp_path.rglob("*.tmp"))


def test_save_object_retry_writes_complete_record(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Retrying after a failed write should store the full record."""
    transport = DiskTransport(tmp_path)
    _fail_first_write(monkeypatch)
    with pytest.raises(StorageError):
        transport.save_object(_record())

    transport.save_object(_record())

    assert transport.get_object(_OBJECT_ID) == (
        f'{{"name":"y","id":"{_OBJECT_ID}","totalChildrenCount":0}}'
    )
