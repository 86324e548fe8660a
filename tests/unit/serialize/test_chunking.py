"""Unit tests for array chunking."""

from __future__ import annotations

from model.base import DataChunk
from serialize.chunking import chunk_sequence, needs_chunking


def test_chunk_sequence_splits_with_remainder() -> None:
    """12000 elements should split into 5000, 5000, and 2000."""
    chunks = chunk_sequence(list(range(12000)))

    assert [len(chunk.data) for chunk in chunks] == [5000, 5000, 2000]


def test_chunk_sequence_preserves_element_order() -> None:
    """Chunks should hold consecutive slices in order."""
    chunks = chunk_sequence(list(range(7)), chunk_size=3)

    assert [chunk.data for chunk in chunks] == [[0, 1, 2], [3, 4, 5], [6]]


def test_chunk_sequence_returns_data_chunks() -> None:
    """Every chunk should be a DataChunk wrapper."""
    chunks = chunk_sequence((1, 2), chunk_size=1)

    assert all(isinstance(chunk, DataChunk) for chunk in chunks)


def test_needs_chunking_only_above_limit() -> None:
    """Sequences at exactly the chunk size should stay inline."""
    flags = [needs_chunking([0] * size) for size in (5000, 5001)]

    assert flags == [False, True]
