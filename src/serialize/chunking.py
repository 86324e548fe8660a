"""Array partitioning into data chunks."""

from __future__ import annotations

from typing import Sequence

from core.constants import CHUNK_SIZE
from model.base import DataChunk


def needs_chunking(values: Sequence[object], chunk_size: int = CHUNK_SIZE) -> bool:
    """Return whether a sequence exceeds the chunk size."""
    return len(values) > chunk_size


def chunk_sequence(values: Sequence[object], chunk_size: int = CHUNK_SIZE) -> list[DataChunk]:
    """Split a sequence into consecutive chunks.

    Args:
        values: Elements to partition.
        chunk_size: Maximum elements per chunk.

    Returns:
        Chunks of ``chunk_size`` elements; the last holds the remainder.
    """
    return [
        DataChunk(values[start : start + chunk_size])
        for start in range(0, len(values), chunk_size)
    ]
