"""Value classification for graph decomposition.

Each value is resolved once into a closed set of kinds before the
serializer recurses into it.
"""

from __future__ import annotations

from typing import Literal, Mapping

from core.errors import SerializationError
from model.base import DataChunk, SerializableObject

ValueKind = Literal["scalar", "detached", "chunk", "sequence", "inline"]

_SCALAR_TYPES = (str, bool, int, float)


def classify_value(value: object, detachable: bool = False) -> ValueKind:
    """Resolve how a value is serialized.

    Scalars are checked first, so a detachable member holding a scalar
    or ``None`` is kept inline.

    Args:
        value: Member value.
        detachable: Whether the member name requests detachment.

    Returns:
        Value kind.

    Raises:
        SerializationError: If the value has no decomposable structure.
    """
    if value is None or isinstance(value, _SCALAR_TYPES):
        return "scalar"
    if not _is_decomposable(value):
        raise SerializationError(
            f"Cannot serialize value {value!r} of type {type(value).__name__}. "
            "Use scalars, lists, mappings, or Base objects."
        )
    if detachable:
        return "detached"
    if isinstance(value, DataChunk):
        return "chunk"
    if isinstance(value, (list, tuple)):
        return "sequence"
    return "inline"


def member_items(value: object) -> list[tuple[str, object]]:
    """Return ordered ``(name, value)`` members of a decomposable value.

    Sequences enumerate their string indices.

    Args:
        value: Mapping, serializable object, or sequence.

    Returns:
        Ordered member pairs.

    Raises:
        SerializationError: If the value is not decomposable or a
            mapping key is not a string.
    """
    if isinstance(value, SerializableObject):
        return value.get_member_items()
    if isinstance(value, Mapping):
        return [(_mapping_key(key), item) for key, item in value.items()]
    if isinstance(value, (list, tuple)):
        return [(str(index), item) for index, item in enumerate(value)]
    raise SerializationError(
        f"Cannot decompose value {value!r} of type {type(value).__name__} into members."
    )


def _is_decomposable(value: object) -> bool:
    return isinstance(value, (Mapping, list, tuple, SerializableObject))


def _mapping_key(key: object) -> str:
    if not isinstance(key, str):
        raise SerializationError(
            f"Cannot serialize mapping key {key!r} of type {type(key).__name__}. "
            "Member names must be strings."
        )
    return key
