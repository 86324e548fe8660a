"""Canonical JSON encoding and content ids.

Canonical form keeps insertion key order, standard escaping, and no
whitespace. Content ids are MD5 hex digests of the UTF-8 bytes.
"""

from __future__ import annotations

import hashlib
import json
from typing import Mapping

from core.constants import HASH_ALGORITHM
from core.errors import SerializationError


def canonicalize(fields: Mapping[str, object]) -> str:
    """Encode record fields as canonical JSON.

    Args:
        fields: Ordered JSON-representable field map.

    Returns:
        Compact JSON string.

    Raises:
        SerializationError: If a value is not JSON-representable or the
            text cannot be encoded as UTF-8.
    """
    try:
        json_text = json.dumps(fields, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
        json_text.encode("utf-8")
    except (TypeError, ValueError) as error:
        raise SerializationError(
            f"Failed to canonicalize record fields: {error}. "
            "Only maps, lists, strings, finite numbers, booleans, and null are supported."
        ) from error
    return json_text


def compute_object_id(json_text: str) -> str:
    """Compute the content id of a canonical JSON string.

    Args:
        json_text: Canonical JSON text.

    Returns:
        Lower-case hex digest.
    """
    hasher = hashlib.new(HASH_ALGORITHM, usedforsecurity=False)
    hasher.update(json_text.encode("utf-8"))
    return hasher.hexdigest()
