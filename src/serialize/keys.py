"""Property key sanitization.

A single leading ``@`` marks a member for detachment and is removed
from the stored key. A leading ``@@`` escapes a literal ``@`` key.
"""

from __future__ import annotations

from core.constants import DETACH_MARKER, DISALLOWED_KEY_CHARACTERS

_ESCAPED_MARKER = DETACH_MARKER * 2


def is_detachable_key(key: str) -> bool:
    """Return whether an original member name requests detachment.

    Args:
        key: Member name before sanitization.

    Returns:
        ``True`` for names with exactly one leading ``@``.
    """
    return key.startswith(DETACH_MARKER) and not key.startswith(_ESCAPED_MARKER)


def clean_key(key: str) -> str:
    """Sanitize a member name into its stored record key.

    Args:
        key: Member name before sanitization.

    Returns:
        Name without ``.`` and ``/`` characters and without the
        detach marker; ``@@name`` collapses to ``@name``.
    """
    cleaned = "".join(character for character in key if character not in DISALLOWED_KEY_CHARACTERS)
    if key.startswith(DETACH_MARKER) and cleaned.startswith(DETACH_MARKER):
        return cleaned[1:]
    return cleaned
