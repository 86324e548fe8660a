"""Dynamic base object and data chunk types.

Stored members keep insertion order. Read-only properties declared on the
class hierarchy are enumerated after stored members.
"""

from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable

from core.constants import BASE_TYPE, DATA_CHUNK_TYPE


@runtime_checkable
class SerializableObject(Protocol):
    """Object exposing an ordered member list for decomposition."""

    def get_member_items(self) -> list[tuple[str, object]]: ...


class Base:
    """Dynamic object whose members are serialized in insertion order.

    Members that are not Python identifiers, such as ``"@child"``,
    are set and read with item syntax. Names starting with ``_`` are
    private state and never serialized.
    """

    speckle_type = BASE_TYPE

    def __init__(self, **members: object) -> None:
        """Create an object with ``speckle_type`` as its first member.

        Args:
            members: Initial members in keyword order.
        """
        self.speckle_type = type(self).speckle_type
        for name, value in members.items():
            self[name] = value

    def __getitem__(self, name: str) -> object:
        if name in self.__dict__ and not name.startswith("_"):
            return self.__dict__[name]
        if name in _derived_member_names(type(self)):
            return getattr(self, name)
        raise KeyError(f"{type(self).__name__} has no member '{name}'")

    def __setitem__(self, name: str, value: object) -> None:
        if name.startswith("_"):
            raise KeyError(f"Member '{name}' is private and cannot be serialized")
        if name in _derived_member_names(type(self)):
            raise KeyError(f"Member '{name}' is a read-only property of {type(self).__name__}")
        self.__dict__[name] = value

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self.get_member_names()

    def __repr__(self) -> str:
        members = ", ".join(f"{name}={value!r}" for name, value in self._stored_items())
        return f"{type(self).__name__}({members})"

    def get_member_names(self) -> list[str]:
        """Return member names in serialization order."""
        return [name for name, _ in self.get_member_items()]

    def get_member_items(self) -> list[tuple[str, object]]:
        """Return ``(name, value)`` pairs in serialization order.

        Returns:
            Stored members first, then derived property values.
        """
        items = self._stored_items()
        items.extend((name, getattr(self, name)) for name in _derived_member_names(type(self)))
        return items

    def _stored_items(self) -> list[tuple[str, object]]:
        return [(name, value) for name, value in vars(self).items() if not name.startswith("_")]


class DataChunk(Base):
    """Contiguous slice of an oversized array stored as its own record."""

    speckle_type = DATA_CHUNK_TYPE

    def __init__(self, data: Iterable[object] | None = None) -> None:
        """Create a chunk wrapping a list of elements.

        Args:
            data: Chunk elements; empty when omitted.
        """
        super().__init__()
        self.data = list(data) if data is not None else []


def _derived_member_names(cls: type) -> list[str]:
    """Collect public property names, base classes first.

    Args:
        cls: Object class to inspect.

    Returns:
        Ordered unique property names.
    """
    names: list[str] = []
    for klass in reversed(cls.__mro__):
        for name, attribute in vars(klass).items():
            if isinstance(attribute, property) and not name.startswith("_") and name not in names:
                names.append(name)
    return names
