from __future__ import annotations

"""Shared data structures used across the toolkit core.

This module is intentionally free of I/O so that the contained objects can
be reused in any context (unit-tests, embedding hosts, etc.).
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Type, TypeVar

from lxml import etree as ET

__all__ = [
    "ClassToInstanceMultiMap",
    "ItemMetadata",
    "StatusMetadata",
    "ErrorStatus",
    "WarningStatus",
    "InfoStatus",
    "RegistrationAuthority",
    "DOMElementItem",
]

T = TypeVar("T")


class ClassToInstanceMultiMap:
    """Ordered multi-valued mapping keyed by the concrete class of each value.

    ``put(ErrorStatus(...))`` files the value under ``ErrorStatus``;
    ``get(ErrorStatus)`` returns every such value in insertion order.
    Values are only indexed under their own class, never a base class.
    """

    def __init__(self) -> None:
        self._values: Dict[type, List[Any]] = {}

    def put(self, value: Any) -> None:
        self._values.setdefault(type(value), []).append(value)

    def get(self, cls: Type[T]) -> List[T]:
        return list(self._values.get(cls, ()))

    def contains_key(self, cls: type) -> bool:
        return bool(self._values.get(cls))

    def remove(self, value: Any) -> bool:
        """Remove the first occurrence of *value*; return whether it was present."""
        values = self._values.get(type(value))
        if not values or value not in values:
            return False
        values.remove(value)
        if not values:
            del self._values[type(value)]
        return True

    def keys(self) -> List[type]:
        return list(self._values)

    def clear(self) -> None:
        self._values.clear()

    def __len__(self) -> int:
        return sum(len(v) for v in self._values.values())

    def __iter__(self) -> Iterator[Any]:
        for values in self._values.values():
            yield from values


class ItemMetadata:
    """Marker base for values stored in an item's metadata."""


@dataclass(frozen=True)
class StatusMetadata(ItemMetadata):
    """A status message attributed to the component that produced it."""

    component_id: str
    message: str


@dataclass(frozen=True)
class ErrorStatus(StatusMetadata):
    pass


@dataclass(frozen=True)
class WarningStatus(StatusMetadata):
    pass


@dataclass(frozen=True)
class InfoStatus(StatusMetadata):
    pass


@dataclass(frozen=True)
class RegistrationAuthority(ItemMetadata):
    """Registration authority URI read from an entity's ``mdrpi:RegistrationInfo``."""

    value: str


class DOMElementItem:
    """An item in the pipeline: a mutable XML element plus its metadata.

    Attributes
    ----------
    root
        The wrapped ``lxml`` element. Components mutate it in place.
    metadata
        Type-keyed multi-map of :class:`ItemMetadata` values.
    """

    def __init__(self, root: ET._Element) -> None:
        if root is None:
            raise ValueError("item root may not be None")
        if isinstance(root, ET._ElementTree):
            root = root.getroot()
        self.root = root
        self.metadata = ClassToInstanceMultiMap()

    def unwrap(self) -> ET._Element:
        return self.root

    def get_item_metadata(self) -> ClassToInstanceMultiMap:
        return self.metadata

    def __repr__(self) -> str:
        return f"DOMElementItem({ET.QName(self.root).localname!r})"
