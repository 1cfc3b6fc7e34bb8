"""
Live sequence view over a target object.

Index i reads and writes through the i-th property of the list.
"""

from collections.abc import MutableSequence, Sequence
from typing import Any

from ..property.models import ObjectProperty
from .property_map import UnsupportedOperationError


class PropertyList(MutableSequence):
    """
    Fixed-length sequence backed by a target object and ordered properties.

    The ordering of the supplied properties is the ordering of the view.
    Slices return a plain list of the current values.
    """

    __slots__ = ("_target", "_properties")

    def __init__(self, target: Any, properties: Sequence[ObjectProperty]):
        self._target = target
        self._properties = list(properties)

    @property
    def target(self) -> Any:
        return self._target

    @property
    def properties(self) -> list[ObjectProperty]:
        return list(self._properties)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [p.get(self._target) for p in self._properties[index]]
        return self._properties[index].get(self._target)

    def __setitem__(self, index, value) -> None:
        if isinstance(index, slice):
            raise UnsupportedOperationError("Slice assignment is not supported by a property list")
        self._properties[index].set(self._target, value)

    def __delitem__(self, index) -> None:
        raise UnsupportedOperationError("Cannot remove elements from a property list")

    def insert(self, index: int, value: Any) -> None:
        raise UnsupportedOperationError("Cannot insert elements into a property list")

    def __len__(self) -> int:
        return len(self._properties)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (PropertyList, list, tuple)):
            return list(self) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"PropertyList({list(self)!r})"
