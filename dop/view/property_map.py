"""
Live mapping view over a target object.

Reads and writes through the mapping are forwarded to the property
accessors, so changes are reflected both ways immediately.
"""

from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any

from ..property.models import ObjectProperty


class UnsupportedOperationError(Exception):
    """Raised when a view is asked to add or remove entries."""
    pass


class PropertyMap(MutableMapping[str, Any]):
    """
    Mapping backed by a target object and a key-to-property mapping.

    The key set is fixed at construction. Values are never cached.

    Usage:
        view = PropertyMap(point, {"x": x_property, "y": y_property})

        view["x"] = 9
        assert point.x == 9
    """

    __slots__ = ("_target", "_properties")

    def __init__(self, target: Any, properties: Mapping[str, ObjectProperty]):
        self._target = target
        self._properties = dict(properties)

    @property
    def target(self) -> Any:
        """The object this view reads from and writes to."""
        return self._target

    @property
    def properties(self) -> Mapping[str, ObjectProperty]:
        """A copy of the key-to-property mapping."""
        return dict(self._properties)

    def __getitem__(self, key: str) -> Any:
        return self._properties[key].get(self._target)

    def __setitem__(self, key: str, value: Any) -> None:
        prop = self._properties.get(key)
        if prop is None:
            raise KeyError(key)
        prop.set(self._target, value)

    def __delitem__(self, key: str) -> None:
        raise UnsupportedOperationError(f"Cannot remove key '{key}' from a property map")

    def __iter__(self) -> Iterator[str]:
        return iter(self._properties)

    def __len__(self) -> int:
        return len(self._properties)

    def __contains__(self, key: object) -> bool:
        # Avoid calling the getter just to test membership.
        return key in self._properties

    def __repr__(self) -> str:
        return f"PropertyMap({dict(self.items())!r})"
