"""
Constructors for live views over a target object.

Changes to the target object directly or through a view are reflected
immediately both ways.
"""

import logging
from typing import Callable, Iterable, Mapping, Optional, Sequence, TypeVar

from ..property.models import BeanProperty, ObjectProperty
from ..view.property_list import PropertyList
from ..view.property_map import PropertyMap

logger = logging.getLogger(__name__)

ObjectT = TypeVar("ObjectT")
P = TypeVar("P", bound=ObjectProperty)

DUPLICATE_KEY_POLICIES = ("error", "first", "last")


class DuplicateKeyError(Exception):
    """Raised when two properties generate the same view key."""
    pass


def create_map(
    target: ObjectT,
    properties: Iterable[ObjectProperty[ObjectT]],
    key_generator: Optional[Callable[[ObjectProperty[ObjectT]], str]] = None,
    on_duplicate: str = "error",
) -> PropertyMap:
    """
    Create a mapping view over the target object.

    Args:
        target: The target object
        properties: Properties to expose
        key_generator: Builds the key of each property. Defaults to the
            property's unique identifier.
        on_duplicate: "error", "first" or "last"

    Returns:
        A mapping backed by the target object

    Raises:
        DuplicateKeyError: If two properties share a key and on_duplicate is "error"
    """
    if key_generator is None:
        key_generator = _unique_identifier
    return PropertyMap(target, _index_by(properties, key_generator, on_duplicate))


def create_map_from_mapping(
    target: ObjectT,
    properties_map: Mapping[str, ObjectProperty[ObjectT]],
) -> PropertyMap:
    """
    Create a mapping view using an existing key-to-property mapping.

    The keys of properties_map are the keys of the view.
    """
    return PropertyMap(target, properties_map)


def create_map_from_bean_properties(
    target: ObjectT,
    properties: Iterable[BeanProperty[ObjectT]],
    on_duplicate: str = "error",
) -> PropertyMap:
    """Create a mapping view keyed by bean property names."""
    return PropertyMap(target, _index_by(properties, _property_name, on_duplicate))


def create_list(
    target: ObjectT,
    property_list: Sequence[ObjectProperty[ObjectT]],
) -> PropertyList:
    """
    Create a list view over the target object.

    The ordering of property_list is the ordering of the view.
    """
    return PropertyList(target, property_list)


def _index_by(
    properties: Iterable[P],
    key_generator: Callable[[P], str],
    on_duplicate: str,
) -> dict[str, P]:
    if on_duplicate not in DUPLICATE_KEY_POLICIES:
        raise ValueError(
            f"Unknown duplicate key policy '{on_duplicate}', "
            f"expected one of {DUPLICATE_KEY_POLICIES}"
        )

    index: dict[str, P] = {}
    for prop in properties:
        key = key_generator(prop)
        if key in index:
            if on_duplicate == "error":
                raise DuplicateKeyError(
                    f"Duplicate key '{key}' for {index[key]!r} and {prop!r}"
                )
            logger.debug(f"Duplicate key '{key}', keeping {on_duplicate}")
            if on_duplicate == "first":
                continue
        index[key] = prop
    return index


def _unique_identifier(prop: ObjectProperty) -> str:
    return prop.unique_identifier


def _property_name(prop: BeanProperty) -> str:
    return prop.property_name
