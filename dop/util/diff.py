"""
Diff detection between two objects.

Compares the values of a collection of properties on two target objects
and reports the properties whose values differ.
"""

import logging
from typing import Collection, Optional, TypeVar

from ..property.factory import BeanPropertyFactory
from ..property.models import ObjectProperty

logger = logging.getLogger(__name__)

ObjectT = TypeVar("ObjectT")


def diff(
    o1: Optional[ObjectT],
    o2: Optional[ObjectT],
    properties: Collection[ObjectProperty[ObjectT]],
) -> Collection[ObjectProperty[ObjectT]]:
    """
    Compare two objects property by property.

    Rules:
    - Same object (or both None) → empty set
    - Exactly one side is None → the properties collection itself, unmodified
    - Otherwise → set of properties whose values are not equal

    Values are equal when they are the same object or compare ==,
    so two None values are equal.

    Args:
        o1: Target object 1
        o2: Target object 2
        properties: Properties whose values will be compared

    Returns:
        Unique properties for which the objects have different values
    """
    if o1 is o2:
        return set()

    if o1 is None or o2 is None:
        # Nothing to extract from a missing object
        return properties

    changed = {p for p in properties if not _values_equal(p.get(o1), p.get(o2))}

    logger.debug(f"Compared {len(properties)} properties, {len(changed)} differ")
    return changed


def _values_equal(a, b) -> bool:
    # Identity first, so a shared NaN compares equal to itself
    return a is b or a == b


def diff_by_type(
    o1: Optional[ObjectT],
    o2: Optional[ObjectT],
    object_type: type,
    factory: Optional[BeanPropertyFactory] = None,
) -> Collection[ObjectProperty[ObjectT]]:
    """
    Compare two objects using every bean property of a type.

    Args:
        o1: Target object 1
        o2: Target object 2
        object_type: Type passed to factory.get_all_bean_properties
        factory: Property factory, a new BeanPropertyFactory if omitted

    Returns:
        Unique properties for which the objects have different values

    Raises:
        UnknownTypeError: If the factory cannot resolve object_type
    """
    if factory is None:
        factory = BeanPropertyFactory()
    return diff(o1, o2, factory.get_all_bean_properties(object_type))
