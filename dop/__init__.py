"""Dynamic Object Properties: live views and diffs over object properties."""

from .property import (
    BeanProperty,
    BeanPropertyFactory,
    ObjectProperty,
    ReadOnlyPropertyError,
    UnknownPropertyError,
    UnknownTypeError,
)
from .util import (
    DuplicateKeyError,
    create_list,
    create_map,
    create_map_from_bean_properties,
    create_map_from_mapping,
    diff,
    diff_by_type,
)
from .view import PropertyList, PropertyMap, UnsupportedOperationError

__version__ = "0.1.0"

__all__ = [
    "ObjectProperty",
    "BeanProperty",
    "BeanPropertyFactory",
    "PropertyMap",
    "PropertyList",
    "diff",
    "diff_by_type",
    "create_map",
    "create_map_from_mapping",
    "create_map_from_bean_properties",
    "create_list",
    "ReadOnlyPropertyError",
    "UnknownTypeError",
    "UnknownPropertyError",
    "UnsupportedOperationError",
    "DuplicateKeyError",
]
