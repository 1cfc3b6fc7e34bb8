"""Utilities built on the property accessors: diffing and view construction."""

from .diff import diff, diff_by_type
from .views import (
    DuplicateKeyError,
    create_list,
    create_map,
    create_map_from_bean_properties,
    create_map_from_mapping,
)

__all__ = [
    "diff",
    "diff_by_type",
    "create_map",
    "create_map_from_mapping",
    "create_map_from_bean_properties",
    "create_list",
    "DuplicateKeyError",
]
