"""Live map and list views over target objects."""

from .property_map import PropertyMap, UnsupportedOperationError
from .property_list import PropertyList

__all__ = ["PropertyMap", "PropertyList", "UnsupportedOperationError"]
