"""Property accessor models and factory."""

from .models import ObjectProperty, BeanProperty, ReadOnlyPropertyError
from .factory import BeanPropertyFactory, UnknownTypeError, UnknownPropertyError

__all__ = [
    "ObjectProperty",
    "BeanProperty",
    "ReadOnlyPropertyError",
    "BeanPropertyFactory",
    "UnknownTypeError",
    "UnknownPropertyError",
]
