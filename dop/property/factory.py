"""
Bean property factory.

Resolves the bean properties of a type, either from explicit registration
or by discovering the declared attributes of the class.
"""

import dataclasses
import inspect
import logging
from typing import ClassVar, Iterable, Optional

from .models import BeanProperty

logger = logging.getLogger(__name__)


class UnknownTypeError(Exception):
    """Raised when no bean properties can be resolved for a type."""
    pass


class UnknownPropertyError(Exception):
    """Raised when a named bean property does not exist on a type."""
    pass


class BeanPropertyFactory:
    """
    Registry of bean properties per type.

    Discovery order for unregistered classes:
    - dataclass fields (read-only when the dataclass is frozen)
    - __slots__ entries across the MRO
    - class-level annotations
    - Python properties (writable if they define a setter)

    Usage:
        factory = BeanPropertyFactory()

        properties = factory.get_all_bean_properties(Point)
        x = factory.get_bean_property(Point, "x")
    """

    def __init__(self, include_properties: bool = True, include_private: bool = False):
        """
        Initialize factory.

        Args:
            include_properties: Also expose Python property objects
            include_private: Also expose names starting with an underscore
        """
        self.include_properties = include_properties
        self.include_private = include_private

        self._registered: dict[type, list[BeanProperty]] = {}
        self._cache: dict[type, list[BeanProperty]] = {}

    def register(self, object_type: type, properties: Iterable[BeanProperty]) -> None:
        """
        Register explicit properties for a type.

        Registered properties take precedence over discovery.
        """
        properties = list(properties)
        self._registered[object_type] = properties
        self._cache.pop(object_type, None)
        logger.debug(f"Registered {len(properties)} properties for {object_type.__qualname__}")

    def get_all_bean_properties(self, object_type: type) -> list[BeanProperty]:
        """
        Get all bean properties of a type.

        Args:
            object_type: The class whose properties are requested

        Returns:
            Properties in declaration order

        Raises:
            UnknownTypeError: If object_type is not a class or has no properties
        """
        if not isinstance(object_type, type):
            raise UnknownTypeError(f"Not a class: {object_type!r}")

        if object_type in self._registered:
            return list(self._registered[object_type])

        cached = self._cache.get(object_type)
        if cached is None:
            cached = self._discover(object_type)
            if not cached:
                raise UnknownTypeError(
                    f"No bean properties found for {object_type.__qualname__}"
                )
            self._cache[object_type] = cached
            logger.debug(
                f"Discovered {len(cached)} properties for {object_type.__qualname__}: "
                f"{[p.property_name for p in cached]}"
            )

        return list(cached)

    def get_bean_property(self, object_type: type, name: str) -> BeanProperty:
        """
        Get a single bean property by declared name.

        Raises:
            UnknownTypeError: If the type has no properties
            UnknownPropertyError: If the type has no property with that name
        """
        for prop in self.get_all_bean_properties(object_type):
            if prop.property_name == name:
                return prop
        raise UnknownPropertyError(f"{object_type.__qualname__} has no property '{name}'")

    def _discover(self, object_type: type) -> list[BeanProperty]:
        """Collect properties from the class declaration."""
        found: dict[str, BeanProperty] = {}

        def add(name: str, property_type=None, writable: bool = True) -> None:
            if name in found or not self._is_visible(name):
                return
            found[name] = BeanProperty.for_attribute(
                object_type, name, property_type=property_type, writable=writable
            )

        if dataclasses.is_dataclass(object_type):
            frozen = object_type.__dataclass_params__.frozen
            for f in dataclasses.fields(object_type):
                add(f.name, _as_type(f.type), writable=not frozen)

        for klass in reversed(object_type.__mro__):
            slots = klass.__dict__.get("__slots__", ())
            if isinstance(slots, str):
                slots = (slots,)
            for name in slots:
                if name not in ("__dict__", "__weakref__"):
                    add(name)

        # Dataclass fields are authoritative; their annotations also list InitVar
        # pseudo-fields that are never stored on the instance.
        if not dataclasses.is_dataclass(object_type):
            for klass in reversed(object_type.__mro__):
                if klass is object:
                    continue
                for name, annotation in inspect.get_annotations(klass).items():
                    if not _is_class_var(annotation):
                        add(name, _as_type(annotation))

        if self.include_properties:
            for klass in reversed(object_type.__mro__):
                for name, member in klass.__dict__.items():
                    if isinstance(member, property):
                        add(name, writable=member.fset is not None)

        return list(found.values())

    def _is_visible(self, name: str) -> bool:
        return self.include_private or not name.startswith("_")


def _as_type(annotation) -> Optional[type]:
    # String annotations and typing constructs are not concrete types.
    return annotation if isinstance(annotation, type) else None


def _is_class_var(annotation) -> bool:
    if isinstance(annotation, str):
        return annotation.startswith(("ClassVar", "typing.ClassVar"))
    return annotation is ClassVar or getattr(annotation, "__origin__", None) is ClassVar
