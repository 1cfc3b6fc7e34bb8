"""
Property accessor models.

A property is a named getter (and optional setter) bound to an attribute
of a target object. Properties are identified by a unique string key.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

ObjectT = TypeVar("ObjectT")


class ReadOnlyPropertyError(Exception):
    """Raised when setting a value through a property without a setter."""
    pass


@dataclass(frozen=True, eq=False)
class ObjectProperty(Generic[ObjectT]):
    """
    Accessor for a single value of a target object.

    Two properties are equal when their unique identifiers are equal,
    so a set of properties is unique by key.

    Attributes:
        unique_identifier: Stable key identifying this property
        getter: Callable reading the value from a target
        setter: Callable writing a value to a target, None if read-only
        property_type: Declared value type, if known
    """
    unique_identifier: str
    getter: Callable[[ObjectT], Any]
    setter: Optional[Callable[[ObjectT, Any], None]] = None
    property_type: Optional[type] = None

    def __post_init__(self):
        if not self.unique_identifier:
            raise ValueError("Property unique identifier must be a non-empty string")

    @property
    def is_writable(self) -> bool:
        """Check if this property supports mutation."""
        return self.setter is not None

    def get(self, target: ObjectT) -> Any:
        """Read the property value from the target."""
        return self.getter(target)

    def set(self, target: ObjectT, value: Any) -> None:
        """
        Write the property value to the target.

        Raises:
            ReadOnlyPropertyError: If the property has no setter
        """
        if self.setter is None:
            raise ReadOnlyPropertyError(f"Property {self.unique_identifier} is read-only")
        self.setter(target, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ObjectProperty):
            return NotImplemented
        return self.unique_identifier == other.unique_identifier

    def __hash__(self) -> int:
        return hash(self.unique_identifier)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.unique_identifier!r})"


@dataclass(frozen=True, eq=False, repr=False)
class BeanProperty(ObjectProperty[ObjectT]):
    """
    Property bound to a named attribute of a declaring type.

    The declared name is distinct from the unique identifier, which also
    carries the declaring type.

    Attributes:
        property_name: Attribute name on the target
        declaring_type: Class that declares the attribute
    """
    property_name: str = ""
    declaring_type: Optional[type] = None

    def __post_init__(self):
        super().__post_init__()
        if not self.property_name:
            raise ValueError("Bean property name must be a non-empty string")

    @staticmethod
    def identifier_for(declaring_type: type, name: str) -> str:
        """Build the unique identifier for an attribute of a type."""
        return f"{declaring_type.__module__}.{declaring_type.__qualname__}#{name}"

    @classmethod
    def for_attribute(
        cls,
        declaring_type: type,
        name: str,
        property_type: Optional[type] = None,
        writable: bool = True,
    ) -> "BeanProperty":
        """Create a bean property backed by getattr/setattr."""

        def getter(target):
            return getattr(target, name)

        setter = None
        if writable:
            def setter(target, value):
                setattr(target, name, value)

        return cls(
            unique_identifier=cls.identifier_for(declaring_type, name),
            getter=getter,
            setter=setter,
            property_type=property_type,
            property_name=name,
            declaring_type=declaring_type,
        )
