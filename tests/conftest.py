"""
Pytest configuration and shared fixtures.

Provides sample target objects and property accessors.
"""

import pytest
from pathlib import Path

from dop.property.factory import BeanPropertyFactory
from dop.property.models import BeanProperty, ObjectProperty
from sample_types import Point


# ============================================================================
# Target Fixtures
# ============================================================================

@pytest.fixture
def point() -> Point:
    """Create a sample point."""
    return Point(1, 2)


@pytest.fixture
def other_point() -> Point:
    """Create a point that differs from the sample point in y."""
    return Point(1, 5)


@pytest.fixture
def equal_point() -> Point:
    """Create a distinct point with the sample point's values."""
    return Point(1, 2)


# ============================================================================
# Property Fixtures
# ============================================================================

def _set_x(target: Point, value: int) -> None:
    target.x = value


def _set_y(target: Point, value: int) -> None:
    target.y = value


@pytest.fixture
def x_property() -> ObjectProperty:
    """Writable accessor for Point.x."""
    return ObjectProperty(
        unique_identifier="point.x",
        getter=lambda p: p.x,
        setter=_set_x,
        property_type=int,
    )


@pytest.fixture
def y_property() -> ObjectProperty:
    """Writable accessor for Point.y."""
    return ObjectProperty(
        unique_identifier="point.y",
        getter=lambda p: p.y,
        setter=_set_y,
        property_type=int,
    )


@pytest.fixture
def norm_property() -> ObjectProperty:
    """Read-only derived accessor."""
    return ObjectProperty(
        unique_identifier="point.norm1",
        getter=lambda p: abs(p.x) + abs(p.y),
    )


@pytest.fixture
def point_properties(x_property: ObjectProperty, y_property: ObjectProperty) -> list[ObjectProperty]:
    """The X and Y accessors in declaration order."""
    return [x_property, y_property]


@pytest.fixture
def bean_properties() -> list[BeanProperty]:
    """Bean properties for Point.x and Point.y."""
    return [
        BeanProperty.for_attribute(Point, "x", property_type=int),
        BeanProperty.for_attribute(Point, "y", property_type=int),
    ]


@pytest.fixture
def factory() -> BeanPropertyFactory:
    """Create a fresh property factory."""
    return BeanPropertyFactory()


# ============================================================================
# Environment Fixtures
# ============================================================================

@pytest.fixture
def clean_env(monkeypatch, tmp_path: Path) -> Path:
    """Run in an empty directory with no configuration variables set."""
    for name in ("DOP_DUPLICATE_KEYS", "DOP_INCLUDE_PROPERTIES", "DOP_INCLUDE_PRIVATE", "LOG_LEVEL"):
        # setenv first so values loaded from .env files are removed on teardown
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def mock_env(clean_env: Path, monkeypatch) -> Path:
    """Set a complete, valid configuration in the environment."""
    monkeypatch.setenv("DOP_DUPLICATE_KEYS", "last")
    monkeypatch.setenv("DOP_INCLUDE_PROPERTIES", "false")
    monkeypatch.setenv("DOP_INCLUDE_PRIVATE", "true")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    return clean_env
