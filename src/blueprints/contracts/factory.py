"""Factory protocols for product families and single-product factories.

Protocols:
    OperatingSystem: First product kind of the software family.
    Application: Second product kind of the software family.
    SoftwareFactory: Creates one operating system and one application,
        both drawn from the same family variant.
    Shape: Product of a factory method.
    ShapeFactory: Creates exactly one kind of shape; no cross-product
        consistency applies.

Example:
    ```python
    from blueprints.contracts import SoftwareFactory

    def boot(factory: SoftwareFactory) -> list[str]:
        return [
            factory.create_operating_system().run(),
            factory.create_application().open(),
        ]
    ```
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class OperatingSystem(Protocol):
    """Operating system product."""

    family: str

    def run(self) -> str:
        """Describe running the operating system."""
        ...


@runtime_checkable
class Application(Protocol):
    """Application product."""

    family: str

    def open(self) -> str:
        """Describe opening the application."""
        ...


@runtime_checkable
class SoftwareFactory(Protocol):
    """Protocol for factories that create a whole software family.

    Every concrete factory must produce one instance of each product kind
    and both instances must carry the factory's ``family`` label. Created
    products hold no reference back to the factory.
    """

    family: str

    def create_operating_system(self) -> "OperatingSystem":
        """Create the family's operating system."""
        ...

    def create_application(self) -> "Application":
        """Create the family's application."""
        ...


@runtime_checkable
class Shape(Protocol):
    """Shape product created by a factory method."""

    def draw(self) -> str:
        """Describe drawing the shape."""
        ...


@runtime_checkable
class ShapeFactory(Protocol):
    """Protocol for factories producing a single kind of shape."""

    def create_shape(self) -> "Shape":
        """Create the shape this factory is responsible for."""
        ...


__all__ = [
    "Application",
    "OperatingSystem",
    "Shape",
    "ShapeFactory",
    "SoftwareFactory",
]
