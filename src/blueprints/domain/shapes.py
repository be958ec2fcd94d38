"""Shapes and their factory-method factories.

A shape factory produces exactly one kind of shape, chosen by which
concrete factory is used. There is no family to keep consistent.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from blueprints.contracts.factory import Shape


class ShapeKind(str, Enum):
    """Keys under which the shape factories are registered."""

    CIRCLE = "circle"
    RECTANGLE = "rectangle"


class Circle:
    def draw(self) -> str:
        return "Drawing a circle"


class Rectangle:
    def draw(self) -> str:
        return "Drawing a rectangle"


class ShapeFactoryBase(ABC):
    """Abstract creator declaring the ``create_shape`` factory method."""

    @abstractmethod
    def create_shape(self) -> "Shape":
        """Create the shape this factory is responsible for."""

    def render(self) -> str:
        """Create a fresh shape and draw it."""
        return self.create_shape().draw()


class CircleFactory(ShapeFactoryBase):
    def create_shape(self) -> "Shape":
        return Circle()


class RectangleFactory(ShapeFactoryBase):
    def create_shape(self) -> "Shape":
        return Rectangle()


__all__ = [
    "Circle",
    "CircleFactory",
    "Rectangle",
    "RectangleFactory",
    "ShapeFactoryBase",
    "ShapeKind",
]
