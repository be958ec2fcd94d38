"""Tests for the shape factory method."""

from __future__ import annotations

import pytest

from blueprints.application import create_shape_factory
from blueprints.contracts import Shape, ShapeFactory
from blueprints.domain.exceptions import UnknownVariantError
from blueprints.domain.shapes import (
    Circle,
    CircleFactory,
    Rectangle,
    RectangleFactory,
    ShapeFactoryBase,
    ShapeKind,
)


class TestShapeFactories:
    """Each factory produces exactly one kind of shape."""

    def test_circle_factory_creates_circle(self) -> None:
        assert isinstance(CircleFactory().create_shape(), Circle)

    def test_rectangle_factory_creates_rectangle(self) -> None:
        assert isinstance(RectangleFactory().create_shape(), Rectangle)

    def test_render_draws_created_shape(self) -> None:
        assert CircleFactory().render() == "Drawing a circle"
        assert RectangleFactory().render() == "Drawing a rectangle"

    def test_base_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            ShapeFactoryBase()  # type: ignore[abstract]

    @pytest.mark.parametrize("kind", list(ShapeKind))
    def test_factories_satisfy_protocols(self, kind: ShapeKind) -> None:
        factory = create_shape_factory(kind)

        assert isinstance(factory, ShapeFactory)
        assert isinstance(factory.create_shape(), Shape)

    def test_unknown_kind_raises(self) -> None:
        with pytest.raises(UnknownVariantError):
            create_shape_factory("triangle")
