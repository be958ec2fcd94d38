"""Default registry tables and key-based creation helpers.

Each ``*_registry()`` function builds a fresh, immutable registry from the
built-in variants. Callers that need different behaviour build their own
KeyedRegistry, or derive one with ``with_entry``/``with_policy``, and pass
it in explicitly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from blueprints.domain.exceptions import UnknownVariantError
from blueprints.domain.house import ConcreteHouseBuilder, LuxuryHouseBuilder
from blueprints.domain.operations import (
    Addition,
    Multiplication,
    OperationKind,
    Subtraction,
)
from blueprints.domain.products import Product1, Product2, RefusalProduct
from blueprints.domain.shapes import CircleFactory, RectangleFactory, ShapeKind
from blueprints.domain.software import (
    LinuxFactory,
    SoftwareFamily,
    UnsupportedSoftwareFactory,
    WindowsFactory,
)

from .registry import KeyedRegistry, LookupPolicy

if TYPE_CHECKING:
    from blueprints.contracts import (
        Operation,
        Product,
        ShapeFactory,
        SoftwareFactory,
    )
    from blueprints.domain.house import HouseBuilder


def operation_registry() -> KeyedRegistry["Operation"]:
    """Registry of the arithmetic operations.

    Integer operations have no refusal variant, so the registry is strict.
    """
    return KeyedRegistry(
        "operation",
        {
            OperationKind.ADDITION: Addition,
            OperationKind.SUBTRACTION: Subtraction,
            OperationKind.MULTIPLICATION: Multiplication,
        },
    )


def product_registry(
    policy: LookupPolicy = LookupPolicy.LENIENT,
) -> KeyedRegistry["Product"]:
    """Registry of simple-factory products, lenient by default."""
    return KeyedRegistry(
        "product",
        {"p1": Product1, "p2": Product2},
        policy=policy,
        fallback=RefusalProduct,
    )


def software_factory_registry(
    policy: LookupPolicy = LookupPolicy.STRICT,
) -> KeyedRegistry["SoftwareFactory"]:
    """Registry of software family factories, strict by default."""
    return KeyedRegistry(
        "software",
        {
            SoftwareFamily.WINDOWS: WindowsFactory,
            SoftwareFamily.LINUX: LinuxFactory,
        },
        policy=policy,
        fallback=UnsupportedSoftwareFactory,
        error_cls=UnknownVariantError,
    )


def shape_factory_registry() -> KeyedRegistry["ShapeFactory"]:
    """Registry of shape factories. Shapes have no refusal variant."""
    return KeyedRegistry(
        "shape",
        {
            ShapeKind.CIRCLE: CircleFactory,
            ShapeKind.RECTANGLE: RectangleFactory,
        },
        error_cls=UnknownVariantError,
    )


def house_builder_registry() -> KeyedRegistry["HouseBuilder"]:
    """Registry of house builders. Each lookup yields a fresh builder."""
    return KeyedRegistry(
        "house",
        {
            ConcreteHouseBuilder.variant: ConcreteHouseBuilder,
            LuxuryHouseBuilder.variant: LuxuryHouseBuilder,
        },
        error_cls=UnknownVariantError,
    )


def create_product(
    key: Any, registry: KeyedRegistry["Product"] | None = None
) -> "Product":
    """Create a product by key.

    With the default lenient registry this is a total function: any key,
    including the empty string, yields a product.
    """
    if registry is None:
        registry = product_registry()
    return registry.create(key)


def create_software_factory(
    variant: Any, registry: KeyedRegistry["SoftwareFactory"] | None = None
) -> "SoftwareFactory":
    """Create the factory for a software family variant.

    Raises:
        UnknownVariantError: If the variant is unknown and the registry is
            strict.
    """
    if registry is None:
        registry = software_factory_registry()
    return registry.create(variant)


def create_shape_factory(
    kind: Any, registry: KeyedRegistry["ShapeFactory"] | None = None
) -> "ShapeFactory":
    """Create the factory for a shape kind."""
    if registry is None:
        registry = shape_factory_registry()
    return registry.create(kind)


__all__ = [
    "create_product",
    "create_shape_factory",
    "create_software_factory",
    "house_builder_registry",
    "operation_registry",
    "product_registry",
    "shape_factory_registry",
    "software_factory_registry",
]
