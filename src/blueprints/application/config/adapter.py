"""Adapter turning a BlueprintsConfiguration into configured components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from blueprints.application.catalog import (
    house_builder_registry,
    operation_registry,
    product_registry,
    shape_factory_registry,
    software_factory_registry,
)
from blueprints.application.config.schemas import BlueprintsConfiguration
from blueprints.application.director import Director

if TYPE_CHECKING:
    from blueprints.application.registry import KeyedRegistry
    from blueprints.contracts import Operation, Product, ShapeFactory, SoftwareFactory
    from blueprints.domain.house import HouseBuilder


@dataclass(frozen=True)
class RegistrySet:
    """One registry per kind of selectable implementation."""

    operations: "KeyedRegistry[Operation]" = field(default_factory=operation_registry)
    products: "KeyedRegistry[Product]" = field(default_factory=product_registry)
    software: "KeyedRegistry[SoftwareFactory]" = field(
        default_factory=software_factory_registry
    )
    shapes: "KeyedRegistry[ShapeFactory]" = field(default_factory=shape_factory_registry)
    houses: "KeyedRegistry[HouseBuilder]" = field(default_factory=house_builder_registry)

    def by_name(self) -> dict[str, "KeyedRegistry"]:
        """Registries keyed by their own name, in display order."""
        registries = [self.operations, self.products, self.software, self.shapes, self.houses]
        return {registry.name: registry for registry in registries}


def config_to_registries(config: BlueprintsConfiguration | None = None) -> RegistrySet:
    """Build the registries selected by a configuration.

    Args:
        config: Parsed configuration; None uses the defaults.
    """
    config = config or BlueprintsConfiguration()
    return RegistrySet(
        products=product_registry(config.registries.products),
        software=software_factory_registry(config.registries.software),
    )


def config_to_director(config: BlueprintsConfiguration | None = None) -> Director:
    """Build a director honouring the configured completeness check."""
    config = config or BlueprintsConfiguration()
    return Director(require_complete=config.director.require_complete)


__all__ = [
    "RegistrySet",
    "config_to_director",
    "config_to_registries",
]
