"""Application layer: registries, the operation context and the director.

Example:
    ```python
    from blueprints.application import Director, OperationContext
    from blueprints.domain import LuxuryHouseBuilder, OperationKind

    context = OperationContext()
    context.select(OperationKind.SUBTRACTION)
    context.execute(5, 3)  # 2

    house = Director().construct(LuxuryHouseBuilder())
    ```
"""

from .catalog import (
    create_product,
    create_shape_factory,
    create_software_factory,
    house_builder_registry,
    operation_registry,
    product_registry,
    shape_factory_registry,
    software_factory_registry,
)
from .context import OperationContext
from .director import BUILD_STEPS, Director
from .registry import KeyedRegistry, LookupPolicy, normalize_key

__all__ = [
    "BUILD_STEPS",
    "Director",
    "KeyedRegistry",
    "LookupPolicy",
    "OperationContext",
    "create_product",
    "create_shape_factory",
    "create_software_factory",
    "house_builder_registry",
    "normalize_key",
    "operation_registry",
    "product_registry",
    "shape_factory_registry",
    "software_factory_registry",
]
