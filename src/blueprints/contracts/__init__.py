"""Contracts module - protocols shared between layers.

By depending on these protocols rather than on concrete variants, callers
stay decoupled from the implementations a registry hands out.

Example:
    ```python
    from blueprints.contracts import Operation, SoftwareFactory

    def apply(operation: Operation, a: int, b: int) -> int:
        return operation.operate(a, b)
    ```
"""

from .builders import HouseBuilderProtocol as HouseBuilderProtocol
from .factory import (
    Application as Application,
    OperatingSystem as OperatingSystem,
    Shape as Shape,
    ShapeFactory as ShapeFactory,
    SoftwareFactory as SoftwareFactory,
)
from .operations import (
    Operation as Operation,
    Product as Product,
)

# All imported names are automatically available for direct import.
