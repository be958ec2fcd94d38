"""Runtime-selectable strategies, product factories and staged builders.

Three independent components share one idea: a slot typed by a protocol,
filled at runtime by a concrete variant chosen by key.

- OperationContext selects and runs a binary integer operation.
- Software and shape factories create products without callers naming
  concrete classes; software factories keep their two products in one
  family.
- Director drives any house builder through a fixed sequence of steps.
"""

from blueprints.application import (
    Director,
    KeyedRegistry,
    LookupPolicy,
    OperationContext,
    create_product,
    create_software_factory,
)
from blueprints.domain import (
    BlueprintError,
    InvalidStateError,
    UnknownKeyError,
    UnknownVariantError,
)

__version__ = "0.1.0"

__all__ = [
    "BlueprintError",
    "Director",
    "InvalidStateError",
    "KeyedRegistry",
    "LookupPolicy",
    "OperationContext",
    "UnknownKeyError",
    "UnknownVariantError",
    "create_product",
    "create_software_factory",
]
