"""Domain layer: concrete operations, products, factories and builders."""

from .arithmetic import INT32_MAX, INT32_MIN, wrap_int32
from .exceptions import (
    BlueprintError,
    InvalidStateError,
    UnknownKeyError,
    UnknownVariantError,
)
from .house import (
    HOUSE_FIELDS,
    BuildStage,
    ConcreteHouseBuilder,
    House,
    HouseBuilder,
    LuxuryHouseBuilder,
)
from .operations import Addition, Multiplication, OperationKind, Subtraction
from .products import Product1, Product2, RefusalProduct
from .shapes import (
    Circle,
    CircleFactory,
    Rectangle,
    RectangleFactory,
    ShapeFactoryBase,
    ShapeKind,
)
from .software import (
    UNSUPPORTED_FAMILY,
    ExcelApplication,
    LinuxFactory,
    LinuxOS,
    SoftwareBundle,
    SoftwareFactoryBase,
    SoftwareFamily,
    UnsupportedApplication,
    UnsupportedOS,
    UnsupportedSoftwareFactory,
    WindowsFactory,
    WindowsOS,
    WordApplication,
    boot,
)

__all__ = [
    "Addition",
    "BlueprintError",
    "BuildStage",
    "Circle",
    "CircleFactory",
    "ConcreteHouseBuilder",
    "ExcelApplication",
    "HOUSE_FIELDS",
    "House",
    "HouseBuilder",
    "INT32_MAX",
    "INT32_MIN",
    "InvalidStateError",
    "LinuxFactory",
    "LinuxOS",
    "LuxuryHouseBuilder",
    "Multiplication",
    "OperationKind",
    "Product1",
    "Product2",
    "Rectangle",
    "RectangleFactory",
    "RefusalProduct",
    "ShapeFactoryBase",
    "ShapeKind",
    "SoftwareBundle",
    "SoftwareFactoryBase",
    "SoftwareFamily",
    "Subtraction",
    "UNSUPPORTED_FAMILY",
    "UnknownKeyError",
    "UnknownVariantError",
    "UnsupportedApplication",
    "UnsupportedOS",
    "UnsupportedSoftwareFactory",
    "WindowsFactory",
    "WindowsOS",
    "WordApplication",
    "boot",
    "wrap_int32",
]
