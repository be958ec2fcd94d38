"""Products handed out by the simple product factory."""

from __future__ import annotations


class Product1:
    """Product registered under ``p1``."""

    def operation1(self) -> str:
        return "Product1 operation1 executed"

    def operation2(self) -> str:
        return "Product1 operation2 executed"


class Product2:
    """Product registered under ``p2``."""

    def operation1(self) -> str:
        return "Product2 operation1 executed"

    def operation2(self) -> str:
        return "Product2 operation2 executed"


class RefusalProduct:
    """Null-object product returned for unrecognized keys.

    Every operation reports that it is not permitted rather than raising,
    so callers of a lenient registry always get a usable product.
    """

    def operation1(self) -> str:
        return "Sorry, operation1 is not permitted!"

    def operation2(self) -> str:
        return "Sorry, operation2 is not permitted!"


__all__ = [
    "Product1",
    "Product2",
    "RefusalProduct",
]
