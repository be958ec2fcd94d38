"""Protocols for selectable operations and simple-factory products.

An operation is a stateless two-argument capability. Its key is used only
when selecting it from a registry and is never stored on the operation.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Operation(Protocol):
    """Protocol for pure binary integer operations.

    Implementations must be deterministic: calling ``operate`` twice with
    the same operands returns the same result.

    Example:
        ```python
        class Maximum:
            def operate(self, a: int, b: int) -> int:
                return max(a, b)
        ```
    """

    def operate(self, a: int, b: int) -> int:
        """Apply the operation to two operands.

        Args:
            a: Left operand.
            b: Right operand.

        Returns:
            The result as a signed 32-bit integer.
        """
        ...


@runtime_checkable
class Product(Protocol):
    """Protocol for products handed out by the simple product factory.

    Products report the outcome of each operation as text. The refusal
    fallback reports that the operation is not permitted instead of
    raising.
    """

    def operation1(self) -> str:
        """Run the first product operation."""
        ...

    def operation2(self) -> str:
        """Run the second product operation."""
        ...


__all__ = [
    "Operation",
    "Product",
]
