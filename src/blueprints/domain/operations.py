"""Concrete arithmetic operations.

Each operation is stateless and wraps its result to signed 32-bit, so
overflow is never an error.
"""

from __future__ import annotations

from enum import Enum

from .arithmetic import wrap_int32


class OperationKind(str, Enum):
    """Keys under which the built-in operations are registered."""

    ADDITION = "add"
    SUBTRACTION = "subtract"
    MULTIPLICATION = "multiply"


class Addition:
    """Add two operands."""

    symbol = "+"

    def operate(self, a: int, b: int) -> int:
        return wrap_int32(a + b)


class Subtraction:
    """Subtract the second operand from the first."""

    symbol = "-"

    def operate(self, a: int, b: int) -> int:
        return wrap_int32(a - b)


class Multiplication:
    """Multiply two operands."""

    symbol = "*"

    def operate(self, a: int, b: int) -> int:
        return wrap_int32(a * b)


__all__ = [
    "Addition",
    "Multiplication",
    "OperationKind",
    "Subtraction",
]
