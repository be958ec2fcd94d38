"""Operation context: holds the currently selected operation.

The context keeps at most one operation and no history. It is not safe
for concurrent ``select``/``execute`` calls; give each logical session
its own context.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from blueprints.contracts.operations import Operation
from blueprints.domain.exceptions import InvalidStateError

from .catalog import operation_registry

if TYPE_CHECKING:
    from .registry import KeyedRegistry

logger = logging.getLogger(__name__)


class OperationContext:
    """Holder of one replaceable operation reference.

    Example:
        ```python
        context = OperationContext()
        context.select(OperationKind.ADDITION)
        context.execute(1, 2)  # 3
        context.select(Multiplication())
        context.execute(2, 4)  # 8
        ```
    """

    def __init__(self, registry: KeyedRegistry[Operation] | None = None) -> None:
        """Initialize with nothing selected.

        Args:
            registry: Registry used to resolve operation keys passed to
                ``select``. Defaults to the built-in operation registry.
        """
        self._registry = registry if registry is not None else operation_registry()
        self._operation: Operation | None = None

    @property
    def registry(self) -> KeyedRegistry[Operation]:
        return self._registry

    @property
    def selected(self) -> Operation | None:
        """The currently selected operation, if any."""
        return self._operation

    def select(self, selection: Operation | Any) -> None:
        """Replace the current operation unconditionally.

        Args:
            selection: An operation instance, or a key resolved through the
                context's registry.

        Raises:
            UnknownKeyError: If a key is given that the registry does not
                know. The previous selection is kept in that case.
        """
        if isinstance(selection, Operation):
            operation = selection
        else:
            operation = self._registry.create(selection)
        self._operation = operation
        logger.debug(f"Selected operation {type(operation).__name__}")

    def clear(self) -> None:
        """Drop the current selection."""
        self._operation = None

    def execute(self, a: int, b: int) -> int:
        """Apply the selected operation to ``a`` and ``b``.

        Raises:
            InvalidStateError: If no operation has been selected.
        """
        if self._operation is None:
            raise InvalidStateError("No operation selected; call select() first")
        return self._operation.operate(a, b)


__all__ = [
    "OperationContext",
]
