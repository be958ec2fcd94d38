"""Exception hierarchy for the blueprints framework."""

from __future__ import annotations

from typing import Any, Iterable


class BlueprintError(Exception):
    """Base class for all framework errors."""


class InvalidStateError(BlueprintError):
    """Raised when an operation runs before a required prior step.

    Examples are executing a context with no operation selected, or
    stepping a builder whose house has already been retrieved.
    """


class UnknownKeyError(BlueprintError, KeyError):
    """Raised by a strict registry when a key has no implementation.

    Attributes:
        key: The key that failed to resolve.
        available: Sorted keys the registry does know about.
    """

    kind = "key"

    def __init__(self, key: Any, available: Iterable[str] = ()) -> None:
        self.key = key
        self.available = sorted(available)
        super().__init__(self._format())

    def _format(self) -> str:
        known = ", ".join(self.available)
        return f"Unknown {self.kind} {self.key!r}. Available: {known or 'none'}"

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self._format()


class UnknownVariantError(UnknownKeyError):
    """Raised when no factory implements the requested family variant."""

    kind = "variant"


__all__ = [
    "BlueprintError",
    "InvalidStateError",
    "UnknownKeyError",
    "UnknownVariantError",
]
