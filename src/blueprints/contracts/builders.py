"""Builder protocol used by the director.

The director only depends on this protocol, so any object providing the
four step methods and ``get_house`` can be driven through a build.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from blueprints.domain.house import House


@runtime_checkable
class HouseBuilderProtocol(Protocol):
    """Protocol for staged house builders.

    A builder owns exactly one house for the duration of a build. Each
    step sets one field; ``get_house`` hands the house over and ends the
    builder's useful life.
    """

    def build_foundation(self) -> None:
        """Set the foundation."""
        ...

    def build_structure(self) -> None:
        """Set the structure."""
        ...

    def build_roof(self) -> None:
        """Set the roof."""
        ...

    def build_interior(self) -> None:
        """Set the interior."""
        ...

    def get_house(self) -> "House":
        """Retrieve the house in whatever state it is in."""
        ...


__all__ = [
    "HouseBuilderProtocol",
]
