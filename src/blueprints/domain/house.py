"""House composite and the staged builders that assemble it."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from enum import Enum

from .exceptions import InvalidStateError

logger = logging.getLogger(__name__)


@dataclass
class House:
    """Mutable composite assembled one field per build step.

    A field left as None was never set during the build.

    Attributes:
        foundation: Foundation description.
        structure: Structure description.
        roof: Roof description.
        interior: Interior description.
    """

    foundation: str | None = None
    structure: str | None = None
    roof: str | None = None
    interior: str | None = None

    @property
    def is_complete(self) -> bool:
        """Check whether every field has been set."""
        return not self.missing_fields()

    def missing_fields(self) -> list[str]:
        """Names of fields still unset, in build order."""
        return [f.name for f in fields(self) if getattr(self, f.name) is None]

    def __str__(self) -> str:
        return (
            f"House [foundation={self.foundation}, structure={self.structure}, "
            f"roof={self.roof}, interior={self.interior}]"
        )


# Field order; also the order of the director's build steps
HOUSE_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(House))


class BuildStage(str, Enum):
    """Progress of a single build."""

    CREATED = "created"
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"


class HouseBuilder(ABC):
    """Abstract single-use house builder.

    The public step methods set exactly one field each, using the value
    the variant supplies through the matching ``*_spec`` hook. Setting a
    field twice, or touching the builder after ``get_house``, raises
    InvalidStateError.

    Not thread-safe: a builder must stay confined to one caller.
    """

    variant: str = "abstract"

    def __init__(self) -> None:
        self._house: House = House()
        self._retrieved = False

    @abstractmethod
    def foundation_spec(self) -> str:
        ...

    @abstractmethod
    def structure_spec(self) -> str:
        ...

    @abstractmethod
    def roof_spec(self) -> str:
        ...

    @abstractmethod
    def interior_spec(self) -> str:
        ...

    def build_foundation(self) -> None:
        self._set("foundation", self.foundation_spec())

    def build_structure(self) -> None:
        self._set("structure", self.structure_spec())

    def build_roof(self) -> None:
        self._set("roof", self.roof_spec())

    def build_interior(self) -> None:
        self._set("interior", self.interior_spec())

    @property
    def stage(self) -> BuildStage:
        """Current stage derived from how many fields are set."""
        missing = len(self._house.missing_fields())
        if missing == len(HOUSE_FIELDS):
            return BuildStage.CREATED
        if missing:
            return BuildStage.IN_PROGRESS
        return BuildStage.COMPLETE

    @property
    def retrieved(self) -> bool:
        """Whether the house has already been handed over."""
        return self._retrieved

    def get_house(self) -> House:
        """Hand over the house in whatever state it is in.

        Completion is not checked here; see Director(require_complete=True).

        Raises:
            InvalidStateError: If the house was already retrieved.
        """
        self._ensure_usable("get_house")
        self._retrieved = True
        return self._house

    def _set(self, name: str, value: str) -> None:
        self._ensure_usable(f"build_{name}")
        if getattr(self._house, name) is not None:
            raise InvalidStateError(
                f"{type(self).__name__}: {name} is already set "
                f"to {getattr(self._house, name)!r}"
            )
        setattr(self._house, name, value)
        logger.debug(f"{type(self).__name__} set {name}={value!r}")

    def _ensure_usable(self, action: str) -> None:
        if self._retrieved:
            raise InvalidStateError(
                f"{type(self).__name__}.{action}() called after the house "
                "was retrieved; builders are single-use"
            )


class ConcreteHouseBuilder(HouseBuilder):
    """Builder for a standard house."""

    variant = "standard"

    def foundation_spec(self) -> str:
        return "Standard Foundation"

    def structure_spec(self) -> str:
        return "Standard Structure"

    def roof_spec(self) -> str:
        return "Standard Roof"

    def interior_spec(self) -> str:
        return "Standard Interior"


class LuxuryHouseBuilder(HouseBuilder):
    """Builder for a luxury house."""

    variant = "luxury"

    def foundation_spec(self) -> str:
        return "Strong Foundation"

    def structure_spec(self) -> str:
        return "Reinforced Structure"

    def roof_spec(self) -> str:
        return "Elegant Roof"

    def interior_spec(self) -> str:
        return "Luxury Interior"


__all__ = [
    "BuildStage",
    "ConcreteHouseBuilder",
    "HOUSE_FIELDS",
    "House",
    "HouseBuilder",
    "LuxuryHouseBuilder",
]
