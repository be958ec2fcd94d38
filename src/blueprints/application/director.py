"""Director driving a builder through the fixed build order."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from blueprints.domain.exceptions import InvalidStateError
from blueprints.domain.house import HOUSE_FIELDS

if TYPE_CHECKING:
    from blueprints.contracts.builders import HouseBuilderProtocol
    from blueprints.domain.house import House

logger = logging.getLogger(__name__)

# Step methods in the order every build runs them
BUILD_STEPS: tuple[str, ...] = tuple(f"build_{name}" for name in HOUSE_FIELDS)


class Director:
    """Builder-agnostic orchestrator of the house build.

    The director holds no state between calls, so one instance can be
    reused for any number of sequential builds with different builders.
    Swapping the builder changes the values assigned, never the order or
    number of steps.

    Attributes:
        require_complete: When True, ``construct`` raises InvalidStateError
            if the builder left any field unset. When False (the default)
            partial houses are returned as they are.
    """

    def __init__(self, require_complete: bool = False) -> None:
        self.require_complete = require_complete

    def construct(self, builder: "HouseBuilderProtocol") -> "House":
        """Run every build step once, in order, and return the house.

        Args:
            builder: A fresh builder; it is spent once this returns.

        Returns:
            The house retrieved from the builder.

        Raises:
            InvalidStateError: If the builder was already used, or if
                ``require_complete`` is set and the house is incomplete.
        """
        name = type(builder).__name__
        for step in BUILD_STEPS:
            logger.debug(f"Director running {name}.{step}()")
            getattr(builder, step)()

        house = builder.get_house()
        if self.require_complete and not house.is_complete:
            raise InvalidStateError(
                f"{name} left fields unset: {', '.join(house.missing_fields())}"
            )
        return house


__all__ = [
    "BUILD_STEPS",
    "Director",
]
