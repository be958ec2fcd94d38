"""Per-invocation CLI state shared between the callback and commands."""

from __future__ import annotations

from dataclasses import dataclass, field

import typer

from blueprints.application.config import (
    RegistrySet,
    config_to_director,
    config_to_registries,
)
from blueprints.application.director import Director


@dataclass
class CliState:
    """Registries and director configured for this invocation."""

    registries: RegistrySet = field(default_factory=config_to_registries)
    director: Director = field(default_factory=config_to_director)


def get_state(ctx: typer.Context) -> CliState:
    """Return the state stored by the main callback, creating defaults."""
    if not isinstance(ctx.obj, CliState):
        ctx.obj = CliState()
    return ctx.obj
