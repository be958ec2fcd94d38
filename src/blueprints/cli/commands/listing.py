"""List command showing what every registry can create."""

import typer

from blueprints.cli.state import get_state


def list_command(ctx: typer.Context) -> None:
    """List registry keys and unknown-key policies.

    Example:
        blueprints list
    """
    registries = get_state(ctx).registries.by_name()
    width = max(len(name) for name in registries)

    for name, registry in registries.items():
        keys = ", ".join(registry.available())
        typer.echo(f"  {name:<{width}}  [{registry.policy.value}]  {keys}")
