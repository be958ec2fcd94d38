"""Demo command running every pattern demonstration in order.

The output mirrors running the individual commands one after another:
the calculator, the simple product factory, both software families, both
shapes and both houses.
"""

import typer

from blueprints.application.context import OperationContext
from blueprints.cli.state import get_state
from blueprints.domain.house import ConcreteHouseBuilder, LuxuryHouseBuilder
from blueprints.domain.operations import OperationKind
from blueprints.domain.shapes import ShapeKind
from blueprints.domain.software import SoftwareFamily, boot


def demo_command(ctx: typer.Context) -> None:
    """Run all demonstrations with the configured registries.

    Example:
        blueprints demo
    """
    state = get_state(ctx)
    registries = state.registries

    typer.echo("== Strategy")
    context = OperationContext(registries.operations)
    for kind, a, b in (
        (OperationKind.ADDITION, 1, 2),
        (OperationKind.SUBTRACTION, 5, 3),
        (OperationKind.MULTIPLICATION, 2, 4),
    ):
        context.select(kind)
        typer.echo(context.execute(a, b))

    typer.echo("== Simple factory")
    for key in ("p1", "p2"):
        product = registries.products.create(key)
        typer.echo(product.operation1())
        typer.echo(product.operation2())
    if registries.products.fallback is not None:
        typer.echo(registries.products.create("").operation1())

    typer.echo("== Abstract factory")
    for family in SoftwareFamily:
        for line in boot(registries.software.create(family)):
            typer.echo(line)

    typer.echo("== Factory method")
    for kind in ShapeKind:
        typer.echo(registries.shapes.create(kind).render())

    typer.echo("== Builder")
    builds = (
        ("Concrete", ConcreteHouseBuilder.variant),
        ("Luxury", LuxuryHouseBuilder.variant),
    )
    for label, variant in builds:
        house = state.director.construct(registries.houses.create(variant))
        typer.echo(f"{label} House: {house}")
