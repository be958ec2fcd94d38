"""Typer CLI for the blueprints demonstrations."""

import logging
from pathlib import Path
from typing import Annotated, NoReturn

import typer

from blueprints.application.config import (
    ConfigError,
    config_to_director,
    config_to_registries,
    load_config,
)
from blueprints.application.context import OperationContext
from blueprints.cli.commands import demo_command, list_command
from blueprints.cli.state import CliState, get_state
from blueprints.domain.exceptions import BlueprintError
from blueprints.domain.software import boot

app = typer.Typer(
    name="blueprints",
    help="Select strategies, factories and builders by key.",
)

app.command(name="demo")(demo_command)
app.command(name="list")(list_command)


def _fail(error: Exception) -> NoReturn:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(code=1)


@app.callback()
def main(
    ctx: typer.Context,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Configure registries and the director for the chosen command."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    if config_file is None:
        ctx.obj = CliState()
        return

    try:
        config = load_config(config_file)
    except ConfigError as e:
        _fail(e)
    ctx.obj = CliState(
        registries=config_to_registries(config),
        director=config_to_director(config),
    )


@app.command()
def calc(
    ctx: typer.Context,
    operation: Annotated[str, typer.Argument(help="Operation key: add, subtract, multiply")],
    a: Annotated[int, typer.Argument(help="Left operand")],
    b: Annotated[int, typer.Argument(help="Right operand")],
) -> None:
    """Apply an operation to two integers (32-bit wraparound)."""
    context = OperationContext(get_state(ctx).registries.operations)
    try:
        context.select(operation)
    except BlueprintError as e:
        _fail(e)
    typer.echo(context.execute(a, b))


@app.command()
def product(
    ctx: typer.Context,
    key: Annotated[str, typer.Argument(help="Product key, e.g. p1 or p2")],
) -> None:
    """Create a product by key and run both of its operations."""
    try:
        created = get_state(ctx).registries.products.create(key)
    except BlueprintError as e:
        _fail(e)
    typer.echo(created.operation1())
    typer.echo(created.operation2())


@app.command()
def software(
    ctx: typer.Context,
    variant: Annotated[str, typer.Argument(help="Family variant: windows or linux")],
) -> None:
    """Create a software family and use both of its products."""
    try:
        factory = get_state(ctx).registries.software.create(variant)
    except BlueprintError as e:
        _fail(e)
    for line in boot(factory):
        typer.echo(line)


@app.command()
def shape(
    ctx: typer.Context,
    kind: Annotated[str, typer.Argument(help="Shape kind: circle or rectangle")],
) -> None:
    """Create a shape through its factory method and draw it."""
    try:
        factory = get_state(ctx).registries.shapes.create(kind)
    except BlueprintError as e:
        _fail(e)
    typer.echo(factory.render())


@app.command()
def house(
    ctx: typer.Context,
    variant: Annotated[str, typer.Argument(help="Builder variant: standard or luxury")],
) -> None:
    """Construct a house with the chosen builder."""
    state = get_state(ctx)
    try:
        built = state.director.construct(state.registries.houses.create(variant))
    except BlueprintError as e:
        _fail(e)
    typer.echo(str(built))


if __name__ == "__main__":
    app()
