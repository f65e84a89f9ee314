"""Typer CLI for furniture placement."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from roomplacer.application.factory import get_factory
from roomplacer.cli.commands import load_or_exit, validate_command
from roomplacer.domain.value_objects import Transform
from roomplacer.infrastructure.world import World

app = typer.Typer(
    name="roomplacer",
    help="Validate and randomize furniture layouts in a 2.5D room.",
)

# Register validate command
app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Validate and randomize furniture layouts in a 2.5D room."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


@app.command()
def randomize(
    config_file: Annotated[Path, typer.Argument(help="Path to the JSON room file")],
    seed: Annotated[
        int | None,
        typer.Option("--seed", "-s", help="Random seed (overrides the room file)"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json"),
    ] = "text",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the output to a file"),
    ] = None,
) -> None:
    """Lay out every furniture entity in the room from scratch."""
    if output_format not in ("text", "json"):
        typer.echo(f"Unknown format: {output_format}. Use text or json.", err=True)
        raise typer.Exit(code=1)

    config = load_or_exit(config_file)
    factory = get_factory()
    service = factory.create_placement_service(config, seed=seed)
    report = service.randomize_all_furniture()

    store = service.store
    if output_format == "json":
        output = factory.get_json_exporter().export(report, store.transforms, store.kinds)
    else:
        output = factory.get_layout_report_formatter().format(
            report, store.transforms, store.kinds
        )

    if output_file is not None:
        output_file.write_text(output, encoding="utf-8")
        typer.echo(f"Layout written to {output_file}")
    else:
        typer.echo(output)


@app.command()
def check(
    config_file: Annotated[Path, typer.Argument(help="Path to the JSON room file")],
    kind: Annotated[str, typer.Argument(help="Furniture kind to check")],
    x: Annotated[float, typer.Option("--x", help="Center X")],
    z: Annotated[float, typer.Option("--z", help="Center Z")],
    y: Annotated[float, typer.Option("--y", help="Height above the floor")] = 0.0,
    exclude: Annotated[
        str | None,
        typer.Option("--exclude", "-e", help="Entity id to ignore (the one being moved)"),
    ] = None,
) -> None:
    """Check whether a kind may be placed at a position in the room.

    Exits with code 1 when the position is rejected.
    """
    config = load_or_exit(config_file)
    factory = get_factory()
    service = factory.create_placement_service(config)
    result = service.can_place_furniture(kind, Transform(x, y, z), exclude_id=exclude)

    typer.echo(factory.get_placement_result_formatter().format(kind, result))
    if not result.success:
        raise typer.Exit(code=1)


@app.command()
def find(
    config_file: Annotated[Path, typer.Argument(help="Path to the JSON room file")],
    kind: Annotated[str, typer.Argument(help="Furniture kind to place")],
    seed: Annotated[
        int | None,
        typer.Option("--seed", "-s", help="Random seed (overrides the room file)"),
    ] = None,
    attempts: Annotated[
        int | None,
        typer.Option("--attempts", "-a", min=1, help="Attempt budget"),
    ] = None,
) -> None:
    """Search for a random valid position for a kind in the room.

    Exits with code 1 when no position is found.
    """
    config = load_or_exit(config_file)
    factory = get_factory()
    service = factory.create_placement_service(config, seed=seed)
    result = service.find_random_valid_position(kind, attempts)

    typer.echo(factory.get_placement_result_formatter().format(kind, result))
    if not result.success:
        raise typer.Exit(code=1)


@app.command()
def heights(
    kind: Annotated[str, typer.Argument(help="Furniture kind from the built-in catalog")],
    seed: Annotated[int | None, typer.Option("--seed", "-s", help="Random seed")] = None,
) -> None:
    """Show the Y candidates a wall item is tried at, in order."""
    from roomplacer.domain.services import FurniturePlacementService

    factory = get_factory()
    service = FurniturePlacementService(
        World(),
        config=factory.placement_config,
        rng=factory.create_random_source(seed),
    )
    if service.catalog.get(kind) is None:
        typer.echo(f"Unknown furniture type: {kind}", err=True)
        raise typer.Exit(code=1)

    typer.echo(
        factory.get_placement_result_formatter().format_heights(
            kind, service.generate_y_positions(kind)
        )
    )


if __name__ == "__main__":
    app()
