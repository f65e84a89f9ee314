"""Validate command for checking room files.

This module provides the `validate` command that checks a JSON room file
for syntax and schema errors, plus the shared helpers other commands use
to load a room file and report errors the same way.
"""

from pathlib import Path
from typing import Annotated

import typer

from roomplacer.application.config import (
    ConfigError,
    RoomConfiguration,
    load_config,
)
from roomplacer.domain.catalog import CAT_KIND


def display_load_error(error: ConfigError) -> None:
    """Display a room file loading error.

    Args:
        error: The ConfigError to display
    """
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path", "unknown")
            message = detail.get("message", "Unknown error")
            typer.echo(f"  {path}: {message}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)


def load_or_exit(config_file: Path) -> RoomConfiguration:
    """Load a room file, or report the error and exit with code 1."""
    try:
        return load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON room file to validate"),
    ],
) -> None:
    """Validate a room file.

    Checks the room file for JSON syntax errors, schema errors (unknown
    fields, invalid values), duplicate entity ids and unknown kinds.

    Exit codes:
        0 - Room file is valid
        1 - Room file has errors

    Example:
        roomplacer validate living-room.json
    """
    typer.echo(f"Validating {config_file}...")
    config = load_or_exit(config_file)

    furniture = [item for item in config.furniture if item.kind != CAT_KIND]
    typer.echo(
        f"Validation passed: {len(furniture)} furniture entities, "
        f"{len(config.catalog)} catalog entries."
    )
