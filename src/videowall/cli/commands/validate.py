"""Validate command for checking catalog files."""

from pathlib import Path
from typing import Annotated

import typer

from videowall.application.config import (
    ConfigError,
    config_to_cabinets,
    config_to_limits,
    config_to_presets,
    load_config,
)


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON catalog file to validate"),
    ],
) -> None:
    """Validate a catalog configuration file.

    Checks the file for JSON syntax errors and schema violations (unknown
    fields, non-positive dimensions, duplicate cabinet ids, cabinets larger
    than the limits).

    Exit codes:
        0 - Catalog is valid
        1 - Catalog has errors (cannot be used)

    Example:
        videowall validate my-catalog.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        _display_load_error(e)
        raise typer.Exit(code=1)

    limits = config_to_limits(config)
    typer.echo(
        f"Limits:        {limits.max_width_mm:g} x {limits.max_height_mm:g} mm"
    )
    typer.echo(f"Cabinets:      {len(config_to_cabinets(config))}")
    typer.echo(f"Aspect ratios: {len(config_to_presets(config))}")
    typer.echo()
    typer.echo("Validation passed. Catalog is valid.")


def _display_load_error(error: ConfigError) -> None:
    """Display a catalog loading error on stderr."""
    typer.echo("Errors:", err=True)
    match error.error_type:
        case "file_not_found":
            typer.echo(f"  File not found: {error.path}", err=True)
        case "json_parse":
            typer.echo("  Invalid JSON syntax", err=True)
            for detail in error.details:
                line = detail.get("line", "?")
                column = detail.get("column", "?")
                message = detail.get("message", "Unknown error")
                typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
        case "validation":
            for detail in error.details:
                path = detail.get("path") or "(root)"
                typer.echo(f"  {path}: {detail.get('message', 'Unknown error')}", err=True)
                value = detail.get("value")
                if value is not None and not isinstance(value, (dict, list)):
                    typer.echo(f"    Value: {value!r}", err=True)
        case _:
            typer.echo(f"  {error.message}", err=True)

    typer.echo(err=True)
    typer.echo("Validation failed.", err=True)
