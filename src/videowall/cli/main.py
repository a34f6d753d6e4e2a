"""Typer CLI for video wall sizing."""

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from videowall.application import CalcInput, ServiceFactory
from videowall.application.config import (
    CatalogConfiguration,
    ConfigError,
    config_to_cabinets,
    config_to_limits,
    config_to_presets,
    load_config,
)
from videowall.cli.commands import validate_command
from videowall.domain import (
    LengthUnit,
    ParameterId,
    find_cabinet,
    format_aspect_ratio,
    parse_aspect_ratio,
)
from videowall.infrastructure import (
    GridDiagramFormatter,
    InputSummaryFormatter,
    JsonResultExporter,
    ResultFormatter,
)


class OutputFormat(str, Enum):
    """Output formats for the calculate command."""

    TEXT = "text"
    JSON = "json"
    DIAGRAM = "diagram"


app = typer.Typer(
    name="videowall",
    help="Size LED video walls from any two of aspect ratio, height, width and diagonal.",
)

app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Size LED video walls from cabinet grids."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_catalog(config_file: Path | None) -> CatalogConfiguration | None:
    if config_file is None:
        return None
    try:
        return load_config(config_file)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


@app.command()
def calculate(
    ar: Annotated[
        str | None,
        typer.Option("--ar", "-a", help="Aspect ratio: preset label, W:H or decimal"),
    ] = None,
    height: Annotated[
        str | None,
        typer.Option("--height", "-H", help="Target height in --unit"),
    ] = None,
    width: Annotated[
        str | None,
        typer.Option("--width", "-w", help="Target width in --unit"),
    ] = None,
    diagonal: Annotated[
        str | None,
        typer.Option("--diagonal", "-d", help="Target diagonal in --unit"),
    ] = None,
    unit: Annotated[
        LengthUnit,
        typer.Option("--unit", "-u", help="Unit of the length values"),
    ] = LengthUnit.MM,
    cabinet_id: Annotated[
        str | None,
        typer.Option("--cabinet", "-c", help="Cabinet id (see `videowall cabinets`)"),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to a JSON catalog file"),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format: text, json, diagram"),
    ] = OutputFormat.TEXT,
) -> None:
    """Find the closest cabinet grids below and above a requested display.

    Exactly two of --ar, --height, --width and --diagonal must be given.

    Examples:
        videowall calculate --ar 16:9 --height 100 --unit in
        videowall calculate --height 1500 --width 2000 --cabinet 1:1
        videowall calculate --width 3000 --diagonal 3500 --format json
    """
    config = _load_catalog(config_file)
    cabinets = config_to_cabinets(config)
    presets = config_to_presets(config)

    try:
        cabinet = find_cabinet(cabinet_id, cabinets) if cabinet_id else cabinets[0]
    except KeyError:
        available = ", ".join(c.id for c in cabinets)
        typer.echo(f"Error: Unknown cabinet '{cabinet_id}'. Available: {available}", err=True)
        raise typer.Exit(code=1)

    supplied = {
        ParameterId.AR: ar,
        ParameterId.HEIGHT: height,
        ParameterId.WIDTH: width,
        ParameterId.DIAGONAL: diagonal,
    }
    active = [parameter for parameter, raw in supplied.items() if raw is not None]

    ar_value: float | None = None
    if ar is not None:
        try:
            ar_value = parse_aspect_ratio(ar, presets)
        except ValueError:
            typer.echo(
                f"Error: Please enter a valid positive value for {ParameterId.AR.label}.",
                err=True,
            )
            raise typer.Exit(code=1)

    calc_input = CalcInput(
        active_params=active,
        values={
            parameter.value: raw
            for parameter, raw in supplied.items()
            if parameter.is_length and raw is not None
        },
        ar_value=ar_value,
        cabinet=cabinet,
        unit=unit,
    )

    factory = ServiceFactory(limits=config_to_limits(config))
    try:
        result = factory.create_calculate_command().execute(calc_input)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if output_format is OutputFormat.JSON:
        typer.echo(JsonResultExporter().export(result, unit))
        if not result.is_valid:
            raise typer.Exit(code=1)
        return

    if not result.is_valid:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  - {error}", err=True)
        raise typer.Exit(code=1)

    typer.echo(InputSummaryFormatter().format(calc_input))
    typer.echo()

    if output_format is OutputFormat.DIAGRAM:
        diagram = GridDiagramFormatter()
        typer.echo("LOWER (fits within target)")
        typer.echo(diagram.format(result.lower))
        typer.echo()
        typer.echo("UPPER (covers target)")
        typer.echo(diagram.format(result.upper))
        if result.notices:
            typer.echo()
            typer.echo("Notices:")
            for notice in result.notices:
                typer.echo(f"  - {notice}")
        return

    typer.echo(ResultFormatter().format(result, unit))


@app.command()
def cabinets(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to a JSON catalog file"),
    ] = None,
) -> None:
    """List the available cabinets."""
    config = _load_catalog(config_file)
    limits = config_to_limits(config)

    typer.echo(f"{'Id':<10} {'Width (mm)':>11} {'Height (mm)':>12} {'Max grid':>10}  Label")
    typer.echo("-" * 70)
    for cabinet in config_to_cabinets(config):
        max_grid = f"{limits.max_cols(cabinet)}x{limits.max_rows(cabinet)}"
        typer.echo(
            f"{cabinet.id:<10} {cabinet.width_mm:>11.1f} {cabinet.height_mm:>12.1f} "
            f"{max_grid:>10}  {cabinet.label}"
        )


@app.command()
def presets(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to a JSON catalog file"),
    ] = None,
) -> None:
    """List the aspect-ratio presets."""
    config = _load_catalog(config_file)

    typer.echo(f"{'Label':<10} {'Ratio':>8}")
    typer.echo("-" * 20)
    for preset in config_to_presets(config):
        typer.echo(f"{preset.label:<10} {format_aspect_ratio(preset.value):>8}")


if __name__ == "__main__":
    app()
