"""Typer CLI for bar cutting and panel nesting."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from cutstock.application import OptimizeBarsCommand, OptimizePanelsCommand
from cutstock.application.config import (
    ConfigError,
    JobConfiguration,
    config_to_bar_job,
    config_to_panel_job,
    load_config,
)
from cutstock.cli.commands import validate_command
from cutstock.infrastructure import (
    BarCutListFormatter,
    JsonExporter,
    SheetLayoutFormatter,
)

OUTPUT_FORMATS = ("text", "json")

# Exit code when the job ran but some demand could not be placed.
EXIT_INCOMPLETE = 2


app = typer.Typer(
    name="cutstock",
    help="Optimize bar cut lists and panel layouts from JSON job files.",
)

# Register validate command
app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log optimizer progress to stderr"),
    ] = False,
) -> None:
    """Optimize bar cut lists and panel layouts from JSON job files."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_job(config_file: Path) -> JobConfiguration:
    try:
        return load_config(config_file)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _check_format(output_format: str) -> str:
    fmt = output_format.lower()
    if fmt not in OUTPUT_FORMATS:
        typer.echo(
            f"Error: Unknown format '{output_format}'. "
            f"Available formats: {', '.join(OUTPUT_FORMATS)}",
            err=True,
        )
        raise typer.Exit(code=1)
    return fmt


def _emit(content: str, output_file: Path | None) -> None:
    """Write output to a file if given, otherwise to stdout."""
    if output_file is None:
        typer.echo(content)
        return
    try:
        output_file.write_text(content + "\n", encoding="utf-8")
    except OSError as e:
        typer.echo(f"Error: Could not write {output_file}: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Wrote {output_file}")


def _echo_warnings(warnings: list[str]) -> None:
    for warning in warnings:
        typer.echo(f"Warning: {warning}", err=True)


@app.command()
def bars(
    config_file: Annotated[
        Path,
        typer.Option("--config", "-c", help="Path to JSON job file"),
    ],
    kerf: Annotated[
        float | None,
        typer.Option("--kerf", "-k", help="Saw kerf in inches (overrides job file)"),
    ] = None,
    auto: Annotated[
        bool,
        typer.Option("--auto", help="Find the best stock length per part number"),
    ] = False,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json"),
    ] = "text",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write output to this file"),
    ] = None,
) -> None:
    """Produce a bar cut list.

    Exits with code 2 when some parts could not be placed.

    Examples:
        cutstock bars --config job.json
        cutstock bars --config job.json --auto --format json --output cuts.json
    """
    fmt = _check_format(output_format)
    config = _load_job(config_file)
    if config.bars is None:
        typer.echo("Error: Job file has no 'bars' section", err=True)
        raise typer.Exit(code=1)

    job = config_to_bar_job(config.bars)
    if kerf is not None:
        job.kerf = kerf
    if auto:
        job.find_optimal = True

    result = OptimizeBarsCommand().execute(job)
    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    optimal_bars = result.optimal_bars if job.find_optimal else None
    if fmt == "json":
        content = JsonExporter().export_bars(result.result, optimal_bars)
    else:
        content = BarCutListFormatter().format(result.result, optimal_bars)
    _emit(content, output_file)

    _echo_warnings(result.warnings)
    if not result.result.summary.is_complete:
        raise typer.Exit(code=EXIT_INCOMPLETE)


@app.command()
def panels(
    config_file: Annotated[
        Path,
        typer.Option("--config", "-c", help="Path to JSON job file"),
    ],
    blade_width: Annotated[
        float | None,
        typer.Option("--blade-width", "-b", help="Blade width in inches (overrides job file)"),
    ] = None,
    no_rotation: Annotated[
        bool,
        typer.Option("--no-rotation", help="Do not rotate panels to fit"),
    ] = False,
    auto: Annotated[
        bool,
        typer.Option("--auto", help="Find the best sheet size"),
    ] = False,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json"),
    ] = "text",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write output to this file"),
    ] = None,
) -> None:
    """Produce a panel nesting layout.

    Exits with code 2 when some panels could not be placed.

    Examples:
        cutstock panels --config job.json
        cutstock panels --config job.json --auto --no-rotation
    """
    fmt = _check_format(output_format)
    config = _load_job(config_file)
    if config.panels is None:
        typer.echo("Error: Job file has no 'panels' section", err=True)
        raise typer.Exit(code=1)

    job = config_to_panel_job(config.panels)
    if blade_width is not None:
        job.blade_width = blade_width
    if no_rotation:
        job.allow_rotation = False
    if auto:
        job.find_optimal = True

    result = OptimizePanelsCommand().execute(job)
    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    if fmt == "json":
        content = JsonExporter().export_panels(result.result, result.stock)
    else:
        content = SheetLayoutFormatter().format(result.result, result.stock)
    _emit(content, output_file)

    _echo_warnings(result.warnings)
    if not result.result.summary.is_complete:
        raise typer.Exit(code=EXIT_INCOMPLETE)


if __name__ == "__main__":
    app()
