"""Validate command for checking job files without running them."""

from pathlib import Path
from typing import Annotated

import typer

from cutstock.application.config import (
    ConfigError,
    ValidationResult,
    load_config,
    validate_config,
)


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON job file to validate"),
    ],
) -> None:
    """Validate a cutting job file.

    Exit codes:
        0 - Job is valid with no warnings
        1 - Job has errors (cannot be run)
        2 - Job is valid but has warnings

    Example:
        cutstock validate job.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        result = validate_config(load_config(config_file))
    except ConfigError as e:
        typer.echo("Errors:", err=True)
        for line in _load_error_lines(e):
            typer.echo(f"  {line}", err=True)
        typer.echo()
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    _display_result(result)
    raise typer.Exit(code=result.exit_code)


def _load_error_lines(error: ConfigError) -> list[str]:
    """One line per JSON syntax or schema problem, else the error message."""
    if error.error_type == "json_parse":
        return [
            f"Invalid JSON syntax at line {d.get('line', '?')}, "
            f"column {d.get('column', '?')}: {d.get('message', '')}"
            for d in error.details
        ]
    if error.error_type == "validation":
        return [
            f"{d.get('path') or '(root)'}: {d.get('message')}"
            + (f" (value: {d['value']!r})" if _is_scalar(d.get("value")) else "")
            for d in error.details
        ]
    return [error.message]


def _is_scalar(value: object) -> bool:
    return value is not None and not isinstance(value, (dict, list))


def _display_result(result: ValidationResult) -> None:
    for error in result.errors:
        typer.echo(f"Error: {error.path}: {error.message}", err=True)
    for warning in result.warnings:
        typer.echo(f"Warning: {warning.path}: {warning.message}")
        if warning.suggestion:
            typer.echo(f"  Suggestion: {warning.suggestion}")

    if result.errors:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Job is valid.")
