"""Report display functions for CLI."""

import enum
import typing as t

import typer

from ...domain.exceptions import NoMatchingVariantError, describe_error
from ...domain.record import RecordResolution, RecordSchema


def format_value(value: t.Any) -> str:
    """Render a resolved value for display."""
    if isinstance(value, enum.Enum):
        return value.name
    if isinstance(value, str):
        return repr(value)
    return str(value)


def display_resolved(schema: RecordSchema, resolution: RecordResolution) -> None:
    """Display every resolved field with its source variable and type.

    Args:
        schema: Record schema that was resolved
        resolution: Resolution outcome
    """
    for spec in schema.fields:
        if spec.name not in resolution.values:
            continue
        typer.secho(
            f"✓ {spec.name} ({spec.target_type.describe()}, env {spec.variable_name})"
            f" = {format_value(resolution.values[spec.name])}",
            fg=typer.colors.GREEN,
        )


def display_errors(resolution: RecordResolution) -> None:
    """Display a report naming every failing field.

    Args:
        resolution: Resolution outcome with at least one error
    """
    typer.secho(
        f"✗ {len(resolution.errors)} field(s) of {resolution.record_name} "
        "could not be resolved:",
        fg=typer.colors.RED,
    )
    for error in resolution.errors:
        typer.secho(f"  {describe_error(error)}", fg=typer.colors.RED)
    if resolution.is_fatal:
        typer.secho(
            "  Fatal: an enum without fallback matched nothing; "
            "no default may be substituted",
            fg=typer.colors.RED,
            bold=True,
        )


def display_fatal(error: NoMatchingVariantError) -> None:
    """Display a fatal enum outcome.

    Args:
        error: The no-fallback error raised by the resolver
    """
    typer.secho(f"✗ Fatal: {error}", fg=typer.colors.RED, bold=True)
