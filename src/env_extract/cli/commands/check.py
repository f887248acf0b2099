"""Check and match command implementations."""

from pathlib import Path
from typing import Final, Optional

import typer
from pydantic import ValidationError

from ...domain.exceptions import NoMatchingVariantError, SchemaError
from ...domain.record import RecordSchema
from ...domain.target_types import EnumType
from ...infrastructure.logging import get_logger
from ...infrastructure.schema_files import load_record_schema
from ...resolvers.enum_resolver import EnumResolver
from ...resolvers.environment import EnvLookup, with_default
from ..output.report import display_errors, display_fatal, display_resolved
from ..state import CLIState

EXIT_ERRORS: Final = 1
EXIT_FATAL: Final = 2
EXIT_BAD_SCHEMA: Final = 3


def load_schema(schema_file: Path) -> RecordSchema:
    """Load a record schema file.

    Raises:
        typer.Exit: If the file is unreadable or describes an unusable schema
    """
    try:
        return load_record_schema(schema_file)
    except (SchemaError, ValidationError) as e:
        typer.secho(f"✗ Invalid schema: {schema_file}", fg=typer.colors.RED)
        typer.secho(f"  {e}", fg=typer.colors.RED)
        raise typer.Exit(code=EXIT_BAD_SCHEMA)


def read_env_file(state: CLIState, env_file: Optional[Path]) -> EnvLookup:
    """Build the lookup, turning env file problems into a clean exit."""
    try:
        return state.create_lookup(env_file)
    except (OSError, ValueError) as e:
        typer.secho(f"✗ Invalid env file: {e}", fg=typer.colors.RED)
        raise typer.Exit(code=EXIT_BAD_SCHEMA)


def check(
    ctx: typer.Context,
    schema_file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, help="JSON record schema"
    ),
    env_file: Optional[Path] = typer.Option(
        None,
        "--env-file",
        "-e",
        exists=True,
        dir_okay=False,
        help="KEY=VALUE file layered over the process environment",
    ),
) -> None:
    """Resolve a record schema against the environment and report the result.

    Exit codes: 0 resolved, 1 field errors, 2 fatal enum outcome, 3 bad input.

    Examples:
        env-extract check config.schema.json
        env-extract check config.schema.json --env-file .env
    """
    state: CLIState = ctx.obj

    schema = load_schema(schema_file)
    lookup = read_env_file(state, env_file)

    resolution = state.create_resolver(schema).resolve(lookup)
    get_logger(__name__).debug(
        f"Resolved {len(resolution.values)}/{len(schema.fields)} fields"
    )

    display_resolved(schema, resolution)

    # Guard clause - fatal outcome first, it outranks recoverable errors
    if resolution.is_fatal:
        display_errors(resolution)
        raise typer.Exit(code=EXIT_FATAL)

    if not resolution.is_resolved:
        display_errors(resolution)
        raise typer.Exit(code=EXIT_ERRORS)

    typer.secho(f"✓ {schema.name} resolved", fg=typer.colors.GREEN)


def match(
    ctx: typer.Context,
    schema_file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, help="JSON record schema"
    ),
    field_name: str = typer.Argument(..., help="Enum field to resolve"),
    env_file: Optional[Path] = typer.Option(
        None,
        "--env-file",
        "-e",
        exists=True,
        dir_okay=False,
        help="KEY=VALUE file layered over the process environment",
    ),
) -> None:
    """Resolve a single enum field and print the chosen variant.

    Examples:
        env-extract match config.schema.json db_type
    """
    state: CLIState = ctx.obj

    schema = load_schema(schema_file)
    spec = schema.get_field(field_name)
    if spec is None or not isinstance(spec.target_type, EnumType):
        typer.secho(
            f"✗ {field_name} is not an enum field of {schema.name}",
            fg=typer.colors.RED,
        )
        raise typer.Exit(code=EXIT_ERRORS)

    lookup = read_env_file(state, env_file)
    enum_schema = spec.target_type.enum_schema.model_copy(
        update={"variable_name": spec.variable_name}
    )
    resolver = EnumResolver(enum_schema)
    try:
        variant = resolver.resolve(
            with_default(lookup, spec.variable_name or "", spec.default_value)
        )
    except NoMatchingVariantError as e:
        display_fatal(e)
        raise typer.Exit(code=EXIT_FATAL)

    typer.echo(variant.name)
