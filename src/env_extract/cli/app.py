"""CLI application factory."""

import typer

from ..config.loader import load_settings
from ..config.settings import LogLevel, Settings, build_settings
from ..infrastructure.logging import setup_logging
from .commands.check import check, match
from .state import CLIState


def create_cli_app(
    settings: Settings | None = None,
    state: CLIState | None = None,
) -> typer.Typer:
    """Create CLI application with optional settings or state override.

    Args:
        settings: Optional Settings override for testing
        state: Optional fully built CLIState (takes precedence over settings)

    Returns:
        Configured Typer application with commands registered
    """
    app = typer.Typer(
        name="env-extract",
        help="env-extract - Resolve typed configuration from environment variables",
        no_args_is_help=True,
    )

    @app.callback()
    def setup(
        ctx: typer.Context,
        verbose: bool = typer.Option(
            False,
            "--verbose",
            "-v",
            help="Enable verbose output (DEBUG logging)",
        ),
    ) -> None:
        """Global options available to all commands."""
        if state is not None:
            resolved_state = state
        else:
            if settings is not None:
                resolved_settings = settings
            else:
                loaded = load_settings()
                resolved_settings = build_settings(
                    environment=loaded.environment,
                    log_level=LogLevel.DEBUG if verbose else loaded.log_level,
                )
            resolved_state = CLIState(resolved_settings)

        setup_logging(resolved_state.settings)
        ctx.obj = resolved_state

    app.command()(check)
    app.command()(match)

    return app
