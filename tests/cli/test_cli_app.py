"""Tests for CLI app factory and context wiring."""

import typer

from env_extract.cli.app import create_cli_app
from env_extract.cli.state import CLIState
from env_extract.config.loader import LOG_LEVEL_VARIABLE
from env_extract.config.settings import LogLevel


class TestCLIAppFactory:
    """Test create_cli_app factory."""

    def test_returns_typer_app(self, default_app):
        """create_cli_app returns a Typer instance."""
        assert isinstance(default_app, typer.Typer)
        assert default_app.info.name == "env-extract"

    def test_no_args_shows_help(self, cli_runner, default_app):
        """Invoking without a command prints usage."""
        result = cli_runner.invoke(default_app, [])

        assert "check" in result.output
        assert "match" in result.output


class TestContextInjection:
    """Test our context injection and state wiring."""

    def test_commands_receive_cli_state(self, cli_runner, default_app: typer.Typer):
        """Commands receive CLIState via context."""
        captured_state = None

        @default_app.command()
        def test_cmd(ctx: typer.Context):
            nonlocal captured_state
            captured_state = ctx.obj

        result = cli_runner.invoke(default_app, ["test-cmd"])

        assert result.exit_code == 0
        assert isinstance(captured_state, CLIState)

    def test_injected_settings_available_in_context(
        self, cli_runner, test_app, test_settings
    ):
        """Injected settings are accessible in command context."""
        captured_state = None

        @test_app.command()
        def test_cmd(ctx: typer.Context):
            nonlocal captured_state
            captured_state = ctx.obj

        result = cli_runner.invoke(test_app, ["test-cmd"])

        assert result.exit_code == 0
        assert captured_state.settings is test_settings

    def test_injected_state_takes_precedence(self, cli_runner, test_settings):
        """A fully built CLIState is passed through unchanged."""
        state = CLIState(test_settings, environ={})
        app = create_cli_app(state=state)
        captured_state = None

        @app.command()
        def test_cmd(ctx: typer.Context):
            nonlocal captured_state
            captured_state = ctx.obj

        result = cli_runner.invoke(app, ["test-cmd"])

        assert result.exit_code == 0
        assert captured_state is state


class TestGlobalOptions:
    """Test global CLI flag handling."""

    def test_verbose_flag_enables_debug_logging(self, cli_runner, default_app):
        """--verbose flag sets DEBUG log level."""
        captured_state = None

        @default_app.command()
        def test_cmd(ctx: typer.Context):
            nonlocal captured_state
            captured_state = ctx.obj

        result = cli_runner.invoke(default_app, ["--verbose", "test-cmd"])

        assert result.exit_code == 0
        assert captured_state.settings.log_level == LogLevel.DEBUG

    def test_log_level_read_from_environment(
        self, cli_runner, default_app, monkeypatch
    ):
        """Without flags, the log level comes from ENV_EXTRACT_LOG_LEVEL."""
        monkeypatch.setenv(LOG_LEVEL_VARIABLE, "error")
        captured_state = None

        @default_app.command()
        def test_cmd(ctx: typer.Context):
            nonlocal captured_state
            captured_state = ctx.obj

        result = cli_runner.invoke(default_app, ["test-cmd"])

        assert result.exit_code == 0
        assert captured_state.settings.log_level == LogLevel.ERROR


class TestCLIState:
    """Lookup and resolver construction."""

    def test_env_file_overlays_environment(self, tmp_path, test_settings):
        """Env file values shadow the injected environment."""
        env_file = tmp_path / ".env"
        env_file.write_text("DB_PORT=6543\n")
        state = CLIState(test_settings, environ={"DB_PORT": "5432", "DB_HOST": "h"})

        lookup = state.create_lookup(env_file)

        assert lookup("DB_PORT") == "6543"
        assert lookup("DB_HOST") == "h"

    def test_resolver_factory_injection(self, mocker, test_settings, config_schema):
        """A custom resolver factory is used for every schema."""
        factory = mocker.Mock()
        state = CLIState(test_settings, resolver_factory=factory)

        resolver = state.create_resolver(config_schema)

        factory.assert_called_once_with(config_schema)
        assert resolver is factory.return_value
