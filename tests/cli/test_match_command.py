"""Tests for the match command."""

from env_extract.cli.commands.check import EXIT_ERRORS, EXIT_FATAL


def test_prints_matched_variant(cli_runner, app_for_environ, schema_file):
    """The chosen variant name is printed."""
    result = cli_runner.invoke(
        app_for_environ({"DATABASE_TYPE": "MySQL"}), ["match", str(schema_file), "db_type"]
    )

    assert result.exit_code == 0
    assert result.output.strip() == "Mysql"


def test_prints_fallback_variant(cli_runner, app_for_environ, schema_file):
    """An unset variable prints the fallback variant."""
    result = cli_runner.invoke(app_for_environ({}), ["match", str(schema_file), "log_level"])

    assert result.exit_code == 0
    assert result.output.strip() == "Info"


def test_no_fallback_is_fatal(cli_runner, app_for_environ, schema_file):
    """A no-fallback enum mismatch exits with the fatal code."""
    result = cli_runner.invoke(
        app_for_environ({"DATABASE_TYPE": "oracle"}), ["match", str(schema_file), "db_type"]
    )

    assert result.exit_code == EXIT_FATAL
    assert (
        "✗ Fatal: Invalid environment variable value for DATABASE_TYPE: 'oracle'"
        in result.output
    )


def test_rejects_non_enum_field(cli_runner, app_for_environ, schema_file):
    """Only enum fields can be matched."""
    result = cli_runner.invoke(app_for_environ({}), ["match", str(schema_file), "db_port"])

    assert result.exit_code == EXIT_ERRORS
    assert "✗ db_port is not an enum field of Config" in result.output


def test_rejects_unknown_field(cli_runner, app_for_environ, schema_file):
    """Unknown field names are rejected the same way."""
    result = cli_runner.invoke(app_for_environ({}), ["match", str(schema_file), "nope"])

    assert result.exit_code == EXIT_ERRORS
    assert "✗ nope is not an enum field of Config" in result.output
