"""Shared fixtures for CLI tests."""

import json

import pytest

from env_extract.cli.app import create_cli_app
from env_extract.cli.state import CLIState
from env_extract.config.settings import Environment, LogLevel, Settings


@pytest.fixture
def test_settings():
    """Provide test Settings with known values."""
    return Settings(environment=Environment.TESTING, log_level=LogLevel.CRITICAL)


@pytest.fixture
def test_app(test_settings):
    """Provide CLI app with test settings injected."""
    return create_cli_app(settings=test_settings)


@pytest.fixture
def schema_document():
    """Record schema document mirroring a typical service config."""
    return {
        "name": "Config",
        "fields": [
            {"name": "db_host", "target_type": {"kind": "string"}},
            {"name": "db_port", "target_type": {"kind": "uint", "width": 16}},
            {
                "name": "use_tls",
                "target_type": {"kind": "bool"},
                "default_value": "false",
            },
            {
                "name": "db_type",
                "target_type": {
                    "kind": "enum",
                    "schema": {
                        "name": "DatabaseType",
                        "variable_name": "DATABASE_TYPE",
                        "case_policy": "lowercase",
                        "panic_on_invalid": True,
                        "variants": [
                            {"name": "Postgres"},
                            {"name": "Mysql"},
                            {"name": "Sqlite"},
                        ],
                    },
                },
            },
            {
                "name": "log_level",
                "target_type": {
                    "kind": "enum",
                    "schema": {
                        "name": "LogLevel",
                        "variants": [
                            {"name": "Error"},
                            {"name": "Info", "is_default": True},
                        ],
                    },
                },
            },
        ],
    }


@pytest.fixture
def schema_file(tmp_path, schema_document):
    """Write the schema document to disk."""
    path = tmp_path / "config.schema.json"
    path.write_text(json.dumps(schema_document))
    return path


@pytest.fixture
def valid_environ():
    """Environment that resolves every field of the schema."""
    return {
        "DB_HOST": "localhost",
        "DB_PORT": "5432",
        "DATABASE_TYPE": "POSTGRES",
    }


@pytest.fixture
def app_for_environ(test_settings):
    """Build a CLI app whose commands see a fixed environment."""

    def factory(environ):
        return create_cli_app(state=CLIState(test_settings, environ=environ))

    return factory
