"""Pytest configuration and fixtures for env-extract tests."""

import enum
import typing as t

import loguru
import pytest
from typer.testing import CliRunner

from env_extract.app import create_app
from env_extract.cli.app import create_cli_app
from env_extract.config.settings import Environment, LogLevel, Settings
from env_extract.domain import (
    CasePolicy,
    EnumSchema,
    FieldSpec,
    RecordSchema,
    VariantSpec,
    enum_type,
    schema_from_enum,
)
from env_extract.domain.target_types import BOOL, STRING, U16
from env_extract.infrastructure.logging import reset_logging
from env_extract.resolvers import EnvLookup, environ_lookup


class DatabaseType(enum.Enum):
    """Enumeration used across resolver tests."""

    Postgres = "postgres"
    Mysql = "mysql"
    Sqlite = "sqlite"


@pytest.fixture
def test_settings():
    """Provide test-specific settings."""
    return Settings(
        environment=Environment.TESTING,
        log_level=LogLevel.CRITICAL,  # Minimal logging during tests
    )


@pytest.fixture
def test_app(test_settings):
    """Provide a test app with clean logging state."""
    reset_logging()
    app = create_app(settings=test_settings)
    yield app
    reset_logging()


@pytest.fixture
def mock_logger(mocker):
    """Provide a mock logger for testing that captures log calls."""
    logger = mocker.Mock(spec=loguru.logger)
    return logger


@pytest.fixture(autouse=True)
def clean_logging_state():
    """Automatically reset logging before each test for isolation."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def make_lookup() -> t.Callable[..., EnvLookup]:
    """Build an env lookup over a fixed set of variables."""

    def factory(**variables: str) -> EnvLookup:
        return environ_lookup(variables)

    return factory


@pytest.fixture
def log_level_schema():
    """Enum with three exact-case variants and an Invalid fallback."""
    return EnumSchema(
        name="LogLevel",
        variants=(
            VariantSpec(name="Error"),
            VariantSpec(name="Warning"),
            VariantSpec(name="Info"),
            VariantSpec(name="Invalid"),
        ),
    )


@pytest.fixture
def database_enum():
    """Provide the DatabaseType enumeration."""
    return DatabaseType


@pytest.fixture
def database_schema():
    """DATABASE_TYPE enum, lowercase, with no fallback."""
    return schema_from_enum(
        DatabaseType,
        variable_name="DATABASE_TYPE",
        case_policy=CasePolicy.LOWERCASE,
        panic_on_invalid=True,
    )


@pytest.fixture
def config_schema(database_schema):
    """Record mirroring a typical service config."""
    return RecordSchema(
        name="Config",
        fields=(
            FieldSpec(name="db_host", target_type=STRING),
            FieldSpec(name="db_port", target_type=U16),
            FieldSpec(name="use_tls", target_type=BOOL),
            FieldSpec(name="db_type", target_type=enum_type(database_schema)),
        ),
    )


# CLI-specific fixtures (shared across all tests)


@pytest.fixture
def cli_runner():
    """Provide Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def default_app():
    """Provide CLI app with default settings."""
    return create_cli_app()
