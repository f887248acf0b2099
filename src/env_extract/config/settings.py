import enum
import typing as t

from pydantic import BaseModel, ConfigDict, Field


class Environment(enum.StrEnum):
    """Runtime environment for the application."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(enum.StrEnum):
    """Log levels understood by the logging layer."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseModel):
    """Runtime settings for env-extract itself.

    Core code depends only on this shape; the host decides how values are
    populated (explicit construction, CLI flags, or ``load_settings``).
    """

    model_config = ConfigDict(frozen=True)

    environment: Environment = Field(
        default=Environment.PRODUCTION,
        description="Selects the log format",
    )
    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Minimum level emitted by the logger",
    )


def build_settings(**overrides: t.Any) -> Settings:
    """Create Settings, applying only the overrides that are not None."""
    values = {key: value for key, value in overrides.items() if value is not None}
    return Settings(**values)
