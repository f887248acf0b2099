"""Load env-extract's own Settings from the environment."""

from typing import Final

from ..domain.builders import schema_from_enum
from ..domain.enum_schema import CasePolicy
from ..domain.record import FieldSpec, RecordSchema
from ..domain.target_types import enum_type
from ..resolvers.environment import EnvLookup
from ..resolvers.record_resolver import RecordResolver
from .settings import Environment, LogLevel, Settings

ENVIRONMENT_VARIABLE: Final = "ENV_EXTRACT_ENVIRONMENT"
LOG_LEVEL_VARIABLE: Final = "ENV_EXTRACT_LOG_LEVEL"

SETTINGS_SCHEMA: Final = RecordSchema(
    name="Settings",
    fields=(
        FieldSpec(
            name="environment",
            target_type=enum_type(
                schema_from_enum(
                    Environment,
                    variable_name=ENVIRONMENT_VARIABLE,
                    case_policy=CasePolicy.ANY,
                    default=Environment.PRODUCTION,
                )
            ),
        ),
        FieldSpec(
            name="log_level",
            target_type=enum_type(
                schema_from_enum(
                    LogLevel,
                    variable_name=LOG_LEVEL_VARIABLE,
                    case_policy=CasePolicy.ANY,
                    default=LogLevel.INFO,
                )
            ),
        ),
    ),
)


def load_settings(env_lookup: EnvLookup | None = None) -> Settings:
    """Build Settings from ENV_EXTRACT_* variables.

    Unset or unrecognised values fall back to the Settings defaults, so this
    never fails on a bad environment.
    """
    return RecordResolver(SETTINGS_SCHEMA).load(env_lookup, into=Settings)
