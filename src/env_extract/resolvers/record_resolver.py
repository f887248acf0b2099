"""Resolution of a configuration record, field by field."""

import typing as t

from ..domain.enum_schema import EnumSchema
from ..domain.exceptions import MissingVariableError, ResolutionError
from ..domain.record import FieldSpec, RecordResolution, RecordSchema
from ..domain.target_types import EnumType
from ..infrastructure.logging import get_logger
from .base import BaseResolver
from .enum_resolver import EnumResolver
from .environment import EnvLookup, with_default
from .scalars import convert_scalar

if t.TYPE_CHECKING:
    from loguru import Logger

RecordT = t.TypeVar("RecordT")


class RecordResolver(BaseResolver[RecordResolution]):
    """Populates a record from the environment.

    Fields are resolved independently and in declaration order. Recoverable
    failures (missing variable, bad text) are collected rather than raised so
    one report covers every misconfigured variable. A no-fallback enum field
    is collected as a fatal error; ``RecordResolution.unwrap`` raises it.
    """

    def __init__(
        self,
        schema: RecordSchema,
        *,
        logger: t.Optional["Logger"] = None,
    ) -> None:
        self._schema = schema
        self._logger = logger or get_logger(__name__)
        self._enum_resolvers = {
            spec.name: EnumResolver(self._enum_schema_for(spec), logger=self._logger)
            for spec in schema.fields
            if isinstance(spec.target_type, EnumType)
        }

    @property
    def schema(self) -> RecordSchema:
        return self._schema

    @staticmethod
    def _enum_schema_for(spec: FieldSpec) -> EnumSchema:
        enum_schema = t.cast(EnumType, spec.target_type).enum_schema
        if spec.variable_name != enum_schema.variable_name:
            return enum_schema.model_copy(update={"variable_name": spec.variable_name})
        return enum_schema

    def resolve_field(self, spec: FieldSpec, env_lookup: EnvLookup) -> t.Any:
        """Resolve one field.

        Raises:
            MissingVariableError: Variable unset and no default text
            TypeConversionError: Text not convertible to the target type
            NoMatchingVariantError: Enum field without a fallback matched nothing
        """
        variable_name = t.cast(str, spec.variable_name)
        target = spec.target_type

        if isinstance(target, EnumType):
            resolver = self._enum_resolvers[spec.name]
            lookup = with_default(env_lookup, variable_name, spec.default_value)
            return resolver.resolve(lookup).resolved_value

        raw = env_lookup(variable_name)
        if raw is None:
            raw = spec.default_value
            if raw is not None:
                self._logger.debug(
                    "Variable unset, using default text",
                    field=spec.name,
                    variable=variable_name,
                )
        if raw is None:
            raise MissingVariableError(variable_name, expected_type=target.describe())
        return convert_scalar(raw, variable_name, target)

    def resolve(self, env_lookup: EnvLookup | None = None) -> RecordResolution:
        """Resolve every field, collecting errors in declaration order."""
        lookup = self._lookup_or_snapshot(env_lookup)
        values: dict[str, t.Any] = {}
        errors: list[ResolutionError] = []

        for spec in self._schema.fields:
            try:
                values[spec.name] = self.resolve_field(spec, lookup)
            except ResolutionError as exc:
                errors.append(exc.for_field(spec.name))

        if errors:
            self._logger.warning(
                "Record resolved with errors",
                record=self._schema.name,
                failed=[error.field_name for error in errors],
            )
        else:
            self._logger.debug(
                "Record resolved", record=self._schema.name, fields=len(values)
            )
        return RecordResolution(
            record_name=self._schema.name,
            values=values,
            errors=tuple(errors),
        )

    @t.overload
    def load(self, env_lookup: EnvLookup | None = None) -> dict[str, t.Any]: ...

    @t.overload
    def load(
        self,
        env_lookup: EnvLookup | None = None,
        *,
        into: t.Callable[..., RecordT],
    ) -> RecordT: ...

    def load(self, env_lookup=None, *, into=None):
        """Resolve and unwrap, optionally building ``into(**values)``.

        ``into`` can be any callable taking the field names as keyword
        arguments, such as a dataclass or a pydantic model.

        Raises:
            NoMatchingVariantError: A fatal enum field outcome
            RecordResolutionError: One or more recoverable field errors
        """
        values = self.resolve(env_lookup).unwrap()
        if into is None:
            return values
        return into(**values)


def resolve_record(
    schema: RecordSchema, env_lookup: EnvLookup | None = None
) -> RecordResolution:
    """Resolve a RecordSchema with a default-configured RecordResolver."""
    return RecordResolver(schema).resolve(env_lookup)
