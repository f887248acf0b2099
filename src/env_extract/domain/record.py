"""Record schema and resolution result models."""

import typing as t
from dataclasses import dataclass, field
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .exceptions import RecordResolutionError, ResolutionError, SchemaError
from .target_types import EnumType, TargetType


class FieldSpec(BaseModel):
    """One field of a configuration record.

    ``variable_name`` defaults to the upper-cased field name, or for enum
    fields to the enumeration's own variable. It is populated at construction.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Field name in the resolved record")
    target_type: TargetType = Field(description="Type the raw text converts to")
    variable_name: str | None = Field(
        default=None,
        description="Environment variable to read",
    )
    default_value: str | None = Field(
        default=None,
        description="Raw text used when the variable is absent",
    )

    @model_validator(mode="after")
    def _default_variable_name(self) -> "FieldSpec":
        if self.variable_name is None:
            if isinstance(self.target_type, EnumType):
                variable_name = self.target_type.enum_schema.variable_name
            else:
                variable_name = self.name.upper()
            object.__setattr__(self, "variable_name", variable_name)
        return self


class RecordSchema(BaseModel):
    """Configuration record made of independently resolved fields."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="Config", min_length=1, description="Record name")
    fields: tuple[FieldSpec, ...] = Field(description="Fields in declaration order")

    @model_validator(mode="after")
    def _validate_unique_names(self) -> "RecordSchema":
        names = [spec.name for spec in self.fields]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise SchemaError(
                f"Record {self.name} declares duplicate fields: {', '.join(duplicates)}"
            )
        return self

    def get_field(self, name: str) -> FieldSpec | None:
        """Look up a field by name."""
        for spec in self.fields:
            if spec.name == name:
                return spec
        return None


@dataclass(frozen=True)
class RecordResolution:
    """Outcome of resolving a record: every value that resolved, every error.

    Resolved field names and failed field names are disjoint and together
    cover the schema's fields. Errors keep field declaration order.
    ``values`` is a read-only view; ``unwrap`` returns a mutable copy.
    """

    record_name: str
    values: t.Mapping[str, t.Any] = field(default_factory=dict)
    errors: tuple[ResolutionError, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    @property
    def is_resolved(self) -> bool:
        """True when every field resolved."""
        return not self.errors

    @property
    def is_fatal(self) -> bool:
        """True when any field hit a no-fallback enumeration."""
        return any(error.fatal for error in self.errors)

    @property
    def failed_fields(self) -> tuple[str, ...]:
        return tuple(error.field_name or error.variable_name for error in self.errors)

    def unwrap(self) -> dict[str, t.Any]:
        """Return the resolved values, raising if anything failed.

        Raises:
            NoMatchingVariantError: The first fatal field error, if any.
            RecordResolutionError: Every recoverable field error otherwise.
        """
        for error in self.errors:
            if error.fatal:
                raise error
        if self.errors:
            raise RecordResolutionError(self.record_name, self.errors)
        return dict(self.values)
