"""env-extract - bind environment variables to typed configuration values."""

from .app import App, create_app
from .config.loader import load_settings
from .domain import (
    BOOL,
    F32,
    F64,
    I8,
    I16,
    I32,
    I64,
    I128,
    STRING,
    U8,
    U16,
    U32,
    U64,
    U128,
    CasePolicy,
    DefaultPolicy,
    EnumSchema,
    EnvExtractError,
    FieldSpec,
    MissingVariableError,
    NoMatchingVariantError,
    RecordResolution,
    RecordResolutionError,
    RecordSchema,
    ResolutionError,
    SchemaError,
    TypeConversionError,
    VariantSpec,
    enum_type,
    schema_from_enum,
)
from .resolvers import (
    EnumResolver,
    EnvLookup,
    RecordResolver,
    environ_lookup,
    resolve_enum,
    resolve_record,
)

__all__ = [
    # App
    "App",
    "create_app",
    "load_settings",
    # Schemas
    "CasePolicy",
    "DefaultPolicy",
    "EnumSchema",
    "VariantSpec",
    "FieldSpec",
    "RecordSchema",
    "schema_from_enum",
    "enum_type",
    "STRING",
    "BOOL",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "F32",
    "F64",
    # Resolution
    "EnumResolver",
    "RecordResolver",
    "RecordResolution",
    "EnvLookup",
    "environ_lookup",
    "resolve_enum",
    "resolve_record",
    # Exceptions
    "EnvExtractError",
    "SchemaError",
    "ResolutionError",
    "MissingVariableError",
    "TypeConversionError",
    "NoMatchingVariantError",
    "RecordResolutionError",
]
