"""Domain layer - schema models, resolution results and exceptions."""

from .builders import schema_from_enum
from .enum_schema import (
    INVALID_VARIANT_NAME,
    CasePolicy,
    DefaultPolicy,
    EnumSchema,
    VariantSpec,
)
from .exceptions import (
    EnvExtractError,
    MissingVariableError,
    NoMatchingVariantError,
    RecordResolutionError,
    ResolutionError,
    SchemaError,
    TypeConversionError,
)
from .record import FieldSpec, RecordResolution, RecordSchema
from .target_types import (
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
    BoolType,
    EnumType,
    FloatType,
    SignedIntType,
    StringType,
    TargetType,
    UnsignedIntType,
    enum_type,
)

__all__ = [
    # Enumeration Models
    "INVALID_VARIANT_NAME",
    "CasePolicy",
    "DefaultPolicy",
    "EnumSchema",
    "VariantSpec",
    "schema_from_enum",
    # Record Models
    "FieldSpec",
    "RecordSchema",
    "RecordResolution",
    # Target Types
    "TargetType",
    "StringType",
    "BoolType",
    "UnsignedIntType",
    "SignedIntType",
    "FloatType",
    "EnumType",
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
    # Exceptions
    "EnvExtractError",
    "SchemaError",
    "ResolutionError",
    "MissingVariableError",
    "TypeConversionError",
    "NoMatchingVariantError",
    "RecordResolutionError",
]
