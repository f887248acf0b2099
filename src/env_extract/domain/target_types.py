"""Target types a record field can be converted to."""

import typing as t
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .enum_schema import EnumSchema
from .exceptions import SchemaError

INT_WIDTHS: Final = frozenset({8, 16, 32, 64, 128})
FLOAT_WIDTHS: Final = frozenset({32, 64})


class StringType(BaseModel):
    """Raw text, stored unchanged."""

    model_config = ConfigDict(frozen=True)

    kind: t.Literal["string"] = "string"

    def describe(self) -> str:
        return "String"


class BoolType(BaseModel):
    """Case-insensitive ``true`` / ``false``."""

    model_config = ConfigDict(frozen=True)

    kind: t.Literal["bool"] = "bool"

    def describe(self) -> str:
        return "bool"


class _IntegerType(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: int = Field(default=64, description="Bit width of the integer")

    @model_validator(mode="after")
    def _validate_width(self) -> t.Self:
        if self.width not in INT_WIDTHS:
            raise SchemaError(
                f"Unsupported integer width {self.width}; "
                f"expected one of {sorted(INT_WIDTHS)}"
            )
        return self


class UnsignedIntType(_IntegerType):
    """Unsigned integer of a fixed width (u8 ... u128)."""

    kind: t.Literal["uint"] = "uint"

    @property
    def min_value(self) -> int:
        return 0

    @property
    def max_value(self) -> int:
        return 2**self.width - 1

    def describe(self) -> str:
        return f"u{self.width}"


class SignedIntType(_IntegerType):
    """Two's complement integer of a fixed width (i8 ... i128)."""

    kind: t.Literal["int"] = "int"

    @property
    def min_value(self) -> int:
        return -(2 ** (self.width - 1))

    @property
    def max_value(self) -> int:
        return 2 ** (self.width - 1) - 1

    def describe(self) -> str:
        return f"i{self.width}"


class FloatType(BaseModel):
    """IEEE 754 binary floating point (f32 or f64)."""

    model_config = ConfigDict(frozen=True)

    kind: t.Literal["float"] = "float"
    width: int = Field(default=64, description="Bit width of the float")

    @model_validator(mode="after")
    def _validate_width(self) -> "FloatType":
        if self.width not in FLOAT_WIDTHS:
            raise SchemaError(
                f"Unsupported float width {self.width}; "
                f"expected one of {sorted(FLOAT_WIDTHS)}"
            )
        return self

    def describe(self) -> str:
        return f"f{self.width}"


class EnumType(BaseModel):
    """Value resolved through a nested enumeration schema."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: t.Literal["enum"] = "enum"
    schema_: EnumSchema = Field(alias="schema", description="Enumeration to match")

    @property
    def enum_schema(self) -> EnumSchema:
        return self.schema_

    def describe(self) -> str:
        return self.schema_.describe()


TargetType = t.Annotated[
    StringType | BoolType | UnsignedIntType | SignedIntType | FloatType | EnumType,
    Field(discriminator="kind"),
]

STRING: Final = StringType()
BOOL: Final = BoolType()
U8: Final = UnsignedIntType(width=8)
U16: Final = UnsignedIntType(width=16)
U32: Final = UnsignedIntType(width=32)
U64: Final = UnsignedIntType(width=64)
U128: Final = UnsignedIntType(width=128)
I8: Final = SignedIntType(width=8)
I16: Final = SignedIntType(width=16)
I32: Final = SignedIntType(width=32)
I64: Final = SignedIntType(width=64)
I128: Final = SignedIntType(width=128)
F32: Final = FloatType(width=32)
F64: Final = FloatType(width=64)


def enum_type(schema: EnumSchema) -> EnumType:
    """Wrap an enumeration schema as a field target type."""
    return EnumType(schema=schema)
