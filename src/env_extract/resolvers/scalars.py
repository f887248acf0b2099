"""Conversion of raw environment text to scalar target types."""

import math
import re
import struct
import typing as t
from typing import Final

from ..domain.exceptions import TypeConversionError
from ..domain.target_types import (
    BoolType,
    FloatType,
    SignedIntType,
    StringType,
    UnsignedIntType,
)

ScalarType = StringType | BoolType | UnsignedIntType | SignedIntType | FloatType

# ASCII only: str.isdigit() and int() also accept other Unicode digits.
_INT_PATTERN: Final = re.compile(r"[+-]?[0-9]+", re.ASCII)
_FLOAT_PATTERN: Final = re.compile(
    r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|[+-]?(?:inf|infinity|nan)",
    re.ASCII | re.IGNORECASE,
)
# Widest supported integer (u128 / i128) has 39 digits; longer text cannot fit.
_MAX_INT_DIGITS: Final = 39

_BOOL_VALUES: Final = {"true": True, "false": False}


def parse_bool(raw: str, variable_name: str) -> bool:
    """Parse case-insensitive ``true`` / ``false``."""
    try:
        return _BOOL_VALUES[raw.strip().lower()]
    except KeyError:
        raise TypeConversionError(
            variable_name, raw, "bool", reason="expected 'true' or 'false'"
        ) from None


def parse_int(raw: str, variable_name: str, target: UnsignedIntType | SignedIntType) -> int:
    """Parse a base-10 integer and check it fits the target width."""
    text = raw.strip()
    if not _INT_PATTERN.fullmatch(text):
        raise TypeConversionError(
            variable_name, raw, target.describe(), reason="invalid digit"
        )
    sign = "-" if text.startswith("-") else ""
    significant = text.lstrip("+-").lstrip("0") or "0"
    # int() refuses very long digit strings, so check the length first
    too_long = len(significant) > _MAX_INT_DIGITS
    value = 0 if too_long else int(sign + significant)
    if too_long or not target.min_value <= value <= target.max_value:
        raise TypeConversionError(
            variable_name,
            raw,
            target.describe(),
            reason=f"out of range [{target.min_value}, {target.max_value}]",
        )
    return value


def parse_float(raw: str, variable_name: str, target: FloatType) -> float:
    """Parse a decimal or exponent float, rejecting finite text that overflows."""
    text = raw.strip()
    if not _FLOAT_PATTERN.fullmatch(text):
        raise TypeConversionError(
            variable_name, raw, target.describe(), reason="invalid float literal"
        )
    value = float(text)
    literal_is_finite = text.lstrip("+-")[:1].isdigit() or text.lstrip("+-")[:1] == "."
    try:
        if literal_is_finite and math.isinf(value):
            raise OverflowError(text)
        if target.width == 32:
            # Round to single precision; packing overflows past the f32 range
            (value,) = struct.unpack("f", struct.pack("f", value))
    except OverflowError:
        raise TypeConversionError(
            variable_name, raw, target.describe(), reason="out of range"
        ) from None
    return value


def convert_scalar(raw: str, variable_name: str, target: ScalarType) -> t.Any:
    """Convert raw text to a scalar target type.

    Raises:
        TypeConversionError: If the text is malformed or out of range
    """
    match target:
        case StringType():
            return raw
        case BoolType():
            return parse_bool(raw, variable_name)
        case UnsignedIntType() | SignedIntType():
            return parse_int(raw, variable_name, target)
        case FloatType():
            return parse_float(raw, variable_name, target)
    raise TypeError(f"Not a scalar target type: {target!r}")
