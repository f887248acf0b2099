"""Resolvers - enumeration and record resolution against the environment."""

from .base import BaseResolver
from .enum_resolver import EnumResolver, resolve_enum
from .environment import EnvLookup, environ_lookup, overlay_lookup, with_default
from .record_resolver import RecordResolver, resolve_record
from .scalars import convert_scalar, parse_bool, parse_float, parse_int

__all__ = [
    "BaseResolver",
    "EnumResolver",
    "RecordResolver",
    "resolve_enum",
    "resolve_record",
    # Environment
    "EnvLookup",
    "environ_lookup",
    "overlay_lookup",
    "with_default",
    # Scalars
    "convert_scalar",
    "parse_bool",
    "parse_int",
    "parse_float",
]
