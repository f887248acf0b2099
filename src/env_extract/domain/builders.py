"""Helpers that assemble schemas from ordinary Python declarations."""

import enum
import typing as t

from .enum_schema import CasePolicy, DefaultPolicy, EnumSchema, VariantSpec
from .exceptions import SchemaError


def schema_from_enum(
    enum_cls: type[enum.Enum],
    *,
    variable_name: str | None = None,
    case_policy: CasePolicy = CasePolicy.EXACT,
    default: enum.Enum | None = None,
    ignore: t.Iterable[enum.Enum] = (),
    variant_case_policies: t.Mapping[enum.Enum, CasePolicy] | None = None,
    default_policy: DefaultPolicy | None = None,
    panic_on_invalid: bool = False,
) -> EnumSchema:
    """Build an EnumSchema whose variants are the members of ``enum_cls``.

    Variant names are the member names; each variant carries its member as
    payload, so records hold real enum members.

    Args:
        enum_cls: The enumeration to describe
        variable_name: Environment variable; defaults to the class name upper-cased
        case_policy: Policy for members without an override
        default: Member returned when nothing matches
        ignore: Members excluded from matching
        variant_case_policies: Per-member case policy overrides
        default_policy: Explicit fallback rule
        panic_on_invalid: Treat a non-matching value as fatal

    Returns:
        Validated, immutable EnumSchema

    Raises:
        SchemaError: If a referenced member does not belong to ``enum_cls``
            or the resulting schema has no fallback path

    Examples:
        >>> class DatabaseType(enum.Enum):
        ...     Postgres = 1
        ...     Mysql = 2
        ...     Sqlite = 3
        >>> schema = schema_from_enum(
        ...     DatabaseType, variable_name="DATABASE_TYPE", panic_on_invalid=True
        ... )
        >>> schema.variable_name
        'DATABASE_TYPE'
    """
    overrides = dict(variant_case_policies or {})
    ignored = set(ignore)

    for member in (default, *ignored, *overrides):
        if member is not None and not isinstance(member, enum_cls):
            raise SchemaError(f"{member!r} is not a member of {enum_cls.__name__}")

    variants = tuple(
        VariantSpec(
            name=member.name,
            case_policy=overrides.get(member),
            is_default=member is default,
            is_ignored=member in ignored,
            value=member,
        )
        for member in enum_cls
    )

    return EnumSchema(
        name=enum_cls.__name__,
        variants=variants,
        variable_name=variable_name,
        case_policy=case_policy,
        default_policy=default_policy,
        panic_on_invalid=panic_on_invalid,
    )
