"""Resolution of an environment variable to one enumeration variant."""

import typing as t

from ..domain.enum_schema import (
    INVALID_VARIANT_NAME,
    DefaultPolicy,
    EnumSchema,
    VariantSpec,
)
from ..domain.exceptions import NoMatchingVariantError
from ..infrastructure.logging import get_logger
from .base import BaseResolver
from .environment import EnvLookup

if t.TYPE_CHECKING:
    from loguru import Logger


class EnumResolver(BaseResolver[VariantSpec]):
    """Matches raw text against an EnumSchema's variants.

    Matching is first-match in declaration order over non-ignored variants.
    Two variants that compare equal under their policies (``Foo`` exact and
    ``foo`` lowercase, say) are allowed; the one declared first wins.
    """

    def __init__(
        self,
        schema: EnumSchema,
        *,
        logger: t.Optional["Logger"] = None,
    ) -> None:
        self._schema = schema
        self._logger = logger or get_logger(__name__)

    @property
    def schema(self) -> EnumSchema:
        return self._schema

    def match(self, raw: str | None) -> VariantSpec | None:
        """Return the first variant matching ``raw``, or None.

        Absent text never matches.
        """
        if raw is None:
            return None
        for variant in self._schema.candidates:
            policy = self._schema.policy_for(variant)
            if policy.fold(raw) == policy.fold(variant.name):
                return variant
        return None

    def fallback(self, raw: str | None = None) -> VariantSpec:
        """Return the variant used when nothing matches.

        Raises:
            NoMatchingVariantError: If the schema declares no fallback
        """
        schema = self._schema
        match schema.default_policy:
            case DefaultPolicy.MARKED_DEFAULT_VARIANT:
                return next(v for v in schema.variants if v.is_default)
            case DefaultPolicy.NAMED_INVALID_VARIANT:
                return t.cast(VariantSpec, schema.get_variant(INVALID_VARIANT_NAME))
        raise NoMatchingVariantError(
            t.cast(str, schema.variable_name), raw, enum_name=schema.name
        )

    def resolve_text(self, raw: str | None) -> VariantSpec:
        """Resolve already-read raw text to a variant.

        Raises:
            NoMatchingVariantError: If nothing matches and there is no fallback
        """
        variable_name = self._schema.variable_name
        variant = self.match(raw)
        if variant is not None:
            self._logger.debug(
                "Matched enum variant",
                enum=self._schema.name,
                variable=variable_name,
                variant=variant.name,
            )
            return variant

        try:
            fallback = self.fallback(raw)
        except NoMatchingVariantError:
            self._logger.error(
                "No variant matches and enum declares no fallback",
                enum=self._schema.name,
                variable=variable_name,
                raw=raw,
            )
            raise

        if raw is None:
            self._logger.debug(
                "Variable unset, using fallback variant",
                enum=self._schema.name,
                variable=variable_name,
                variant=fallback.name,
            )
        else:
            self._logger.warning(
                "Value matches no variant, using fallback variant",
                enum=self._schema.name,
                variable=variable_name,
                raw=raw,
                variant=fallback.name,
            )
        return fallback

    def resolve(self, env_lookup: EnvLookup | None = None) -> VariantSpec:
        """Read the schema's variable and resolve it to a variant.

        Raises:
            NoMatchingVariantError: If nothing matches and there is no fallback
        """
        lookup = self._lookup_or_snapshot(env_lookup)
        return self.resolve_text(lookup(t.cast(str, self._schema.variable_name)))

    def resolve_value(self, env_lookup: EnvLookup | None = None) -> t.Any:
        """Resolve and return the variant's payload."""
        return self.resolve(env_lookup).resolved_value


def resolve_enum(
    schema: EnumSchema, env_lookup: EnvLookup | None = None
) -> VariantSpec:
    """Resolve an EnumSchema with a default-configured EnumResolver."""
    return EnumResolver(schema).resolve(env_lookup)
