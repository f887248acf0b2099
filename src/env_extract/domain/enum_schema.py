"""Enumeration schema domain models."""

import enum
import typing as t
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .exceptions import SchemaError

INVALID_VARIANT_NAME: Final = "Invalid"


class CasePolicy(enum.StrEnum):
    """How observed text and variant names are normalized before comparison."""

    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    EXACT = "exact"
    # Declared intent "match regardless of case"; folds like LOWERCASE.
    ANY = "any"

    def fold(self, text: str) -> str:
        """Normalize text for comparison under this policy."""
        if self is CasePolicy.UPPERCASE:
            return text.upper()
        if self in (CasePolicy.LOWERCASE, CasePolicy.ANY):
            return text.lower()
        return text


class DefaultPolicy(enum.StrEnum):
    """What an enumeration resolves to when no variant matches."""

    NAMED_INVALID_VARIANT = "named_invalid_variant"
    MARKED_DEFAULT_VARIANT = "marked_default_variant"
    PANIC_ON_INVALID = "panic_on_invalid"


class VariantSpec(BaseModel):
    """One candidate value of an enumeration."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Symbolic name and comparison text")
    case_policy: CasePolicy | None = Field(
        default=None,
        description="Overrides the enumeration's case policy for this variant",
    )
    is_default: bool = Field(
        default=False,
        description="Fallback variant under MARKED_DEFAULT_VARIANT",
    )
    is_ignored: bool = Field(
        default=False,
        description="Excluded from matching entirely",
    )
    value: t.Any = Field(
        default=None,
        description="Payload handed to record consumers; defaults to the name",
    )

    @property
    def resolved_value(self) -> t.Any:
        """The payload stored in a record for this variant."""
        return self.name if self.value is None else self.value


class EnumSchema(BaseModel):
    """Closed enumeration matched against one environment variable.

    ``variable_name`` defaults to the upper-cased enumeration name.
    ``default_policy`` is derived when omitted: ``panic_on_invalid`` wins,
    then a default-flagged variant, then a variant named ``Invalid``.
    Both are populated at construction, so after validation neither is None.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Name of the enumeration")
    variants: tuple[VariantSpec, ...] = Field(description="Variants in declaration order")
    variable_name: str | None = Field(
        default=None,
        description="Environment variable to read",
    )
    case_policy: CasePolicy = Field(
        default=CasePolicy.EXACT,
        description="Policy for variants that do not declare their own",
    )
    default_policy: DefaultPolicy | None = Field(
        default=None,
        description="Fallback rule when nothing matches",
    )
    panic_on_invalid: bool = Field(
        default=False,
        description="Shorthand for default_policy=PANIC_ON_INVALID",
    )

    @model_validator(mode="after")
    def _validate_schema(self) -> "EnumSchema":
        names = [variant.name for variant in self.variants]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise SchemaError(
                f"Enum {self.name} declares duplicate variants: {', '.join(duplicates)}"
            )

        if not self.candidates:
            raise SchemaError(f"Enum {self.name} has no variants that can be matched")

        defaults = [v for v in self.variants if v.is_default]
        if len(defaults) > 1:
            raise SchemaError(
                f"Enum {self.name} marks more than one default variant: "
                f"{', '.join(v.name for v in defaults)}"
            )
        if defaults and defaults[0].is_ignored:
            raise SchemaError(
                f"Enum {self.name} default variant {defaults[0].name} cannot be ignored"
            )

        policy = self._derive_default_policy()
        if policy is DefaultPolicy.MARKED_DEFAULT_VARIANT and not defaults:
            raise SchemaError(f"Enum {self.name} has no variant marked as default")
        if policy is DefaultPolicy.NAMED_INVALID_VARIANT:
            invalid = self.get_variant(INVALID_VARIANT_NAME)
            if invalid is None or invalid.is_ignored:
                raise SchemaError(
                    f"Enum {self.name} has no matchable {INVALID_VARIANT_NAME!r} variant"
                )

        # Frozen model: fill derived values in place once, during validation.
        object.__setattr__(self, "default_policy", policy)
        if self.variable_name is None:
            object.__setattr__(self, "variable_name", self.name.upper())
        return self

    def _derive_default_policy(self) -> DefaultPolicy:
        if self.panic_on_invalid:
            if self.default_policy not in (None, DefaultPolicy.PANIC_ON_INVALID):
                raise SchemaError(
                    f"Enum {self.name} sets panic_on_invalid together with "
                    f"{self.default_policy}"
                )
            return DefaultPolicy.PANIC_ON_INVALID
        if self.default_policy is not None:
            return self.default_policy
        if any(v.is_default for v in self.variants):
            return DefaultPolicy.MARKED_DEFAULT_VARIANT
        if self.get_variant(INVALID_VARIANT_NAME) is not None:
            return DefaultPolicy.NAMED_INVALID_VARIANT
        raise SchemaError(
            f"Enum {self.name} must have an {INVALID_VARIANT_NAME!r} variant, "
            "a variant marked as default, or panic_on_invalid"
        )

    @property
    def candidates(self) -> tuple[VariantSpec, ...]:
        """Variants that take part in matching, in declaration order."""
        return tuple(v for v in self.variants if not v.is_ignored)

    def get_variant(self, name: str) -> VariantSpec | None:
        """Look up a variant by its exact name."""
        for variant in self.variants:
            if variant.name == name:
                return variant
        return None

    def policy_for(self, variant: VariantSpec) -> CasePolicy:
        """Effective case policy for a variant."""
        return variant.case_policy or self.case_policy

    def describe(self) -> str:
        return f"enum {self.name}"
