"""Custom exceptions for env-extract."""

import typing as t


class EnvExtractError(Exception):
    """Base exception for env-extract errors."""

    pass


class SchemaError(EnvExtractError):
    """Raised when a schema cannot be used at all.

    Schema errors are authoring mistakes (no fallback variant, duplicate
    defaults, empty variant set, ...). They surface when the schema is
    constructed, independent of any environment.
    """

    pass


class ResolutionError(EnvExtractError):
    """Base exception for a single value that could not be resolved.

    Carries enough context to build a report line: the environment variable,
    the field it was meant for (when resolved as part of a record), the
    observed raw text and the expected type.
    """

    fatal: t.ClassVar[bool] = False

    def __init__(
        self,
        message: str,
        *,
        variable_name: str,
        raw_text: str | None = None,
        expected_type: str | None = None,
        field_name: str | None = None,
    ) -> None:
        self.variable_name = variable_name
        self.raw_text = raw_text
        self.expected_type = expected_type
        self.field_name = field_name
        super().__init__(message)

    def for_field(self, field_name: str) -> "ResolutionError":
        """Attach the record field this error belongs to and return self."""
        self.field_name = field_name
        return self


class MissingVariableError(ResolutionError):
    """Raised when a variable is unset and no default text exists."""

    def __init__(
        self,
        variable_name: str,
        *,
        expected_type: str | None = None,
        field_name: str | None = None,
    ) -> None:
        super().__init__(
            f"No environment variable or default value found for '{variable_name}'",
            variable_name=variable_name,
            expected_type=expected_type,
            field_name=field_name,
        )


class TypeConversionError(ResolutionError):
    """Raised when raw text is present but not convertible to the target type."""

    def __init__(
        self,
        variable_name: str,
        raw_text: str,
        target_type: str,
        *,
        reason: str | None = None,
        field_name: str | None = None,
    ) -> None:
        self.reason = reason
        message = f"Cannot convert {variable_name}={raw_text!r} to {target_type}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(
            message,
            variable_name=variable_name,
            raw_text=raw_text,
            expected_type=target_type,
            field_name=field_name,
        )


class NoMatchingVariantError(ResolutionError):
    """Raised when no variant matches and the schema declares no fallback.

    This is the one fatal outcome: the schema author opted out of any safe
    default, so callers must not continue with a substitute value.
    """

    fatal: t.ClassVar[bool] = True

    def __init__(
        self,
        variable_name: str,
        raw_text: str | None,
        *,
        enum_name: str | None = None,
        field_name: str | None = None,
    ) -> None:
        self.enum_name = enum_name
        shown = repr(raw_text) if raw_text is not None else "<unset>"
        super().__init__(
            f"Invalid environment variable value for {variable_name}: {shown}",
            variable_name=variable_name,
            raw_text=raw_text,
            expected_type=enum_name,
            field_name=field_name,
        )


class RecordResolutionError(EnvExtractError):
    """Raised when one or more fields of a record could not be resolved.

    The message lists every failing field in declaration order with its
    expected type and the raw text observed.
    """

    def __init__(
        self, record_name: str, errors: t.Sequence[ResolutionError]
    ) -> None:
        self.record_name = record_name
        self.errors = tuple(errors)
        lines = [f"{len(self.errors)} field(s) of {record_name} could not be resolved:"]
        lines.extend(f"  - {describe_error(error)}" for error in self.errors)
        super().__init__("\n".join(lines))


def describe_error(error: ResolutionError) -> str:
    """Render one resolution error as a single report line."""
    subject = error.field_name or error.variable_name
    observed = repr(error.raw_text) if error.raw_text is not None else "<unset>"
    expected = error.expected_type or "unknown"
    return (
        f"{subject} (env {error.variable_name}): expected {expected}, "
        f"got {observed} - {type(error).__name__}"
    )
