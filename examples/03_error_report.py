#!/usr/bin/env python3
"""
03_error_report.py - Report every misconfigured variable at once

Demonstrates: RecordResolution, recoverable errors and the fatal outcome
"""
import enum

from env_extract import (
    STRING,
    U16,
    FieldSpec,
    NoMatchingVariantError,
    RecordResolutionError,
    RecordSchema,
    create_app,
    enum_type,
    environ_lookup,
    resolve_record,
    schema_from_enum,
)


class Region(enum.Enum):
    Eu = "eu"
    Us = "us"


def main() -> None:
    create_app()  # Logging configured from ENV_EXTRACT_*
    schema = RecordSchema(
        name="Service",
        fields=(
            FieldSpec(name="host", target_type=STRING),
            FieldSpec(name="port", target_type=U16),
            FieldSpec(
                name="region",
                target_type=enum_type(schema_from_enum(Region, panic_on_invalid=True)),
            ),
        ),
    )

    resolution = resolve_record(schema, environ_lookup({"PORT": "70000", "REGION": "Eu"}))
    print(f"Resolved: {resolution.values}")
    try:
        resolution.unwrap()
    except RecordResolutionError as e:
        print(e)

    resolution = resolve_record(schema, environ_lookup({"REGION": "asia"}))
    try:
        resolution.unwrap()
    except NoMatchingVariantError as e:
        print(f"Fatal, refusing to start: {e}")


if __name__ == "__main__":
    main()
