#!/usr/bin/env python3
"""
01_enum_variable.py - Match one variable against an enumeration

Demonstrates: schema_from_enum, case policies and the Invalid fallback
"""
import enum

from env_extract import (
    CasePolicy,
    create_app,
    environ_lookup,
    resolve_enum,
    schema_from_enum,
)


class DatabaseType(enum.Enum):
    Postgres = "postgres"
    Mysql = "mysql"
    Sqlite = "sqlite"
    Invalid = "invalid"


def main() -> None:
    create_app()  # Logging configured from ENV_EXTRACT_*
    schema = schema_from_enum(
        DatabaseType,
        variable_name="DATABASE_TYPE",
        case_policy=CasePolicy.LOWERCASE,
    )

    # Fixed environments instead of os.environ so the output is predictable
    for environ in ({"DATABASE_TYPE": "postgres"}, {"DATABASE_TYPE": "ORACLE"}, {}):
        variant = resolve_enum(schema, environ_lookup(environ))
        print(f"{environ or '<unset>'} -> {variant.resolved_value}")


if __name__ == "__main__":
    main()
