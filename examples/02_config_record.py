#!/usr/bin/env python3
"""
02_config_record.py - Load a typed configuration record

Demonstrates: RecordSchema, default text and loading into a dataclass
"""
import enum
from dataclasses import dataclass

from env_extract import (
    BOOL,
    STRING,
    U16,
    CasePolicy,
    FieldSpec,
    RecordResolver,
    RecordSchema,
    create_app,
    enum_type,
    environ_lookup,
    schema_from_enum,
)


class DatabaseType(enum.Enum):
    Postgres = "postgres"
    Mysql = "mysql"
    Sqlite = "sqlite"


@dataclass(frozen=True)
class Config:
    db_host: str
    db_port: int
    use_tls: bool
    db_type: DatabaseType


SCHEMA = RecordSchema(
    name="Config",
    fields=(
        FieldSpec(name="db_host", target_type=STRING),
        FieldSpec(name="db_port", target_type=U16, default_value="5432"),
        FieldSpec(name="use_tls", target_type=BOOL),
        FieldSpec(
            name="db_type",
            target_type=enum_type(
                schema_from_enum(
                    DatabaseType,
                    variable_name="DATABASE_TYPE",
                    case_policy=CasePolicy.ANY,
                    default=DatabaseType.Sqlite,
                )
            ),
        ),
    ),
)


def main() -> None:
    create_app()  # Logging configured from ENV_EXTRACT_*
    lookup = environ_lookup(
        {"DB_HOST": "db.internal", "USE_TLS": "TRUE", "DATABASE_TYPE": "Postgres"}
    )
    config = RecordResolver(SCHEMA).load(lookup, into=Config)
    print(config)


if __name__ == "__main__":
    main()
