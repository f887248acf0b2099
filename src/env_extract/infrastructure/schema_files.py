"""Loading record schemas and env files from disk."""

import io
import typing as t
from pathlib import Path

from dotenv import dotenv_values

from ..domain.exceptions import SchemaError
from ..domain.record import RecordSchema


def load_record_schema(path: Path) -> RecordSchema:
    """Load a RecordSchema from a JSON file.

    Raises:
        SchemaError: If the file cannot be read, or describes an
            unusable enumeration or record
        pydantic.ValidationError: If the JSON does not match the schema shape
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SchemaError(f"Unable to read schema file: {path}") from exc
    return RecordSchema.model_validate_json(text)


def _require_values(values: t.Mapping[str, str | None]) -> dict[str, str]:
    """Reject bare ``KEY`` lines, which python-dotenv reports as None."""
    bare = [key for key, value in values.items() if value is None]
    if bare:
        raise ValueError(f"No value for {', '.join(bare)} (expected KEY=VALUE)")
    return t.cast(dict[str, str], dict(values))


def parse_env_file(text: str) -> dict[str, str]:
    """Parse ``KEY=VALUE`` lines with python-dotenv.

    Values are taken literally (no ``${VAR}`` expansion), so the result
    does not depend on the process environment.

    Raises:
        ValueError: If a line names a variable without a value
    """
    return _require_values(dotenv_values(stream=io.StringIO(text), interpolate=False))


def load_env_file(path: Path) -> dict[str, str]:
    """Read and parse an env file without touching ``os.environ``.

    Raises:
        OSError: If the file cannot be read
        ValueError: If a line names a variable without a value
    """
    with path.open(encoding="utf-8") as stream:
        return _require_values(dotenv_values(stream=stream, interpolate=False))
