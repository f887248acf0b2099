"""CLI state container."""

import typing as t
from pathlib import Path

from ..config.settings import Settings
from ..domain.record import RecordSchema
from ..infrastructure.schema_files import load_env_file
from ..resolvers.environment import EnvLookup, environ_lookup, overlay_lookup
from ..resolvers.record_resolver import RecordResolver

ResolverFactory = t.Callable[[RecordSchema], RecordResolver]


class CLIState:
    """Application state container for CLI commands.

    Holds Settings plus the environment source and resolver factory, so tests
    can inject a fixed environment instead of the process one.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        environ: t.Mapping[str, str] | None = None,
        resolver_factory: ResolverFactory | None = None,
    ):
        self.settings = settings
        self.environ = environ
        self._resolver_factory = resolver_factory or RecordResolver

    def create_lookup(self, env_file: Path | None = None) -> EnvLookup:
        """Snapshot the environment, overlaid with an env file if given."""
        lookup = environ_lookup(self.environ)
        if env_file is not None:
            lookup = overlay_lookup(lookup, load_env_file(env_file))
        return lookup

    def create_resolver(self, schema: RecordSchema) -> RecordResolver:
        return self._resolver_factory(schema)
