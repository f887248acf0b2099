"""Base interface for schema resolvers."""

import typing as t
from abc import ABC, abstractmethod

from .environment import EnvLookup, environ_lookup

ResultT = t.TypeVar("ResultT")


class BaseResolver(ABC, t.Generic[ResultT]):
    """Abstract base class for resolvers.

    A resolver is a pure function of its schema and one environment
    snapshot. Passing no lookup snapshots ``os.environ`` for the call.
    """

    @abstractmethod
    def resolve(self, env_lookup: EnvLookup | None = None) -> ResultT:
        """Resolve the schema against an environment lookup."""

    @staticmethod
    def _lookup_or_snapshot(env_lookup: EnvLookup | None) -> EnvLookup:
        return env_lookup if env_lookup is not None else environ_lookup()
