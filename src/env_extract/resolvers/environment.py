"""Environment lookup functions consumed by the resolvers."""

import os
import typing as t

EnvLookup = t.Callable[[str], str | None]


def environ_lookup(mapping: t.Mapping[str, str] | None = None) -> EnvLookup:
    """Build a lookup over a snapshot of ``mapping`` (``os.environ`` by default).

    The snapshot is taken now; later changes to the mapping are not seen.
    """
    snapshot = dict(os.environ if mapping is None else mapping)
    return snapshot.get


def overlay_lookup(base: EnvLookup, overrides: t.Mapping[str, str]) -> EnvLookup:
    """Build a lookup where ``overrides`` shadow ``base``."""
    snapshot = dict(overrides)

    def lookup(name: str) -> str | None:
        if name in snapshot:
            return snapshot[name]
        return base(name)

    return lookup


def with_default(base: EnvLookup, name: str, default: str | None) -> EnvLookup:
    """Build a lookup that answers ``default`` when ``name`` is absent."""
    if default is None:
        return base

    def lookup(key: str) -> str | None:
        value = base(key)
        if value is None and key == name:
            return default
        return value

    return lookup
