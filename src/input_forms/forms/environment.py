"""
Environment providers.

Fields fall back to environment variables when they have no bound
value. The lookup goes through a provider so tests can supply a plain
mapping instead of mutating the process environment.
"""

import os
from collections.abc import Mapping
from typing import Protocol


class EnvironmentProvider(Protocol):
    """Ordered name lookup used for environment variable fallbacks."""

    def lookup(self, name: str) -> str | None:
        ...


class ProcessEnvironment:
    """Reads variables from the running process environment."""

    def lookup(self, name: str) -> str | None:
        return os.environ.get(name)


class MappingEnvironment:
    """Reads variables from a caller owned mapping."""

    def __init__(self, values: Mapping[str, str] | None = None):
        self.values = dict(values or {})

    def lookup(self, name: str) -> str | None:
        return self.values.get(name)

    def set(self, name: str, value: str) -> None:
        self.values[name] = value

    def unset(self, name: str) -> None:
        self.values.pop(name, None)
