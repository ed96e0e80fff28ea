"""Environment providers: where accessors look variables up.

Every process has an environment: a set of ``KEY=VALUE`` string pairs
inherited from its parent.  The accessors in ``envkit.accessors`` never
read ``os.environ`` directly; they ask a *provider* instead.  Anything
with a ``get(key, default)`` method will do.

Two providers ship with the library:
    - **Environment**: a plain dict wrapper.  Each instance is an
      independent copy, which makes tests deterministic without
      touching the real process state.
    - **OsEnvironment**: a read-only live view over ``os.environ``.
      This is what accessors use when no provider is passed.

Key properties:
    - **Strings only**: both keys and values are strings (no types).
    - **Read-only from the accessors' side**: lookups never mutate.
"""

import os
from typing import Protocol


class EnvProvider(Protocol):
    """Anything that can look up an environment variable by name."""

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the value for *key*, or *default* if not set."""
        ...


class Environment:
    """A key-value store for environment variables.

    Each instance is an independent copy; modifying one does not
    affect any other, and none of them touch ``os.environ``.
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        """Create an environment, optionally pre-populated.

        Args:
            initial: Starting variables (copied, not referenced).

        """
        self._vars: dict[str, str] = dict(initial) if initial else {}

    @classmethod
    def from_os(cls) -> "Environment":
        """Return a snapshot of the current process environment."""
        return cls(initial=dict(os.environ))

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the value for *key*, or *default* if not set."""
        return self._vars.get(key, default)

    def set(self, key: str, value: str) -> None:
        """Set *key* to *value* (creates or overwrites)."""
        self._vars[key] = value

    def delete(self, key: str) -> None:
        """Remove *key* from the environment.

        Raises:
            KeyError: If *key* does not exist.

        """
        del self._vars[key]

    def items(self) -> list[tuple[str, str]]:
        """Return all (key, value) pairs."""
        return list(self._vars.items())

    def copy(self) -> "Environment":
        """Return an independent copy of this environment."""
        return Environment(initial=self._vars)

    def __contains__(self, key: object) -> bool:
        """Return True if *key* is set (even to an empty string)."""
        return key in self._vars

    def __len__(self) -> int:
        """Return the number of variables."""
        return len(self._vars)


class OsEnvironment:
    """A read-only live view over the real process environment.

    Lookups hit ``os.environ`` on every call, so changes made elsewhere
    in the host process are visible immediately.
    """

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the value for *key*, or *default* if not set."""
        return os.environ.get(key, default)

    def items(self) -> list[tuple[str, str]]:
        """Return all (key, value) pairs."""
        return list(os.environ.items())

    def __contains__(self, key: object) -> bool:
        """Return True if *key* is set in the process environment."""
        return key in os.environ

    def __len__(self) -> int:
        """Return the number of variables."""
        return len(os.environ)


_DEFAULT_ENVIRONMENT = OsEnvironment()


def default_environment() -> OsEnvironment:
    """Return the provider used when an accessor is given no ``env``."""
    return _DEFAULT_ENVIRONMENT
