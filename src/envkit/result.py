"""An explicit success-or-error value for mandatory lookups.

``Resolved`` lets a caller look at a required variable without
try/except: check ``ok``, then read ``value`` or ``error``.  The
``mandatory_*`` accessors are just ``resolve_*(...).unwrap()``.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from envkit.errors import EnvVarError

T = TypeVar("T")


@dataclass(frozen=True)
class Resolved(Generic[T]):
    """The outcome of a mandatory lookup.

    Exactly one of ``value`` and ``error`` is meaningful: when
    ``error`` is None the lookup succeeded.

    Attributes:
        name: The environment variable that was looked up.
        value: The parsed value, or None on failure.
        error: The failure, or None on success.

    """

    name: str
    value: T | None = None
    error: EnvVarError | None = None

    @classmethod
    def success(cls, name: str, value: T) -> "Resolved[T]":
        """Build a successful result."""
        return cls(name=name, value=value)

    @classmethod
    def failure(cls, name: str, error: EnvVarError) -> "Resolved[T]":
        """Build a failed result."""
        return cls(name=name, error=error)

    @property
    def ok(self) -> bool:
        """Return True if the lookup produced a value."""
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, or raise the stored error.

        Raises:
            EnvVarError: If the lookup failed.

        """
        if self.error is not None:
            raise self.error.with_traceback(None)
        return self.value  # type: ignore[return-value]

    def value_or(self, default: T) -> T:
        """Return the value, or *default* if the lookup failed."""
        if self.error is not None:
            return default
        return self.value  # type: ignore[return-value]
