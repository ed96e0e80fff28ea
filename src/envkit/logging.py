"""Structured logging for fallback warnings.

When an "important" accessor has to fall back to its default, it
records a structured entry saying which variable was missing and which
default took its place.  Entries are kept in memory so callers (and
tests) can inspect them, and forwarded to the standard ``logging``
module so host applications see them through their own handlers.

- **LogLevel**: severity levels ordered for filtering (DEBUG < ERROR).
- **LogEntry**: a single structured record (level, message, source, fields).
- **Logger**: an append-only, optionally bounded log with filtering
  and clearing.

Design choices:
    - **IntEnum for levels** so they compare naturally with ``<``.
    - **Frozen dataclass for entries**: log records should be immutable,
      down to a private read-only copy of their fields.
    - **Filter returns a list, not a generator**: the log is typically
      small and callers usually want to iterate multiple times.
"""

import copy
import logging
from collections import deque
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import IntEnum
from types import MappingProxyType
from typing import Any

DEFAULT_MAX_ENTRIES = 256


class LogLevel(IntEnum):
    """Severity levels for log entries.

    Using IntEnum means levels compare with ``<`` / ``>`` naturally,
    which makes minimum-level filtering trivial.
    """

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3

    @property
    def stdlib_level(self) -> int:
        """Return the matching ``logging`` module level."""
        return _STDLIB_LEVELS[self]


_STDLIB_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


@dataclass(frozen=True)
class LogEntry:
    """A single structured log record.

    Attributes:
        level: The severity of this event.
        message: A human-readable description of what happened.
        source: The subsystem that generated the event (e.g. "env").
        fields: Structured key/value context (e.g. ``var``, ``default``).

    """

    level: LogLevel
    message: str
    source: str
    fields: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        """Freeze a private copy of *fields* so later mutation cannot leak in."""
        object.__setattr__(self, "fields", MappingProxyType(copy.deepcopy(dict(self.fields))))

    def __str__(self) -> str:
        """Format as ``[LEVEL] source: message key=value ...``."""
        text = f"[{self.level.name}] {self.source}: {self.message}"
        if self.fields:
            pairs = " ".join(f"{key}={value!r}" for key, value in self.fields.items())
            text = f"{text} {pairs}"
        return text


class Logger:
    """Append-only log buffer with filtering.

    Every entry is also handed to ``logging.getLogger(name)`` at the
    matching level, with the structured fields attached as ``extra``.
    With *max_entries* set, only the most recent entries are kept.
    """

    def __init__(self, name: str = "envkit", *, max_entries: int | None = None) -> None:
        """Create an empty logger forwarding to the stdlib logger *name*.

        Args:
            name: The stdlib logger to forward entries to.
            max_entries: If set, the oldest entries are dropped beyond this
                many.  None keeps everything.

        """
        self._entries: deque[LogEntry] = deque(maxlen=max_entries)
        self._stdlib = logging.getLogger(name)

    @property
    def max_entries(self) -> int | None:
        """Return the buffer bound, or None if unbounded."""
        return self._entries.maxlen

    @property
    def name(self) -> str:
        """Return the name of the stdlib logger entries are forwarded to."""
        return self._stdlib.name

    @property
    def entries(self) -> list[LogEntry]:
        """Return all log entries in chronological order."""
        return list(self._entries)

    def log(
        self,
        level: LogLevel,
        message: str,
        *,
        source: str,
        **fields: Any,
    ) -> LogEntry:
        """Append a new entry to the log and forward it.

        Args:
            level: Severity of the event.
            message: Human-readable event description.
            source: Subsystem that generated the event.
            **fields: Structured context attached to the entry.

        Returns:
            The recorded entry.

        """
        entry = LogEntry(level=level, message=message, source=source, fields=dict(fields))
        self._entries.append(entry)
        self._stdlib.log(
            level.stdlib_level,
            str(entry),
            extra={"source": source, "fields": entry.fields},
        )
        return entry

    def warning(self, message: str, *, source: str, **fields: Any) -> LogEntry:
        """Shorthand for ``log(LogLevel.WARNING, ...)``."""
        return self.log(LogLevel.WARNING, message, source=source, **fields)

    def filter(
        self,
        *,
        min_level: LogLevel | None = None,
        source: str | None = None,
    ) -> list[LogEntry]:
        """Return entries matching the given criteria.

        Args:
            min_level: If set, only return entries at or above this level.
            source: If set, only return entries from this source.

        Returns:
            A filtered list of log entries.

        """
        result = list(self._entries)
        if min_level is not None:
            result = [e for e in result if e.level >= min_level]
        if source is not None:
            result = [e for e in result if e.source == source]
        return result

    def clear(self) -> None:
        """Remove all log entries."""
        self._entries.clear()


_DEFAULT_LOGGER = Logger(max_entries=DEFAULT_MAX_ENTRIES)


def default_logger() -> Logger:
    """Return the logger used when an accessor is given no ``logger``.

    The shared buffer keeps only the last ``DEFAULT_MAX_ENTRIES`` entries,
    so hosts that read configuration in a loop do not grow it forever.
    """
    return _DEFAULT_LOGGER
