"""Typed environment variable accessors.

Each accessor reads one variable and converts it under one of three
policies:

- **Optional** (``var*``): return the value, or the caller's default
  if it is unset, empty, or malformed.  Silent.
- **Important** (``important_var*``): same as optional, but record a
  warning naming the variable and the default whenever it falls back.
- **Mandatory** (``mandatory_var*``): return the value, or raise
  ``MissingVariableError`` / ``InvalidValueError``.

The ``resolve_var*`` family applies the mandatory policy but returns a
``Resolved`` instead of raising, so the host decides what to do.

An unset variable and one set to ``""`` are treated identically
everywhere.  Optional accessors never tell the caller *why* they used
the default: a malformed ``RETRIES=abc`` looks exactly like no
``RETRIES`` at all.
"""

from collections.abc import Callable
from typing import TypeVar

from envkit.env import EnvProvider, default_environment
from envkit.errors import InvalidValueError, MissingVariableError
from envkit.logging import Logger, default_logger
from envkit.parsing import (
    ParseError,
    check_delimiter,
    narrow_int,
    parse_bool,
    parse_int64,
    split_list,
)
from envkit.result import Resolved

T = TypeVar("T")

FALLBACK_MESSAGE = "Using fallback default value for env var."
LOG_SOURCE = "env"


def _lookup(name: str, env: EnvProvider | None) -> str | None:
    """Return the raw value, or None if it is unset or empty."""
    provider = env if env is not None else default_environment()
    value = provider.get(name)
    return value or None


def _warn_fallback(logger: Logger | None, name: str, default: object, raw: str | None) -> None:
    sink = logger if logger is not None else default_logger()
    if raw is None:
        sink.warning(FALLBACK_MESSAGE, source=LOG_SOURCE, var=name, default=default)
    else:
        sink.warning(FALLBACK_MESSAGE, source=LOG_SOURCE, var=name, default=default, value=raw)


def _optional(
    name: str,
    default: T,
    parse: Callable[[str], T],
    env: EnvProvider | None,
    *,
    warn: bool = False,
    logger: Logger | None = None,
) -> T:
    raw = _lookup(name, env)
    if raw is not None:
        try:
            return parse(raw)
        except ParseError:
            pass
    if warn:
        _warn_fallback(logger, name, default, raw)
    return default


def _resolve(
    name: str,
    parse: Callable[[str], T],
    kind: str,
    env: EnvProvider | None,
) -> Resolved[T]:
    raw = _lookup(name, env)
    if raw is None:
        return Resolved.failure(name, MissingVariableError(name))
    try:
        return Resolved.success(name, parse(raw))
    except ParseError as exc:
        error = InvalidValueError(name, raw, kind=kind)
        error.__cause__ = exc
        return Resolved.failure(name, error)


def _as_str(raw: str) -> str:
    return raw


def _as_int(raw: str) -> int:
    return narrow_int(parse_int64(raw))


# -- Strings ---------------------------------------------------------------


def var(name: str, default: str, *, env: EnvProvider | None = None) -> str:
    """Read *name* as a string, falling back to *default*."""
    return _optional(name, default, _as_str, env)


def important_var(
    name: str,
    default: str,
    *,
    env: EnvProvider | None = None,
    logger: Logger | None = None,
) -> str:
    """Read *name* as a string, warning when forced to use *default*."""
    return _optional(name, default, _as_str, env, warn=True, logger=logger)


def resolve_var(name: str, *, env: EnvProvider | None = None) -> Resolved[str]:
    """Look up a required string without raising."""
    return _resolve(name, _as_str, "string", env)


def mandatory_var(name: str, *, env: EnvProvider | None = None) -> str:
    """Read *name* as a string.

    Raises:
        MissingVariableError: If *name* is unset or empty.

    """
    return resolve_var(name, env=env).unwrap()


# -- Booleans --------------------------------------------------------------


def var_as_bool(name: str, default: bool, *, env: EnvProvider | None = None) -> bool:
    """Read *name* as a boolean, falling back to *default* if unset or malformed."""
    return _optional(name, default, parse_bool, env)


def important_var_as_bool(
    name: str,
    default: bool,
    *,
    env: EnvProvider | None = None,
    logger: Logger | None = None,
) -> bool:
    """Read *name* as a boolean, warning when forced to use *default*."""
    return _optional(name, default, parse_bool, env, warn=True, logger=logger)


def resolve_var_as_bool(name: str, *, env: EnvProvider | None = None) -> Resolved[bool]:
    """Look up a required boolean without raising."""
    return _resolve(name, parse_bool, "bool", env)


def mandatory_var_as_bool(name: str, *, env: EnvProvider | None = None) -> bool:
    """Read *name* as a boolean.

    Raises:
        MissingVariableError: If *name* is unset or empty.
        InvalidValueError: If the value is not a boolean literal.

    """
    return resolve_var_as_bool(name, env=env).unwrap()


# -- Integers --------------------------------------------------------------
#
# The 64-bit accessors do the parsing; the plain ``int`` ones narrow the
# result (and the default) to 32 bits.


def var_as_int64(name: str, default: int, *, env: EnvProvider | None = None) -> int:
    """Read *name* as a 64-bit integer, falling back to *default*."""
    return _optional(name, default, parse_int64, env)


def important_var_as_int64(
    name: str,
    default: int,
    *,
    env: EnvProvider | None = None,
    logger: Logger | None = None,
) -> int:
    """Read *name* as a 64-bit integer, warning when forced to use *default*."""
    return _optional(name, default, parse_int64, env, warn=True, logger=logger)


def resolve_var_as_int64(name: str, *, env: EnvProvider | None = None) -> Resolved[int]:
    """Look up a required 64-bit integer without raising."""
    return _resolve(name, parse_int64, "int", env)


def mandatory_var_as_int64(name: str, *, env: EnvProvider | None = None) -> int:
    """Read *name* as a 64-bit integer.

    Raises:
        MissingVariableError: If *name* is unset or empty.
        InvalidValueError: If the value is not a base-10 int64.

    """
    return resolve_var_as_int64(name, env=env).unwrap()


def var_as_int(name: str, default: int, *, env: EnvProvider | None = None) -> int:
    """Read *name* as a 32-bit integer, falling back to *default*."""
    return narrow_int(var_as_int64(name, default, env=env))


def important_var_as_int(
    name: str,
    default: int,
    *,
    env: EnvProvider | None = None,
    logger: Logger | None = None,
) -> int:
    """Read *name* as a 32-bit integer, warning when forced to use *default*."""
    return narrow_int(important_var_as_int64(name, narrow_int(default), env=env, logger=logger))


def resolve_var_as_int(name: str, *, env: EnvProvider | None = None) -> Resolved[int]:
    """Look up a required 32-bit integer without raising."""
    return _resolve(name, _as_int, "int", env)


def mandatory_var_as_int(name: str, *, env: EnvProvider | None = None) -> int:
    """Read *name* as a 32-bit integer.

    Values outside the 32-bit range wrap around rather than fail.

    Raises:
        MissingVariableError: If *name* is unset or empty.
        InvalidValueError: If the value is not a base-10 int64.

    """
    return resolve_var_as_int(name, env=env).unwrap()


# -- Lists -----------------------------------------------------------------


def var_as_list(
    name: str,
    default: list[str],
    delimiter: str = ",",
    *,
    env: EnvProvider | None = None,
) -> list[str]:
    """Read *name* as a list split on *delimiter*.

    When *name* is unset or empty, *default* is returned as-is (the
    same object, not a copy).  Empty elements are kept: ``"a,,b"``
    gives ``["a", "", "b"]``.

    Raises:
        ValueError: If *delimiter* is not a single character.

    """
    check_delimiter(delimiter)
    return _optional(name, default, lambda raw: split_list(raw, delimiter), env)


def important_var_as_list(
    name: str,
    default: list[str],
    delimiter: str = ",",
    *,
    env: EnvProvider | None = None,
    logger: Logger | None = None,
) -> list[str]:
    """Read *name* as a list, warning when forced to use *default*."""
    check_delimiter(delimiter)
    return _optional(
        name,
        default,
        lambda raw: split_list(raw, delimiter),
        env,
        warn=True,
        logger=logger,
    )


def resolve_var_as_list(
    name: str,
    delimiter: str = ",",
    *,
    env: EnvProvider | None = None,
) -> Resolved[list[str]]:
    """Look up a required list without raising.

    Raises:
        ValueError: If *delimiter* is not a single character.

    """
    check_delimiter(delimiter)

    def parse(raw: str) -> list[str]:
        items = split_list(raw, delimiter)
        if not items:
            msg = f"Empty list from {raw!r}"
            raise ParseError(msg)
        return items

    return _resolve(name, parse, "list", env)


def mandatory_var_as_list(
    name: str,
    delimiter: str = ",",
    *,
    env: EnvProvider | None = None,
) -> list[str]:
    """Read *name* as a list split on *delimiter*.

    Raises:
        MissingVariableError: If *name* is unset or empty.
        ValueError: If *delimiter* is not a single character.

    """
    return resolve_var_as_list(name, delimiter, env=env).unwrap()
