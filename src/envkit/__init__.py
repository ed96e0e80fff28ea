"""envkit: read environment variables into typed values.

Re-exports public symbols so callers can write::

    from envkit import mandatory_var, var_as_int

Parsing helpers are NOT re-exported here; import them directly from
``envkit.parsing``.
"""

from envkit.accessors import (
    important_var,
    important_var_as_bool,
    important_var_as_int,
    important_var_as_int64,
    important_var_as_list,
    mandatory_var,
    mandatory_var_as_bool,
    mandatory_var_as_int,
    mandatory_var_as_int64,
    mandatory_var_as_list,
    resolve_var,
    resolve_var_as_bool,
    resolve_var_as_int,
    resolve_var_as_int64,
    resolve_var_as_list,
    var,
    var_as_bool,
    var_as_int,
    var_as_int64,
    var_as_list,
)
from envkit.env import EnvProvider, Environment, OsEnvironment, default_environment
from envkit.errors import EnvVarError, InvalidValueError, MissingVariableError
from envkit.logging import LogEntry, Logger, LogLevel, default_logger
from envkit.result import Resolved

__all__ = [
    "EnvProvider",
    "EnvVarError",
    "Environment",
    "InvalidValueError",
    "LogEntry",
    "LogLevel",
    "Logger",
    "MissingVariableError",
    "OsEnvironment",
    "Resolved",
    "default_environment",
    "default_logger",
    "important_var",
    "important_var_as_bool",
    "important_var_as_int",
    "important_var_as_int64",
    "important_var_as_list",
    "mandatory_var",
    "mandatory_var_as_bool",
    "mandatory_var_as_int",
    "mandatory_var_as_int64",
    "mandatory_var_as_list",
    "resolve_var",
    "resolve_var_as_bool",
    "resolve_var_as_int",
    "resolve_var_as_int64",
    "resolve_var_as_list",
    "var",
    "var_as_bool",
    "var_as_int",
    "var_as_int64",
    "var_as_list",
]
