"""Errors raised by the mandatory accessors.

A missing required variable and a malformed one are different problems
for whoever is reading the startup log, so they get different types.
Both share ``EnvVarError`` so a host can catch either with one clause.
"""


class EnvVarError(Exception):
    """Raise when a mandatory environment variable cannot be used."""

    def __init__(self, message: str, *, name: str) -> None:
        """Store the offending variable name alongside the message."""
        super().__init__(message)
        self.name = name


class MissingVariableError(EnvVarError):
    """Raise when a mandatory variable is unset or empty."""

    def __init__(self, name: str) -> None:
        """Build the message from the variable name."""
        super().__init__(f"Missing mandatory env var name {name}", name=name)


class InvalidValueError(EnvVarError):
    """Raise when a mandatory variable is set but cannot be parsed."""

    def __init__(self, name: str, value: str, *, kind: str) -> None:
        """Build the message from the variable, its raw value and target kind.

        Args:
            name: The environment variable name.
            value: The raw string that failed to parse.
            kind: The target type label (``bool``, ``int``, ``list``).

        """
        super().__init__(
            f"Invalid {kind} value for env var name {name} value {value}",
            name=name,
        )
        self.value = value
        self.kind = kind
