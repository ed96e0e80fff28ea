"""Turn raw environment strings into typed values.

Environment values are always strings.  These helpers do the conversion
and nothing else: no defaults, no logging.  Policy (fall back, warn,
or fail) lives in ``envkit.accessors``.

Parsing rules:
    - **Booleans** accept ``1/t/true`` and ``0/f/false`` in any case.
    - **Integers** are base-10 with an optional sign, ASCII digits only,
      and must fit in a signed 64-bit integer.  ``int()`` alone is too
      lenient here: it accepts whitespace, underscores and unbounded
      values.
    - **Narrowing** wraps a 64-bit value to a 32-bit signed one the way
      a fixed-width cast does (two's complement).
    - **Lists** split on a single-character delimiter and keep empty
      elements.
"""

import re

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
INT32_BITS = 32

_TRUE_LITERALS = frozenset({"1", "t", "true"})
_FALSE_LITERALS = frozenset({"0", "f", "false"})
_INT_PATTERN = re.compile(r"[+-]?[0-9]+", re.ASCII)


class ParseError(ValueError):
    """Raise when a raw string cannot be converted to the requested type."""


def parse_bool(raw: str) -> bool:
    """Parse a boolean literal.

    Args:
        raw: The string to parse.

    Returns:
        The parsed boolean.

    Raises:
        ParseError: If *raw* is not a recognised literal.

    """
    lowered = raw.lower()
    if lowered in _TRUE_LITERALS:
        return True
    if lowered in _FALSE_LITERALS:
        return False
    msg = f"Invalid bool literal {raw!r}"
    raise ParseError(msg)


def parse_int64(raw: str) -> int:
    """Parse a base-10 integer within the signed 64-bit range.

    Args:
        raw: The string to parse.

    Returns:
        The parsed integer.

    Raises:
        ParseError: If *raw* is not a plain decimal integer, or overflows.

    """
    if _INT_PATTERN.fullmatch(raw) is None:
        msg = f"Invalid integer literal {raw!r}"
        raise ParseError(msg)
    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        msg = f"Integer {raw!r} out of 64-bit range"
        raise ParseError(msg)
    return value


def narrow_int(value: int, bits: int = INT32_BITS) -> int:
    """Wrap *value* to a signed integer of *bits* width.

    Mirrors a fixed-width cast: the low *bits* bits are kept and
    reinterpreted as two's complement.

    >>> narrow_int(2**31)
    -2147483648
    """
    mask = (1 << bits) - 1
    low = value & mask
    if low >= 1 << (bits - 1):
        low -= 1 << bits
    return low


def split_list(raw: str, delimiter: str) -> list[str]:
    """Split *raw* on *delimiter*, keeping empty elements.

    Raises:
        ValueError: If *delimiter* is not exactly one character.

    """
    check_delimiter(delimiter)
    return raw.split(delimiter)


def check_delimiter(delimiter: str) -> None:
    """Reject delimiters that are not a single character."""
    if len(delimiter) != 1:
        msg = f"Delimiter must be a single character, got {delimiter!r}"
        raise ValueError(msg)
