"""Tests for the raw string parsers.

These are the conversions underneath every accessor: booleans, 64-bit
integers, fixed-width narrowing, and delimiter splitting.
"""

import pytest

from envkit.parsing import (
    INT64_MAX,
    INT64_MIN,
    ParseError,
    narrow_int,
    parse_bool,
    parse_int64,
    split_list,
)

INT32_MAX = 2**31 - 1
INT32_MIN = -(2**31)
EXPECTED_SEVEN = 7
EXPECTED_NEGATIVE = -42
EXPECTED_PLUS = 5
BEYOND_INT32 = 2**32 + 5


class TestParseBool:
    """Verify boolean literal parsing."""

    @pytest.mark.parametrize("raw", ["1", "t", "T", "true", "True", "TRUE", "tRuE"])
    def test_true_literals(self, raw: str) -> None:
        """Truthy literals parse to True in any case."""
        assert parse_bool(raw) is True

    @pytest.mark.parametrize("raw", ["0", "f", "F", "false", "False", "FALSE"])
    def test_false_literals(self, raw: str) -> None:
        """Falsy literals parse to False in any case."""
        assert parse_bool(raw) is False

    @pytest.mark.parametrize("raw", ["maybe", "yes", "on", "2", " true", ""])
    def test_rejects_other_text(self, raw: str) -> None:
        """Anything else is a ParseError."""
        with pytest.raises(ParseError):
            parse_bool(raw)

    def test_parse_error_is_value_error(self) -> None:
        """ParseError is a ValueError subclass."""
        assert issubclass(ParseError, ValueError)


class TestParseInt64:
    """Verify base-10 integer parsing."""

    def test_plain(self) -> None:
        """A plain decimal parses."""
        assert parse_int64("7") == EXPECTED_SEVEN

    def test_signs(self) -> None:
        """Leading signs are accepted."""
        assert parse_int64("-42") == EXPECTED_NEGATIVE
        assert parse_int64("+5") == EXPECTED_PLUS

    def test_bounds(self) -> None:
        """The int64 extremes parse exactly."""
        assert parse_int64(str(INT64_MAX)) == INT64_MAX
        assert parse_int64(str(INT64_MIN)) == INT64_MIN

    @pytest.mark.parametrize("raw", [str(INT64_MAX + 1), str(INT64_MIN - 1)])
    def test_overflow(self, raw: str) -> None:
        """Values outside int64 are rejected."""
        with pytest.raises(ParseError):
            parse_int64(raw)

    @pytest.mark.parametrize("raw", ["abc", "1.5", " 7", "7 ", "1_000", "0x10", "", "-", "١٢"])
    def test_rejects_non_decimal(self, raw: str) -> None:
        """Whitespace, underscores, hex and non-ASCII digits are rejected."""
        with pytest.raises(ParseError):
            parse_int64(raw)


class TestNarrowInt:
    """Verify two's-complement narrowing to 32 bits."""

    def test_in_range_unchanged(self) -> None:
        """Values within 32 bits pass through."""
        assert narrow_int(INT32_MAX) == INT32_MAX
        assert narrow_int(INT32_MIN) == INT32_MIN
        assert narrow_int(EXPECTED_NEGATIVE) == EXPECTED_NEGATIVE

    def test_wraps_past_max(self) -> None:
        """One past the max wraps to the min."""
        assert narrow_int(INT32_MAX + 1) == INT32_MIN

    def test_keeps_low_bits(self) -> None:
        """Only the low 32 bits survive."""
        assert narrow_int(BEYOND_INT32) == EXPECTED_PLUS
        assert narrow_int(-1) == -1

    def test_custom_width(self) -> None:
        """Other widths narrow the same way."""
        assert narrow_int(128, bits=8) == -128  # noqa: PLR2004


class TestSplitList:
    """Verify delimiter splitting."""

    def test_split(self) -> None:
        """Elements come back in order."""
        assert split_list("a,b,c", ",") == ["a", "b", "c"]

    def test_keeps_empty_elements(self) -> None:
        """Empty elements between delimiters are kept."""
        assert split_list("a,,b,", ",") == ["a", "", "b", ""]

    def test_no_delimiter_present(self) -> None:
        """A value without the delimiter is a single element."""
        assert split_list("solo", ";") == ["solo"]

    @pytest.mark.parametrize("delimiter", ["", "::"])
    def test_rejects_bad_delimiter(self, delimiter: str) -> None:
        """The delimiter must be exactly one character."""
        with pytest.raises(ValueError, match="single character"):
            split_list("a", delimiter)
