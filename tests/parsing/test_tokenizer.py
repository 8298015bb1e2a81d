"""
Tests for flag tokenization.

Focus Areas:
1. Splitting ``--flag value`` segments
2. The ``\\--`` escape for literal double dashes in values
3. Malformed, duplicated and over-long flags
"""

import pytest

from sgsafe.exceptions import (
    DuplicateFlagError,
    IncorrectFlagError,
    InputLengthExceededError,
)
from sgsafe.parsing.tokenizer import MAX_INPUT_LENGTH, extract_flag_values


class TestFlagSplitting:
    """Test splitting of well-formed flag text."""

    def test_two_flags(self):
        """Each flag maps to its own value."""
        assert extract_flag_values("--title A --info B") == {"title": "A", "info": "B"}

    def test_multi_word_values(self):
        """Values keep their interior spaces."""
        result = extract_flag_values("--title Stolen bike --info Taken from void deck")
        assert result == {"title": "Stolen bike", "info": "Taken from void deck"}

    def test_extra_whitespace_is_trimmed(self):
        """Whitespace around names and values is removed."""
        result = extract_flag_values("  --title    A   --info\tB  ")
        assert result == {"title": "A", "info": "B"}

    def test_flags_keep_input_order(self):
        """Flags are returned in the order they were typed."""
        result = extract_flag_values("--c 1 --a 2 --b 3")
        assert list(result) == ["c", "a", "b"]

    def test_dashes_inside_a_word_do_not_split(self):
        """Only whitespace followed by -- starts a new flag."""
        assert extract_flag_values("--title well--known") == {"title": "well--known"}

    def test_hyphenated_flag_name(self):
        """Flag names may contain single hyphens."""
        result = extract_flag_values("--number-of-victims 3")
        assert result == {"number-of-victims": "3"}


class TestEscapedDoubleDash:
    """Test the \\-- escape sequence."""

    def test_escape_is_restored_as_literal(self):
        """\\-- becomes -- inside the value."""
        assert extract_flag_values("--title A\\-- B") == {"title": "A-- B"}

    def test_escape_after_space_does_not_start_flag(self):
        """A space before \\-- does not create a new flag boundary."""
        result = extract_flag_values("--info see \\--help output")
        assert result == {"info": "see --help output"}

    def test_multiple_escapes(self):
        """Every escape in a value is restored."""
        result = extract_flag_values("--info \\--a \\--b --title T")
        assert result == {"info": "--a --b", "title": "T"}


class TestMalformedFlags:
    """Test rejection of malformed flag text."""

    @pytest.mark.parametrize(
        "text",
        [
            "--title",
            "--",
            "-- ",
            "title A",
            "theft",
            "",
            "--title A --info",
            "--title A -- B",
        ],
    )
    def test_incorrect_flag(self, text):
        """Missing prefix, name or value is an IncorrectFlagError."""
        with pytest.raises(IncorrectFlagError):
            extract_flag_values(text)

    def test_duplicate_flag(self):
        """The same flag twice is a DuplicateFlagError."""
        with pytest.raises(DuplicateFlagError):
            extract_flag_values("--title A --title B")

    def test_value_at_length_limit_is_accepted(self):
        """A value of exactly the maximum length is allowed."""
        value = "x" * MAX_INPUT_LENGTH
        assert extract_flag_values(f"--info {value}") == {"info": value}

    def test_value_over_length_limit(self):
        """A value over the maximum length is rejected."""
        with pytest.raises(InputLengthExceededError):
            extract_flag_values("--info " + "x" * (MAX_INPUT_LENGTH + 1))

    def test_length_is_checked_after_restoring_escapes(self):
        """Each restored escape counts as two characters."""
        value = "\\--" * (MAX_INPUT_LENGTH // 2) + "x"
        with pytest.raises(InputLengthExceededError):
            extract_flag_values(f"--info {value}")
