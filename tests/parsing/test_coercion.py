"""
Tests for typed conversion of flag values.
"""

from datetime import date

import pytest

from sgsafe.exceptions import InvalidDateInputError, InvalidIntegerError
from sgsafe.parsing.coercion import FLAG_TYPES, FlagType, convert_flag_value_types

NUMERIC_FLAGS = [
    "exceeded-speed",
    "number-of-victims",
    "speed-limit",
    "monetary-damage",
    "financial-value",
    "number-of-casualties",
]


class TestFlagTypeTable:
    """Test the flag name to type table."""

    def test_date_flag(self):
        assert FLAG_TYPES["date"] is FlagType.DATE

    @pytest.mark.parametrize("flag", NUMERIC_FLAGS)
    def test_numeric_flags(self, flag):
        assert FLAG_TYPES[flag] is FlagType.NON_NEGATIVE_INT

    def test_only_listed_flags_are_typed(self):
        assert set(FLAG_TYPES) == {"date", *NUMERIC_FLAGS}


class TestDateConversion:
    """Test conversion of the date flag."""

    def test_date_with_default_pattern(self):
        result = convert_flag_value_types({"date": "10-10-2025"}, "dd-MM-yyyy")
        assert result == {"date": date(2025, 10, 10)}

    def test_date_with_custom_pattern(self):
        result = convert_flag_value_types({"date": "2025/03/07"}, "yyyy/MM/dd")
        assert result == {"date": date(2025, 3, 7)}

    def test_two_digit_year_pattern(self):
        result = convert_flag_value_types({"date": "01-01-75"}, "dd-MM-yy")
        assert result == {"date": date(2075, 1, 1)}

    @pytest.mark.parametrize(
        "value",
        ["2025-10-10", "10/10/2025", "32-01-2025", "today", "1-1-2025", "01-1-2025",
         " 1-01-2025", "10-10-25"],
    )
    def test_out_of_pattern_date(self, value):
        with pytest.raises(InvalidDateInputError):
            convert_flag_value_types({"date": value}, "dd-MM-yyyy")

    def test_error_reports_the_pattern(self):
        with pytest.raises(InvalidDateInputError) as exc_info:
            convert_flag_value_types({"date": "x"}, "dd/MM/yyyy")
        assert exc_info.value.date_format == "dd/MM/yyyy"
        assert "dd/MM/yyyy" in exc_info.value.tip


class TestIntegerConversion:
    """Test conversion of numeric flags."""

    @pytest.mark.parametrize("flag", NUMERIC_FLAGS)
    def test_valid_integer(self, flag):
        assert convert_flag_value_types({flag: "3"}, "dd-MM-yyyy") == {flag: 3}

    def test_zero_and_explicit_plus(self):
        result = convert_flag_value_types(
            {"speed-limit": "0", "exceeded-speed": "+90"}, "dd-MM-yyyy"
        )
        assert result == {"speed-limit": 0, "exceeded-speed": 90}

    def test_negative_integer(self):
        with pytest.raises(InvalidIntegerError) as exc_info:
            convert_flag_value_types({"number-of-victims": "-1"}, "dd-MM-yyyy")
        assert exc_info.value.flag == "number-of-victims"

    def test_integer_too_long_to_convert(self):
        with pytest.raises(InvalidIntegerError) as exc_info:
            convert_flag_value_types({"financial-value": "9" * 4500}, "dd-MM-yyyy")
        assert exc_info.value.flag == "financial-value"
        assert exc_info.value.__cause__ is None

    def test_long_integer_within_conversion_limit(self):
        result = convert_flag_value_types({"financial-value": "9" * 100}, "dd-MM-yyyy")
        assert result == {"financial-value": int("9" * 100)}

    @pytest.mark.parametrize("value", ["three", "3.5", "1_000", "", "0x10", "٣"])
    def test_non_numeric_value(self, value):
        with pytest.raises(InvalidIntegerError):
            convert_flag_value_types({"financial-value": value}, "dd-MM-yyyy")


class TestMixedConversion:
    """Test maps with several flags."""

    def test_strings_pass_through(self):
        flags = {"title": "Stolen bike", "location": "Block 5"}
        assert convert_flag_value_types(flags, "dd-MM-yyyy") == flags

    def test_mixed_types(self):
        flags = {"title": "T", "date": "01-02-2024", "speed-limit": "50"}
        result = convert_flag_value_types(flags, "dd-MM-yyyy")
        assert result == {"title": "T", "date": date(2024, 2, 1), "speed-limit": 50}

    def test_first_failure_is_reported(self):
        """Conversion stops at the first invalid value in input order."""
        flags = {"speed-limit": "x", "date": "bad"}
        with pytest.raises(InvalidIntegerError):
            convert_flag_value_types(flags, "dd-MM-yyyy")
