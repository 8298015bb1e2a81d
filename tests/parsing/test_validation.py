"""
Tests for flag-set and case ID validation.
"""

import pytest

from sgsafe.parsing.validation import (
    has_all_required_flags,
    has_only_valid_flags,
    is_input_empty,
    is_valid_case_id,
)


class TestFlagValidation:
    """Test required and allowed flag checks."""

    def test_all_required_present(self):
        flags = {"category": "theft", "title": "T", "date": "1-1-2025", "info": "I"}
        assert has_all_required_flags(flags, ["category", "title", "date", "info"])

    def test_required_missing(self):
        assert not has_all_required_flags({"title": "T"}, ["title", "info"])

    def test_no_required_flags(self):
        """An empty requirement is always satisfied."""
        assert has_all_required_flags({}, [])

    def test_only_valid_flags(self):
        assert has_only_valid_flags({"status": "open"}, ["status", "mode"])

    def test_unexpected_flag(self):
        assert not has_only_valid_flags({"status": "open", "sort": "x"}, ["status", "mode"])

    def test_empty_map_is_valid(self):
        assert has_only_valid_flags({}, ["status"])


class TestCaseIdValidation:
    """Test case ID format checks."""

    @pytest.mark.parametrize("case_id", ["00AB12", "000001", "FFFFFF", "abcdef", "0a1B2c"])
    def test_valid_case_ids(self, case_id):
        """Six hexadecimal characters in either case are accepted."""
        assert is_valid_case_id(case_id)

    @pytest.mark.parametrize(
        "case_id",
        ["00AB1", "00AB123", "00ABG1", "", None, "00 AB1", "000001 ", "-00001"],
    )
    def test_invalid_case_ids(self, case_id):
        """Wrong length, non-hex characters and empty values are rejected."""
        assert not is_valid_case_id(case_id)


class TestEmptyInput:
    """Test the empty input check."""

    @pytest.mark.parametrize("text", ["", "   ", "\t\n", None])
    def test_empty(self, text):
        assert is_input_empty(text)

    def test_not_empty(self):
        assert not is_input_empty(" x ")
