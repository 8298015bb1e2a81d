"""
SgSafe parsing components.

This package provides the flag tokenizer, input validators, type coercion and
the command parser that composes them.
"""

from sgsafe.parsing.coercion import (
    FLAG_TYPES,
    FlagType,
    convert_flag_value_types,
)
from sgsafe.parsing.parser import CommandParser, parse_command
from sgsafe.parsing.result import ParseFailure, ParseResult, ParseSuccess
from sgsafe.parsing.tokenizer import MAX_INPUT_LENGTH, extract_flag_values
from sgsafe.parsing.validation import (
    has_all_required_flags,
    has_only_valid_flags,
    is_valid_case_id,
)

__all__ = [
    "CommandParser",
    "parse_command",
    "ParseResult",
    "ParseSuccess",
    "ParseFailure",
    "extract_flag_values",
    "MAX_INPUT_LENGTH",
    "has_all_required_flags",
    "has_only_valid_flags",
    "is_valid_case_id",
    "FLAG_TYPES",
    "FlagType",
    "convert_flag_value_types",
]
