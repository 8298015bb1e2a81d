"""
Input validation for SgSafe command parsing.

This module contains the predicates the parser composes: flag-set checks
against a command's required and allowed flags and case ID format checks.
"""

import re
from collections.abc import Iterable, Mapping

CASE_ID_PATTERN = re.compile(r"[0-9A-Fa-f]{6}")


def is_input_empty(text: str | None) -> bool:
    """Check whether the text is missing or whitespace only."""
    return text is None or not text.strip()


def has_all_required_flags(flags: Mapping[str, str], required: Iterable[str]) -> bool:
    """
    Check that every required flag is present.

    Params:
        flags: Parsed flag mapping
        required: Flag names that must be present

    Returns:
        True if every required name is a key of ``flags``
    """
    return all(name in flags for name in required)


def has_only_valid_flags(flags: Mapping[str, str], allowed: Iterable[str]) -> bool:
    """
    Check that no unexpected flag is present.

    Params:
        flags: Parsed flag mapping
        allowed: Flag names the command accepts

    Returns:
        True if every key of ``flags`` is an allowed name
    """
    allowed_names = set(allowed)
    return all(name in allowed_names for name in flags)


def is_valid_case_id(token: str | None) -> bool:
    """Check that a token is a case ID: exactly 6 hexadecimal characters."""
    if not token:
        return False
    return CASE_ID_PATTERN.fullmatch(token) is not None
