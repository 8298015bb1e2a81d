"""
Type coercion for SgSafe flag values.

Flag values arrive as strings. ``FLAG_TYPES`` fixes the target type for each
flag name; flags not listed stay strings.
"""

import logging
import re
from datetime import date
from enum import Enum

from sgsafe.core.types import FlagMap, FlagValue, TypedFlagMap
from sgsafe.dates import parse_date
from sgsafe.exceptions import InvalidDateInputError, InvalidIntegerError

logger = logging.getLogger(__name__)


class FlagType(Enum):
    """Target type of a flag value."""

    STRING = "string"
    DATE = "date"
    NON_NEGATIVE_INT = "non_negative_int"


FLAG_TYPES: dict[str, FlagType] = {
    "date": FlagType.DATE,
    "exceeded-speed": FlagType.NON_NEGATIVE_INT,
    "number-of-victims": FlagType.NON_NEGATIVE_INT,
    "speed-limit": FlagType.NON_NEGATIVE_INT,
    "monetary-damage": FlagType.NON_NEGATIVE_INT,
    "financial-value": FlagType.NON_NEGATIVE_INT,
    "number-of-casualties": FlagType.NON_NEGATIVE_INT,
}

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def coerce_date(value: str, date_format: str) -> date:
    """
    Parse a date flag value with the configured input pattern.

    Params:
        value: Raw flag value
        date_format: Input date pattern such as ``dd-MM-yyyy``

    Returns:
        The parsed date

    Raises:
        InvalidDateInputError: If the value does not match the pattern
    """
    try:
        return parse_date(value, date_format)
    except ValueError as e:
        logger.warning("Failed to parse date value '%s' with format '%s'", value, date_format)
        raise InvalidDateInputError(date_format) from e


def coerce_non_negative_int(flag: str, value: str) -> int:
    """
    Parse a numeric flag value.

    Params:
        flag: Flag name, reported in the error
        value: Raw flag value

    Returns:
        The parsed integer

    Raises:
        InvalidIntegerError: If the value is not an integer or is negative
    """
    if not INTEGER_PATTERN.fullmatch(value):
        logger.warning("Non-numeric value '%s' for flag '%s'", value, flag)
        raise InvalidIntegerError(flag)

    try:
        number = int(value)
    except ValueError:
        # Digit strings longer than the interpreter's conversion limit
        logger.warning("Integer value for flag '%s' is too long to convert", flag)
        raise InvalidIntegerError(flag) from None

    if number < 0:
        logger.warning("Negative value %d for flag '%s'", number, flag)
        raise InvalidIntegerError(flag)
    return number


def convert_flag_value(flag: str, value: str, date_format: str) -> FlagValue:
    """Convert a single flag value to the type ``FLAG_TYPES`` assigns it."""
    flag_type = FLAG_TYPES.get(flag, FlagType.STRING)
    if flag_type is FlagType.DATE:
        return coerce_date(value, date_format)
    if flag_type is FlagType.NON_NEGATIVE_INT:
        return coerce_non_negative_int(flag, value)
    return value


def convert_flag_value_types(flags: FlagMap, date_format: str) -> TypedFlagMap:
    """
    Convert raw flag values to their typed form.

    Processing stops at the first value that cannot be converted.

    Params:
        flags: Mapping of flag name to raw string value
        date_format: Input date pattern used for ``date`` flags

    Returns:
        Mapping of flag name to string, date or non-negative integer

    Raises:
        InvalidDateInputError: If a date value does not match ``date_format``
        InvalidIntegerError: If a numeric value is non-numeric or negative
    """
    logger.debug("Starting flag value type conversion")
    typed_values = {
        flag: convert_flag_value(flag, value, date_format)
        for flag, value in flags.items()
    }
    logger.debug("Finished flag value type conversion")
    return typed_values
