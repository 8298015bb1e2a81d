"""
Flag tokenizer for SgSafe commands.

Splits the part of a command after its keyword into ``--flag value`` pairs.
A literal ``--`` inside a value is written as ``\\--``.
"""

import logging
import re

from sgsafe.core.types import FlagMap
from sgsafe.exceptions import (
    DuplicateFlagError,
    IncorrectFlagError,
    InputLengthExceededError,
)

logger = logging.getLogger(__name__)

FLAG_PREFIX = "--"

ESCAPED_FLAG = "\\--"

# NUL cannot be typed at the prompt, so the placeholder never meets user text
ESCAPED_FLAG_PLACEHOLDER = "\x00ESCAPED_DOUBLE_DASH\x00"

# Whitespace directly before a flag; the flag prefix stays with the next segment
FLAG_SEPARATOR_PATTERN = re.compile(r"\s+(?=--)")

MAX_INPUT_LENGTH = 5000


def extract_flag_values(text: str) -> FlagMap:
    """
    Extract flags and their values from the text following a command keyword.

    Params:
        text: Flag-bearing remainder such as ``--title A --info B``

    Returns:
        Mapping of flag name (without ``--``) to its raw value, in input order

    Raises:
        IncorrectFlagError: If a segment lacks the ``--`` prefix, a name or a value
        InputLengthExceededError: If a value is longer than ``MAX_INPUT_LENGTH``
        DuplicateFlagError: If the same flag appears twice
    """
    escaped = text.replace(ESCAPED_FLAG, ESCAPED_FLAG_PLACEHOLDER)
    flag_values: FlagMap = {}

    for part in FLAG_SEPARATOR_PATTERN.split(escaped.strip()):
        if not part.startswith(FLAG_PREFIX):
            logger.warning("Incorrect flag usage detected: missing '--' prefix")
            raise IncorrectFlagError()

        flag_text = part[len(FLAG_PREFIX) :].strip()
        if not flag_text:
            logger.warning("Incorrect flag usage detected: empty flag")
            raise IncorrectFlagError()

        pieces = re.split(r"\s", flag_text, maxsplit=1)
        if len(pieces) < 2:
            logger.warning("Incorrect flag usage detected: flag without value")
            raise IncorrectFlagError()

        flag = pieces[0].strip()
        value = pieces[1].strip().replace(ESCAPED_FLAG_PLACEHOLDER, FLAG_PREFIX)

        if len(value) > MAX_INPUT_LENGTH:
            logger.warning("Value for flag '%s' exceeds character limit", flag)
            raise InputLengthExceededError()

        if flag in flag_values:
            logger.warning("Duplicated flag detected: '%s'", flag)
            raise DuplicateFlagError()

        flag_values[flag] = value

    return flag_values
