"""
Date pattern handling for SgSafe.

Users describe date formats with letter patterns such as ``dd-MM-yyyy`` or
``d MMM yyyy``. This module compiles those patterns into strict regular
expressions for reading dates and renders dates back out with the same
patterns.
"""

import calendar
import re
from datetime import date
from typing import Callable, NamedTuple

DEFAULT_DATE_FORMAT = "dd-MM-yyyy"

SEPARATORS = frozenset("-/., ")

# A run of one repeated letter, or any single other character
PATTERN_TOKEN = re.compile(r"([A-Za-z])\1*|.", re.DOTALL)

# Two-digit years fall in 2000-2099
TWO_DIGIT_YEAR_BASE = 2000

MONTH_ABBREVIATIONS = {
    name.lower(): number for number, name in enumerate(calendar.month_abbr) if name
}
MONTH_NAMES = {
    name.lower(): number for number, name in enumerate(calendar.month_name) if name
}


def _alternatives(names: dict[str, int]) -> str:
    return "|".join(re.escape(name) for name in sorted(names, key=len, reverse=True))


class DateToken(NamedTuple):
    """A recognised pattern letter run."""

    field: str
    regex: str
    read: Callable[[str], int]
    render: Callable[[date], str]


DATE_TOKENS: dict[str, DateToken] = {
    "d": DateToken("day", r"\d{1,2}", int, lambda value: str(value.day)),
    "dd": DateToken("day", r"\d{2}", int, lambda value: f"{value.day:02d}"),
    "M": DateToken("month", r"\d{1,2}", int, lambda value: str(value.month)),
    "MM": DateToken("month", r"\d{2}", int, lambda value: f"{value.month:02d}"),
    "MMM": DateToken(
        "month",
        _alternatives(MONTH_ABBREVIATIONS),
        lambda text: MONTH_ABBREVIATIONS[text.lower()],
        lambda value: calendar.month_abbr[value.month],
    ),
    "MMMM": DateToken(
        "month",
        _alternatives(MONTH_NAMES),
        lambda text: MONTH_NAMES[text.lower()],
        lambda value: calendar.month_name[value.month],
    ),
    "yy": DateToken(
        "year",
        r"\d{2}",
        lambda text: TWO_DIGIT_YEAR_BASE + int(text),
        lambda value: f"{value.year % 100:02d}",
    ),
    "yyyy": DateToken("year", r"\d{4}", int, lambda value: f"{value.year:04d}"),
    "uuuu": DateToken("year", r"\d{4}", int, lambda value: f"{value.year:04d}"),
}

REQUIRED_FIELDS = ("day", "month", "year")


def _split_pattern(pattern: str) -> list[DateToken | str]:
    """
    Split a date pattern into recognised tokens and literal separators.

    Params:
        pattern: User-facing date pattern such as ``dd-MM-yyyy``

    Returns:
        List of ``DateToken`` entries and separator strings in pattern order

    Raises:
        ValueError: If the pattern is empty, contains unknown letters or
            characters, or does not name each of day, month and year exactly once
    """
    if not pattern or pattern.isspace():
        raise ValueError("Date pattern cannot be empty")

    parts: list[DateToken | str] = []
    seen_fields: list[str] = []
    for match in PATTERN_TOKEN.finditer(pattern):
        text = match.group(0)
        if text in DATE_TOKENS:
            token = DATE_TOKENS[text]
            if token.field in seen_fields:
                raise ValueError(f"Date pattern names the {token.field} more than once")
            seen_fields.append(token.field)
            parts.append(token)
        elif text in SEPARATORS:
            parts.append(text)
        else:
            raise ValueError(f"Unsupported element '{text}' in date pattern '{pattern}'")

    missing = [field for field in REQUIRED_FIELDS if field not in seen_fields]
    if missing:
        raise ValueError(
            f"Date pattern '{pattern}' is missing: {', '.join(missing)}"
        )

    return parts


def compile_date_pattern(pattern: str) -> re.Pattern[str]:
    """
    Compile a user-facing date pattern into a regular expression.

    Each field becomes a named group (``day``, ``month``, ``year``). Two-letter
    numeric tokens require exactly two digits; single letters accept one or two.

    Params:
        pattern: Date pattern such as ``dd/MM/yyyy``

    Returns:
        Compiled expression to be used with ``fullmatch``

    Raises:
        ValueError: If the pattern is not a valid date pattern
    """
    regex = "".join(
        f"(?P<{part.field}>{part.regex})" if isinstance(part, DateToken) else re.escape(part)
        for part in _split_pattern(pattern)
    )
    return re.compile(regex, re.IGNORECASE | re.ASCII)


def is_valid_date_format(pattern: str | None) -> bool:
    """Check whether a pattern can be used as an input or output date format."""
    if pattern is None:
        return False
    try:
        _split_pattern(pattern)
    except ValueError:
        return False
    return True


def parse_date(text: str, pattern: str) -> date:
    """
    Parse a date string using a user-facing date pattern.

    Params:
        text: The date as typed by the user
        pattern: Date pattern the text must follow exactly

    Returns:
        The parsed date

    Raises:
        ValueError: If the pattern is invalid, the text does not match it, or
            the matched fields do not form a calendar date
    """
    match = compile_date_pattern(pattern).fullmatch(text)
    if match is None:
        raise ValueError(f"'{text}' does not match date pattern '{pattern}'")

    tokens = {
        part.field: part for part in _split_pattern(pattern) if isinstance(part, DateToken)
    }
    day, month, year = (
        tokens[field].read(match.group(field)) for field in REQUIRED_FIELDS
    )
    return date(year, month, day)


def format_date(value: date, pattern: str) -> str:
    """Render a date with a user-facing date pattern."""
    return "".join(
        part.render(value) if isinstance(part, DateToken) else part
        for part in _split_pattern(pattern)
    )
