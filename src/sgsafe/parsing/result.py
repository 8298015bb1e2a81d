"""
Tagged parse outcomes.

``CommandParser.try_parse`` returns one of these instead of raising, so callers
can branch on the outcome with ``match``.
"""

from attrs import frozen

from sgsafe.commands.types import Command
from sgsafe.exceptions import CommandParseError, ErrorKind


@frozen
class ParseSuccess:
    command: Command


@frozen
class ParseFailure:
    error: CommandParseError

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind


ParseResult = ParseSuccess | ParseFailure
