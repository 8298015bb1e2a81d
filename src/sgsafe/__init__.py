"""
SgSafe - A command interpreter for police case management

SgSafe turns lines such as ``add --category theft --title ... --date 10-10-2025``
into typed, validated commands and applies them to an in-memory case registry.
"""

from importlib.metadata import version

from sgsafe.parsing.parser import CommandParser, parse_command
from sgsafe.parsing.result import ParseFailure, ParseSuccess
from sgsafe.settings import Settings

__version__ = version("sgsafe")

__all__ = [
    "__version__",
    "CommandParser",
    "parse_command",
    "ParseSuccess",
    "ParseFailure",
    "Settings",
]
