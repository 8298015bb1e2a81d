"""
SgSafe command objects.

This package contains the typed commands produced by the parser. Their
execution lives in ``sgsafe.commands.executor``.
"""

from sgsafe.commands.types import (
    AddCommand,
    ByeCommand,
    CaseListingMode,
    CloseCommand,
    Command,
    DeleteCommand,
    EditCommand,
    EditPromptCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
    OpenCommand,
    ReadCommand,
    SettingCommand,
)

__all__ = [
    "Command",
    "CaseListingMode",
    "ListCommand",
    "AddCommand",
    "EditCommand",
    "EditPromptCommand",
    "CloseCommand",
    "OpenCommand",
    "DeleteCommand",
    "ReadCommand",
    "FindCommand",
    "SettingCommand",
    "HelpCommand",
    "ByeCommand",
]
