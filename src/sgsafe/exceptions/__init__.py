"""
SgSafe exception classes.

This package provides all exception types used throughout SgSafe for
consistent error handling and reporting.
"""

from sgsafe.exceptions.core import (
    CaseCannotBeEditedError,
    CaseError,
    CaseNotFoundError,
    CommandParseError,
    DuplicateFlagError,
    EmptyCommandError,
    ErrorKind,
    ErrorLevel,
    IllegalCharacterError,
    IncorrectFlagError,
    InputLengthExceededError,
    InvalidAddCommandError,
    InvalidByeCommandError,
    InvalidCaseIdError,
    InvalidCloseCommandError,
    InvalidCommandError,
    InvalidDateInputError,
    InvalidDeleteCommandError,
    InvalidEditCommandError,
    InvalidEditFlagError,
    InvalidFindCommandError,
    InvalidFormatStringError,
    InvalidHelpCommandError,
    InvalidIntegerError,
    InvalidListCommandError,
    InvalidOpenCommandError,
    InvalidReadCommandError,
    InvalidSettingCommandError,
    SgSafeError,
    UnknownCategoryError,
    UnknownCommandError,
)

__all__ = [
    "SgSafeError",
    "ErrorKind",
    "ErrorLevel",
    "CommandParseError",
    "EmptyCommandError",
    "IllegalCharacterError",
    "UnknownCommandError",
    "IncorrectFlagError",
    "DuplicateFlagError",
    "InputLengthExceededError",
    "InvalidDateInputError",
    "InvalidIntegerError",
    "InvalidCaseIdError",
    "InvalidFormatStringError",
    "InvalidCommandError",
    "InvalidListCommandError",
    "InvalidAddCommandError",
    "InvalidEditCommandError",
    "InvalidCloseCommandError",
    "InvalidOpenCommandError",
    "InvalidDeleteCommandError",
    "InvalidReadCommandError",
    "InvalidFindCommandError",
    "InvalidSettingCommandError",
    "InvalidHelpCommandError",
    "InvalidByeCommandError",
    "CaseError",
    "CaseNotFoundError",
    "CaseCannotBeEditedError",
    "InvalidEditFlagError",
    "UnknownCategoryError",
]
