"""
Exception classes for SgSafe command parsing and execution.

This module defines specific exception types for every error condition that can
occur while turning a line of user input into a command and while applying that
command to the case registry. Parse errors carry a short message, a tip and an
example usage string so the read-loop can render them without knowing which
command failed.
"""

from enum import Enum


class ErrorLevel(Enum):
    """Error message detail level for end users vs developers."""

    USER = "user"  # Message, tip and example only
    DEVELOPER = "developer"  # Adds the error kind and the offending input


class ErrorKind(Enum):
    """Tag identifying which parse failure occurred."""

    EMPTY_COMMAND = "empty_command"
    ILLEGAL_CHARACTER = "illegal_character"
    UNKNOWN_COMMAND = "unknown_command"
    INCORRECT_FLAG = "incorrect_flag"
    DUPLICATE_FLAG = "duplicate_flag"
    INPUT_LENGTH_EXCEEDED = "input_length_exceeded"
    INVALID_DATE_INPUT = "invalid_date_input"
    INVALID_INTEGER = "invalid_integer"
    INVALID_CASE_ID = "invalid_case_id"
    INVALID_FORMAT_STRING = "invalid_format_string"
    INVALID_LIST_COMMAND = "invalid_list_command"
    INVALID_ADD_COMMAND = "invalid_add_command"
    INVALID_EDIT_COMMAND = "invalid_edit_command"
    INVALID_CLOSE_COMMAND = "invalid_close_command"
    INVALID_OPEN_COMMAND = "invalid_open_command"
    INVALID_DELETE_COMMAND = "invalid_delete_command"
    INVALID_READ_COMMAND = "invalid_read_command"
    INVALID_FIND_COMMAND = "invalid_find_command"
    INVALID_SETTING_COMMAND = "invalid_setting_command"
    INVALID_HELP_COMMAND = "invalid_help_command"
    INVALID_BYE_COMMAND = "invalid_bye_command"


CASE_ID_TIP = "Case ID should be exactly 6 characters of 0-9 or A-F."


class SgSafeError(Exception):
    """Base exception for all SgSafe errors."""

    pass


class CommandParseError(SgSafeError):
    """
    Base exception for every failure to turn user input into a command.

    Subclasses set ``kind`` and the default ``MESSAGE``, ``TIP`` and ``EXAMPLE``
    texts. The texts are data for the read-loop; the parser never prints them.
    """

    kind: ErrorKind
    MESSAGE = "The command could not be understood."
    TIP = ""
    EXAMPLE = ""

    def __init__(
        self,
        message: str | None = None,
        tip: str | None = None,
        example: str | None = None,
        raw_input: str | None = None,
    ):
        """
        Initialize the exception.

        Params:
            message: Main error text, defaults to the class ``MESSAGE``
            tip: Hint on how to fix the input, defaults to the class ``TIP``
            example: Example of a valid command, defaults to the class ``EXAMPLE``
            raw_input: The input line that triggered the error, if known
        """
        self.message = message if message is not None else self.MESSAGE
        self.tip = tip if tip is not None else self.TIP
        self.example = example if example is not None else self.EXAMPLE
        self.raw_input = raw_input
        super().__init__(self.message)

    def format_message(self, error_level: ErrorLevel = ErrorLevel.USER) -> str:
        """
        Format the error for display.

        Params:
            error_level: Whether to show USER or DEVELOPER level details

        Returns:
            Multi-line string with the message, tip and example
        """
        lines = [self.message]
        if self.tip:
            lines.append(self.tip)
        if self.example:
            lines.append(self.example)

        if error_level == ErrorLevel.DEVELOPER:
            lines.append(f"  kind: {self.kind.value}")
            if self.raw_input is not None:
                lines.append(f"  input: {self.raw_input}")

        return "\n".join(lines)


class EmptyCommandError(CommandParseError):
    """Raised when the input line is empty or whitespace only."""

    kind = ErrorKind.EMPTY_COMMAND
    MESSAGE = "No command was entered."
    TIP = "Type a command keyword such as 'list', 'add' or 'help'."
    EXAMPLE = 'For example, try: "help"'


class IllegalCharacterError(CommandParseError):
    """Raised when the command contains the reserved '|' character."""

    kind = ErrorKind.ILLEGAL_CHARACTER
    MESSAGE = "The character '|' is not allowed in commands."
    TIP = "Remove every '|' from your input and try again."


class UnknownCommandError(CommandParseError):
    """Raised when the command keyword is not recognised."""

    kind = ErrorKind.UNKNOWN_COMMAND
    TIP = "Type 'help' to see the list of available commands."

    def __init__(self, raw_input: str, keyword: str):
        """
        Initialize the exception.

        Params:
            raw_input: The full line the user entered
            keyword: The unrecognised command keyword
        """
        self.keyword = keyword
        super().__init__(
            message=f"Unknown command '{keyword}'.",
            raw_input=raw_input,
        )


class IncorrectFlagError(CommandParseError):
    """Raised when a flag is malformed or has no value."""

    kind = ErrorKind.INCORRECT_FLAG
    MESSAGE = "A flag is malformed or is missing its value."
    TIP = "Every flag must start with '--' and be followed by a value."
    EXAMPLE = 'For example, try: "find --keyword theft"'


class DuplicateFlagError(CommandParseError):
    """Raised when the same flag appears more than once."""

    kind = ErrorKind.DUPLICATE_FLAG
    MESSAGE = "The same flag was entered more than once."
    TIP = "Each flag may only appear once per command."


class InputLengthExceededError(CommandParseError):
    """Raised when a flag value is longer than the allowed maximum."""

    kind = ErrorKind.INPUT_LENGTH_EXCEEDED
    MESSAGE = "A flag value exceeds the maximum length."
    TIP = "Each flag value may be at most 5000 characters long."


class InvalidDateInputError(CommandParseError):
    """Raised when a date value does not match the configured input pattern."""

    kind = ErrorKind.INVALID_DATE_INPUT
    MESSAGE = "The date entered is invalid."
    TIP = "Dates must follow the configured input date format."

    def __init__(self, date_format: str | None = None):
        """
        Initialize the exception.

        Params:
            date_format: The input date pattern in effect, if known
        """
        self.date_format = date_format
        tip = None
        if date_format:
            tip = f"Dates must follow the input date format '{date_format}'."
        super().__init__(tip=tip)


class InvalidIntegerError(CommandParseError):
    """Raised when a numeric flag value is not a non-negative integer."""

    kind = ErrorKind.INVALID_INTEGER
    TIP = "The value must be a whole number that is 0 or greater."

    def __init__(self, flag: str):
        """
        Initialize the exception.

        Params:
            flag: Name of the flag whose value could not be converted
        """
        self.flag = flag
        super().__init__(
            message=f"The value for '--{flag}' is not a valid number.",
            example=f'For example, try: "--{flag} 3"',
        )


class InvalidCaseIdError(CommandParseError):
    """Raised when a case ID is not 6 hexadecimal characters."""

    kind = ErrorKind.INVALID_CASE_ID
    MESSAGE = "The case ID format is incorrect."
    TIP = CASE_ID_TIP
    EXAMPLE = 'For example, try: "read 00A1F2"'


class InvalidFormatStringError(CommandParseError):
    """Raised when a date pattern given to the setting command is invalid."""

    kind = ErrorKind.INVALID_FORMAT_STRING
    MESSAGE = "The date format entered is invalid."
    TIP = (
        "Use dd or d for the day, MM, M, MMM or MMMM for the month and yyyy or yy "
        "for the year, separated by '-', '/', '.', ',' or spaces."
    )
    EXAMPLE = 'For example, try: "setting --type inputdateformat --value dd/MM/yyyy"'


class InvalidCommandError(CommandParseError):
    """Base exception for command-specific argument errors."""

    pass


class InvalidListCommandError(InvalidCommandError):
    """Raised when the list command has invalid flags or values."""

    kind = ErrorKind.INVALID_LIST_COMMAND
    MESSAGE = "The list command has invalid flags or values."
    TIP = "--status must be open, closed or all; --mode must be verbose or summary."
    EXAMPLE = 'For example, try: "list --status open --mode verbose"'


class InvalidAddCommandError(InvalidCommandError):
    """Raised when the add command is missing required flags or has unknown ones."""

    kind = ErrorKind.INVALID_ADD_COMMAND
    MESSAGE = "The add command is missing required flags or has unknown flags."
    TIP = (
        "--category, --title, --date and --info are required; "
        "--victim and --officer are optional."
    )
    EXAMPLE = (
        'For example, try: "add --category theft --title Stolen bike '
        '--date 10-10-2025 --info Taken from the void deck"'
    )


class InvalidEditCommandError(InvalidCommandError):
    """Raised when the edit command has no case ID."""

    kind = ErrorKind.INVALID_EDIT_COMMAND
    MESSAGE = "The case ID is missing or the format is incorrect."
    TIP = CASE_ID_TIP
    EXAMPLE = 'For example, try: "edit 000000" or "edit 000000 --title new title"'


class InvalidCloseCommandError(InvalidCommandError):
    """Raised when the close command has no case ID."""

    kind = ErrorKind.INVALID_CLOSE_COMMAND
    MESSAGE = "The close command requires a case ID."
    TIP = CASE_ID_TIP
    EXAMPLE = 'For example, try: "close 000001"'


class InvalidOpenCommandError(InvalidCommandError):
    """Raised when the open command has no case ID."""

    kind = ErrorKind.INVALID_OPEN_COMMAND
    MESSAGE = "The open command requires a case ID."
    TIP = CASE_ID_TIP
    EXAMPLE = 'For example, try: "open 000001"'


class InvalidDeleteCommandError(InvalidCommandError):
    """Raised when the delete command has a missing or malformed case ID."""

    kind = ErrorKind.INVALID_DELETE_COMMAND
    MESSAGE = "The case ID is missing or the format is incorrect."
    TIP = CASE_ID_TIP
    EXAMPLE = 'For example, try: "delete 000001"'


class InvalidReadCommandError(InvalidCommandError):
    """Raised when the read command has a missing or malformed case ID."""

    kind = ErrorKind.INVALID_READ_COMMAND
    MESSAGE = "The case ID is missing or the format is incorrect."
    TIP = CASE_ID_TIP
    EXAMPLE = 'For example, try: "read 000001"'


class InvalidFindCommandError(InvalidCommandError):
    """Raised when the find command has no keyword or unknown flags."""

    kind = ErrorKind.INVALID_FIND_COMMAND
    MESSAGE = "The find command requires exactly one --keyword flag."
    TIP = "Only the --keyword flag is accepted."
    EXAMPLE = 'For example, try: "find --keyword theft"'


class InvalidSettingCommandError(InvalidCommandError):
    """Raised when the setting command has an unknown type or wrong flags."""

    kind = ErrorKind.INVALID_SETTING_COMMAND
    EXAMPLE = 'For example, try: "setting --type inputdateformat --value dd/MM/yyyy"'

    def __init__(self, unknown_type: bool):
        """
        Initialize the exception.

        Params:
            unknown_type: True if --type named no known setting, False if the
                flags themselves were missing or unexpected
        """
        self.unknown_type = unknown_type
        if unknown_type:
            message = "The setting type is not recognised."
            tip = "Valid setting types are inputdateformat and outputdateformat."
        else:
            message = "The setting command requires the --type and --value flags."
            tip = "No other flags are accepted."
        super().__init__(message=message, tip=tip)


class InvalidHelpCommandError(InvalidCommandError):
    """Raised when the help command is given arguments."""

    kind = ErrorKind.INVALID_HELP_COMMAND
    MESSAGE = "The help command does not take any arguments."
    EXAMPLE = 'For example, try: "help"'


class InvalidByeCommandError(InvalidCommandError):
    """Raised when the bye command is given arguments."""

    kind = ErrorKind.INVALID_BYE_COMMAND
    MESSAGE = "The bye command does not take any arguments."
    EXAMPLE = 'For example, try: "bye"'


class CaseError(SgSafeError):
    """Base exception for failures while applying a command to the case registry."""

    pass


class CaseNotFoundError(CaseError):
    """Raised when no live case has the requested ID."""

    def __init__(self, case_id: str):
        """
        Initialize the exception.

        Params:
            case_id: The ID that was looked up
        """
        self.case_id = case_id
        super().__init__(f"No case found with ID '{case_id}'.")


class CaseCannotBeEditedError(CaseError):
    """Raised when attempting to edit a closed case."""

    def __init__(self, case_id: str):
        """
        Initialize the exception.

        Params:
            case_id: The ID of the closed case
        """
        self.case_id = case_id
        super().__init__(
            f"Case '{case_id}' is closed and cannot be edited. Open it first."
        )


class InvalidEditFlagError(CaseError):
    """Raised when an edit names fields the case's category does not have."""

    def __init__(self, case_id: str, invalid_flags: list[str], valid_flags: list[str]):
        """
        Initialize the exception.

        Params:
            case_id: The ID of the case being edited
            invalid_flags: Flags not editable for this case
            valid_flags: Flags that are editable for this case
        """
        self.case_id = case_id
        self.invalid_flags = invalid_flags
        self.valid_flags = valid_flags
        invalid = ", ".join(f"--{flag}" for flag in invalid_flags)
        valid = ", ".join(f"--{flag}" for flag in valid_flags)
        super().__init__(
            f"Case '{case_id}' has no field for {invalid}. Editable fields: {valid}"
        )


class UnknownCategoryError(CaseError):
    """Raised when a case is added with a category that does not exist."""

    def __init__(self, category: str, known_categories: list[str]):
        """
        Initialize the exception.

        Params:
            category: The category that was requested
            known_categories: All category names that are accepted
        """
        self.category = category
        self.known_categories = known_categories
        super().__init__(
            f"Unknown case category '{category}'. "
            f"Known categories: {', '.join(known_categories)}"
        )
