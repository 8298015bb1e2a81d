"""
Parser for SgSafe case-management commands.

This module turns one line of user input into a typed command object. The
first word of the line selects a per-command parse routine through the
``COMMAND_PARSERS`` table; each routine composes the tokenizer, the flag and
case ID validators and the type coercer.
"""

import logging

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
from sgsafe.dates import is_valid_date_format
from sgsafe.exceptions import (
    CommandParseError,
    EmptyCommandError,
    IllegalCharacterError,
    IncorrectFlagError,
    InvalidAddCommandError,
    InvalidByeCommandError,
    InvalidCaseIdError,
    InvalidCloseCommandError,
    InvalidDeleteCommandError,
    InvalidEditCommandError,
    InvalidFindCommandError,
    InvalidFormatStringError,
    InvalidHelpCommandError,
    InvalidListCommandError,
    InvalidOpenCommandError,
    InvalidReadCommandError,
    InvalidSettingCommandError,
    UnknownCommandError,
)
from sgsafe.parsing.coercion import coerce_date, convert_flag_value_types
from sgsafe.parsing.result import ParseFailure, ParseResult, ParseSuccess
from sgsafe.parsing.tokenizer import FLAG_PREFIX, extract_flag_values
from sgsafe.parsing.validation import (
    has_all_required_flags,
    has_only_valid_flags,
    is_input_empty,
    is_valid_case_id,
)
from sgsafe.settings import Settings, SettingType

logger = logging.getLogger(__name__)

# Reserved for piping commands together
RESERVED_CHARACTER = "|"


class CommandParser:
    """Parser for SgSafe command lines."""

    # Keyword -> parse routine; adding a command is one row here plus its routine
    COMMAND_PARSERS = {
        "list": "_parse_list_command",
        "add": "_parse_add_command",
        "edit": "_parse_edit_command",
        "close": "_parse_close_command",
        "open": "_parse_open_command",
        "delete": "_parse_delete_command",
        "read": "_parse_read_command",
        "find": "_parse_find_command",
        "setting": "_parse_setting_command",
        "help": "_parse_help_command",
        "bye": "_parse_bye_command",
    }

    LIST_VALID_FLAGS = ("status", "mode")
    LIST_STATUSES = {
        "open": CaseListingMode.OPEN_ONLY,
        "closed": CaseListingMode.CLOSED_ONLY,
        "all": CaseListingMode.ALL,
    }
    LIST_MODES = {"verbose": True, "summary": False}

    ADD_REQUIRED_FLAGS = ("category", "title", "date", "info")
    ADD_VALID_FLAGS = ADD_REQUIRED_FLAGS + ("victim", "officer")

    FIND_FLAGS = ("keyword",)

    SETTING_FLAGS = ("type", "value")

    def __init__(self, settings: Settings | None = None):
        """
        Create a parser.

        Params:
            settings: Settings consulted for the input date format; a default
                ``Settings`` is used when omitted
        """
        self.settings = settings if settings is not None else Settings()

    def parse(self, user_input: str) -> Command:
        """
        Parse a line of user input into a command object.

        Params:
            user_input: The full line entered by the user

        Returns:
            The typed command for the line

        Raises:
            CommandParseError: If the line cannot be turned into a valid command;
                the concrete subclass identifies the failure
        """
        try:
            cleaned = self._clean_user_input(user_input)
            keyword, remainder = self._split_keyword(cleaned)
            if RESERVED_CHARACTER in remainder:
                raise IllegalCharacterError()

            parser_name = self.COMMAND_PARSERS.get(keyword)
            if parser_name is None:
                raise UnknownCommandError(user_input, keyword)

            logger.debug("Dispatching '%s' command", keyword)
            return getattr(self, parser_name)(remainder)
        except CommandParseError as e:
            if e.raw_input is None:
                e.raw_input = user_input
            raise

    def try_parse(self, user_input: str) -> ParseResult:
        """
        Parse a line of user input without raising on invalid input.

        Params:
            user_input: The full line entered by the user

        Returns:
            ``ParseSuccess`` with the command, or ``ParseFailure`` with the error
        """
        try:
            return ParseSuccess(self.parse(user_input))
        except CommandParseError as e:
            return ParseFailure(e)

    def _clean_user_input(self, user_input: str) -> str:
        """Strip the input, rejecting lines that are empty afterwards."""
        cleaned = user_input.strip()
        if not cleaned:
            raise EmptyCommandError()
        return cleaned

    def _split_keyword(self, cleaned: str) -> tuple[str, str]:
        """Split a cleaned line into its lower-cased keyword and the remainder."""
        parts = cleaned.split(maxsplit=1)
        keyword = parts[0].lower()
        remainder = parts[1].strip() if len(parts) > 1 else ""
        return keyword, remainder

    def _parse_list_command(self, remainder: str) -> ListCommand:
        """
        Parse ``list`` with its optional ``--status`` and ``--mode`` flags.

        Without flags the default listing mode and summary output are used.
        """
        if not remainder:
            return ListCommand(CaseListingMode.DEFAULT, False)

        flag_values = extract_flag_values(remainder)
        if not has_only_valid_flags(flag_values, self.LIST_VALID_FLAGS):
            raise InvalidListCommandError()

        listing_mode = self._parse_list_status(flag_values.get("status"))
        is_verbose = self._parse_list_mode(flag_values.get("mode"))
        return ListCommand(listing_mode, is_verbose)

    def _parse_list_status(self, status: str | None) -> CaseListingMode:
        if not status:
            return CaseListingMode.DEFAULT
        try:
            return self.LIST_STATUSES[status.lower()]
        except KeyError:
            raise InvalidListCommandError() from None

    def _parse_list_mode(self, mode: str | None) -> bool:
        if not mode:
            return False
        try:
            return self.LIST_MODES[mode.lower()]
        except KeyError:
            raise InvalidListCommandError() from None

    def _parse_add_command(self, remainder: str) -> AddCommand:
        """
        Parse ``add``.

        ``--category``, ``--title``, ``--date`` and ``--info`` are required;
        ``--victim`` and ``--officer`` are optional. The date is parsed with the
        configured input date format.
        """
        if is_input_empty(remainder):
            raise InvalidAddCommandError()

        flag_values = extract_flag_values(remainder)
        if not has_all_required_flags(
            flag_values, self.ADD_REQUIRED_FLAGS
        ) or not has_only_valid_flags(flag_values, self.ADD_VALID_FLAGS):
            raise InvalidAddCommandError()

        date = coerce_date(flag_values["date"], self.settings.input_date_format)

        return AddCommand(
            category=flag_values["category"],
            title=flag_values["title"],
            date=date,
            info=flag_values["info"],
            victim=flag_values.get("victim"),
            officer=flag_values.get("officer"),
        )

    def _parse_edit_command(self, remainder: str) -> EditCommand | EditPromptCommand:
        """
        Parse ``edit``.

        Supports two forms:
        1. ``edit <case id>`` shows the fields that can be edited
        2. ``edit <case id> --flag value ...`` edits the case directly
        """
        if not remainder:
            raise InvalidEditCommandError()

        parts = remainder.split(maxsplit=1)
        case_id = parts[0]
        if not is_valid_case_id(case_id):
            raise InvalidCaseIdError()

        if len(parts) == 1:
            return EditPromptCommand(case_id.upper())

        replacements = parts[1].strip()
        if not replacements.startswith(FLAG_PREFIX):
            logger.warning("Incorrect flag usage detected in edit command")
            raise IncorrectFlagError()

        flag_values = extract_flag_values(replacements)
        typed_values = convert_flag_value_types(
            flag_values, self.settings.input_date_format
        )
        return EditCommand(case_id.upper(), typed_values)

    def _parse_close_command(self, remainder: str) -> CloseCommand:
        if is_input_empty(remainder):
            raise InvalidCloseCommandError()
        if not is_valid_case_id(remainder):
            raise InvalidCaseIdError()
        return CloseCommand(remainder.upper())

    def _parse_open_command(self, remainder: str) -> OpenCommand:
        if is_input_empty(remainder):
            raise InvalidOpenCommandError()
        if not is_valid_case_id(remainder):
            raise InvalidCaseIdError()
        return OpenCommand(remainder.upper())

    def _parse_delete_command(self, remainder: str) -> DeleteCommand:
        if not is_valid_case_id(remainder):
            raise InvalidDeleteCommandError()
        return DeleteCommand(remainder.upper())

    def _parse_read_command(self, remainder: str) -> ReadCommand:
        if not is_valid_case_id(remainder):
            raise InvalidReadCommandError()
        return ReadCommand(remainder.upper())

    def _parse_find_command(self, remainder: str) -> FindCommand:
        """Parse ``find --keyword <term>``; the keyword flag is the only one accepted."""
        if is_input_empty(remainder):
            raise InvalidFindCommandError()

        flag_values = extract_flag_values(remainder)
        if not has_all_required_flags(
            flag_values, self.FIND_FLAGS
        ) or not has_only_valid_flags(flag_values, self.FIND_FLAGS):
            raise InvalidFindCommandError()

        return FindCommand(flag_values["keyword"])

    def _parse_setting_command(self, remainder: str) -> SettingCommand:
        """
        Parse ``setting --type <setting> --value <date pattern>``.

        Flag problems are reported before an unknown setting type, and an
        unknown type before an invalid pattern.
        """
        if is_input_empty(remainder):
            raise InvalidSettingCommandError(unknown_type=False)

        flag_values = extract_flag_values(remainder)
        if not has_all_required_flags(
            flag_values, self.SETTING_FLAGS
        ) or not has_only_valid_flags(flag_values, self.SETTING_FLAGS):
            raise InvalidSettingCommandError(unknown_type=False)

        try:
            setting_type = SettingType.from_name(flag_values["type"])
        except KeyError:
            raise InvalidSettingCommandError(unknown_type=True) from None

        value = flag_values["value"]
        if not is_valid_date_format(value):
            raise InvalidFormatStringError()

        return SettingCommand(setting_type, value)

    def _parse_help_command(self, remainder: str) -> HelpCommand:
        if remainder:
            raise InvalidHelpCommandError()
        return HelpCommand()

    def _parse_bye_command(self, remainder: str) -> ByeCommand:
        if remainder:
            raise InvalidByeCommandError()
        return ByeCommand()


def parse_command(user_input: str, settings: Settings | None = None) -> Command:
    """
    Convenience function to parse a command line.

    Params:
        user_input: The full line entered by the user
        settings: Optional settings providing the input date format

    Returns:
        The typed command for the line

    Raises:
        CommandParseError: If the line cannot be turned into a valid command
    """
    parser = CommandParser(settings)
    return parser.parse(user_input)
