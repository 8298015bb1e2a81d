"""
Execution of parsed commands against the case registry.

Commands return structured output rather than printing. The read-loop decides
how to display it.
"""

import logging
from enum import Enum, auto

from attrs import field, frozen

from sgsafe.cases.manager import CaseManager
from sgsafe.cases.models import Case
from sgsafe.commands.types import (
    AddCommand,
    ByeCommand,
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
from sgsafe.core.types import FlagValue
from sgsafe.dates import format_date
from sgsafe.settings import Settings, SettingType

logger = logging.getLogger(__name__)

HELP_TEXT = """\
Available commands:
  list [--status open|closed|all] [--mode verbose|summary]
  add --category <category> --title <title> --date <date> --info <info> [--victim <name>] [--officer <name>]
  edit <case id> [--<field> <value> ...]
  close <case id>
  open <case id>
  delete <case id>
  read <case id>
  find --keyword <keyword>
  setting --type inputdateformat|outputdateformat --value <date format>
  help
  bye
Write \\-- to use a literal -- inside a value."""


class CommandResult(Enum):
    """Result status of a command execution."""

    SUCCESS = auto()
    QUIT = auto()


@frozen
class CommandOutput:
    """Output from a command execution.

    Attributes:
        result: Whether the read-loop should continue.
        message: Human-readable text for display.
        cases: Cases the command selected or changed, in display order.
    """

    result: CommandResult
    message: str
    cases: tuple[Case, ...] = field(default=(), converter=tuple)


class CommandExecutor:
    """Applies typed commands to a ``CaseManager`` and the ``Settings``."""

    HANDLERS = {
        ListCommand: "_execute_list",
        AddCommand: "_execute_add",
        EditCommand: "_execute_edit",
        EditPromptCommand: "_execute_edit_prompt",
        CloseCommand: "_execute_close",
        OpenCommand: "_execute_open",
        DeleteCommand: "_execute_delete",
        ReadCommand: "_execute_read",
        FindCommand: "_execute_find",
        SettingCommand: "_execute_setting",
        HelpCommand: "_execute_help",
        ByeCommand: "_execute_bye",
    }

    def __init__(self, manager: CaseManager, settings: Settings):
        self.manager = manager
        self.settings = settings

    def execute(self, command: Command) -> CommandOutput:
        """
        Execute a parsed command.

        Params:
            command: Command produced by ``CommandParser``

        Returns:
            Structured output describing what happened

        Raises:
            CaseError: If the command refers to a missing case or an edit is not
                allowed
        """
        handler_name = self.HANDLERS[type(command)]
        logger.debug("Executing %s", type(command).__name__)
        return getattr(self, handler_name)(command)

    def _format_value(self, value: FlagValue) -> str:
        if isinstance(value, str):
            return value
        if isinstance(value, int):
            return str(value)
        return format_date(value, self.settings.output_date_format)

    def _summarize(self, case: Case) -> str:
        status = "Open" if case.is_open else "Closed"
        return (
            f"[{status}] #{case.case_id} "
            f"{self._format_value(case.date)} "
            f"{case.category_label}: {case.title}"
        )

    def _describe(self, case: Case) -> str:
        lines = [self._summarize(case)]
        lines.extend(
            f"  {label}: {self._format_value(value)}"
            for label, value in case.filled_fields()
        )
        return "\n".join(lines)

    def _success(self, message: str, cases: list[Case] | None = None) -> CommandOutput:
        return CommandOutput(CommandResult.SUCCESS, message, cases or ())

    def _execute_list(self, command: ListCommand) -> CommandOutput:
        cases = self.manager.list_cases(command.mode)
        if not cases:
            return self._success("No cases found.")
        render = self._describe if command.verbose else self._summarize
        return self._success("\n".join(render(case) for case in cases), cases)

    def _execute_add(self, command: AddCommand) -> CommandOutput:
        case = self.manager.add_case(
            command.category,
            command.title,
            command.date,
            command.info,
            victim=command.victim,
            officer=command.officer,
        )
        return self._success(f"New case added:\n{self._summarize(case)}", [case])

    def _execute_edit(self, command: EditCommand) -> CommandOutput:
        case = self.manager.edit_case(command.case_id, command.updates)
        return self._success(f"Case updated:\n{self._describe(case)}", [case])

    def _execute_edit_prompt(self, command: EditPromptCommand) -> CommandOutput:
        case = self.manager.get_editable_case(command.case_id)
        flags = " ".join(f"--{flag}" for flag in case.editable_flags())
        message = (
            f"Case found: {self._summarize(case)}\n"
            f"Fields that can be edited: {flags}\n"
            f"Usage: edit {case.case_id} --<field> <new value>"
        )
        return self._success(message, [case])

    def _execute_close(self, command: CloseCommand) -> CommandOutput:
        if not self.manager.get_case(command.case_id).is_open:
            return self._success(f"Case #{command.case_id} is already closed.")
        case = self.manager.close_case(command.case_id)
        return self._success(f"Case #{case.case_id} has been closed.", [case])

    def _execute_open(self, command: OpenCommand) -> CommandOutput:
        if self.manager.get_case(command.case_id).is_open:
            return self._success(f"Case #{command.case_id} is already open.")
        case = self.manager.open_case(command.case_id)
        return self._success(f"Case #{case.case_id} has been reopened.", [case])

    def _execute_delete(self, command: DeleteCommand) -> CommandOutput:
        case = self.manager.delete_case(command.case_id)
        return self._success(f"Case #{case.case_id} has been deleted.", [case])

    def _execute_read(self, command: ReadCommand) -> CommandOutput:
        case = self.manager.get_case(command.case_id)
        return self._success(self._describe(case), [case])

    def _execute_find(self, command: FindCommand) -> CommandOutput:
        cases = self.manager.find_cases(command.keyword)
        if not cases:
            return self._success(f"No cases match '{command.keyword}'.")
        lines = [f"{len(cases)} case(s) match '{command.keyword}':"]
        lines.extend(self._summarize(case) for case in cases)
        return self._success("\n".join(lines), cases)

    def _execute_setting(self, command: SettingCommand) -> CommandOutput:
        self.settings.update(command.setting_type, command.value)
        label = (
            "Input"
            if command.setting_type is SettingType.INPUTDATEFORMAT
            else "Output"
        )
        return self._success(f"{label} date format set to '{command.value}'.")

    def _execute_help(self, command: HelpCommand) -> CommandOutput:
        return self._success(HELP_TEXT)

    def _execute_bye(self, command: ByeCommand) -> CommandOutput:
        return CommandOutput(CommandResult.QUIT, "Goodbye!")
