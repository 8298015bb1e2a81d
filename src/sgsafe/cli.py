"""
Interactive read-loop for SgSafe.

Reads one command per line, parses it, executes it against an in-memory case
registry and prints the outcome until ``bye`` or end of input.
"""

import logging
from typing import Callable

from rich.console import Console

from sgsafe.cases.manager import CaseManager
from sgsafe.commands.executor import CommandExecutor, CommandResult
from sgsafe.commands.types import Command
from sgsafe.exceptions import CaseError, CommandParseError, ErrorLevel
from sgsafe.parsing.parser import CommandParser
from sgsafe.parsing.result import ParseFailure, ParseSuccess
from sgsafe.settings import Settings

PROMPT = "sgsafe> "
WELCOME = "Welcome to SgSafe. Type 'help' to see the available commands."


def print_parse_error(
    console: Console,
    error: CommandParseError,
    error_level: ErrorLevel = ErrorLevel.USER,
) -> None:
    """Print a parse error as message, tip and example."""
    lines = error.format_message(error_level).split("\n")
    console.print(lines[0], style="bold red", markup=False, highlight=False)
    for line in lines[1:]:
        console.print(line, style="yellow", markup=False, highlight=False)


def run_repl(
    console: Console,
    parser: CommandParser,
    executor: CommandExecutor,
    read_line: Callable[[], str] | None = None,
    error_level: ErrorLevel = ErrorLevel.USER,
) -> None:
    """
    Run the read-loop until ``bye`` or end of input.

    Params:
        console: Console to print to
        parser: Parser turning lines into commands
        executor: Executor applying commands
        read_line: Source of input lines; defaults to prompting on the console.
            Must raise ``EOFError`` when input is exhausted.
        error_level: Detail level for parse error messages
    """
    if read_line is None:

        def read_line() -> str:
            return console.input(PROMPT)

    console.print(WELCOME, markup=False, highlight=False)
    while True:
        try:
            line = read_line()
        except EOFError:
            break

        match parser.try_parse(line):
            case ParseFailure(error=error):
                print_parse_error(console, error, error_level)
            case ParseSuccess(command=command):
                if _execute(console, executor, command) is CommandResult.QUIT:
                    break


def _execute(
    console: Console, executor: CommandExecutor, command: Command
) -> CommandResult:
    try:
        output = executor.execute(command)
    except CaseError as e:
        console.print(str(e), style="bold red", markup=False, highlight=False)
        return CommandResult.SUCCESS

    console.print(output.message, markup=False, highlight=False)
    return output.result


def main() -> None:
    """Entry point for the ``sgsafe`` console script."""
    # Parser warnings duplicate the messages already shown to the user
    logging.basicConfig(level=logging.ERROR)
    settings = Settings()
    console = Console(highlight=False)
    run_repl(
        console,
        CommandParser(settings),
        CommandExecutor(CaseManager(), settings),
    )


if __name__ == "__main__":
    main()
