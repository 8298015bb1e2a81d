"""
Typed command objects produced by the SgSafe parser.

Each command carries only the fields its execution needs. Commands are frozen
so that a parsed command cannot drift from what the user typed before it runs.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from sgsafe.core.types import TypedFlagMap
from sgsafe.settings import SettingType


class CaseListingMode(Enum):
    """Which cases the list command shows."""

    DEFAULT = "default"
    OPEN_ONLY = "open"
    CLOSED_ONLY = "closed"
    ALL = "all"


@dataclass(frozen=True)
class ListCommand:
    """Represents ``list [--status open|closed|all] [--mode verbose|summary]``."""

    mode: CaseListingMode = CaseListingMode.DEFAULT
    verbose: bool = False


@dataclass(frozen=True)
class AddCommand:
    """Represents ``add --category C --title T --date D --info I [--victim V] [--officer O]``."""

    category: str
    title: str
    date: date
    info: str
    victim: str | None = None
    officer: str | None = None


@dataclass(frozen=True)
class EditCommand:
    """Represents ``edit <case id> --flag value ...`` with values already typed."""

    case_id: str
    updates: TypedFlagMap = field(default_factory=dict)


@dataclass(frozen=True)
class EditPromptCommand:
    """Represents ``edit <case id>``, which shows the fields that can be edited."""

    case_id: str


@dataclass(frozen=True)
class CloseCommand:
    """Represents ``close <case id>``."""

    case_id: str


@dataclass(frozen=True)
class OpenCommand:
    """Represents ``open <case id>``."""

    case_id: str


@dataclass(frozen=True)
class DeleteCommand:
    """Represents ``delete <case id>``."""

    case_id: str


@dataclass(frozen=True)
class ReadCommand:
    """Represents ``read <case id>``."""

    case_id: str


@dataclass(frozen=True)
class FindCommand:
    """Represents ``find --keyword K``."""

    keyword: str


@dataclass(frozen=True)
class SettingCommand:
    """Represents ``setting --type T --value V``."""

    setting_type: SettingType
    value: str


@dataclass(frozen=True)
class HelpCommand:
    """Represents ``help``."""


@dataclass(frozen=True)
class ByeCommand:
    """Represents ``bye``."""


Command = (
    ListCommand
    | AddCommand
    | EditCommand
    | EditPromptCommand
    | CloseCommand
    | OpenCommand
    | DeleteCommand
    | ReadCommand
    | FindCommand
    | SettingCommand
    | HelpCommand
    | ByeCommand
)
