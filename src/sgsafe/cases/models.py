"""
Case record model.
"""

import datetime

from inflection import humanize, titleize, underscore
from pydantic import BaseModel, ConfigDict, Field

from sgsafe.cases.categories import COMMON_FLAGS, editable_flags
from sgsafe.core.types import FlagValue, TypedFlagMap


def field_name(flag: str) -> str:
    """Map a flag name such as ``number-of-victims`` to ``number_of_victims``."""
    return underscore(flag)


def field_label(flag: str) -> str:
    """Map a flag name such as ``number-of-victims`` to ``Number of victims``."""
    return humanize(underscore(flag))


class Case(BaseModel):
    """
    A single case held by the case registry.

    Common fields are attributes; category-specific fields live in ``details``
    keyed by their underscored field name.
    """

    model_config = ConfigDict(validate_assignment=True)

    case_id: str
    category: str
    title: str
    date: datetime.date
    info: str
    victim: str | None = None
    officer: str | None = None
    is_open: bool = True
    is_deleted: bool = False
    details: dict[str, FlagValue] = Field(default_factory=dict)

    @property
    def category_label(self) -> str:
        return titleize(self.category)

    def editable_flags(self) -> tuple[str, ...]:
        return editable_flags(self.category)

    def get_field(self, flag: str) -> FlagValue | None:
        """Return the current value of a field by its flag name, or None if unset."""
        name = field_name(flag)
        if flag in COMMON_FLAGS:
            return getattr(self, name)
        return self.details.get(name)

    def apply_updates(self, updates: TypedFlagMap) -> None:
        """
        Overwrite fields with typed flag values.

        Params:
            updates: Mapping of flag name to typed value; every flag must be one
                of ``editable_flags()``
        """
        for flag, value in updates.items():
            name = field_name(flag)
            if flag in COMMON_FLAGS:
                setattr(self, name, value)
            else:
                self.details[name] = value

    def filled_fields(self) -> list[tuple[str, FlagValue]]:
        """List ``(label, value)`` for every field that has a value, in flag order."""
        fields = []
        for flag in self.editable_flags():
            value = self.get_field(flag)
            if value is not None:
                fields.append((field_label(flag), value))
        return fields
