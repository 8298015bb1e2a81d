"""
User-adjustable settings for SgSafe.

The settings hold the date patterns used when reading dates from commands and
when displaying dates back to the user. They are changed at runtime through the
``setting`` command.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

from sgsafe.dates import DEFAULT_DATE_FORMAT, compile_date_pattern


class SettingType(Enum):
    """Settings that can be changed with the ``setting`` command."""

    INPUTDATEFORMAT = "input_date_format"
    OUTPUTDATEFORMAT = "output_date_format"

    @classmethod
    def from_name(cls, name: str) -> "SettingType":
        """
        Look up a setting type by its name, ignoring case.

        Params:
            name: Setting name as typed by the user, e.g. ``inputdateformat``

        Returns:
            The matching setting type

        Raises:
            KeyError: If no setting has that name
        """
        return cls[name.strip().upper()]


class Settings(BaseModel):
    """Current date patterns for reading and displaying dates.

    Assignments are validated, so an invalid pattern can never be stored even
    when a caller bypasses the ``setting`` command.
    """

    model_config = ConfigDict(validate_assignment=True)

    input_date_format: str = DEFAULT_DATE_FORMAT
    output_date_format: str = DEFAULT_DATE_FORMAT

    @field_validator("input_date_format", "output_date_format")
    @classmethod
    def _check_date_format(cls, value: str) -> str:
        compile_date_pattern(value)
        return value

    def get(self, setting_type: SettingType) -> str:
        """Return the current value of a setting."""
        return getattr(self, setting_type.value)

    def update(self, setting_type: SettingType, value: str) -> None:
        """
        Change a setting.

        Params:
            setting_type: Which setting to change
            value: New date pattern

        Raises:
            pydantic.ValidationError: If the pattern is not a valid date pattern
        """
        setattr(self, setting_type.value, value)
