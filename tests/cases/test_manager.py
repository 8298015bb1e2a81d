"""
Tests for the in-memory case registry.

This module tests:
- Case ID generation and lookup
- Close, open and delete state changes
- Editing with category-specific fields
- Finding and listing cases
"""

from datetime import date

import pytest

from sgsafe.cases.categories import COMMON_FLAGS, editable_flags
from sgsafe.cases.models import field_label, field_name
from sgsafe.commands.types import CaseListingMode
from sgsafe.exceptions import (
    CaseCannotBeEditedError,
    CaseNotFoundError,
    InvalidEditFlagError,
    UnknownCategoryError,
)

INCIDENT_DATE = date(2025, 10, 10)


def add_speeding(manager, title="Speeding on PIE"):
    return manager.add_case("Speeding", title, INCIDENT_DATE, "Caught by camera")


class TestAddAndLookup:
    """Test adding cases and looking them up."""

    def test_sequential_hex_ids(self, manager):
        ids = [add_speeding(manager).case_id for _ in range(11)]
        assert ids[0] == "000001"
        assert ids[9] == "00000A"
        assert ids[10] == "00000B"

    def test_category_is_normalized(self, manager):
        case = add_speeding(manager)
        assert case.category == "speeding"
        assert case.category_label == "Speeding"

    def test_new_case_is_open(self, manager):
        case = add_speeding(manager)
        assert case.is_open
        assert not case.is_deleted

    def test_optional_fields(self, manager):
        case = manager.add_case(
            "robbery", "T", INCIDENT_DATE, "I", victim="Alice", officer="Officer Tan"
        )
        assert case.victim == "Alice"
        assert case.officer == "Officer Tan"

    def test_unknown_category(self, manager):
        with pytest.raises(UnknownCategoryError) as exc_info:
            manager.add_case("jaywalking", "T", INCIDENT_DATE, "I")
        assert exc_info.value.category == "jaywalking"
        assert "theft" in exc_info.value.known_categories

    def test_get_case_ignores_id_case(self, manager):
        case = manager.add_case("theft", "T", INCIDENT_DATE, "I")
        for _ in range(9):
            add_speeding(manager)
        tenth = add_speeding(manager)
        assert manager.get_case("000001") is case
        assert manager.get_case("00000b") is tenth

    def test_missing_case(self, manager):
        with pytest.raises(CaseNotFoundError):
            manager.get_case("000001")


class TestStateChanges:
    """Test close, open and delete."""

    def test_close_and_open(self, manager):
        case = add_speeding(manager)
        manager.close_case(case.case_id)
        assert not case.is_open
        manager.open_case(case.case_id)
        assert case.is_open

    def test_deleted_case_is_not_found(self, manager):
        case = add_speeding(manager)
        manager.delete_case(case.case_id)
        with pytest.raises(CaseNotFoundError):
            manager.get_case(case.case_id)

    def test_deleted_ids_are_not_reused(self, manager):
        case = add_speeding(manager)
        manager.delete_case(case.case_id)
        assert add_speeding(manager).case_id == "000002"


class TestEditCase:
    """Test editing cases."""

    def test_edit_common_fields(self, manager):
        case = add_speeding(manager)
        manager.edit_case(case.case_id, {"title": "New", "date": date(2024, 1, 2)})
        assert case.title == "New"
        assert case.date == date(2024, 1, 2)

    def test_edit_category_fields(self, manager):
        case = add_speeding(manager)
        manager.edit_case(
            case.case_id, {"speed-limit": 70, "exceeded-speed": 110, "vehicle-plate": "SGX1"}
        )
        assert case.details == {
            "speed_limit": 70,
            "exceeded_speed": 110,
            "vehicle_plate": "SGX1",
        }
        assert case.get_field("speed-limit") == 70

    def test_field_of_other_category(self, manager):
        case = add_speeding(manager)
        with pytest.raises(InvalidEditFlagError) as exc_info:
            manager.edit_case(case.case_id, {"title": "X", "weapon": "knife"})
        assert exc_info.value.invalid_flags == ["weapon"]
        assert "speed-limit" in exc_info.value.valid_flags
        assert case.title == "Speeding on PIE"

    def test_closed_case_cannot_be_edited(self, manager):
        case = add_speeding(manager)
        manager.close_case(case.case_id)
        with pytest.raises(CaseCannotBeEditedError):
            manager.edit_case(case.case_id, {"title": "X"})

    def test_editable_flags(self):
        flags = editable_flags("murder")
        assert flags[: len(COMMON_FLAGS)] == COMMON_FLAGS
        assert "number-of-victims" in flags


class TestFieldNames:
    """Test flag to field name mapping."""

    def test_field_name(self):
        assert field_name("number-of-victims") == "number_of_victims"
        assert field_name("title") == "title"

    def test_field_label(self):
        assert field_label("number-of-victims") == "Number of victims"

    def test_filled_fields_skip_empty(self, manager):
        case = add_speeding(manager)
        manager.edit_case(case.case_id, {"speed-limit": 70})
        labels = [label for label, _ in case.filled_fields()]
        assert labels == ["Title", "Date", "Info", "Speed limit"]


class TestFindAndList:
    """Test searching and listing."""

    def test_find_matches_title_and_info(self, manager):
        bike = manager.add_case("theft", "Stolen bike", INCIDENT_DATE, "Blue frame")
        car = manager.add_case("theft", "Car break-in", INCIDENT_DATE, "Bike rack taken")
        manager.add_case("scam", "Phone scam", INCIDENT_DATE, "Caller posed as bank")
        assert manager.find_cases("BIKE") == [bike, car]

    def test_find_skips_deleted(self, manager):
        case = manager.add_case("theft", "Stolen bike", INCIDENT_DATE, "I")
        manager.delete_case(case.case_id)
        assert manager.find_cases("bike") == []

    def test_list_modes(self, manager):
        first = add_speeding(manager, "first")
        second = add_speeding(manager, "second")
        third = add_speeding(manager, "third")
        deleted = add_speeding(manager, "deleted")
        manager.close_case(first.case_id)
        manager.delete_case(deleted.case_id)

        assert manager.list_cases(CaseListingMode.ALL) == [first, second, third]
        assert manager.list_cases(CaseListingMode.DEFAULT) == [second, third, first]
        assert manager.list_cases(CaseListingMode.OPEN_ONLY) == [second, third]
        assert manager.list_cases(CaseListingMode.CLOSED_ONLY) == [first]
