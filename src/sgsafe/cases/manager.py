"""
In-memory registry of cases.
"""

import datetime
import logging

from sgsafe.cases.categories import CATEGORIES, is_known_category, normalize_category
from sgsafe.cases.models import Case
from sgsafe.commands.types import CaseListingMode
from sgsafe.core.types import TypedFlagMap
from sgsafe.exceptions import (
    CaseCannotBeEditedError,
    CaseNotFoundError,
    InvalidEditFlagError,
    UnknownCategoryError,
)

logger = logging.getLogger(__name__)


class CaseManager:
    """Registry holding every case for the current session.

    Responsibilities:
      - Hand out sequential 6-digit hexadecimal case IDs.
      - Look up live cases by ID; deleted cases are kept but never returned.
      - Apply close, open, delete and edit operations with their state checks.
    """

    def __init__(self):
        self._cases: list[Case] = []
        self._next_id = 1

    def _generate_case_id(self) -> str:
        case_id = f"{self._next_id:06X}"
        self._next_id += 1
        return case_id

    def add_case(
        self,
        category: str,
        title: str,
        date: datetime.date,
        info: str,
        victim: str | None = None,
        officer: str | None = None,
    ) -> Case:
        """
        Create and store a new open case.

        Params:
            category: Category name, matched case-insensitively
            title: Short case title
            date: Date of the incident
            info: Free-text description
            victim: Optional victim name
            officer: Optional officer in charge

        Returns:
            The stored case

        Raises:
            UnknownCategoryError: If the category is not in ``CATEGORIES``
        """
        if not is_known_category(category):
            raise UnknownCategoryError(category, sorted(CATEGORIES))

        case = Case(
            case_id=self._generate_case_id(),
            category=normalize_category(category),
            title=title,
            date=date,
            info=info,
            victim=victim,
            officer=officer,
        )
        self._cases.append(case)
        logger.info("Added case %s", case.case_id)
        return case

    def get_case(self, case_id: str) -> Case:
        """
        Find a live case by ID.

        Raises:
            CaseNotFoundError: If no live case has that ID
        """
        wanted = case_id.upper()
        for case in self._cases:
            if case.case_id == wanted and not case.is_deleted:
                return case
        raise CaseNotFoundError(case_id)

    def close_case(self, case_id: str) -> Case:
        case = self.get_case(case_id)
        case.is_open = False
        return case

    def open_case(self, case_id: str) -> Case:
        case = self.get_case(case_id)
        case.is_open = True
        return case

    def delete_case(self, case_id: str) -> Case:
        case = self.get_case(case_id)
        case.is_deleted = True
        logger.info("Deleted case %s", case.case_id)
        return case

    def get_editable_case(self, case_id: str) -> Case:
        """
        Find a live case that may be edited.

        Raises:
            CaseNotFoundError: If no live case has that ID
            CaseCannotBeEditedError: If the case is closed
        """
        case = self.get_case(case_id)
        if not case.is_open:
            raise CaseCannotBeEditedError(case.case_id)
        return case

    def edit_case(self, case_id: str, updates: TypedFlagMap) -> Case:
        """
        Apply typed field updates to an open case.

        Params:
            case_id: ID of the case to edit
            updates: Mapping of flag name to typed value

        Returns:
            The updated case

        Raises:
            CaseNotFoundError: If no live case has that ID
            CaseCannotBeEditedError: If the case is closed
            InvalidEditFlagError: If a flag is not a field of the case's category
        """
        case = self.get_editable_case(case_id)
        valid_flags = case.editable_flags()
        invalid_flags = [flag for flag in updates if flag not in valid_flags]
        if invalid_flags:
            raise InvalidEditFlagError(case.case_id, invalid_flags, list(valid_flags))

        case.apply_updates(updates)
        return case

    def find_cases(self, keyword: str) -> list[Case]:
        """Return live cases whose title or info contains the keyword, ignoring case."""
        needle = keyword.lower()
        return [
            case
            for case in self._cases
            if not case.is_deleted
            and (needle in case.title.lower() or needle in case.info.lower())
        ]

    def list_cases(self, mode: CaseListingMode) -> list[Case]:
        """
        Return live cases selected by a listing mode.

        ``ALL`` keeps registry order; ``DEFAULT`` lists open cases before
        closed ones.
        """
        live_cases = [case for case in self._cases if not case.is_deleted]
        open_cases = [case for case in live_cases if case.is_open]
        closed_cases = [case for case in live_cases if not case.is_open]
        if mode is CaseListingMode.OPEN_ONLY:
            return open_cases
        if mode is CaseListingMode.CLOSED_ONLY:
            return closed_cases
        if mode is CaseListingMode.DEFAULT:
            return open_cases + closed_cases
        return live_cases
