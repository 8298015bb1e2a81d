"""
SgSafe case registry.

This package holds the case model, the category table and the in-memory
registry that commands are executed against.
"""

from sgsafe.cases.categories import CATEGORIES, COMMON_FLAGS, editable_flags
from sgsafe.cases.manager import CaseManager
from sgsafe.cases.models import Case

__all__ = [
    "Case",
    "CaseManager",
    "CATEGORIES",
    "COMMON_FLAGS",
    "editable_flags",
]
