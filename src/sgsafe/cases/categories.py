"""
Case categories and the fields each category records.

Every case has the common fields entered with ``add``. Each category adds a
fixed set of extra fields that can only be filled in with ``edit``.
"""

COMMON_FLAGS = ("title", "date", "info", "victim", "officer")

CATEGORIES: dict[str, tuple[str, ...]] = {
    "theft": ("location", "stolen-item", "financial-value"),
    "burglary": ("location", "stolen-item", "financial-value"),
    "robbery": ("location", "weapon", "financial-value"),
    "scam": ("scam-type", "financial-value"),
    "vandalism": ("location", "monetary-damage"),
    "arson": ("location", "monetary-damage", "number-of-casualties"),
    "assault": ("location", "weapon", "number-of-victims"),
    "murder": ("location", "weapon", "number-of-victims"),
    "speeding": (
        "location",
        "vehicle-type",
        "vehicle-plate",
        "speed-limit",
        "exceeded-speed",
    ),
    "accident": (
        "location",
        "vehicle-type",
        "vehicle-plate",
        "number-of-casualties",
        "monetary-damage",
    ),
}


def normalize_category(category: str) -> str:
    """Return the registry key for a category name as typed by the user."""
    return category.strip().lower()


def is_known_category(category: str) -> bool:
    return normalize_category(category) in CATEGORIES


def editable_flags(category: str) -> tuple[str, ...]:
    """
    List the flags ``edit`` accepts for a case of the given category.

    Params:
        category: Registry key of the category

    Returns:
        Common flags followed by the category's extra flags

    Raises:
        KeyError: If the category is unknown
    """
    return COMMON_FLAGS + CATEGORIES[category]
