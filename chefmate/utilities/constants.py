from typing import Final

DATE_FORMAT: Final[str] = "%Y-%m-%d"

DAYS_OF_WEEK: Final[tuple[str, ...]] = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)
MEAL_SLOTS: Final[tuple[str, ...]] = ("breakfast", "lunch", "dinner", "snack1", "snack2")

CATEGORIES: Final[tuple[str, ...]] = (
    "produce", "meat", "dairy", "bakery", "canned", "dry", "frozen", "other",
)
FALLBACK_CATEGORY: Final[str] = "other"

DIFFICULTIES: Final[tuple[str, ...]] = ("easy", "medium", "hard")
SKILL_LEVELS: Final[tuple[str, ...]] = ("beginner", "intermediate", "advanced")
BUDGETS: Final[tuple[str, ...]] = ("low", "medium", "high")

SHOPPING_LIST_TITLE: Final[str] = "SHOPPING LIST"
SHOPPING_LIST_FILENAME: Final[str] = "shopping-list.txt"
