"""Shopping category classification by keyword substring.

A category table is an ordered sequence of (category, keywords) pairs. Categories
are tested in table order and the first one owning a keyword contained in the
ingredient name wins, so an ingredient matching several categories always lands
in the earliest one. Names that match nothing fall back to ``other``.

Two tables ship with the package:

- ``DEFAULT_CATEGORY_KEYWORDS``: the table used by the shopping list builder.
- ``LEGACY_CATEGORY_KEYWORDS``: the vocabulary of the first release, kept for
  callers that need its exact output (it sends "canned tomatoes" to produce
  and "rolled oats" to bakery).
"""
from typing import Sequence, Tuple

from chefmate.utilities.constants import CATEGORIES, FALLBACK_CATEGORY

CategoryTable = Sequence[Tuple[str, Sequence[str]]]

# "herb" is listed under both produce and dry; produce comes first and wins.
# Tomatoes and rolls are matched by specific phrases so "canned tomatoes" and
# "rolled oats" reach canned and dry.
DEFAULT_CATEGORY_KEYWORDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("produce", ("fruit", "vegetable", "apple", "banana", "lettuce", "cherry tomato", "roma tomato",
                 "grape tomato", "fresh tomato", "onion", "garlic", "herb", "lemon", "lime")),
    ("meat", ("meat", "beef", "chicken", "pork", "fish", "salmon", "tuna", "shrimp", "turkey")),
    ("dairy", ("milk", "cheese", "yogurt", "butter", "cream", "egg")),
    ("bakery", ("bread", "rolls", "dinner roll", "bread roll", "bun", "bagel", "pastry", "cake")),
    ("canned", ("can", "canned", "jar", "preserved", "soup")),
    ("dry", ("rice", "pasta", "cereal", "flour", "sugar", "spice", "herb", "bean", "lentil", "nut",
             "oat")),
    ("frozen", ("frozen", "ice cream", "pizza")),
)

LEGACY_CATEGORY_KEYWORDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("produce", ("fruit", "vegetable", "apple", "banana", "lettuce", "tomato", "onion", "garlic",
                 "herb", "lemon", "lime")),
    ("meat", ("meat", "beef", "chicken", "pork", "fish", "salmon", "tuna", "shrimp", "turkey")),
    ("dairy", ("milk", "cheese", "yogurt", "butter", "cream", "egg")),
    ("bakery", ("bread", "roll", "bun", "bagel", "pastry", "cake")),
    ("canned", ("can", "canned", "jar", "preserved", "soup")),
    ("dry", ("rice", "pasta", "cereal", "flour", "sugar", "spice", "herb", "bean", "lentil", "nut")),
    ("frozen", ("frozen", "ice cream", "pizza")),
)


def validate_table(table: CategoryTable) -> None:
    """Raise ValueError if the table names a category outside the closed set."""
    for category, _keywords in table:
        if category not in CATEGORIES or category == FALLBACK_CATEGORY:
            raise ValueError(f"Invalid category in keyword table: {category!r}")


def classify(name: str, table: CategoryTable = DEFAULT_CATEGORY_KEYWORDS) -> str:
    """Return the shopping category for an ingredient name (case-insensitive)."""
    lowered = (name or "").lower()
    for category, keywords in table:
        if any(keyword.lower() in lowered for keyword in keywords):
            return category
    return FALLBACK_CATEGORY


__all__ = [
    'CategoryTable', 'DEFAULT_CATEGORY_KEYWORDS', 'LEGACY_CATEGORY_KEYWORDS',
    'classify', 'validate_table',
]
