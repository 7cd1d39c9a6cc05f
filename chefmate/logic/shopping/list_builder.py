"""Shopping list builder.

Provides build_shopping_list(plan, table=DEFAULT_CATEGORY_KEYWORDS): merges the
ingredients of every planned meal by (lowercased name, unit), classifies each
merged entry and returns the entries ordered by category.
"""
import logging
from typing import Dict, Tuple, Any

from chefmate.domain.Ingredient import Ingredient
from chefmate.domain.MealPlan import MealPlan
from chefmate.domain.ShoppingList import ShoppingListItem
from chefmate.logic.shopping.categories import CategoryTable, DEFAULT_CATEGORY_KEYWORDS, classify, validate_table

logger = logging.getLogger(__name__)

MergeKey = Tuple[str, str]


def merge_key(ingredient: Ingredient) -> MergeKey:
    # Name is case-folded, unit is compared exactly
    return (ingredient.item or '').lower(), ingredient.unit or ''


def merge_ingredients(plan: MealPlan) -> Dict[MergeKey, Dict[str, Any]]:
    """Sum ingredient amounts over all populated slots of the plan.

    Returns a new dict mapping merge key to
    { item, amount, unit, recipes } where item/unit are as first written and
    recipes lists each contributing recipe name once, in encounter order.
    Amounts are added as given; the plan is not modified.
    """
    merged: Dict[MergeKey, Dict[str, Any]] = {}
    for _day, _slot, recipe in plan.iter_meals():
        for ingredient in recipe.ingredients:
            key = merge_key(ingredient)
            entry = merged.get(key)
            if entry is None:
                merged[key] = {
                    'item': ingredient.item,
                    'amount': ingredient.amount,
                    'unit': ingredient.unit,
                    'recipes': [recipe.name],
                }
                continue
            entry['amount'] += ingredient.amount
            if recipe.name not in entry['recipes']:
                entry['recipes'].append(recipe.name)
    return merged


def build_shopping_list(plan: MealPlan, table: CategoryTable = DEFAULT_CATEGORY_KEYWORDS) -> Tuple[ShoppingListItem, ...]:
    """Compute the consolidated shopping list for a meal plan.

    Args:
        plan: MealPlan whose populated slots are read.
        table: ordered (category, keywords) pairs used for classification.

    Returns:
        Tuple of ShoppingListItem sorted by category name; entries of the same
        category keep merge order.
    """
    validate_table(table)
    merged = merge_ingredients(plan)
    items = [
        ShoppingListItem(
            item=entry['item'],
            amount=entry['amount'],
            unit=entry['unit'],
            recipes=entry['recipes'],
            category=classify(entry['item'], table),
        )
        for entry in merged.values()
    ]
    # list.sort is stable
    items.sort(key=lambda i: i.category)
    logger.debug("Built shopping list with %d items from %d meals", len(items), plan.count_meals())
    return tuple(items)


__all__ = ['MergeKey', 'merge_key', 'merge_ingredients', 'build_shopping_list']
