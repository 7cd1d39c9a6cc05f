"""Event helper utilities.

Helpers for publishing meal plan and shopping list events on the global bus.

Quick import:
    from chefmate.events.event_helpers import (
        publish_meal_plan_saved, publish_shopping_list_generated, publish_shopping_list_saved
    )
"""
from __future__ import annotations
from collections import Counter
from typing import Optional, Sequence

from chefmate.domain.MealPlan import MealPlan
from chefmate.domain.ShoppingList import ShoppingListItem
from .Event_Bus import (
    publish,
    MEAL_PLAN_SAVED, SHOPPING_LIST_GENERATED, SHOPPING_LIST_SAVED,
)

__all__ = [
    'publish_meal_plan_saved', 'publish_shopping_list_generated', 'publish_shopping_list_saved',
    'MEAL_PLAN_SAVED', 'SHOPPING_LIST_GENERATED', 'SHOPPING_LIST_SAVED',
]


def publish_meal_plan_saved(plan: MealPlan):
    """Publish a meal_plan.saved event."""
    publish(MEAL_PLAN_SAVED, {
        'plan_id': plan.id,
        'meals': plan.count_meals(),
    })


def publish_shopping_list_generated(plan_id: Optional[str], items: Sequence[ShoppingListItem]):
    """Publish a shopping_list.generated event.

    Payload structure:
        {
          'plan_id': <str | None>,
          'count': <int>,
          'categories': { <category>: <int>, ... }
        }
    """
    publish(SHOPPING_LIST_GENERATED, {
        'plan_id': plan_id,
        'count': len(items),
        'categories': dict(Counter(i.category for i in items)),
    })


def publish_shopping_list_saved(plan_id: str, count: int):
    """Publish a shopping_list.saved event."""
    publish(SHOPPING_LIST_SAVED, {
        'plan_id': plan_id,
        'count': count,
    })
