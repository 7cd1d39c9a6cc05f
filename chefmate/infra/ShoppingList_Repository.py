"""Saved shopping list snapshots, one per meal plan (file persistence)."""
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional
from uuid import uuid4

from chefmate.domain.ShoppingList import ShoppingList
from chefmate.infra.errors import ShoppingListNotFoundError
from chefmate.infra.json_store import atomic_write, load_json, store_lock
from chefmate.infra.paths import SHOPPING_LISTS_FILE

logger = logging.getLogger(__name__)


class ShoppingListRepository:
    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else SHOPPING_LISTS_FILE

    def save(self, shopping_list: ShoppingList) -> ShoppingList:
        '''Stores the snapshot, replacing any earlier one for the same meal plan.'''
        if not shopping_list.meal_plan_id:
            raise ValueError("A saved shopping list needs a meal_plan_id")
        shopping_list.id = shopping_list.id or uuid4().hex
        shopping_list.created_at = datetime.now(timezone.utc).isoformat()
        with store_lock:
            store = load_json(self.path, {})
            store[shopping_list.meal_plan_id] = shopping_list.to_dict()
            atomic_write(self.path, store)
        logger.info("Saved shopping list for meal plan %s (%d items)",
                    shopping_list.meal_plan_id, len(shopping_list))
        return shopping_list

    def get(self, meal_plan_id: str) -> ShoppingList:
        data = load_json(self.path, {}).get(meal_plan_id)
        if data is None:
            raise ShoppingListNotFoundError(meal_plan_id)
        return ShoppingList.from_dict(data)


__all__ = ['ShoppingListRepository']
