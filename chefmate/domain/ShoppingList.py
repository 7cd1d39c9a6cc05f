"""ShoppingList snapshot and its ShoppingListItem entries (derived from a MealPlan)."""
from typing import Iterable, List, Optional, Sequence

from chefmate.utilities.constants import CATEGORIES, FALLBACK_CATEGORY


class ShoppingListItem:
    def __init__(self, item: str = "", amount: float = 0, unit: str = "",
                 recipes: Optional[Iterable[str]] = None, category: str = FALLBACK_CATEGORY):
        if category not in CATEGORIES:
            raise ValueError(f"Unknown shopping category: {category!r}")
        self.item = item
        self.amount = amount
        self.unit = unit
        self.recipes = tuple(recipes or ())
        self.category = category

    def __str__(self) -> str:
        return f"[{self.category}] {self.amount} {self.unit} {self.item} ({', '.join(self.recipes)})"

    __repr__ = __str__

    def __eq__(self, other):
        if not isinstance(other, ShoppingListItem):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return ShoppingListItem(
            item=d.get("item") or "",
            amount=d.get("amount", 0) or 0,
            unit=d.get("unit") or "",
            recipes=d.get("recipes") or [],
            category=d.get("category") or FALLBACK_CATEGORY,
        )

    def to_dict(self):
        return {
            "item": self.item,
            "amount": self.amount,
            "unit": self.unit,
            "recipes": list(self.recipes),
            "category": self.category,
        }


class ShoppingList:
    def __init__(self, items: Optional[Sequence[ShoppingListItem]] = None, meal_plan_id: Optional[str] = None,
                 id: Optional[str] = None, user_id: Optional[str] = None, created_at: Optional[str] = None):
        self.id = id
        self.user_id = user_id
        self.meal_plan_id = meal_plan_id
        self.items: List[ShoppingListItem] = list(items or [])
        self.created_at = created_at

    def get_items(self):
        '''
        Returns the list of shopping list items.
        '''
        return self.items

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.items)
        return f"Shopping List:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return ShoppingList(
            items=[ShoppingListItem.from_dict(i) for i in d.get("items") or []],
            meal_plan_id=d.get("meal_plan_id"),
            id=d.get("id"),
            user_id=d.get("user_id"),
            created_at=d.get("created_at"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "meal_plan_id": self.meal_plan_id,
            "items": [i.to_dict() for i in self.items],
            "created_at": self.created_at,
        }
