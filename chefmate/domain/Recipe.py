"""Recipe domain entity: name, timings, ingredients, instructions, nutrition, dietary tags."""
from chefmate.domain.Ingredient import Ingredient
from typing import List, Dict, Optional

NUTRITION_KEYS = ("calories", "protein", "carbs", "fat", "fiber")


class Recipe:
    def __init__(self, id: str = "", name: str = "", description: str = "",
                 prep_time: int = 0, cook_time: int = 0, servings: int = 1,
                 difficulty: str = "easy", ingredients: Optional[List[Ingredient]] = None,
                 instructions: Optional[List[str]] = None, nutrition: Optional[Dict[str, float]] = None,
                 dietary_restrictions: Optional[List[str]] = None, image_url: Optional[str] = None):
        self.id = id
        self.name = name
        self.description = description
        self.prep_time = prep_time
        self.cook_time = cook_time
        self.servings = servings
        self.difficulty = difficulty
        self.ingredients = ingredients[:] if ingredients else []
        self.instructions = instructions[:] if instructions else []
        n = nutrition or {}
        self.nutrition = {k: n.get(k, 0) or 0 for k in NUTRITION_KEYS}
        self.dietary_restrictions = dietary_restrictions[:] if dietary_restrictions else []
        self.image_url = image_url

    def __str__(self) -> str:
        return (f"{self.name} - {self.servings} servings - {self.difficulty} - "
                f"Prep {self.prep_time} min / Cook {self.cook_time} min - "
                f"Ingredients: {len(self.ingredients)}")

    __repr__ = __str__

    @property
    def total_time(self) -> int:
        return (self.prep_time or 0) + (self.cook_time or 0)

    @staticmethod
    def from_dict(data):
        d = dict(data)
        d['ingredients'] = [Ingredient.from_dict(ing) for ing in d.get('ingredients') or []]
        allowed = {"id", "name", "description", "prep_time", "cook_time", "servings", "difficulty",
                   "ingredients", "instructions", "nutrition", "dietary_restrictions", "image_url"}
        return Recipe(**{k: v for k, v in d.items() if k in allowed})

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "prep_time": self.prep_time,
            "cook_time": self.cook_time,
            "servings": self.servings,
            "difficulty": self.difficulty,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "instructions": self.instructions,
            "nutrition": dict(self.nutrition),
            "dietary_restrictions": self.dietary_restrictions,
            "image_url": self.image_url,
        }
