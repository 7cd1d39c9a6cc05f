"""MealPlan domain entity: a 7-day x 5-slot grid of optional recipes, plus planning preferences."""
from datetime import date, timedelta
from typing import Dict, Iterator, List, Optional, Tuple

from chefmate.domain.Recipe import Recipe
from chefmate.utilities.constants import DATE_FORMAT, DAYS_OF_WEEK, MEAL_SLOTS


class MealPlanPreferences:
    def __init__(self, dietary_restrictions: Optional[List[str]] = None, calorie_goal: int = 2000,
                 skill_level: str = "intermediate", prep_time: int = 30, servings: int = 2,
                 excluded_ingredients: Optional[List[str]] = None, budget: str = "medium",
                 equipment: Optional[List[str]] = None):
        self.dietary_restrictions = dietary_restrictions[:] if dietary_restrictions else []
        self.calorie_goal = calorie_goal
        self.skill_level = skill_level
        self.prep_time = prep_time
        self.servings = servings
        self.excluded_ingredients = excluded_ingredients[:] if excluded_ingredients else []
        self.budget = budget
        self.equipment = equipment[:] if equipment else []

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        allowed = {"dietary_restrictions", "calorie_goal", "skill_level", "prep_time", "servings",
                   "excluded_ingredients", "budget", "equipment"}
        return MealPlanPreferences(**{k: v for k, v in d.items() if k in allowed})

    def to_dict(self):
        return {
            "dietary_restrictions": self.dietary_restrictions,
            "calorie_goal": self.calorie_goal,
            "skill_level": self.skill_level,
            "prep_time": self.prep_time,
            "servings": self.servings,
            "excluded_ingredients": self.excluded_ingredients,
            "budget": self.budget,
            "equipment": self.equipment,
        }


def empty_week() -> Dict[str, Dict[str, Optional[Recipe]]]:
    return {day: {slot: None for slot in MEAL_SLOTS} for day in DAYS_OF_WEEK}


class MealPlan:
    def __init__(self, meals: Optional[Dict[str, Dict[str, Optional[Recipe]]]] = None,
                 start_date: Optional[str] = None, end_date: Optional[str] = None,
                 preferences: Optional[MealPlanPreferences] = None, id: Optional[str] = None,
                 user_id: Optional[str] = None, created_at: Optional[str] = None):
        today = date.today()
        self.id = id
        self.user_id = user_id
        self.start_date = start_date or today.strftime(DATE_FORMAT)
        self.end_date = end_date or (today + timedelta(days=6)).strftime(DATE_FORMAT)
        self.preferences = preferences or MealPlanPreferences()
        self.created_at = created_at
        # Every day and slot is always present; absent recipes are None
        self.meals = empty_week()
        for day, slots in (meals or {}).items():
            for slot, recipe in (slots or {}).items():
                self.set_meal(day, slot, recipe)

    def __str__(self) -> str:
        return f"MealPlan {self.start_date} - {self.end_date} ({self.count_meals()} meals)"

    __repr__ = __str__

    def set_meal(self, day: str, slot: str, recipe: Optional[Recipe]):
        '''Assigns a recipe to a slot; None clears it.'''
        if day not in self.meals:
            raise ValueError(f"Unknown day: {day!r}")
        if slot not in MEAL_SLOTS:
            raise ValueError(f"Unknown meal slot: {slot!r}")
        self.meals[day][slot] = recipe

    def get_meal(self, day: str, slot: str) -> Optional[Recipe]:
        return self.meals.get(day, {}).get(slot)

    def iter_meals(self) -> Iterator[Tuple[str, str, Recipe]]:
        """Yield (day, slot, recipe) for populated slots, in week order then slot order."""
        for day in DAYS_OF_WEEK:
            slots = self.meals.get(day, {})
            for slot in MEAL_SLOTS:
                recipe = slots.get(slot)
                if recipe is not None:
                    yield day, slot, recipe

    def count_meals(self) -> int:
        return sum(1 for _ in self.iter_meals())

    @staticmethod
    def from_dict(data):
        '''
        Builds a MealPlan from its JSON form. Unknown days and slots are dropped,
        recipes may be given as full recipe dictionaries or null.
        '''
        d = dict(data) if isinstance(data, dict) else {}
        meals = {}
        for day, slots in (d.get("meals") or {}).items():
            if day not in DAYS_OF_WEEK or not isinstance(slots, dict):
                continue
            meals[day] = {
                slot: (Recipe.from_dict(val) if isinstance(val, dict) else None)
                for slot, val in slots.items() if slot in MEAL_SLOTS
            }
        return MealPlan(
            meals=meals,
            start_date=d.get("start_date"),
            end_date=d.get("end_date"),
            preferences=MealPlanPreferences.from_dict(d.get("preferences")),
            id=d.get("id"),
            user_id=d.get("user_id"),
            created_at=d.get("created_at"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "start_date": self.start_date,
            "end_date": self.end_date,
            "preferences": self.preferences.to_dict(),
            "meals": {
                day: {slot: (r.to_dict() if r is not None else None) for slot, r in slots.items()}
                for day, slots in self.meals.items()
            },
            "created_at": self.created_at,
        }
