"""Lookup errors raised by the repositories; the web layer maps them to 404."""


class NotFoundError(LookupError):
    pass


class RecipeNotFoundError(NotFoundError):
    def __init__(self, recipe_id: str):
        super().__init__(f"Recipe '{recipe_id}' not found.")
        self.recipe_id = recipe_id


class MealPlanNotFoundError(NotFoundError):
    def __init__(self, plan_id: str):
        super().__init__(f"Meal plan '{plan_id}' not found.")
        self.plan_id = plan_id


class ShoppingListNotFoundError(NotFoundError):
    def __init__(self, plan_id: str):
        super().__init__(f"No saved shopping list for meal plan '{plan_id}'.")
        self.plan_id = plan_id


__all__ = ['NotFoundError', 'RecipeNotFoundError', 'MealPlanNotFoundError', 'ShoppingListNotFoundError']
