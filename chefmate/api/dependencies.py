"""Repository providers for FastAPI's Depends; tests override them with temp-dir repositories."""
from chefmate.infra.Plan_Repository import PlanRepository
from chefmate.infra.Recipe_Repository import RecipeRepository
from chefmate.infra.ShoppingList_Repository import ShoppingListRepository


def get_recipe_repository() -> RecipeRepository:
    return RecipeRepository()


def get_plan_repository() -> PlanRepository:
    return PlanRepository()


def get_shopping_list_repository() -> ShoppingListRepository:
    return ShoppingListRepository()
