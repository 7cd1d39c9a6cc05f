import logging
from pathlib import Path
from typing import List, Optional
from uuid import uuid4

from chefmate.domain.Recipe import Recipe
from chefmate.domain.RecipeFilters import RecipeFilters
from chefmate.infra.errors import RecipeNotFoundError
from chefmate.infra.json_store import atomic_write, load_json, store_lock
from chefmate.infra.paths import RECIPES_FILE

logger = logging.getLogger(__name__)


class RecipeRepository:
    """Recipes stored as a JSON list in `recipes.json`."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else RECIPES_FILE

    def _load(self) -> List[dict]:
        return load_json(self.path, [])

    def list_recipes(self) -> List[Recipe]:
        recipes = []
        for entry in self._load():
            try:
                recipes.append(Recipe.from_dict(entry))
            except (TypeError, ValueError) as e:
                logger.warning("Skipping malformed recipe entry in %s: %s", self.path, e)
        return recipes

    def get(self, recipe_id: str) -> Recipe:
        for recipe in self.list_recipes():
            if recipe.id == recipe_id:
                return recipe
        raise RecipeNotFoundError(recipe_id)

    def search(self, filters: Optional[RecipeFilters] = None) -> List[Recipe]:
        """Return recipes matching the filters, ordered by name."""
        filters = filters or RecipeFilters()
        found = [r for r in self.list_recipes() if filters.matches(r)]
        found.sort(key=lambda r: r.name)
        return found

    def save(self, recipe: Recipe) -> Recipe:
        '''
        Inserts a new recipe and returns it with its assigned id.
        Raises ValueError when a recipe with the same name (case-insensitive) exists.
        '''
        name = (recipe.name or "").strip()
        with store_lock:
            data = self._load()
            if any((r.get("name") or "").strip().lower() == name.lower() for r in data):
                raise ValueError(f"Recipe with name '{name}' already exists")
            if not recipe.id:
                recipe.id = uuid4().hex
            data.append(recipe.to_dict())
            atomic_write(self.path, data)
        logger.info("Saved recipe %s (%s)", recipe.name, recipe.id)
        return recipe


__all__ = ['RecipeRepository']
