from pathlib import Path

from chefmate.utilities.config import DATA_DIR as _CONFIG_DATA_DIR

# Centralized paths for data files (single source of truth)
DATA_DIR: Path = _CONFIG_DATA_DIR
RECIPES_FILE = DATA_DIR / 'recipes.json'
MEAL_PLANS_FILE = DATA_DIR / 'meal_plans.json'
SHOPPING_LISTS_FILE = DATA_DIR / 'shopping_lists.json'

__all__ = ['DATA_DIR', 'RECIPES_FILE', 'MEAL_PLANS_FILE', 'SHOPPING_LISTS_FILE']
