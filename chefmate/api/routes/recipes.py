import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from chefmate.api.dependencies import get_recipe_repository
from chefmate.domain.RecipeFilters import RecipeFilters
from chefmate.infra.errors import RecipeNotFoundError
from chefmate.infra.Recipe_Repository import RecipeRepository
from chefmate.utilities.validators import NewRecipeInput

router = APIRouter(prefix="/api/recipes", tags=["recipes"])
logger = logging.getLogger(__name__)


@router.get("")
def search_recipes(q: str = Query(default=""),
                   difficulty: Optional[str] = Query(default=None, pattern=r'^(easy|medium|hard)$'),
                   max_prep_time: Optional[int] = Query(default=None, ge=0),
                   dietary: List[str] = Query(default=[]),
                   repo: RecipeRepository = Depends(get_recipe_repository)):
    """Search recipes by name and filters; results are ordered by name."""
    filters = RecipeFilters(query=q, dietary_restrictions=dietary,
                            max_prep_time=max_prep_time, difficulty=difficulty)
    recipes = repo.search(filters)
    return {"recipes": [r.to_dict() for r in recipes], "count": len(recipes)}


@router.get("/{recipe_id}")
def get_recipe(recipe_id: str, repo: RecipeRepository = Depends(get_recipe_repository)):
    try:
        return repo.get(recipe_id).to_dict()
    except RecipeNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("", status_code=201)
def add_recipe(payload: NewRecipeInput, repo: RecipeRepository = Depends(get_recipe_repository)):
    recipe = payload.to_domain()
    try:
        saved = repo.save(recipe)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    logger.info("Recipe added via API: %s", saved.name)
    return saved.to_dict()
