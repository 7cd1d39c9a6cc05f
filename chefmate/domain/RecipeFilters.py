"""Typed recipe search filter used by the recipe repository and the search endpoint."""
from typing import List, Optional

from chefmate.domain.Recipe import Recipe


class RecipeFilters:
    def __init__(self, query: str = "", dietary_restrictions: Optional[List[str]] = None,
                 max_prep_time: Optional[int] = None, difficulty: Optional[str] = None):
        self.query = (query or "").strip()
        self.dietary_restrictions = [r.strip().lower() for r in (dietary_restrictions or []) if r and r.strip()]
        # 0 means "no limit", same as an empty field in the search form
        self.max_prep_time = max_prep_time or None
        self.difficulty = difficulty or None

    def __repr__(self) -> str:
        return (f"RecipeFilters(query={self.query!r}, dietary_restrictions={self.dietary_restrictions!r}, "
                f"max_prep_time={self.max_prep_time!r}, difficulty={self.difficulty!r})")

    def matches(self, recipe: Recipe) -> bool:
        '''
        True when the recipe satisfies every filter that is set.
        Name match is a case-insensitive substring; dietary restrictions must all be present.
        '''
        if self.query and self.query.lower() not in (recipe.name or "").lower():
            return False
        if self.dietary_restrictions:
            tags = {t.lower() for t in recipe.dietary_restrictions}
            if not all(r in tags for r in self.dietary_restrictions):
                return False
        if self.max_prep_time is not None and (recipe.prep_time or 0) > self.max_prep_time:
            return False
        if self.difficulty and recipe.difficulty != self.difficulty:
            return False
        return True
