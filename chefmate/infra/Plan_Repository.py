import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional
from uuid import uuid4

from chefmate.domain.MealPlan import MealPlan
from chefmate.infra.errors import MealPlanNotFoundError
from chefmate.infra.json_store import atomic_write, load_json, store_lock
from chefmate.infra.paths import MEAL_PLANS_FILE

logger = logging.getLogger(__name__)


class PlanRepository:
    """Meal plans stored in `meal_plans.json` as { plan_id: plan_dict }.

    Each plan embeds full recipe records in its slots, so a stored plan keeps
    producing the same shopping list even if the recipe catalogue changes later.
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else MEAL_PLANS_FILE

    def save(self, plan: MealPlan) -> MealPlan:
        if not plan.id:
            plan.id = uuid4().hex
        if not plan.created_at:
            plan.created_at = datetime.now(timezone.utc).isoformat()
        with store_lock:
            store = load_json(self.path, {})
            store[plan.id] = plan.to_dict()
            atomic_write(self.path, store)
        logger.info("Saved meal plan %s (%d meals)", plan.id, plan.count_meals())
        return plan

    def get(self, plan_id: str) -> MealPlan:
        store = load_json(self.path, {})
        data = store.get(plan_id)
        if data is None:
            raise MealPlanNotFoundError(plan_id)
        return MealPlan.from_dict(data)

    def list_plans(self) -> List[MealPlan]:
        """All stored plans, newest first."""
        plans = [MealPlan.from_dict(d) for d in load_json(self.path, {}).values()]
        plans.sort(key=lambda p: p.created_at or "", reverse=True)
        return plans


__all__ = ['PlanRepository']
