from fastapi import (
    FastAPI,
    Request,
    Query,
    HTTPException,
    Response,
    Depends,
)
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from typing import Optional, Sequence
import logging

from chefmate.api.dependencies import get_plan_repository, get_shopping_list_repository
from chefmate.domain.MealPlan import MealPlan
from chefmate.domain.ShoppingList import ShoppingList, ShoppingListItem
from chefmate.events.event_helpers import (
    publish_meal_plan_saved,
    publish_shopping_list_generated,
    publish_shopping_list_saved,
)
from chefmate.events.web_observers import start as start_event_observers, get_events as get_web_events
from chefmate.infra.errors import MealPlanNotFoundError, ShoppingListNotFoundError
from chefmate.infra.pdf_utils import generate_pdf_for_shopping_list
from chefmate.infra.Plan_Repository import PlanRepository
from chefmate.infra.ShoppingList_Repository import ShoppingListRepository
from chefmate.logic.shopping.export import export_text, format_amount, group_by_category
from chefmate.logic.shopping.list_builder import build_shopping_list
from chefmate.utilities.config import TEMPLATES_DIR
from chefmate.utilities.constants import SHOPPING_LIST_FILENAME
from chefmate.utilities.validators import MealPlanInput

# Routers
from chefmate.api.routes import recipes
from chefmate.api.api_ai import router as ai_router

# Logging
logger = logging.getLogger("chefmate_app")

# Initialize FastAPI app
app = FastAPI(title="ChefMate Recipes, Meal Plans & Shopping Lists API")

# Include routers
app.include_router(recipes.router)
app.include_router(ai_router)

# Templates
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["amount"] = format_amount


@app.on_event("startup")
def _startup_web_observers():
    """Register event bus subscribers for web notifications when the app starts."""
    start_event_observers()
    logger.info("Web observers for application events started")


# -------------------- Helpers --------------------
def _load_plan(repo: PlanRepository, plan_id: str) -> MealPlan:
    try:
        return repo.get(plan_id)
    except MealPlanNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


def _shopping_payload(plan_id: Optional[str], items: Sequence[ShoppingListItem]) -> dict:
    return {
        "meal_plan_id": plan_id,
        "items": [i.to_dict() for i in items],
        "count": len(items),
        "categories": {c: [i.to_dict() for i in group] for c, group in group_by_category(items).items()},
    }


def _generate(plan: MealPlan):
    items = build_shopping_list(plan)
    publish_shopping_list_generated(plan.id, items)
    return items


# -------------------- API: Meal Plans --------------------
@app.get("/api/meal-plans")
def list_meal_plans(repo: PlanRepository = Depends(get_plan_repository)):
    plans = repo.list_plans()
    return {"meal_plans": [p.to_dict() for p in plans], "count": len(plans)}


@app.post("/api/meal-plans", status_code=201)
def save_meal_plan(payload: MealPlanInput, repo: PlanRepository = Depends(get_plan_repository)):
    plan = repo.save(payload.to_domain())
    logger.info("Meal plan %s saved with %d meals", plan.id, plan.count_meals())
    publish_meal_plan_saved(plan)
    return plan.to_dict()


@app.get("/api/meal-plans/{plan_id}")
def get_meal_plan(plan_id: str, repo: PlanRepository = Depends(get_plan_repository)):
    return _load_plan(repo, plan_id).to_dict()


# -------------------- API: Shopping List --------------------
@app.post("/api/shopping-list")
def api_shopping_list_for_plan(payload: MealPlanInput):
    """Build the shopping list for an unsaved meal plan sent in the body."""
    items = _generate(payload.to_domain())
    return _shopping_payload(None, items)


@app.get("/api/meal-plans/{plan_id}/shopping-list")
def api_shopping_list(plan_id: str,
                      save: Optional[int] = Query(default=None),
                      repo: PlanRepository = Depends(get_plan_repository),
                      lists: ShoppingListRepository = Depends(get_shopping_list_repository)):
    plan = _load_plan(repo, plan_id)
    items = _generate(plan)
    payload = _shopping_payload(plan_id, items)
    if save is not None and int(save) == 1:
        saved = lists.save(ShoppingList(items=items, meal_plan_id=plan_id, user_id=plan.user_id))
        logger.info("Shopping list saved for meal plan %s", plan_id)
        publish_shopping_list_saved(plan_id, len(saved))
        payload["id"] = saved.id
        payload["created_at"] = saved.created_at
    return payload


@app.get("/api/meal-plans/{plan_id}/shopping-list/saved")
def api_saved_shopping_list(plan_id: str,
                            lists: ShoppingListRepository = Depends(get_shopping_list_repository)):
    try:
        saved = lists.get(plan_id)
    except ShoppingListNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    payload = _shopping_payload(plan_id, saved.items)
    payload["id"] = saved.id
    payload["created_at"] = saved.created_at
    return payload


@app.get("/api/meal-plans/{plan_id}/shopping-list/export")
def export_shopping_list(plan_id: str, repo: PlanRepository = Depends(get_plan_repository)):
    items = _generate(_load_plan(repo, plan_id))
    return Response(
        content=export_text(items),
        media_type="text/plain; charset=utf-8",
        headers={"Content-Disposition": f"attachment; filename={SHOPPING_LIST_FILENAME}"},
    )


@app.get("/api/meal-plans/{plan_id}/shopping-list/pdf")
def export_shopping_list_pdf(plan_id: str, repo: PlanRepository = Depends(get_plan_repository)):
    plan = _load_plan(repo, plan_id)
    pdf_bytes = generate_pdf_for_shopping_list(
        _generate(plan), title=f"Shopping List {plan.start_date} - {plan.end_date}"
    )
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename=shopping_list_{plan_id}.pdf"},
    )


# -------------------- UI PAGES --------------------
@app.get("/shopping-list/{plan_id}", response_class=HTMLResponse)
def shopping_list_page(request: Request, plan_id: str, repo: PlanRepository = Depends(get_plan_repository)):
    plan = _load_plan(repo, plan_id)
    items = _generate(plan)
    return templates.TemplateResponse(
        request,
        "shopping_list.html",
        {
            "plan": plan,
            "groups": group_by_category(items),
            "total_items": len(items),
        }
    )


# -------------------- API: Events --------------------
@app.get("/api/events")
def api_events(since: Optional[int] = Query(default=None)):
    return get_web_events(since)
