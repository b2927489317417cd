from fastapi import APIRouter, HTTPException
import logging

from portions.logic.shopping.aggregator import AggregationEntry, aggregate_ingredients, group_by_category
from portions.logic.shopping.list_builder import build_shopping_list, date_range
from portions.utilities.validators import AggregateInput, ShoppingPlanInput

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/shopping-list", tags=["shopping"])


@router.post("/aggregate")
def api_aggregate(payload: AggregateInput):
    """Merge ingredient contributions into a category-grouped shopping list."""
    entries = [
        AggregationEntry(e.ingredient.to_domain(), e.servings, e.recipe_id)
        for e in payload.entries
    ]
    aggregated = aggregate_ingredients(entries)
    grouped = group_by_category(aggregated)
    return {"count": len(aggregated), "categories": grouped.to_dict()}


@router.post("/plan")
def api_plan_shopping_list(payload: ShoppingPlanInput):
    """Shopping list for the meals planned inside a date range."""
    if payload.range:
        try:
            start, end = date_range(payload.range)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
    else:
        start, end = payload.start_date, payload.end_date

    recipes = [r.model_dump() for r in payload.recipes]
    plan_entries = [e.to_domain() for e in payload.entries]
    shopping_list = build_shopping_list(plan_entries, recipes, start, end)
    logger.info(f"Built shopping list {start.isoformat()}..{end.isoformat()} with {len(shopping_list)} items")
    return {
        "start_date": start.isoformat(),
        "end_date": end.isoformat(),
        "count": len(shopping_list),
        "categories": shopping_list.to_dict(),
    }
