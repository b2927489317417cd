"""Shopping list builder.

Flattens the meal-plan entries that fall inside a date range into aggregation
entries (ingredient, servings, recipe_id), then aggregates and groups them.
Provides build_shopping_list(plan_entries, recipes, start, end).
"""
import calendar
from datetime import date as _date, timedelta
from typing import Any, Dict, Iterable, List, Optional, Tuple

from portions.domain.Plan import MealPlanEntry
from portions.domain.RecipeIngredient import RecipeIngredient
from portions.domain.ShoppingList import ShoppingList
from portions.logic.shopping.aggregator import AggregationEntry, aggregate_ingredients, group_by_category

DATE_RANGE_OPTIONS = ('this-week', 'next-week', 'this-month')


def date_range(option: str, today: Optional[_date] = None) -> Tuple[_date, _date]:
    """Inclusive (start, end) for a named range; weeks run Sunday to Saturday."""
    today = today or _date.today()
    if option in ('this-week', 'next-week'):
        anchor = today + timedelta(days=7) if option == 'next-week' else today
        # Python weekday(): Monday=0 ... Sunday=6
        start = anchor - timedelta(days=(anchor.weekday() + 1) % 7)
        return start, start + timedelta(days=6)
    if option == 'this-month':
        last_day = calendar.monthrange(today.year, today.month)[1]
        return today.replace(day=1), today.replace(day=last_day)
    raise ValueError(f"Unknown date range option: {option!r}")


def _recipe_index(recipes: Iterable[Dict[str, Any]]) -> Dict[str, List[RecipeIngredient]]:
    index: Dict[str, List[RecipeIngredient]] = {}
    for recipe in recipes:
        recipe_id = recipe.get('id')
        if not recipe_id:
            continue
        index[recipe_id] = [
            ing if isinstance(ing, RecipeIngredient) else RecipeIngredient.from_dict(ing)
            for ing in recipe.get('ingredients', [])
        ]
    return index


def collect_entries(plan_entries: Iterable[MealPlanEntry], recipes: Iterable[Dict[str, Any]],
                    start: _date, end: _date) -> List[AggregationEntry]:
    """Aggregation entries for every planned meal between start and end (inclusive).

    Empty slots and meals whose recipe is unknown are skipped.
    """
    index = _recipe_index(recipes)
    entries: List[AggregationEntry] = []
    for meal in plan_entries:
        if not (start <= meal.plan_date <= end):
            continue
        if not meal.recipe_id:
            continue
        ingredients = index.get(meal.recipe_id)
        if ingredients is None:
            continue
        for ingredient in ingredients:
            entries.append(AggregationEntry(ingredient, meal.servings, meal.recipe_id))
    return entries


def build_shopping_list(plan_entries: Iterable[MealPlanEntry], recipes: Iterable[Dict[str, Any]],
                        start: _date, end: _date) -> ShoppingList:
    """Category-grouped shopping list for the meals planned between start and end."""
    entries = collect_entries(plan_entries, recipes, start, end)
    return group_by_category(aggregate_ingredients(entries))


__all__ = ['DATE_RANGE_OPTIONS', 'date_range', 'collect_entries', 'build_shopping_list']
