"""Ingredient aggregation for shopping lists.

aggregate_ingredients(entries) merges (ingredient, servings, recipe_id) entries
whose (lower-cased name, canonical unit) match, multiplying each quantity by its
servings. Units are only respelled ("tablespoons" -> "tbsp"), never converted,
so "olive oil, tbsp" and "olive oil, cup" stay on separate lines.
group_by_category() then buckets the lines in aisle order.
"""
import logging
from typing import Any, Dict, Iterable, List, NamedTuple, Optional, Tuple, Union

from portions.domain.AggregatedIngredient import AggregatedIngredient
from portions.domain.IngredientCategory import IngredientCategory
from portions.domain.RecipeIngredient import RecipeIngredient
from portions.domain.ShoppingList import ShoppingList, ShoppingListGroup
from portions.logic.units.tables import canonical_unit
from portions.utilities.constants import CATEGORY_ORDER

Number = Union[int, float]

logger = logging.getLogger(__name__)

__all__ = ["AggregationEntry", "aggregation_key", "aggregate_ingredients", "group_by_category"]


class AggregationEntry(NamedTuple):
    ingredient: RecipeIngredient
    servings: Number
    recipe_id: str


def _coerce_entry(entry: Any) -> AggregationEntry:
    if isinstance(entry, AggregationEntry):
        return entry
    if isinstance(entry, dict):
        ingredient = entry.get('ingredient')
        servings = entry.get('servings', 1)
        recipe_id = entry.get('recipe_id', entry.get('recipeId', ''))
    else:
        ingredient, servings, recipe_id = entry
    if not isinstance(ingredient, RecipeIngredient):
        ingredient = RecipeIngredient.from_dict(ingredient)
    return AggregationEntry(ingredient, servings, recipe_id)


def aggregation_key(ingredient: RecipeIngredient) -> Tuple[str, str]:
    return (ingredient.name or '').lower(), canonical_unit(ingredient.unit)


def aggregate_ingredients(entries: Iterable[Any]) -> List[AggregatedIngredient]:
    """Merge entries into shopping-list totals, in first-seen order.

    A "to taste" quantity (None) is never summed: a line that starts as None
    stays None, and a None contribution leaves an existing total unchanged.
    """
    aggregated: Dict[Tuple[str, str], AggregatedIngredient] = {}

    for raw in entries:
        ingredient, servings, recipe_id = _coerce_entry(raw)
        key = aggregation_key(ingredient)
        quantity: Optional[Number] = None
        if ingredient.quantity is not None:
            quantity = ingredient.quantity * servings

        existing = aggregated.get(key)
        if existing is not None:
            existing.add(quantity, recipe_id)
            continue
        aggregated[key] = AggregatedIngredient(
            ingredient_id=ingredient.ingredient_id,
            name=ingredient.name,
            category=ingredient.category,
            total_quantity=quantity,
            unit=key[1] or None,
            source_recipe_ids=[recipe_id],
        )

    logger.debug("Aggregated %d shopping lines", len(aggregated))
    return list(aggregated.values())


def group_by_category(ingredients: Iterable[AggregatedIngredient]) -> ShoppingList:
    """Bucket items by category in fixed aisle order, leaving out empty categories."""
    buckets: Dict[str, List[AggregatedIngredient]] = {category: [] for category in CATEGORY_ORDER}
    for ingredient in ingredients:
        buckets[ingredient.category.value].append(ingredient)

    return ShoppingList([
        ShoppingListGroup(IngredientCategory(category), buckets[category])
        for category in CATEGORY_ORDER
        if buckets[category]
    ])
