"""AggregatedIngredient: one shopping-list line summed across several recipes."""
from typing import List, Optional, Union

from portions.domain.IngredientCategory import IngredientCategory

Number = Union[int, float]


class AggregatedIngredient:
    def __init__(self, ingredient_id: Optional[str], name: str, category: IngredientCategory,
                 total_quantity: Optional[Number], unit: Optional[str],
                 source_recipe_ids: Optional[List[str]] = None):
        self.ingredient_id = ingredient_id
        self.name = name
        self.category = IngredientCategory.coerce(category, name)
        self.total_quantity = total_quantity
        self.unit = unit
        self.source_recipe_ids = source_recipe_ids[:] if source_recipe_ids else []

    def add(self, quantity: Optional[Number], recipe_id: str):
        '''Adds a contribution; a missing quantity on either side leaves the total untouched.'''
        if quantity is not None and self.total_quantity is not None:
            self.total_quantity += quantity
        if recipe_id not in self.source_recipe_ids:
            self.source_recipe_ids.append(recipe_id)

    def __str__(self) -> str:
        amount = "to taste" if self.total_quantity is None else f"{self.total_quantity:g} {self.unit or ''}".strip()
        return f"{self.name} - {amount} - Recipes: {', '.join(self.source_recipe_ids)}"

    __repr__ = __str__

    def to_dict(self):
        return {
            "ingredient_id": self.ingredient_id,
            "name": self.name,
            "category": self.category.value,
            "total_quantity": self.total_quantity,
            "unit": self.unit,
            "source_recipe_ids": list(self.source_recipe_ids),
        }
