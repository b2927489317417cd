"""RecipeIngredient entity: one line of a recipe (name, category, quantity, unit, preparation notes)."""
from typing import Optional, Union

from portions.domain.IngredientCategory import IngredientCategory

Number = Union[int, float]


class RecipeIngredient:
    def __init__(self, id: str = "", name: str = "", quantity: Optional[Number] = None,
                 unit: Optional[str] = None, category=IngredientCategory.OTHER,
                 ingredient_id: Optional[str] = None, preparation: Optional[str] = None,
                 notes: Optional[str] = None):
        # quantity None means "to taste", it is never defaulted to zero
        self.id = id
        self.ingredient_id = ingredient_id or None
        self.name = name
        self.category = IngredientCategory.coerce(category, name)
        self.quantity = quantity
        self.unit = unit or None
        self.preparation = preparation
        self.notes = notes

    @property
    def is_to_taste(self) -> bool:
        return self.quantity is None

    def __str__(self) -> str:
        amount = "to taste" if self.quantity is None else f"{self.quantity} {self.unit or ''}".strip()
        parts = [f"{self.name} - {amount}"]
        if self.preparation:
            parts.append(self.preparation)
        if self.notes:
            parts.append(f"({self.notes})")
        return " - ".join(parts)

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, RecipeIngredient):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @staticmethod
    def from_dict(data):
        '''Creates a RecipeIngredient from a dictionary. Accepts camelCase keys, ignores unknown ones.'''
        d = dict(data) if isinstance(data, dict) else {}
        if "ingredientId" in d and "ingredient_id" not in d:
            d["ingredient_id"] = d.pop("ingredientId")
        allowed = {"id", "ingredient_id", "name", "category", "quantity", "unit", "preparation", "notes"}
        filtered = {k: v for k, v in d.items() if k in allowed}
        filtered.setdefault("id", "")
        filtered.setdefault("name", "")
        if filtered.get("category") is None:
            filtered["category"] = IngredientCategory.infer(filtered["name"])
        return RecipeIngredient(**filtered)

    def to_dict(self):
        '''Converts the RecipeIngredient to a JSON-friendly dictionary.'''
        return {
            "id": self.id,
            "ingredient_id": self.ingredient_id,
            "name": self.name,
            "category": self.category.value,
            "quantity": self.quantity,
            "unit": self.unit,
            "preparation": self.preparation,
            "notes": self.notes,
        }
