"""ScaledIngredient: a recipe ingredient after scaling, with its display text."""
from typing import Optional, Union

from portions.domain.RecipeIngredient import RecipeIngredient

Number = Union[int, float]


class ScaledIngredient:
    def __init__(self, original: RecipeIngredient, scaled_quantity: Optional[Number],
                 scaled_unit: Optional[str], display_text: str, was_converted: bool = False,
                 conversion_note: Optional[str] = None):
        self.original = original
        self.scaled_quantity = scaled_quantity
        self.scaled_unit = scaled_unit
        self.display_text = display_text
        self.was_converted = was_converted
        self.conversion_note = conversion_note

    def __str__(self) -> str:
        text = f"{self.original.name} - {self.display_text}"
        if self.conversion_note:
            text += f" ({self.conversion_note})"
        return text

    __repr__ = __str__

    def to_dict(self):
        return {
            "original": self.original.to_dict(),
            "scaled_quantity": self.scaled_quantity,
            "scaled_unit": self.scaled_unit,
            "display_text": self.display_text,
            "was_converted": self.was_converted,
            "conversion_note": self.conversion_note,
        }
