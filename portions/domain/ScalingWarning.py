"""ScalingWarning: advice attached to an ingredient (or the whole recipe) after scaling."""
from enum import Enum
from typing import Optional


class ScalingWarningType(str, Enum):
    MINIMUM_THRESHOLD = "minimum-threshold"
    NON_LINEAR = "non-linear"
    TECHNIQUE_CHANGE = "technique-change"
    TIMING_ADJUSTMENT = "timing-adjustment"
    EQUIPMENT_CHANGE = "equipment-change"


class ScalingWarning:
    def __init__(self, ingredient_id: str, ingredient_name: str, type: ScalingWarningType,
                 message: str, suggestion: Optional[str] = None):
        self.ingredient_id = ingredient_id
        self.ingredient_name = ingredient_name
        self.type = ScalingWarningType(type)
        self.message = message
        self.suggestion = suggestion

    def __str__(self) -> str:
        text = f"[{self.type.value}] {self.message}"
        if self.suggestion:
            text += f" - {self.suggestion}"
        return text

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, ScalingWarning):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def to_dict(self):
        return {
            "ingredient_id": self.ingredient_id,
            "ingredient_name": self.ingredient_name,
            "type": self.type.value,
            "message": self.message,
            "suggestion": self.suggestion,
        }
