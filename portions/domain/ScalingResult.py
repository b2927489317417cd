"""ScalingResult aggregate: every scaled ingredient of a recipe plus warnings and timing hints."""
from typing import List, Optional, Union

from portions.domain.ScaledIngredient import ScaledIngredient
from portions.domain.ScalingWarning import ScalingWarning

Number = Union[int, float]


class TimingAdjustment:
    def __init__(self, step: int, note: str, original_time: Optional[int] = None,
                 adjusted_time: Optional[int] = None):
        self.step = step
        self.note = note
        self.original_time = original_time
        self.adjusted_time = adjusted_time

    def __str__(self) -> str:
        return f"Step {self.step}: {self.note}"

    __repr__ = __str__

    def to_dict(self):
        return {
            "step": self.step,
            "note": self.note,
            "original_time": self.original_time,
            "adjusted_time": self.adjusted_time,
        }


class ScalingResult:
    def __init__(self, original_servings: Number, target_servings: Number, scale_factor: float,
                 ingredients: Optional[List[ScaledIngredient]] = None,
                 warnings: Optional[List[ScalingWarning]] = None,
                 timing_adjustments: Optional[List[TimingAdjustment]] = None):
        self.original_servings = original_servings
        self.target_servings = target_servings
        self.scale_factor = scale_factor
        self.ingredients = ingredients[:] if ingredients else []
        self.warnings = warnings[:] if warnings else []
        # None rather than [] when there is nothing to adjust
        self.timing_adjustments = timing_adjustments[:] if timing_adjustments else None

    def __str__(self) -> str:
        return (f"Scaled {self.original_servings} -> {self.target_servings} servings "
                f"(x{self.scale_factor:g}) - {len(self.ingredients)} ingredients, "
                f"{len(self.warnings)} warnings")

    __repr__ = __str__

    def to_dict(self):
        return {
            "original_servings": self.original_servings,
            "target_servings": self.target_servings,
            "scale_factor": self.scale_factor,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "warnings": [w.to_dict() for w in self.warnings],
            "timing_adjustments": (
                [t.to_dict() for t in self.timing_adjustments]
                if self.timing_adjustments is not None else None
            ),
        }
