"""Scaling warning engine.

Per-ingredient rules, first match wins:
  1. no master ingredient id -> nothing is known, no warning
  2. non-linear ingredient scaled up more than 2x or down below 0.5x
  3. scaled quantity under the ingredient's minimum usable amount

A non-linear ingredient that is also under its minimum only reports the
non-linear warning. Recipe-wide warnings are produced separately by
general_warnings().
"""
from typing import List, Optional, Union

from portions.domain.RecipeIngredient import RecipeIngredient
from portions.domain.ScalingKnowledge import ScalingKnowledge
from portions.domain.ScalingWarning import ScalingWarning, ScalingWarningType
from portions.utilities.constants import (
    GENERAL_WARNING_ID,
    GENERAL_WARNING_NAME,
    LARGE_BATCH_FACTOR,
    SMALL_BATCH_FACTOR,
    TECHNIQUE_CHANGE_FACTOR,
    VERY_LARGE_BATCH_FACTOR,
)

Number = Union[int, float]

__all__ = ["check_ingredient", "general_warnings"]


def _non_linear_warning(ingredient: RecipeIngredient, factor: float) -> Optional[ScalingWarning]:
    if factor > LARGE_BATCH_FACTOR:
        if factor > VERY_LARGE_BATCH_FACTOR:
            suggestion = 'Use 70-80% of calculated amount and adjust to taste'
        else:
            suggestion = 'You may need slightly less than calculated'
        return ScalingWarning(
            ingredient.ingredient_id, ingredient.name, ScalingWarningType.NON_LINEAR,
            f"{ingredient.name} doesn't scale linearly for large batches",
            suggestion,
        )
    if factor < SMALL_BATCH_FACTOR:
        return ScalingWarning(
            ingredient.ingredient_id, ingredient.name, ScalingWarningType.NON_LINEAR,
            f"{ingredient.name} may be difficult to measure accurately at this scale",
            'Consider rounding up slightly for better results',
        )
    return None


def check_ingredient(ingredient: RecipeIngredient, factor: float, scaled_quantity: Optional[Number],
                     knowledge: ScalingKnowledge) -> Optional[ScalingWarning]:
    """Return the single warning that applies to this ingredient, or None."""
    ingredient_id = ingredient.ingredient_id
    if not ingredient_id:
        return None

    if knowledge.is_non_linear(ingredient_id):
        warning = _non_linear_warning(ingredient, factor)
        if warning is not None:
            return warning

    minimum = knowledge.minimum_for(ingredient_id)
    if minimum is not None and scaled_quantity is not None and scaled_quantity < minimum.quantity:
        return ScalingWarning(
            ingredient_id, ingredient.name, ScalingWarningType.MINIMUM_THRESHOLD,
            f"{ingredient.name} quantity is below usable minimum",
            f"Use at least {minimum}",
        )
    return None


def general_warnings(factor: float) -> List[ScalingWarning]:
    """Recipe-wide warnings for extreme scale factors, technique change before timing."""
    warnings: List[ScalingWarning] = []
    if factor > TECHNIQUE_CHANGE_FACTOR:
        warnings.append(ScalingWarning(
            GENERAL_WARNING_ID, GENERAL_WARNING_NAME, ScalingWarningType.TECHNIQUE_CHANGE,
            f"Scaling more than {TECHNIQUE_CHANGE_FACTOR:g}x may require technique adjustments",
            'Consider cooking in batches for best results',
        ))
    if factor < SMALL_BATCH_FACTOR:
        warnings.append(ScalingWarning(
            GENERAL_WARNING_ID, GENERAL_WARNING_NAME, ScalingWarningType.TIMING_ADJUSTMENT,
            'Smaller portions may cook faster',
            'Check doneness 20-30% earlier than original timing',
        ))
    return warnings
