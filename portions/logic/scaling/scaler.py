"""Ingredient and recipe scaling.

scale_recipe(ingredients, original_servings, target_servings) computes one
scale factor (target / original), runs every ingredient through
scale_ingredient and the warning engine, and adds recipe-wide warnings and a
cooking-time hint. original_servings must be positive; zero is not guarded
and raises ZeroDivisionError.
"""
import logging
from typing import Iterable, List, Optional, Union

from portions.domain.RecipeIngredient import RecipeIngredient
from portions.domain.ScaledIngredient import ScaledIngredient
from portions.domain.ScalingKnowledge import ScalingKnowledge
from portions.domain.ScalingResult import ScalingResult, TimingAdjustment
from portions.domain.ScalingWarning import ScalingWarning
from portions.infra.Knowledge_Repository import load_scaling_knowledge
from portions.logic.scaling.formatter import format_quantity
from portions.logic.scaling.rounding import RoundingPolicy, round_half_up
from portions.logic.scaling.simplifier import simplify_quantity
from portions.logic.scaling.warning_engine import check_ingredient, general_warnings
from portions.utilities.constants import LARGE_BATCH_FACTOR, SMALL_BATCH_FACTOR, TO_TASTE

Number = Union[int, float]

logger = logging.getLogger(__name__)

__all__ = ["scale_ingredient", "scale_recipe", "timing_adjustments"]


def scale_ingredient(ingredient: RecipeIngredient, factor: float, *,
                     policy: Optional[RoundingPolicy] = None) -> ScaledIngredient:
    """Scale one ingredient and simplify its unit for display."""
    if ingredient.quantity is None:
        return ScaledIngredient(
            original=ingredient,
            scaled_quantity=None,
            scaled_unit=ingredient.unit,
            display_text=TO_TASTE,
            was_converted=False,
        )

    raw = ingredient.quantity * factor
    simplified = simplify_quantity(raw, ingredient.unit, policy=policy)
    return ScaledIngredient(
        original=ingredient,
        scaled_quantity=simplified.quantity,
        scaled_unit=simplified.unit,
        display_text=format_quantity(simplified.quantity, simplified.unit),
        was_converted=simplified.note is not None,
        conversion_note=simplified.note,
    )


def timing_adjustments(factor: float) -> List[TimingAdjustment]:
    """Rough cooking-time hint for big or small batches (at most one)."""
    if factor >= LARGE_BATCH_FACTOR:
        percent = round_half_up((factor - 1) * 10)
        return [TimingAdjustment(0, f"Cooking time may increase by {percent}% for larger quantities")]
    if factor <= SMALL_BATCH_FACTOR:
        percent = round_half_up((1 - factor) * 30)
        return [TimingAdjustment(0, f"Cooking time may decrease by {percent}% for smaller quantities")]
    return []


def scale_recipe(ingredients: Iterable[RecipeIngredient], original_servings: Number,
                 target_servings: Number, *, knowledge: Optional[ScalingKnowledge] = None,
                 policy: Optional[RoundingPolicy] = None) -> ScalingResult:
    knowledge = knowledge if knowledge is not None else load_scaling_knowledge()
    factor = target_servings / original_servings

    scaled: List[ScaledIngredient] = []
    warnings: List[ScalingWarning] = []
    for ingredient in ingredients:
        result = scale_ingredient(ingredient, factor, policy=policy)
        scaled.append(result)
        warning = check_ingredient(ingredient, factor, result.scaled_quantity, knowledge)
        if warning is not None:
            warnings.append(warning)

    warnings.extend(general_warnings(factor))
    logger.debug("Scaled %d ingredients by %.3f (%d warnings)", len(scaled), factor, len(warnings))

    return ScalingResult(
        original_servings=original_servings,
        target_servings=target_servings,
        scale_factor=factor,
        ingredients=scaled,
        warnings=warnings,
        timing_adjustments=timing_adjustments(factor),
    )
