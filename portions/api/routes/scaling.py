from fastapi import APIRouter, HTTPException, Query
import logging

from portions.logic.scaling.formatter import format_quantity, format_scale_factor
from portions.logic.scaling.presets import (
    SCALING_PRESETS,
    SCENARIOS,
    calculate_target_servings,
    recommended_scale_factor,
    should_suggest_advice,
)
from portions.logic.scaling.scaler import scale_ingredient, scale_recipe
from portions.logic.scaling.simplifier import simplify_quantity
from portions.utilities.validators import QuantityInput, ScaleIngredientInput, ScaleRecipeInput

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["scaling"])


@router.post("/scale")
def api_scale_recipe(payload: ScaleRecipeInput):
    """Scale a recipe's ingredients from original to target servings."""
    ingredients = [ing.to_domain() for ing in payload.ingredients]
    result = scale_recipe(ingredients, payload.original_servings, payload.target_servings)
    if result.warnings:
        logger.info(f"Scaling x{result.scale_factor:g} produced {len(result.warnings)} warnings")
    data = result.to_dict()
    data["scale_label"] = format_scale_factor(result.scale_factor)
    data["suggest_advice"] = should_suggest_advice(result)
    return data


@router.post("/scale/ingredient")
def api_scale_ingredient(payload: ScaleIngredientInput):
    return scale_ingredient(payload.ingredient.to_domain(), payload.factor).to_dict()


@router.get("/scale/presets")
def api_scale_presets():
    return {"presets": [{"value": p.value, "label": p.label} for p in SCALING_PRESETS]}


@router.get("/scale/recommend")
def api_recommend(servings: float = Query(..., gt=0), scenario: str = Query(...)):
    """Recommended factor and resulting servings for a named scenario."""
    if scenario not in SCENARIOS:
        raise HTTPException(status_code=400, detail=f"Unknown scenario '{scenario}'. Expected one of: {', '.join(SCENARIOS)}")
    factor = recommended_scale_factor(servings, scenario)
    return {
        "scenario": scenario,
        "scale_factor": factor,
        "label": format_scale_factor(factor),
        "target_servings": calculate_target_servings(servings, factor),
    }


@router.post("/quantity/simplify")
def api_simplify(payload: QuantityInput):
    if payload.quantity is None:
        # nothing to simplify for "to taste"
        return {"quantity": None, "unit": payload.unit, "note": None}
    simplified = simplify_quantity(payload.quantity, payload.unit)
    return simplified._asdict()


@router.post("/quantity/format")
def api_format(payload: QuantityInput):
    return {"text": format_quantity(payload.quantity, payload.unit)}
