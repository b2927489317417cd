"""Serving-size presets and small helpers around scale factors."""
import math
from typing import Final, List, NamedTuple, Union

from portions.domain.ScalingResult import ScalingResult
from portions.logic.scaling.formatter import format_scale_factor
from portions.logic.scaling.rounding import round_half_up
from portions.utilities.constants import SMALL_BATCH_FACTOR, VERY_LARGE_BATCH_FACTOR

Number = Union[int, float]

__all__ = [
    "ScalingPreset", "SCALING_PRESETS", "SCENARIOS",
    "recommended_scale_factor", "calculate_target_servings", "should_suggest_advice",
]


class ScalingPreset(NamedTuple):
    value: float
    label: str


SCALING_PRESETS: Final[List[ScalingPreset]] = [
    ScalingPreset(v, format_scale_factor(v)) for v in (0.5, 1, 2, 4)
]

SCENARIOS: Final[tuple] = ('half', 'double', 'dinner-party', 'meal-prep')


def recommended_scale_factor(current_servings: Number, scenario: str) -> float:
    """Scale factor for a common cooking scenario; unknown scenarios keep the recipe as is."""
    if scenario == 'half':
        return 0.5
    if scenario == 'double':
        return 2
    if scenario == 'dinner-party':
        # feed at least 8
        return max(2, math.ceil(8 / current_servings))
    if scenario == 'meal-prep':
        # a dozen portions
        return max(3, math.ceil(12 / current_servings))
    return 1


def calculate_target_servings(original_servings: Number, scale_factor: float) -> int:
    return int(round_half_up(original_servings * scale_factor))


def should_suggest_advice(result: ScalingResult) -> bool:
    """True when the result is unusual enough that a cook would want extra guidance."""
    return (
        len(result.warnings) > 0
        or result.scale_factor > VERY_LARGE_BATCH_FACTOR
        or result.scale_factor < SMALL_BATCH_FACTOR
    )
