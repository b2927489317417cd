"""Magnitude-tier rounding policy.

Small amounts are rounded finely and large ones coarsely so scaled quantities
stay readable: below 1 to the nearest quarter, below 10 to the nearest half,
everything else to a whole number.
"""
import math
from typing import Iterable, NamedTuple, Optional, Tuple, Union

Number = Union[int, float]

__all__ = ["RoundingTier", "RoundingPolicy", "DEFAULT_ROUNDING", "round_half_up"]


def round_half_up(value: float, step: float = 1) -> Number:
    """Round to the nearest multiple of step, ties away from zero for positive values."""
    result = math.floor(value / step + 0.5) * step
    # 0.1-style steps leave binary noise behind
    result = round(result, 10)
    return int(result) if float(result).is_integer() else result


class RoundingTier(NamedTuple):
    upper_bound: Optional[float]  # exclusive; None for the open-ended last tier
    step: float


class RoundingPolicy:
    def __init__(self, tiers: Iterable[Tuple[Optional[float], float]]):
        self.tiers = tuple(RoundingTier(*t) for t in tiers)
        if not self.tiers or self.tiers[-1].upper_bound is not None:
            raise ValueError("The last rounding tier must be open-ended (upper_bound=None)")

    def step_for(self, value: float) -> float:
        for tier in self.tiers:
            if tier.upper_bound is None or value < tier.upper_bound:
                return tier.step
        return self.tiers[-1].step

    def round(self, value: float) -> Number:
        return round_half_up(value, self.step_for(value))

    def __repr__(self) -> str:
        return f"RoundingPolicy({list(self.tiers)})"


DEFAULT_ROUNDING = RoundingPolicy([
    (1, 0.25),
    (10, 0.5),
    (None, 1),
])
