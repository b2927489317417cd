"""ScalingKnowledge: reference data about ingredients that resist linear scaling.

Holds the set of non-linear ingredient ids and the minimum usable quantity per
ingredient id. Instances are read-only once built and are passed explicitly to
the warning engine, so tests can supply synthetic data.
"""
from types import MappingProxyType
from typing import Any, Iterable, Mapping, NamedTuple, Optional, Union

Number = Union[int, float]


class MinimumQuantity(NamedTuple):
    quantity: Number
    unit: str = ""

    def __str__(self) -> str:
        return f"{self.quantity:g} {self.unit}".strip()


def _as_minimum(ingredient_id: str, value) -> MinimumQuantity:
    """Accept a MinimumQuantity, a (quantity, unit) pair or a {"quantity", "unit"} mapping."""
    if isinstance(value, Mapping):
        minimum = MinimumQuantity(value.get('quantity'), value.get('unit') or "")
    elif isinstance(value, (int, float)):
        minimum = MinimumQuantity(value)
    else:
        minimum = MinimumQuantity(*value)
    if isinstance(minimum.quantity, bool) or not isinstance(minimum.quantity, (int, float)):
        raise ValueError(f"Minimum for '{ingredient_id}' needs a numeric quantity, got {minimum.quantity!r}")
    return minimum


class ScalingKnowledge:
    def __init__(self, non_linear: Optional[Iterable[str]] = None,
                 minimums: Optional[Mapping[str, Any]] = None):
        self.non_linear = frozenset(non_linear or ())
        self.minimums = MappingProxyType({k: _as_minimum(k, v) for k, v in (minimums or {}).items()})

    def is_non_linear(self, ingredient_id: str) -> bool:
        return ingredient_id in self.non_linear

    def minimum_for(self, ingredient_id: str) -> Optional[MinimumQuantity]:
        return self.minimums.get(ingredient_id)

    def __str__(self) -> str:
        return f"ScalingKnowledge({len(self.non_linear)} non-linear, {len(self.minimums)} minimums)"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Builds knowledge from {"non_linear": [...], "minimums": {id: {"quantity", "unit"}}}.'''
        d = dict(data) if isinstance(data, dict) else {}
        minimums = {}
        for key, value in (d.get('minimums') or {}).items():
            if isinstance(value, dict) and value.get('quantity') is not None:
                minimums[key] = MinimumQuantity(value['quantity'], value.get('unit') or "")
        return ScalingKnowledge(d.get('non_linear') or [], minimums)

    def to_dict(self):
        return {
            "non_linear": sorted(self.non_linear),
            "minimums": {k: {"quantity": v.quantity, "unit": v.unit} for k, v in self.minimums.items()},
        }
