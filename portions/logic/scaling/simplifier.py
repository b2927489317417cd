"""Quantity simplifier.

Turns a raw (quantity, unit) pair into the most readable form: volume and
weight are converted through their base unit and re-expressed in the largest
display unit the amount reaches ("16 tbsp" becomes "1 cup"), count units only
get rounded.
"""
from typing import NamedTuple, Optional, Union

from portions.logic.scaling.rounding import DEFAULT_ROUNDING, RoundingPolicy
from portions.logic.units.tables import (
    DISPLAY_PREFERENCES,
    UnitDomain,
    UnitSpec,
    classify_unit,
    unit_factor,
)

Number = Union[int, float]

__all__ = ["SimplifiedQuantity", "simplify_quantity"]


class SimplifiedQuantity(NamedTuple):
    quantity: Number
    unit: Optional[str]
    note: Optional[str] = None


def _num(value: Number) -> str:
    # Plain decimal text, never exponent notation
    if value == int(value):
        return str(int(value))
    return f"{value:.10f}".rstrip('0').rstrip('.')


def _converted(quantity: Number, unit: Optional[str], spec: UnitSpec,
               new_quantity: Number, new_unit: str) -> SimplifiedQuantity:
    note = None
    if new_unit != spec.canonical:
        note = f"{_num(quantity)} {unit} converted to {_num(new_quantity)} {new_unit}"
    return SimplifiedQuantity(new_quantity, new_unit, note)


def simplify_quantity(quantity: Number, unit: Optional[str], *,
                      policy: Optional[RoundingPolicy] = None) -> SimplifiedQuantity:
    """Return the readable form of quantity/unit.

    A note is attached only when the unit actually changed; respelling a
    synonym ("tablespoons" -> "tbsp") does not count as a conversion.
    """
    policy = policy or DEFAULT_ROUNDING
    spec = classify_unit(unit)

    if spec.domain is UnitDomain.COUNT:
        return SimplifiedQuantity(policy.round(quantity), unit)

    base = quantity * spec.factor
    for pref in DISPLAY_PREFERENCES[spec.domain]:
        if base < pref.min_base:
            continue
        rounded = policy.round(base / unit_factor(spec.domain, pref.unit))
        # Rounded away to nothing: try the next smaller unit instead
        if rounded > 0:
            return _converted(quantity, unit, spec, rounded, pref.unit)

    return _converted(quantity, unit, spec, base, spec.domain.base_unit)
