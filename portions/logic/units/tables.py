"""Unit domain tables.

Every accepted unit spelling maps to a UnitSpec: the domain it belongs to, the
canonical spelling used for display and aggregation keys, and the factor that
converts one of it into the domain's base unit (teaspoons for volume, grams for
weight). Anything not listed is a count unit and passes through unconverted.
"""
from enum import Enum
from typing import Dict, NamedTuple, Optional, Tuple

__all__ = [
    "UnitDomain", "UnitSpec", "DisplayPreference",
    "VOLUME_UNITS", "WEIGHT_UNITS", "COUNT_UNITS", "DISPLAY_PREFERENCES",
    "classify_unit", "canonical_unit", "unit_factor",
]


class UnitDomain(Enum):
    VOLUME = "volume"
    WEIGHT = "weight"
    COUNT = "count"

    @property
    def base_unit(self) -> Optional[str]:
        return _BASE_UNITS[self]


class UnitSpec(NamedTuple):
    domain: UnitDomain
    canonical: str
    factor: float = 1


class DisplayPreference(NamedTuple):
    unit: str
    min_base: float


_BASE_UNITS = {
    UnitDomain.VOLUME: "tsp",
    UnitDomain.WEIGHT: "g",
    UnitDomain.COUNT: None,
}


def _table(domain: UnitDomain, entries: Dict[Tuple[str, ...], Tuple[str, float]]) -> Dict[str, UnitSpec]:
    table: Dict[str, UnitSpec] = {}
    for synonyms, (canonical, factor) in entries.items():
        for synonym in synonyms:
            table[synonym] = UnitSpec(domain, canonical, factor)
    return table


VOLUME_UNITS: Dict[str, UnitSpec] = _table(UnitDomain.VOLUME, {
    ("tsp", "tsps", "teaspoon", "teaspoons"): ("tsp", 1),
    ("tbsp", "tbsps", "tbs", "tablespoon", "tablespoons"): ("tbsp", 3),
    ("cup", "cups"): ("cup", 48),  # 16 tbsp
    ("fl oz", "fl. oz", "fluid ounce", "fluid ounces"): ("fl oz", 6),
    ("ml", "milliliter", "milliliters", "millilitre", "millilitres"): ("ml", 0.2),
    ("l", "liter", "liters", "litre", "litres"): ("l", 200),
})

WEIGHT_UNITS: Dict[str, UnitSpec] = _table(UnitDomain.WEIGHT, {
    ("g", "gram", "grams", "gr"): ("g", 1),
    ("oz", "ounce", "ounces"): ("oz", 28.35),
    ("lb", "lbs", "pound", "pounds"): ("lb", 453.6),
    ("kg", "kilogram", "kilograms", "kilo", "kilos"): ("kg", 1000),
})

# Count units are never converted; the table only folds spellings together.
COUNT_UNITS: Dict[str, UnitSpec] = _table(UnitDomain.COUNT, {
    ("clove", "cloves"): ("cloves", 1),
    ("piece", "pieces", "pc", "pcs"): ("pieces", 1),
    ("stalk", "stalks"): ("stalks", 1),
    ("slice", "slices"): ("slices", 1),
    ("can", "cans"): ("cans", 1),
    ("pinch", "pinches"): ("pinch", 1),
    ("medium",): ("medium", 1),
    ("large",): ("large", 1),
    ("small",): ("small", 1),
})

# Largest unit first; the first entry whose threshold (in base units) is met wins.
DISPLAY_PREFERENCES: Dict[UnitDomain, Tuple[DisplayPreference, ...]] = {
    UnitDomain.VOLUME: (
        DisplayPreference("cup", 24),    # half a cup or more
        DisplayPreference("tbsp", 3),
        DisplayPreference("tsp", 0),
    ),
    UnitDomain.WEIGHT: (
        DisplayPreference("lb", 453.6),
        DisplayPreference("oz", 28.35),
        DisplayPreference("g", 0),
    ),
    UnitDomain.COUNT: (),
}


def _normalize(unit: Optional[str]) -> str:
    return (unit or "").strip().lower()


def classify_unit(unit: Optional[str]) -> UnitSpec:
    """Return the UnitSpec for a unit spelling; unknown spellings are count units."""
    key = _normalize(unit)
    for table in (VOLUME_UNITS, WEIGHT_UNITS, COUNT_UNITS):
        spec = table.get(key)
        if spec is not None:
            return spec
    return UnitSpec(UnitDomain.COUNT, key, 1)


def canonical_unit(unit: Optional[str]) -> str:
    """Canonical spelling of a unit, '' when there is none."""
    return classify_unit(unit).canonical


def unit_factor(domain: UnitDomain, canonical: str) -> float:
    """Base-unit factor for a canonical unit of a convertible domain."""
    table = VOLUME_UNITS if domain is UnitDomain.VOLUME else WEIGHT_UNITS
    return table[canonical].factor
