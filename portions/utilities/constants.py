from typing import Final

GENERAL_WARNING_ID: Final[str] = "__general__"
GENERAL_WARNING_NAME: Final[str] = "General"

CATEGORY_ORDER: Final[tuple[str, ...]] = (
    "produce",
    "protein",
    "seafood",
    "dairy",
    "grains",
    "pantry",
    "oils-vinegars",
    "herbs-spices",
    "nuts-seeds",
    "beverages",
    "other",
)
CATEGORY_LABELS: Final[dict[str, str]] = {
    "produce": "Produce",
    "protein": "Meat & Protein",
    "seafood": "Seafood",
    "dairy": "Dairy & Eggs",
    "grains": "Grains & Bread",
    "pantry": "Pantry Staples",
    "oils-vinegars": "Oils & Vinegars",
    "herbs-spices": "Herbs & Spices",
    "nuts-seeds": "Nuts & Seeds",
    "beverages": "Beverages",
    "other": "Other",
}

# Scale factor thresholds
LARGE_BATCH_FACTOR: Final[float] = 2
VERY_LARGE_BATCH_FACTOR: Final[float] = 3
TECHNIQUE_CHANGE_FACTOR: Final[float] = 4
SMALL_BATCH_FACTOR: Final[float] = 0.5

TO_TASTE: Final[str] = "to taste"
