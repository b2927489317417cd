"""IngredientCategory value: the shopping aisle an ingredient belongs to."""
from enum import Enum
from typing import Dict, List, Optional

from portions.utilities.constants import CATEGORY_LABELS


class IngredientCategory(str, Enum):
    PRODUCE = "produce"
    PROTEIN = "protein"
    SEAFOOD = "seafood"
    DAIRY = "dairy"
    GRAINS = "grains"
    PANTRY = "pantry"
    OILS_VINEGARS = "oils-vinegars"
    HERBS_SPICES = "herbs-spices"
    NUTS_SEEDS = "nuts-seeds"
    BEVERAGES = "beverages"
    OTHER = "other"

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self.value]

    @classmethod
    def infer(cls, name: str) -> "IngredientCategory":
        '''Guess a category from an ingredient name by keyword; first matching category wins.'''
        if not isinstance(name, str) or not name.strip():
            return cls.OTHER
        lower = name.lower()
        for category, keywords in _CATEGORY_KEYWORDS.items():
            if any(keyword in lower for keyword in keywords):
                return category
        return cls.OTHER

    @classmethod
    def coerce(cls, value, name: Optional[str] = None) -> "IngredientCategory":
        '''Accept an enum member or its string value; fall back to inference from the name.'''
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return cls.infer(name or "")


# Checked in declaration order; the first category with a matching keyword wins,
# so "bell pepper" is produce and "olive oil" an oil.
_CATEGORY_KEYWORDS: Dict[IngredientCategory, List[str]] = {
    IngredientCategory.PRODUCE: [
        'tomato', 'onion', 'garlic', 'pepper', 'lettuce', 'spinach', 'carrot',
        'cucumber', 'zucchini', 'eggplant', 'lemon', 'lime', 'orange', 'apple',
        'berry', 'strawberry', 'blueberry', 'avocado', 'potato', 'celery',
        'broccoli', 'cauliflower', 'cabbage', 'kale', 'arugula', 'mushroom',
        'asparagus', 'artichoke', 'beet', 'radish', 'squash', 'pumpkin',
        'grape', 'banana', 'mango', 'pineapple', 'peach', 'pear', 'plum',
        'cherry', 'fig', 'date', 'pomegranate', 'melon', 'watermelon',
        'ginger', 'scallion', 'shallot', 'leek', 'fennel', 'chard',
    ],
    IngredientCategory.DAIRY: [
        'milk', 'cheese', 'yogurt', 'cream', 'butter', 'feta', 'parmesan',
        'mozzarella', 'ricotta', 'cottage', 'cheddar', 'brie', 'goat cheese',
        'halloumi', 'labneh', 'kefir', 'sour cream', 'creme fraiche',
        'mascarpone', 'gruyere', 'pecorino', 'manchego',
    ],
    IngredientCategory.PROTEIN: [
        'chicken', 'beef', 'pork', 'lamb', 'turkey', 'egg', 'tofu', 'tempeh',
        'duck', 'veal', 'bacon', 'sausage', 'ham', 'prosciutto', 'ground meat',
        'steak', 'roast', 'chop', 'thigh', 'breast', 'wing', 'leg',
        'seitan', 'edamame', 'lentil', 'bean', 'chickpea', 'hummus',
    ],
    IngredientCategory.SEAFOOD: [
        'fish', 'salmon', 'shrimp', 'tuna', 'cod', 'tilapia', 'scallop',
        'mussel', 'clam', 'oyster', 'crab', 'lobster', 'squid', 'calamari',
        'octopus', 'anchovy', 'sardine', 'mackerel', 'halibut', 'trout',
        'bass', 'snapper', 'mahi', 'swordfish', 'prawn', 'crawfish',
    ],
    IngredientCategory.GRAINS: [
        'rice', 'pasta', 'bread', 'flour', 'oat', 'quinoa', 'couscous',
        'bulgur', 'pita', 'tortilla', 'noodle', 'barley', 'farro', 'polenta',
        'cornmeal', 'wheat', 'rye', 'millet', 'buckwheat', 'orzo', 'risotto',
        'spaghetti', 'penne', 'linguine', 'fettuccine', 'macaroni', 'lasagna',
        'cracker', 'breadcrumb', 'panko', 'croissant', 'bagel', 'baguette',
    ],
    IngredientCategory.OILS_VINEGARS: [
        'oil', 'olive', 'vinegar', 'balsamic', 'coconut oil', 'sesame oil',
        'vegetable oil', 'canola', 'avocado oil', 'sunflower oil', 'ghee',
        'red wine vinegar', 'white wine vinegar', 'apple cider vinegar',
        'rice vinegar', 'sherry vinegar', 'champagne vinegar',
    ],
    IngredientCategory.HERBS_SPICES: [
        'basil', 'oregano', 'thyme', 'rosemary', 'cumin', 'paprika',
        'cinnamon', 'salt', 'pepper', 'parsley', 'cilantro', 'mint', 'dill',
        'sage', 'tarragon', 'chive', 'bay leaf', 'coriander', 'turmeric',
        'ginger', 'nutmeg', 'clove', 'cardamom', 'saffron', 'sumac',
        'zaatar', 'harissa', 'cayenne', 'chili', 'curry', 'allspice',
        'fennel seed', 'mustard seed', 'caraway', 'anise', 'vanilla',
    ],
    IngredientCategory.NUTS_SEEDS: [
        'almond', 'walnut', 'pistachio', 'pine nut', 'sesame', 'tahini',
        'cashew', 'pecan', 'hazelnut', 'macadamia', 'peanut', 'chestnut',
        'sunflower seed', 'pumpkin seed', 'chia', 'flax', 'hemp seed',
        'poppy seed', 'nut butter', 'almond butter', 'peanut butter',
    ],
    IngredientCategory.PANTRY: [
        'honey', 'sugar', 'stock', 'broth', 'sauce', 'paste', 'can', 'dried',
        'tomato paste', 'tomato sauce', 'soy sauce', 'fish sauce', 'worcestershire',
        'maple syrup', 'molasses', 'agave', 'jam', 'jelly', 'preserve',
        'mustard', 'ketchup', 'mayonnaise', 'hot sauce', 'sriracha',
        'capers', 'olive', 'relish', 'sun-dried', 'roasted',
        'cornstarch', 'baking powder', 'baking soda', 'yeast', 'gelatin',
        'coconut milk', 'condensed milk', 'evaporated milk',
    ],
    IngredientCategory.BEVERAGES: [
        'wine', 'juice', 'water', 'tea', 'coffee', 'beer', 'cider',
        'sparkling', 'soda', 'lemonade', 'smoothie', 'shake',
        'espresso', 'matcha', 'chai',
    ],
}
