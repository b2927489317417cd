"""ShoppingList aggregate: aggregated ingredients bucketed by category, in aisle order."""
from typing import List, Optional

from portions.domain.AggregatedIngredient import AggregatedIngredient
from portions.domain.IngredientCategory import IngredientCategory


class ShoppingListGroup:
    def __init__(self, category: IngredientCategory, items: Optional[List[AggregatedIngredient]] = None):
        self.category = IngredientCategory(category)
        self.category_label = self.category.label
        self.items = items[:] if items else []

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.items)
        return f"{self.category_label}:\n\t{items_str}"

    __repr__ = __str__

    def to_dict(self):
        return {
            "category": self.category.value,
            "category_label": self.category_label,
            "items": [item.to_dict() for item in self.items],
        }


class ShoppingList:
    def __init__(self, groups: Optional[List[ShoppingListGroup]] = None):
        self.groups = groups[:] if groups else []

    def get_items(self) -> List[AggregatedIngredient]:
        '''
        Returns every item across all groups, in category order.
        '''
        return [item for group in self.groups for item in group.items]

    def categories(self) -> List[IngredientCategory]:
        return [group.category for group in self.groups]

    def __len__(self) -> int:
        return sum(len(group) for group in self.groups)

    def __str__(self) -> str:
        groups_str = "\n".join(str(group) for group in self.groups)
        return f"Shopping List\n{groups_str}"

    __repr__ = __str__

    def to_dict(self):
        return [group.to_dict() for group in self.groups]
