"""MealPlanEntry entity: a recipe scheduled on a date and meal slot for a number of servings."""
from datetime import date, datetime
from typing import Optional, Union

Number = Union[int, float]

MEAL_TYPES = ('breakfast', 'lunch', 'dinner')


class MealPlanEntry:
    def __init__(self, plan_date: date, meal_type: str, recipe_id: Optional[str], servings: Number = 1):
        self.plan_date = plan_date
        self.meal_type = meal_type
        self.recipe_id = recipe_id
        self.servings = servings

    def __str__(self) -> str:
        return f"{self.plan_date.isoformat()} {self.meal_type}: {self.recipe_id or '-'} x{self.servings}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates a MealPlanEntry from a dictionary with an ISO date string (YYYY-MM-DD).'''
        d = dict(data)
        raw_date = d.get('plan_date', d.get('planDate'))
        if isinstance(raw_date, str):
            raw_date = datetime.strptime(raw_date, '%Y-%m-%d').date()
        return MealPlanEntry(
            plan_date=raw_date,
            meal_type=d.get('meal_type', d.get('mealType', 'dinner')),
            recipe_id=d.get('recipe_id', d.get('recipeId')),
            servings=d.get('servings', 1),
        )

    def to_dict(self):
        return {
            "plan_date": self.plan_date.isoformat(),
            "meal_type": self.meal_type,
            "recipe_id": self.recipe_id,
            "servings": self.servings,
        }
