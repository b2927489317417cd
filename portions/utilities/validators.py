"""
Input validation schemas using Pydantic for the HTTP boundary.
"""
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from portions.domain.IngredientCategory import IngredientCategory
from portions.domain.Plan import MealPlanEntry
from portions.domain.RecipeIngredient import RecipeIngredient


class IngredientInput(BaseModel):
    """Schema for a recipe ingredient. A null quantity means "to taste"."""
    id: str = ""
    ingredient_id: Optional[str] = None
    name: str = Field(..., min_length=1, max_length=100)
    category: Optional[str] = None
    quantity: Optional[float] = Field(None, ge=0)
    unit: Optional[str] = Field(None, max_length=20)
    preparation: Optional[str] = None
    notes: Optional[str] = None

    @field_validator('name', 'unit')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator('category')
    @classmethod
    def validate_category(cls, v):
        """Only known categories; missing ones are inferred from the name later."""
        if v is None:
            return v
        v = v.strip().lower()
        if v not in {c.value for c in IngredientCategory}:
            raise ValueError(f'Unknown ingredient category: {v}')
        return v

    def to_domain(self) -> RecipeIngredient:
        return RecipeIngredient.from_dict(self.model_dump())


class ScaleRecipeInput(BaseModel):
    """Schema for scaling a whole recipe."""
    ingredients: List[IngredientInput] = Field(default_factory=list)
    original_servings: float = Field(..., gt=0, le=1000)
    target_servings: float = Field(..., gt=0, le=1000)


class ScaleIngredientInput(BaseModel):
    """Schema for scaling one ingredient by an explicit factor."""
    ingredient: IngredientInput
    factor: float = Field(..., gt=0, le=1000)


class QuantityInput(BaseModel):
    """Schema for simplify/format requests."""
    quantity: Optional[float] = Field(None, ge=0)
    unit: Optional[str] = Field(None, max_length=20)


class AggregateEntryInput(BaseModel):
    """Schema for one shopping-list contribution."""
    ingredient: IngredientInput
    servings: float = Field(1, gt=0)
    recipe_id: str = Field(..., min_length=1)


class AggregateInput(BaseModel):
    entries: List[AggregateEntryInput] = Field(default_factory=list)


class RecipeInput(BaseModel):
    """Schema for a recipe referenced by meal-plan entries."""
    id: str = Field(..., min_length=1)
    name: str = ""
    servings: Optional[int] = Field(None, ge=1, le=50)
    ingredients: List[IngredientInput] = Field(default_factory=list)


class MealPlanEntryInput(BaseModel):
    """Schema for a planned meal."""
    plan_date: date
    meal_type: str = Field('dinner', pattern=r'^(breakfast|lunch|dinner)$')
    recipe_id: Optional[str] = None
    servings: float = Field(1, gt=0)

    def to_domain(self) -> MealPlanEntry:
        return MealPlanEntry(self.plan_date, self.meal_type, self.recipe_id, self.servings)


class ShoppingPlanInput(BaseModel):
    """Schema for building a shopping list from a meal plan."""
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    range: Optional[str] = Field(None, pattern=r'^(this-week|next-week|this-month)$')
    entries: List[MealPlanEntryInput] = Field(default_factory=list)
    recipes: List[RecipeInput] = Field(default_factory=list)

    @model_validator(mode='after')
    def validate_dates(self):
        """Either a named range or both dates, in order."""
        if self.range is None:
            if self.start_date is None or self.end_date is None:
                raise ValueError('Provide start_date and end_date, or a named range')
            if self.end_date < self.start_date:
                raise ValueError('end_date must not be before start_date')
        return self


__all__ = [
    'IngredientInput', 'ScaleRecipeInput', 'ScaleIngredientInput', 'QuantityInput',
    'AggregateEntryInput', 'AggregateInput', 'RecipeInput', 'MealPlanEntryInput',
    'ShoppingPlanInput',
]
