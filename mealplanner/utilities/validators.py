"""
Input validation schemas using Pydantic for the console driver.

The core trusts whatever reaches it; these schemas are the single place where
raw console text is checked before being handed to the stores.
"""
import re
from pydantic import BaseModel, Field, field_validator
from typing import List

from mealplanner.domain.Meal import MealCategory
from mealplanner.utilities.constants import INGREDIENT_SEPARATOR, LETTERS_ONLY_PATTERN

_LETTERS_ONLY = re.compile(LETTERS_ONLY_PATTERN)


class CategoryInput(BaseModel):
    """Schema for a meal category typed by the user."""
    category: MealCategory


class MealNameInput(BaseModel):
    """Schema for a meal name (letters and spaces only)."""
    name: str = Field(..., min_length=1)

    @field_validator('name', mode='before')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator('name')
    @classmethod
    def letters_only(cls, v):
        if not _LETTERS_ONLY.match(v):
            raise ValueError('Meal name must contain letters and spaces only')
        return v


class IngredientsInput(BaseModel):
    """Schema for a comma separated ingredient list."""
    ingredients: List[str] = Field(..., min_length=1)

    @field_validator('ingredients', mode='before')
    @classmethod
    def split_raw_text(cls, v):
        """Accept the raw console line as well as an already split list."""
        if isinstance(v, str):
            v = v.split(INGREDIENT_SEPARATOR)
        return [item.strip() if isinstance(item, str) else item for item in v]

    @field_validator('ingredients')
    @classmethod
    def validate_ingredients(cls, v):
        """Every ingredient is non-blank letters/spaces; duplicates collapse, first kept."""
        for item in v:
            if not item or not _LETTERS_ONLY.match(item):
                raise ValueError(f'Invalid ingredient: {item!r}')
        return list(dict.fromkeys(v))


def parse_category(raw: str):
    """Return the MealCategory for ``raw`` or None when it is not one of the closed set."""
    try:
        return CategoryInput(category=raw.strip()).category
    except ValueError:
        return None
