"""Meal domain entity: category, name and the set of ingredients it owns."""
from enum import Enum
from typing import Iterable, Optional


class MealCategory(str, Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    def __str__(self) -> str:
        return self.value


class Meal:
    def __init__(self, category: MealCategory, name: str, ingredients: Iterable[str],
                 id: Optional[int] = None):
        self.id = id  # None until the store has persisted the meal
        self.category = MealCategory(category)
        self.name = name
        # Duplicates collapse, first occurrence keeps its position
        self.ingredients = tuple(dict.fromkeys(ingredients))

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def __eq__(self, other) -> bool:
        if not isinstance(other, Meal):
            return NotImplemented
        return (self.id, self.category, self.name, set(self.ingredients)) == \
            (other.id, other.category, other.name, set(other.ingredients))

    def __hash__(self) -> int:
        return hash((self.id, self.category, self.name))

    def __str__(self) -> str:
        return f"{self.name} ({self.category.value}) - Ingredients: {', '.join(self.ingredients)}"

    def __repr__(self) -> str:
        return f"Meal(id={self.id!r}, category={self.category.value!r}, name={self.name!r}, ingredients={list(self.ingredients)!r})"
