"""Plan domain entity: the weekly schedule mapping (day, category) to a stored meal."""
from enum import IntEnum
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from mealplanner.domain.Meal import Meal, MealCategory


class Day(IntEnum):
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @property
    def label(self) -> str:
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.label


def plan_slots() -> Iterator[Tuple[Day, MealCategory]]:
    """Every (day, category) pair in display order: Monday first, breakfast first."""
    for day in Day:
        for category in MealCategory:
            yield day, category


class PlanEntry:
    def __init__(self, day: Day, category: MealCategory, meal: Meal):
        self.day = Day(day)
        self.category = MealCategory(category)
        self.meal = meal

    @property
    def slot(self) -> Tuple[Day, MealCategory]:
        return self.day, self.category

    def __eq__(self, other) -> bool:
        if not isinstance(other, PlanEntry):
            return NotImplemented
        return self.slot == other.slot and self.meal.id == other.meal.id

    def __hash__(self) -> int:
        return hash((self.day, self.category, self.meal.id))

    def __repr__(self) -> str:
        return f"PlanEntry({self.day.label}, {self.category.value}, {self.meal.name!r})"


class Plan:
    def __init__(self, entries: Iterable[PlanEntry]):
        self.meals: Dict[Tuple[Day, MealCategory], Meal] = {}
        for entry in entries:
            self.meals[entry.slot] = entry.meal

    def meal_for(self, day: Day, category: MealCategory) -> Optional[Meal]:
        return self.meals.get((Day(day), MealCategory(category)))

    def entries(self) -> List[PlanEntry]:
        return [PlanEntry(day, category, self.meals[(day, category)])
                for day, category in plan_slots() if (day, category) in self.meals]

    def __len__(self) -> int:
        return len(self.meals)

    def __str__(self) -> str:
        blocks = []
        for day in Day:
            lines = [day.label]
            for category in MealCategory:
                meal = self.meals.get((day, category))
                if meal is not None:
                    lines.append(f"{category.label}: {meal.name}")
            blocks.append("\n".join(lines))
        return "\n\n".join(blocks)
