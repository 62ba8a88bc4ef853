"""Weekly planner.

Planning is collect-then-commit: a ``PlanningSession`` gathers one meal per
(day, category) slot and only ``commit()`` writes to the plan store, replacing
the previous plan in one go. Abandoning a session leaves the stored plan alone.
"""
import logging
from typing import Dict, Iterator, List, Tuple

from mealplanner.domain.Meal import Meal, MealCategory
from mealplanner.domain.Plan import Day, Plan, PlanEntry, plan_slots
from mealplanner.infra.Meal_Repository import MealRepository
from mealplanner.infra.Plan_Repository import PlanRepository
from mealplanner.utilities.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class PlanningSession:
    def __init__(self, meal_repository: MealRepository, plan_repository: PlanRepository):
        self._meals = meal_repository
        self._plans = plan_repository
        self._candidates: Dict[MealCategory, List[Meal]] = {}
        self._entries: Dict[Tuple[Day, MealCategory], PlanEntry] = {}

    def slots(self) -> Iterator[Tuple[Day, MealCategory]]:
        return plan_slots()

    def candidates(self, category: MealCategory) -> List[Meal]:
        """Fetch (and remember) the list of meals shown for ``category``."""
        category = MealCategory(category)
        meals = self._meals.list_by_category(category)
        self._candidates[category] = meals
        return meals

    def select(self, day: Day, category: MealCategory, name: str) -> Meal:
        """Bind ``name`` to the slot, or raise NotFoundError so the caller can ask again."""
        day, category = Day(day), MealCategory(category)
        shown = self._candidates.get(category)
        if shown is None:
            shown = self.candidates(category)
        wanted = name.strip().lower()
        meal = next((m for m in shown if m.name.lower() == wanted), None)
        if meal is None or not self._meals.exists_by_name(category, name):
            raise NotFoundError(f"No {category.value} named '{name.strip()}' in the list for {day.label}")
        self._entries[(day, category)] = PlanEntry(day, category, meal)
        return meal

    @property
    def entries(self) -> List[PlanEntry]:
        return [self._entries[slot] for slot in plan_slots() if slot in self._entries]

    @property
    def is_complete(self) -> bool:
        return all(slot in self._entries for slot in plan_slots())

    def commit(self) -> Plan:
        """Hand every collected entry to the plan store as one replacement."""
        plan = self._plans.replace_plan(self.entries)
        logger.info("Weekly plan committed")
        return plan


class WeeklyPlanner:
    def __init__(self, meal_repository: MealRepository, plan_repository: PlanRepository):
        self.meal_repository = meal_repository
        self.plan_repository = plan_repository

    def missing_categories(self) -> List[MealCategory]:
        """Categories without a single meal; a week cannot be planned while any exist."""
        return [c for c in MealCategory if not self.meal_repository.list_by_category(c)]

    def start(self) -> PlanningSession:
        return PlanningSession(self.meal_repository, self.plan_repository)
