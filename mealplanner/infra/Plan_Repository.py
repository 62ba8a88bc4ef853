import logging
from collections import Counter
from typing import Iterable, List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.orm import selectinload

from mealplanner.domain.Meal import MealCategory
from mealplanner.domain.Plan import Day, Plan, PlanEntry, plan_slots
from mealplanner.infra.database import Database
from mealplanner.infra.tables import IngredientRow, MealRow, PlanRow
from mealplanner.utilities.constants import SLOTS_PER_PLAN
from mealplanner.utilities.exceptions import PersistenceError

logger = logging.getLogger(__name__)

_CATEGORY_ORDER = {category.value: index for index, category in enumerate(MealCategory)}


def _check_complete(entries: List[PlanEntry]) -> None:
    """Reject anything that is not exactly one entry per (day, category) slot."""
    if len(entries) != SLOTS_PER_PLAN:
        raise PersistenceError(f"A weekly plan needs {SLOTS_PER_PLAN} entries, got {len(entries)}")
    seen = Counter(entry.slot for entry in entries)
    duplicated = [f"{day.label} {category.value}" for (day, category), n in seen.items() if n > 1]
    if duplicated:
        raise PersistenceError(f"Duplicate plan slots: {', '.join(duplicated)}")
    missing = [f"{day.label} {category.value}" for day, category in plan_slots() if (day, category) not in seen]
    if missing:
        raise PersistenceError(f"Missing plan slots: {', '.join(missing)}")


class PlanRepository:
    """Holds the single current weekly plan."""

    def __init__(self, database: Database):
        self.database = database

    def replace_plan(self, entries: Iterable[PlanEntry]) -> Plan:
        """Drop the current plan and store ``entries`` as the new one.

        Meal existence is the caller's job; a dangling meal id still fails on the
        foreign key and rolls the whole replacement back, leaving the old plan as it was.
        """
        entries = list(entries)
        _check_complete(entries)
        with self.database.session() as session:
            session.execute(delete(PlanRow))
            session.add_all([
                PlanRow(day=int(entry.day), category=entry.category.value, meal_id=entry.meal.id)
                for entry in entries
            ])
        logger.info(f"Weekly plan replaced with {len(entries)} entries")
        return Plan(entries)

    def current_plan(self) -> Optional[Plan]:
        """The stored plan, or None when nothing has been planned yet."""
        stmt = select(PlanRow).options(selectinload(PlanRow.meal).selectinload(MealRow.ingredients))
        with self.database.session() as session:
            rows = session.scalars(stmt).all()
            if not rows:
                return None
            return Plan(
                PlanEntry(Day(row.day), MealCategory(row.category), row.meal.to_domain())
                for row in rows
            )

    def has_plan(self) -> bool:
        with self.database.session() as session:
            return session.scalar(select(func.count()).select_from(PlanRow)) > 0

    def ingredients_in_plan(self) -> List[str]:
        """One ingredient name per ingredient per planned slot, in plan order.

        A meal chosen for two slots contributes its ingredients twice.
        """
        stmt = (
            select(PlanRow.day, PlanRow.category, IngredientRow.name)
            .join(IngredientRow, IngredientRow.meal_id == PlanRow.meal_id)
            .order_by(PlanRow.day, IngredientRow.id)
        )
        with self.database.session() as session:
            rows = session.execute(stmt).all()
        # Stable sort keeps ingredient order inside each slot
        rows.sort(key=lambda row: (row.day, _CATEGORY_ORDER[row.category]))
        return [row.name for row in rows]
