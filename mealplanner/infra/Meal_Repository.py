import logging
from typing import Iterable, List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import selectinload

from mealplanner.domain.Meal import Meal, MealCategory
from mealplanner.infra.database import Database
from mealplanner.infra.tables import IngredientRow, MealRow

logger = logging.getLogger(__name__)


class MealRepository:
    """Meals and the ingredients they own, stored as one unit."""

    def __init__(self, database: Database):
        self.database = database

    def add_meal(self, category: MealCategory, name: str, ingredients: Iterable[str]) -> Meal:
        """Persist a meal together with all of its ingredients and return it with its new id.

        The meal row and its ingredient rows are written in a single transaction:
        either everything is stored or nothing is.
        """
        category = MealCategory(category)
        names = list(dict.fromkeys(ingredients))
        if not names:
            raise ValueError(f"Meal '{name}' needs at least one ingredient")
        with self.database.session() as session:
            row = MealRow(
                name=name,
                category=category.value,
                ingredients=[IngredientRow(name=ingredient) for ingredient in names],
            )
            session.add(row)
            session.flush()  # the INSERT hands back the generated id
            meal = row.to_domain()
        logger.info(f"Meal added: id={meal.id} {category.value} '{name}' ({len(names)} ingredients)")
        return meal

    def list_by_category(self, category: MealCategory) -> List[Meal]:
        """Meals of one category, sorted by name ignoring case."""
        category = MealCategory(category)
        stmt = (
            select(MealRow)
            .where(MealRow.category == category.value)
            .options(selectinload(MealRow.ingredients))
            .order_by(func.lower(MealRow.name), MealRow.id)
        )
        with self.database.session() as session:
            return [row.to_domain() for row in session.scalars(stmt)]

    def list_all(self) -> List[Meal]:
        """Every stored meal across all categories, ids included, in creation order."""
        stmt = select(MealRow).options(selectinload(MealRow.ingredients)).order_by(MealRow.id)
        with self.database.session() as session:
            return [row.to_domain() for row in session.scalars(stmt)]

    def exists_by_name(self, category: MealCategory, name: str) -> bool:
        return self.find_by_name(category, name) is not None

    def find_by_name(self, category: MealCategory, name: str) -> Optional[Meal]:
        """Case-insensitive lookup; the oldest meal wins when names repeat."""
        category = MealCategory(category)
        stmt = (
            select(MealRow)
            .where(MealRow.category == category.value, func.lower(MealRow.name) == name.strip().lower())
            .options(selectinload(MealRow.ingredients))
            .order_by(MealRow.id)
            .limit(1)
        )
        with self.database.session() as session:
            row = session.scalars(stmt).first()
            return row.to_domain() if row is not None else None

    def get(self, meal_id: int) -> Optional[Meal]:
        with self.database.session() as session:
            row = session.get(MealRow, meal_id)
            return row.to_domain() if row is not None else None

    def count(self) -> int:
        with self.database.session() as session:
            return session.scalar(select(func.count()).select_from(MealRow))
