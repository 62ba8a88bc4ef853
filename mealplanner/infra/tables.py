"""SQLAlchemy mapping of the three persisted tables: meals, ingredients and plan."""
from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, String
from sqlalchemy.orm import declarative_base, relationship

from mealplanner.domain.Meal import Meal, MealCategory

Base = declarative_base()

_CATEGORY_VALUES = ", ".join(f"'{c.value}'" for c in MealCategory)


class MealRow(Base):
    __tablename__ = "meals"
    # AUTOINCREMENT keeps deleted ids from ever being handed out again
    __table_args__ = (
        CheckConstraint(f"category IN ({_CATEGORY_VALUES})", name="ck_meals_category"),
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    category = Column(String(16), nullable=False, index=True)

    ingredients = relationship(
        "IngredientRow",
        back_populates="meal",
        cascade="all, delete-orphan",
        order_by="IngredientRow.id",
    )

    def to_domain(self) -> Meal:
        return Meal(
            category=MealCategory(self.category),
            name=self.name,
            ingredients=[ing.name for ing in self.ingredients],
            id=self.id,
        )


class IngredientRow(Base):
    __tablename__ = "ingredients"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    meal_id = Column(Integer, ForeignKey("meals.id", ondelete="CASCADE"), nullable=False, index=True)

    meal = relationship("MealRow", back_populates="ingredients")


class PlanRow(Base):
    __tablename__ = "plan"
    # (day, category) is the primary key, so a slot can only be filled once
    __table_args__ = (
        CheckConstraint("day BETWEEN 1 AND 7", name="ck_plan_day"),
        CheckConstraint(f"category IN ({_CATEGORY_VALUES})", name="ck_plan_category"),
    )

    day = Column(Integer, primary_key=True)
    category = Column(String(16), primary_key=True)
    meal_id = Column(Integer, ForeignKey("meals.id"), nullable=False)

    meal = relationship("MealRow")
