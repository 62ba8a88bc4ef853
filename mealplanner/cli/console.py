"""Text UI driver: the read-eval loop behind the ``mealplanner`` command.

All prompts go through ``output_fn`` and all answers come from ``input_fn`` so the
loop can be driven by a script in tests.
"""
import logging
from typing import Callable, List, Optional

from pydantic import ValidationError

from mealplanner.domain.Meal import Meal, MealCategory
from mealplanner.infra.Meal_Repository import MealRepository
from mealplanner.infra.Plan_Repository import PlanRepository
from mealplanner.logic.planning.weekly_planner import WeeklyPlanner
from mealplanner.logic.shopping.list_builder import save_shopping_list
from mealplanner.utilities import constants as text
from mealplanner.utilities.exceptions import MealPlannerError, NotFoundError
from mealplanner.utilities.validators import IngredientsInput, MealNameInput, parse_category

logger = logging.getLogger(__name__)


class ConsoleApp:
    def __init__(self, meal_repository: MealRepository, plan_repository: PlanRepository,
                 input_fn: Callable[[], str] = input, output_fn: Callable[[str], None] = print):
        self.meals = meal_repository
        self.plans = plan_repository
        self.planner = WeeklyPlanner(meal_repository, plan_repository)
        self._input = input_fn
        self._output = output_fn
        self._commands = {
            "add": self.add_meal,
            "show": self.show_meals,
            "plan": self.plan_week,
            "save": self.save_shopping_list,
        }

    # --- I/O helpers -------------------------------------------------------
    def _say(self, message: str = "") -> None:
        self._output(message)

    def _ask(self, prompt: Optional[str] = None) -> str:
        if prompt is not None:
            self._say(prompt)
        return self._input()

    def _ask_category(self, prompt: str) -> MealCategory:
        self._say(prompt)
        while True:
            category = parse_category(self._ask())
            if category is not None:
                return category
            self._say(text.WRONG_CATEGORY)

    # --- Main loop ---------------------------------------------------------
    def run(self) -> None:
        """Serve commands until ``exit`` or end of input."""
        while True:
            try:
                command = self._ask(text.MENU_PROMPT).strip()
            except EOFError:
                command = "exit"
            if command == "exit":
                self._say(text.BYE)
                return
            handler = self._commands.get(command)
            if handler is None:
                continue
            try:
                handler()
            except EOFError:
                self._say(text.BYE)
                return
            except MealPlannerError as e:
                logger.warning(f"Command '{command}' failed: {e}")
                self._say(f"Error: {e}")

    # --- Commands ----------------------------------------------------------
    def add_meal(self) -> Meal:
        category = self._ask_category(text.ADD_CATEGORY_PROMPT)
        self._say(text.NAME_PROMPT)
        while True:
            try:
                name = MealNameInput(name=self._ask()).name
                break
            except ValidationError:
                self._say(text.WRONG_FORMAT)
        self._say(text.INGREDIENTS_PROMPT)
        while True:
            try:
                ingredients = IngredientsInput(ingredients=self._ask()).ingredients
                break
            except ValidationError:
                self._say(text.WRONG_FORMAT)
        meal = self.meals.add_meal(category, name, ingredients)
        self._say(text.MEAL_ADDED)
        return meal

    def show_meals(self) -> List[Meal]:
        category = self._ask_category(text.SHOW_CATEGORY_PROMPT)
        meals = self.meals.list_by_category(category)
        if not meals:
            self._say(text.NO_MEALS)
            return meals
        self._say(f"Category: {category.value}")
        for meal in meals:
            self._say()
            self._say(f"Name: {meal.name}")
            self._say("Ingredients:")
            for ingredient in meal.ingredients:
                self._say(ingredient)
        self._say()
        return meals

    def plan_week(self):
        missing = self.planner.missing_categories()
        if missing:
            self._say(text.CANNOT_PLAN.format(categories=", ".join(c.value for c in missing)))
            return None
        session = self.planner.start()
        current_day = None
        for day, category in session.slots():
            if day != current_day:
                if current_day is not None:
                    self._say(f"Yeah! We planned the meals for {current_day.label}.")
                    self._say()
                self._say(day.label)
                current_day = day
            for meal in session.candidates(category):
                self._say(meal.name)
            self._say(f"Choose the {category.value} for {day.label} from the list above:")
            while True:
                try:
                    session.select(day, category, self._ask())
                    break
                except NotFoundError:
                    self._say(text.MEAL_NOT_IN_LIST)
        self._say(f"Yeah! We planned the meals for {current_day.label}.")
        self._say()
        plan = session.commit()
        self._say(str(plan))
        self._say()
        return plan

    def save_shopping_list(self):
        if not self.plans.has_plan():
            self._say(text.CANNOT_SAVE)
            return None
        filename = self._ask(text.FILENAME_PROMPT).strip()
        entries = save_shopping_list(self.plans, filename)
        self._say(text.SAVED)
        return entries
