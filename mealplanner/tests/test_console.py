import pytest

from mealplanner.cli.console import ConsoleApp
from mealplanner.domain.Meal import MealCategory
from mealplanner.domain.Plan import Day
from mealplanner.infra.database import Database
from mealplanner.infra.Meal_Repository import MealRepository
from mealplanner.infra.Plan_Repository import PlanRepository
from mealplanner.utilities import constants as text


def scripted(lines):
    it = iter(lines)

    def _input():
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return _input


@pytest.fixture
def database(tmp_path):
    db = Database(tmp_path / "meals.db").open()
    yield db
    db.close()


@pytest.fixture
def repos(database):
    return MealRepository(database), PlanRepository(database)


def run(repos, lines):
    out = []
    ConsoleApp(*repos, input_fn=scripted(lines), output_fn=out.append).run()
    return out


def stock(meals):
    meals.add_meal("breakfast", "Yogurt", ["Yogurt", "Honey"])
    meals.add_meal("breakfast", "Pancakes", ["Flour", "Milk"])
    meals.add_meal("lunch", "Salad", ["Lettuce", "Tomato"])
    meals.add_meal("dinner", "Soup", ["Water", "Salt"])


def test_exit_says_bye(repos):
    assert run(repos, ["exit"]) == [text.MENU_PROMPT, text.BYE]


def test_end_of_input_behaves_like_exit(repos):
    assert run(repos, []) == [text.MENU_PROMPT, text.BYE]


def test_unknown_command_prompts_again(repos):
    out = run(repos, ["dance", "exit"])
    assert out == [text.MENU_PROMPT, text.MENU_PROMPT, text.BYE]


def test_add_meal_with_retries(repos):
    meals, _ = repos
    out = run(repos, [
        "add",
        "brunch", "lunch",
        "salad2", "salad",
        "lettuce, 4 tomatoes", "lettuce, tomato, cucumber",
        "exit",
    ])
    assert out.count(text.WRONG_CATEGORY) == 1
    assert out.count(text.WRONG_FORMAT) == 2
    assert text.MEAL_ADDED in out
    stored = meals.list_by_category(MealCategory.LUNCH)
    assert [m.name for m in stored] == ["salad"]
    assert stored[0].ingredients == ("lettuce", "tomato", "cucumber")


def test_show_empty_category(repos):
    out = run(repos, ["show", "dinner", "exit"])
    assert text.NO_MEALS in out


def test_show_prints_meals_sorted(repos):
    meals, _ = repos
    stock(meals)
    out = run(repos, ["show", "breakfast", "exit"])
    start = out.index("Category: breakfast")
    assert out[start:start + 10] == [
        "Category: breakfast",
        "",
        "Name: Pancakes",
        "Ingredients:",
        "Flour",
        "Milk",
        "",
        "Name: Yogurt",
        "Ingredients:",
        "Yogurt",
    ]


def test_plan_refused_while_a_category_is_empty(repos):
    meals, plans = repos
    meals.add_meal("lunch", "Salad", ["Lettuce"])
    out = run(repos, ["plan", "exit"])
    assert text.CANNOT_PLAN.format(categories="breakfast, dinner") in out
    assert plans.current_plan() is None


def test_plan_whole_week_with_one_bad_choice(repos):
    meals, plans = repos
    stock(meals)
    answers = ["plan", "Omelette"]  # first answer is not on the list
    for day in Day:
        answers += ["yogurt" if day == Day.MONDAY else "Pancakes", "Salad", "Soup"]
    answers.append("exit")
    out = run(repos, answers)

    assert out.count(text.MEAL_NOT_IN_LIST) == 1
    assert "Choose the breakfast for Monday from the list above:" in out
    assert "Yeah! We planned the meals for Sunday." in out
    monday = out.index("Monday")
    assert out[monday + 1:monday + 3] == ["Pancakes", "Yogurt"]

    plan = plans.current_plan()
    assert plan.meal_for(Day.MONDAY, MealCategory.BREAKFAST).name == "Yogurt"
    assert plan.meal_for(Day.TUESDAY, MealCategory.BREAKFAST).name == "Pancakes"
    assert str(plan) in out


def test_interrupted_planning_keeps_no_partial_plan(repos):
    meals, plans = repos
    stock(meals)
    out = run(repos, ["plan", "Yogurt", "Salad"])
    assert out[-1] == text.BYE
    assert plans.current_plan() is None


def test_save_without_plan(repos, tmp_path):
    out = run(repos, ["save", "exit"])
    assert text.CANNOT_SAVE in out
    assert text.FILENAME_PROMPT not in out


def test_plan_then_save(repos, tmp_path):
    meals, _ = repos
    stock(meals)
    target = tmp_path / "shopping.txt"
    answers = ["plan"]
    for _day in Day:
        answers += ["Yogurt", "Salad", "Soup"]
    answers += ["save", str(target), "exit"]
    out = run(repos, answers)
    assert text.SAVED in out
    assert target.read_text(encoding="utf-8").splitlines() == [
        "Yogurt x7", "Honey x7", "Lettuce x7", "Tomato x7", "Water x7", "Salt x7",
    ]


def test_save_failure_is_reported_and_loop_continues(repos, tmp_path):
    meals, _ = repos
    stock(meals)
    answers = ["plan"]
    for _day in Day:
        answers += ["Yogurt", "Salad", "Soup"]
    answers += ["save", str(tmp_path / "no_such_dir" / "list.txt"), "exit"]
    out = run(repos, answers)
    assert any(line.startswith("Error: Cannot write shopping list") for line in out)
    assert out[-1] == text.BYE
