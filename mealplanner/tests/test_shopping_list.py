from collections import Counter

import pytest

from mealplanner.domain.Meal import MealCategory
from mealplanner.domain.Plan import PlanEntry, plan_slots
from mealplanner.domain.ShoppingList import ShoppingListEntry
from mealplanner.infra.database import Database
from mealplanner.infra.Meal_Repository import MealRepository
from mealplanner.infra.Plan_Repository import PlanRepository
from mealplanner.logic.shopping.list_builder import (
    build_shopping_list,
    export_shopping_list,
    parse_shopping_list,
    save_shopping_list,
)
from mealplanner.utilities.exceptions import ExportError, NotFoundError, PersistenceError


@pytest.fixture
def database(tmp_path):
    db = Database(tmp_path / "meals.db").open()
    yield db
    db.close()


def test_same_meal_twice_doubles_its_ingredients():
    entries = build_shopping_list(["Salt", "Pepper", "Salt", "Pepper"])
    assert entries == [ShoppingListEntry("Salt", 2), ShoppingListEntry("Pepper", 2)]
    assert [e.render() for e in entries] == ["Salt x2", "Pepper x2"]


def test_grouping_is_case_sensitive_and_keeps_first_seen_order():
    entries = build_shopping_list(["milk", "Eggs", "Milk", "milk"])
    assert entries == [
        ShoppingListEntry("milk", 2),
        ShoppingListEntry("Eggs", 1),
        ShoppingListEntry("Milk", 1),
    ]


def test_single_entries_have_no_multiplier():
    assert str(ShoppingListEntry("Bread")) == "Bread"
    assert str(ShoppingListEntry("Bread", 3)) == "Bread x3"


def test_entry_count_must_be_positive():
    with pytest.raises(ValueError):
        ShoppingListEntry("Bread", 0)


def test_empty_input_builds_empty_list():
    assert build_shopping_list([]) == []


def test_export_writes_one_line_per_entry(tmp_path):
    target = tmp_path / "shopping.txt"
    export_shopping_list(build_shopping_list(["Salt", "Bread", "Salt", "Olive oil"]), target)
    assert target.read_text(encoding="utf-8") == "Salt x2\nBread\nOlive oil\n"


@pytest.mark.parametrize("names", [
    ["Salt", "Pepper", "Salt", "Pepper"],
    ["Flour", "Sugar", "Eggs", "Flour", "Flour", "Butter"],
    ["Sweet potato", "Sweet potato", "sweet potato", "Lime"],
])
def test_export_then_parse_recovers_the_same_counts(tmp_path, names):
    target = tmp_path / "list.txt"
    built = build_shopping_list(names)
    export_shopping_list(built, target)
    parsed = parse_shopping_list(target)
    assert Counter({e.name: e.count for e in parsed}) == Counter({e.name: e.count for e in built})


def test_export_refuses_empty_list(tmp_path):
    target = tmp_path / "empty.txt"
    with pytest.raises(NotFoundError, match="nothing to export"):
        export_shopping_list([], target)
    assert not target.exists()


def test_export_to_unwritable_destination(tmp_path):
    target = tmp_path / "missing_dir" / "list.txt"
    with pytest.raises(ExportError) as info:
        export_shopping_list([ShoppingListEntry("Salt")], target)
    assert isinstance(info.value, PersistenceError)
    assert not target.exists()


def test_save_without_plan_reports_nothing_to_export(tmp_path, database):
    target = tmp_path / "shopping.txt"
    with pytest.raises(NotFoundError, match="nothing to export"):
        save_shopping_list(PlanRepository(database), target)
    assert not target.exists()


def test_save_exports_the_current_plan(tmp_path, database):
    meals = MealRepository(database)
    eggs = meals.add_meal(MealCategory.BREAKFAST, "Eggs", ["Eggs", "Salt"])
    salad = meals.add_meal(MealCategory.LUNCH, "Salad", ["Lettuce", "Salt"])
    stew = meals.add_meal(MealCategory.DINNER, "Stew", ["Beef", "Carrot"])
    chosen = {MealCategory.BREAKFAST: eggs, MealCategory.LUNCH: salad, MealCategory.DINNER: stew}
    plans = PlanRepository(database)
    plans.replace_plan(PlanEntry(d, c, chosen[c]) for d, c in plan_slots())

    target = tmp_path / "shopping.txt"
    entries = save_shopping_list(plans, target)
    assert entries == [
        ShoppingListEntry("Eggs", 7),
        ShoppingListEntry("Salt", 14),
        ShoppingListEntry("Lettuce", 7),
        ShoppingListEntry("Beef", 7),
        ShoppingListEntry("Carrot", 7),
    ]
    assert target.read_text(encoding="utf-8").splitlines() == [
        "Eggs x7", "Salt x14", "Lettuce x7", "Beef x7", "Carrot x7",
    ]
