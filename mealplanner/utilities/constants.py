from typing import Final

DAY_NAMES: Final[list[str]] = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
MEAL_CATEGORIES: Final[list[str]] = ["breakfast", "lunch", "dinner"]
SLOTS_PER_PLAN: Final[int] = len(DAY_NAMES) * len(MEAL_CATEGORIES)

# Names and ingredients: letters and spaces only
LETTERS_ONLY_PATTERN: Final[str] = r"^[A-Za-z ]+$"
INGREDIENT_SEPARATOR: Final[str] = ","
COUNT_SUFFIX: Final[str] = " x"

# Console texts
MENU_PROMPT: Final[str] = "What would you like to do (add, show, plan, save, exit)?"
ADD_CATEGORY_PROMPT: Final[str] = "Which meal do you want to add (breakfast, lunch, dinner)?"
SHOW_CATEGORY_PROMPT: Final[str] = "Which category do you want to print (breakfast, lunch, dinner)?"
NAME_PROMPT: Final[str] = "Input the meal's name:"
INGREDIENTS_PROMPT: Final[str] = "Input the ingredients:"
FILENAME_PROMPT: Final[str] = "Input a filename:"
WRONG_CATEGORY: Final[str] = "Wrong meal category! Choose from: breakfast, lunch, dinner."
WRONG_FORMAT: Final[str] = "Wrong format. Use letters only!"
MEAL_ADDED: Final[str] = "The meal has been added!"
NO_MEALS: Final[str] = "No meals found."
MEAL_NOT_IN_LIST: Final[str] = "This meal doesn't exist. Choose a meal from the list above."
CANNOT_SAVE: Final[str] = "Unable to save. Plan your meals first."
CANNOT_PLAN: Final[str] = "Unable to plan. Add at least one meal for: {categories}."
SAVED: Final[str] = "Saved!"
BYE: Final[str] = "Bye!"
NOTHING_TO_EXPORT: Final[str] = "nothing to export"
