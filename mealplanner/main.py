import argparse
import logging
import sys

from mealplanner.cli.console import ConsoleApp
from mealplanner.infra.database import Database
from mealplanner.infra.Meal_Repository import MealRepository
from mealplanner.infra.Plan_Repository import PlanRepository
from mealplanner.utilities.app_logging import configure_logging
from mealplanner.utilities.config import DB_PATH, ECHO_SQL, LOG_LEVEL
from mealplanner.utilities.exceptions import PersistenceError

logger = logging.getLogger("mealplanner.main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Plan a week of meals and export the shopping list')
    parser.add_argument('--db', default=str(DB_PATH), help=f'SQLite file holding meals and the plan (default: {DB_PATH})')
    parser.add_argument('--log-level', default=LOG_LEVEL, help='Logging level (default: %(default)s)')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    database = Database(args.db, echo=ECHO_SQL)
    try:
        database.open()
    except PersistenceError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    # The store is released on every way out of the loop, Ctrl+C included
    try:
        meals = MealRepository(database)
        try:
            logger.info(f"{meals.count()} meals in store")
        except PersistenceError as e:
            logger.warning(f"Could not count stored meals: {e}")
        ConsoleApp(meals, PlanRepository(database)).run()
    except KeyboardInterrupt:
        print()
    finally:
        database.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
