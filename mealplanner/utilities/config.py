"""Configuration management for the Meal Planner console tool."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

from mealplanner.infra.paths import DB_FILE

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Storage
DB_PATH: Final[Path] = Path(os.getenv('MEALPLANNER_DB_PATH', str(DB_FILE)))
ECHO_SQL: Final[bool] = os.getenv('MEALPLANNER_ECHO_SQL', 'False').lower() == 'true'

# Logging
LOG_LEVEL: Final[str] = os.getenv('MEALPLANNER_LOG_LEVEL', 'WARNING').upper()
