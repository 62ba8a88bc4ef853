from pathlib import Path

# Centralized paths for data files (single source of truth)
DATA_DIR = (Path(__file__).parent.parent / 'data').resolve()
DB_FILE = DATA_DIR / 'meals.db'

__all__ = ['DATA_DIR', 'DB_FILE']
