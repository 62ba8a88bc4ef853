"""Shopping list builder.

Turns the ingredient names of the current plan into countable shopping list
entries and writes/reads the plain-text export:

    Salt x2
    Pepper x2
    Bread

Provides build_shopping_list, export_shopping_list, save_shopping_list and
parse_shopping_list.
"""
import logging
import re
from collections import Counter
from pathlib import Path
from typing import Iterable, List

from mealplanner.domain.ShoppingList import ShoppingListEntry
from mealplanner.infra.Plan_Repository import PlanRepository
from mealplanner.utilities.constants import COUNT_SUFFIX, NOTHING_TO_EXPORT
from mealplanner.utilities.exceptions import ExportError, NotFoundError

logger = logging.getLogger(__name__)

_LINE = re.compile(rf"^(?P<name>.+?)(?:{re.escape(COUNT_SUFFIX)}(?P<count>\d+))?$")


def build_shopping_list(ingredient_names: Iterable[str]) -> List[ShoppingListEntry]:
    """Group identical names (exact, case-sensitive) and count them.

    Entries keep the order in which each name was first seen.
    """
    counts = Counter(ingredient_names)
    return [ShoppingListEntry(name, count) for name, count in counts.items()]


def export_shopping_list(entries: List[ShoppingListEntry], destination) -> Path:
    """Write one entry per line to ``destination`` and return its path."""
    if not entries:
        raise NotFoundError(NOTHING_TO_EXPORT)
    path = Path(destination)
    try:
        with open(path, 'w', encoding='utf-8') as f:
            for entry in entries:
                f.write(entry.render() + "\n")
    except OSError as e:
        logger.error(f"Shopping list export failed for {path}: {e}")
        raise ExportError(path, e.strerror or str(e)) from e
    logger.info(f"Exported {len(entries)} shopping list entries to {path}")
    return path


def save_shopping_list(plan_repository: PlanRepository, destination) -> List[ShoppingListEntry]:
    """Build the list for the current plan and export it; refuses when no plan exists."""
    names = plan_repository.ingredients_in_plan()
    if not names:
        raise NotFoundError(NOTHING_TO_EXPORT)
    entries = build_shopping_list(names)
    export_shopping_list(entries, destination)
    return entries


def parse_shopping_list(source) -> List[ShoppingListEntry]:
    """Read an exported shopping list back into entries."""
    entries: List[ShoppingListEntry] = []
    with open(source, 'r', encoding='utf-8') as f:
        for raw in f:
            line = raw.rstrip("\n")
            if not line.strip():
                continue
            match = _LINE.match(line)
            count = int(match.group('count')) if match.group('count') else 1
            entries.append(ShoppingListEntry(match.group('name'), count))
    return entries


__all__ = ['build_shopping_list', 'export_shopping_list', 'save_shopping_list', 'parse_shopping_list']
