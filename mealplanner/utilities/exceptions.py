"""Error kinds surfaced by the meal planner core."""


class MealPlannerError(Exception):
    """Base class for failures reported by the stores and the planning logic."""


class NotFoundError(MealPlannerError):
    """Raised when a selection or export refers to something that does not exist."""


class PersistenceError(MealPlannerError):
    """Raised when the store is unreachable, a write is rejected or a constraint fails."""


class ExportError(PersistenceError):
    """Raised when a shopping list cannot be written to its destination."""

    def __init__(self, destination, reason: str):
        self.destination = destination
        super().__init__(f"Cannot write shopping list to '{destination}': {reason}")
