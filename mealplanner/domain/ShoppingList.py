"""ShoppingList entry: an ingredient name and how many planned meals need it."""

from mealplanner.utilities.constants import COUNT_SUFFIX


class ShoppingListEntry:
    def __init__(self, name: str, count: int = 1):
        if count < 1:
            raise ValueError(f"Count must be at least 1: {count}")
        self.name = name
        self.count = count

    def render(self) -> str:
        '''
        Returns the export line: the bare name, or "name xN" when needed more than once.
        '''
        if self.count == 1:
            return self.name
        return f"{self.name}{COUNT_SUFFIX}{self.count}"

    def __eq__(self, other) -> bool:
        if not isinstance(other, ShoppingListEntry):
            return NotImplemented
        return (self.name, self.count) == (other.name, other.count)

    def __hash__(self) -> int:
        return hash((self.name, self.count))

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"ShoppingListEntry({self.name!r}, {self.count})"
