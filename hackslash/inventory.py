"""A character's inventory made of one or more item grids."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

from hackslash.item import Item
from hackslash.item_grid import ItemGrid

Point = Tuple[int, int]

DEFAULT_GRID_SIZE: Point = (10, 6)


class Inventory:
    """Manages item grids and the items a character starts with."""

    def __init__(
        self,
        default_grid_size: Point = DEFAULT_GRID_SIZE,
        default_items: Optional[Sequence[Item]] = None,
    ) -> None:
        self.default_grid_size = default_grid_size
        self.default_items: List[Item] = list(default_items or ())
        self.grids: List[ItemGrid] = []

    def begin_play(self) -> None:
        """Create the default grid and put the default items in it."""
        self.grids = [ItemGrid(self.default_grid_size)]
        self.add_many_items(self.default_items)

    def add_grid(self, grid: ItemGrid) -> None:
        self.grids.append(grid)

    def grid_at(self, index: int) -> ItemGrid:
        return self.grids[index]

    @property
    def default_grid(self) -> ItemGrid:
        return self.grids[0]

    def add_item(self, item: Item) -> bool:
        """Put ``item`` into the first grid with room; False if none has."""
        return any(grid.add_item(item) for grid in self.grids)

    def add_many_items(self, items: Iterable[Item]) -> List[Item]:
        """Spread ``items`` over the grids in order; return those that did not fit."""
        remaining = list(items)
        for grid in self.grids:
            if not remaining:
                break
            remaining = grid.add_many_items(remaining)
        return remaining

    def remove_item(self, item: Item) -> None:
        """Remove ``item`` from the grid holding it, if any."""
        for grid in self.grids:
            if item in grid:
                grid.remove_item(item)
                return