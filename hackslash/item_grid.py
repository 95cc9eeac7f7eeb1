"""A rectangular grid of cells that holds items."""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from hackslash.core import Event
from hackslash.item import Item, ItemDisposition

Point = Tuple[int, int]

EMPTY_CELL = 0


class ItemGrid:
    """Items placed on a grid; each cell holds the id of the item covering it."""

    def __init__(self, size: Point) -> None:
        width, height = size
        if width < 0 or height < 0:
            raise ValueError(f"grid size must not be negative: {size}")
        self._size: Point = (width, height)
        self._cells: List[int] = [EMPTY_CELL] * (width * height)
        self._items: List[Item] = []
        self.dragging_item: Optional[Item] = None
        self.on_grid_change = Event()
        self.on_item_added = Event()
        self.on_item_removed = Event()

    @property
    def size(self) -> Point:
        return self._size

    @property
    def items(self) -> List[Item]:
        """A copy of the items in the grid, in the order they were added."""
        return list(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def _index(self, coordinates: Point) -> int:
        x, y = coordinates
        width, height = self._size
        if not (0 <= x < width and 0 <= y < height):
            raise IndexError(f"cell {coordinates} is outside a {width}x{height} grid")
        return y * width + x

    def cell(self, coordinates: Point) -> int:
        """The id stored at ``coordinates``, or EMPTY_CELL."""
        return self._cells[self._index(coordinates)]

    def set_cell(self, coordinates: Point, item_id: int) -> None:
        self._cells[self._index(coordinates)] = item_id

    def fill_area(self, top_left: Point, area_size: Point, item_id: int) -> None:
        left, top = top_left
        width, height = area_size
        for dx in range(width):
            for dy in range(height):
                self.set_cell((left + dx, top + dy), item_id)

    def is_area_empty(self, coordinates: Point, item_size: Point) -> bool:
        """True if the area lies inside the grid and no item covers it."""
        x, y = coordinates
        width, height = item_size
        grid_width, grid_height = self._size
        if x < 0 or y < 0 or x + width > grid_width or y + height > grid_height:
            return False
        return all(
            self.cell((x + dx, y + dy)) == EMPTY_CELL
            for dx in range(width)
            for dy in range(height)
        )

    def find_empty_area(self, item_size: Point) -> Optional[Point]:
        """The first free top-left position scanning row by row, or None."""
        width, height = item_size
        grid_width, grid_height = self._size
        if width > grid_width or height > grid_height:
            return None
        return next(
            (
                (x, y)
                for y in range(grid_height - height + 1)
                for x in range(grid_width - width + 1)
                if self.is_area_empty((x, y), item_size)
            ),
            None,
        )

    def can_add_item_at(self, item: Item, coordinates: Point) -> bool:
        return self.is_area_empty(coordinates, item.size)

    def can_add_item(self, item: Item) -> bool:
        return self.find_empty_area(item.size) is not None

    def _add_internal(self, item: Item, coordinates: Point) -> None:
        self._items.append(item)
        item.grid_coordinates = coordinates
        item.disposition = ItemDisposition.GRID
        item.owning_grid = self
        self.fill_area(coordinates, item.size, item.unique_id)

    def _add_and_notify(self, item: Item, coordinates: Point) -> None:
        self._add_internal(item, coordinates)
        self.on_grid_change.emit()
        self.on_item_added.emit(item)

    def add_item(self, item: Item) -> bool:
        """Place ``item`` at the first free position; False if there is none."""
        coordinates = self.find_empty_area(item.size)
        if coordinates is None:
            return False
        self._add_and_notify(item, coordinates)
        return True

    def add_item_at(self, item: Item, coordinates: Point) -> bool:
        """Place ``item`` at ``coordinates``; False if it does not fit there."""
        if not self.is_area_empty(coordinates, item.size):
            return False
        self._add_and_notify(item, coordinates)
        return True

    def add_many_items(self, items: Iterable[Item]) -> List[Item]:
        """Place each item at the first free position; return those that did not fit."""
        not_added: List[Item] = []
        any_added = False
        for item in items:
            coordinates = self.find_empty_area(item.size)
            if coordinates is None:
                not_added.append(item)
                continue
            self._add_internal(item, coordinates)
            self.on_item_added.emit(item)
            any_added = True
        if any_added:
            self.on_grid_change.emit()
        return not_added

    def remove_item(self, item: Item) -> None:
        """Take ``item`` out of the grid if it is there."""
        if item not in self._items:
            return
        self._items.remove(item)
        if item.grid_coordinates is not None:
            self.fill_area(item.grid_coordinates, item.size, EMPTY_CELL)
        item.grid_coordinates = None
        item.disposition = ItemDisposition.NONE
        item.owning_grid = None
        self.on_item_removed.emit(item)
        self.on_grid_change.emit()

    def _require_dragging(self) -> Item:
        if self.dragging_item is None:
            raise RuntimeError("no item is being dragged")
        return self.dragging_item

    def start_dragging_item(self, item: Item) -> None:
        """Lift ``item`` off its cells while it is dragged."""
        if item.grid_coordinates is None:
            raise ValueError(f"{item!r} has no place in a grid")
        self.dragging_item = item
        self.fill_area(item.grid_coordinates, item.size, EMPTY_CELL)
        self.on_grid_change.emit()

    def cancel_dragging_item(self) -> None:
        """Put the dragged item back where it was."""
        item = self._require_dragging()
        self.fill_area(item.grid_coordinates, item.size, item.unique_id)
        self.dragging_item = None
        self.on_grid_change.emit()

    def finish_dragging_item_out_of_grid(self) -> None:
        """Forget the dragged item after it was dropped elsewhere."""
        if self.dragging_item is not None:
            self._items.remove(self.dragging_item)
            self.dragging_item = None

    def move_dragging_item_in_same_grid(self, coordinates: Point) -> None:
        """Drop the dragged item at ``coordinates`` in this grid."""
        item = self._require_dragging()
        self.fill_area(coordinates, item.size, item.unique_id)
        item.grid_coordinates = coordinates
        self.dragging_item = None
        self.on_grid_change.emit()