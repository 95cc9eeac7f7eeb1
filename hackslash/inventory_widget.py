"""A widget that draws an item grid and handles dropping items on it."""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

from hackslash.item import Item
from hackslash.item_grid import ItemGrid
from hackslash.item_widget import (
    CELL_SIZE,
    ItemDragDropOperation,
    ItemHintWidget,
    ItemWidget,
    LinearColor,
    RarityColors,
)

Point = Tuple[int, int]
Vector2 = Tuple[float, float]

VALID_HINT_COLOR: LinearColor = (0.0, 1.0, 0.0, 0.5)
INVALID_HINT_COLOR: LinearColor = (1.0, 0.0, 0.0, 0.5)


class InventoryWidget:
    """Displays a grid's items and places dragged items dropped onto it."""

    def __init__(self, grid: ItemGrid, colors: Optional[RarityColors] = None) -> None:
        if grid is None:
            raise ValueError("an inventory widget needs a grid")
        self.grid = grid
        self.colors = colors if colors is not None else RarityColors()
        self.cell_size = CELL_SIZE
        width, height = grid.size
        self.width = width * self.cell_size
        self.height = height * self.cell_size
        # Background cells as (row, column), created column by column.
        self.cells: List[Point] = [
            (row, column) for column in range(width) for row in range(height)
        ]
        self.item_widgets: List[ItemWidget] = []
        self._create_item_widgets(grid.items)
        grid.on_grid_change.connect(self._on_item_grid_update)
        self.hint = ItemHintWidget()

    def _create_item_widgets(self, items: List[Item]) -> None:
        for item in items:
            widget = ItemWidget(item, self.colors)
            widget.slot_size = (item.size[0] * self.cell_size, item.size[1] * self.cell_size)
            x, y = item.grid_coordinates
            widget.slot_position = (x * self.cell_size, y * self.cell_size)
            self.item_widgets.append(widget)

    def _remove_item_widgets(self) -> None:
        for widget in self.item_widgets:
            widget.slot_position = None
            widget.slot_size = None
        self.item_widgets = []

    def _on_item_grid_update(self) -> None:
        self._remove_item_widgets()
        self._create_item_widgets(self.grid.items)

    def local_to_grid(self, position: Vector2) -> Point:
        """The cell under a widget-local position, truncated toward zero."""
        x, y = position
        return (int(x / self.cell_size), int(y / self.cell_size))

    def grid_coordinates_from_drag(
        self, cursor: Vector2, operation: ItemDragDropOperation
    ) -> Point:
        """The top-left cell for the dragged item, centred on the cursor."""
        width, height = operation.item.size
        offset_x = width * self.cell_size * 0.5
        offset_y = height * self.cell_size * 0.5
        half_cell = self.cell_size / 2.0
        x, y = cursor
        return self.local_to_grid((x - offset_x + half_cell, y - offset_y + half_cell))

    def is_dragged_item_in_borders(self, coordinates: Point, item_size: Point) -> bool:
        x, y = coordinates
        width, height = item_size
        grid_width, grid_height = self.grid.size
        return x >= 0 and y >= 0 and x + width <= grid_width and y + height <= grid_height

    def _show_hint(self, coordinates: Point, item_size: Point, color: LinearColor) -> None:
        self.hint.set_color(color)
        self.hint.visible = True
        self.hint.slot_size = (item_size[0] * self.cell_size, item_size[1] * self.cell_size)
        self.hint.slot_position = (coordinates[0] * self.cell_size, coordinates[1] * self.cell_size)

    def _remove_hint(self) -> None:
        self.hint.visible = False
        self.hint.slot_position = None
        self.hint.slot_size = None

    def on_drag_over(self, cursor: Vector2, operation: Any) -> bool:
        """Show where the dragged item would land and whether it fits."""
        if isinstance(operation, ItemDragDropOperation):
            coordinates = self.grid_coordinates_from_drag(cursor, operation)
            size = operation.item.size
            if self.is_dragged_item_in_borders(coordinates, size):
                fits = self.grid.can_add_item_at(operation.item, coordinates)
                self._show_hint(coordinates, size, VALID_HINT_COLOR if fits else INVALID_HINT_COLOR)
        return True

    def on_drag_leave(self) -> None:
        self._remove_hint()

    def on_drop(self, cursor: Vector2, operation: Any) -> bool:
        """Place the dropped item here, or send it back where it came from."""
        self._remove_hint()
        if isinstance(operation, ItemDragDropOperation):
            item = operation.item
            coordinates = self.grid_coordinates_from_drag(cursor, operation)
            if self.grid.can_add_item_at(item, coordinates):
                if item.owning_grid is self.grid:
                    self.grid.move_dragging_item_in_same_grid(coordinates)
            elif item.owning_grid is not None:
                item.owning_grid.cancel_dragging_item()
        return True