"""Widgets showing a single item, its drag visual and its drop hint."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple

from hackslash.item import Item, ItemRarity

LinearColor = Tuple[float, float, float, float]
Point = Tuple[int, int]
Vector2 = Tuple[float, float]

CELL_SIZE = 60.0
DRAG_OPACITY = 0.5


@dataclass(frozen=True)
class RarityColors:
    """Background colours for each item rarity."""

    common: LinearColor = (0.5, 0.5, 0.5, 1.0)
    uncommon: LinearColor = (0.0, 0.6, 0.0, 1.0)
    rare: LinearColor = (0.0, 0.3, 1.0, 1.0)
    legendary: LinearColor = (1.0, 0.5, 0.0, 1.0)


@dataclass
class ItemDragDropOperation:
    """A drag in progress, carrying the dragged item and its visual."""

    item: Item
    default_drag_visual: Any = None


class ItemDragWidget:
    """The half-transparent picture that follows the cursor during a drag."""

    def __init__(self, item: Optional[Item] = None) -> None:
        self.width: Optional[float] = None
        self.height: Optional[float] = None
        self.image: Any = None
        self.opacity = 1.0
        if item is not None:
            self.width = item.size[0] * CELL_SIZE
            self.height = item.size[1] * CELL_SIZE
            self.image = item.image
            self.opacity = DRAG_OPACITY


class ItemHintWidget:
    """A coloured rectangle marking where a dragged item would land."""

    def __init__(self) -> None:
        self.width: Optional[float] = None
        self.height: Optional[float] = None
        self.color: Optional[LinearColor] = None
        self.render_pivot: Vector2 = (0.0, 0.0)
        self.visible = False
        self.slot_position: Optional[Vector2] = None
        self.slot_size: Optional[Vector2] = None

    def set_size(self, item_size: Point) -> None:
        self.width = item_size[0] * CELL_SIZE
        self.height = item_size[1] * CELL_SIZE

    def set_color(self, color: LinearColor) -> None:
        self.color = color


class ItemWidget:
    """Shows an item on a rarity-coloured background and starts drags."""

    def __init__(self, item: Item, colors: Optional[RarityColors] = None) -> None:
        self.item = item
        self.colors = colors if colors is not None else RarityColors()
        self.image = item.image
        self.background_color = self.color_from_rarity(item.rarity)
        self.render_pivot: Vector2 = (0.0, 0.0)
        self.slot_position: Optional[Vector2] = None
        self.slot_size: Optional[Vector2] = None

    def color_from_rarity(self, rarity: ItemRarity) -> LinearColor:
        mapping = {
            ItemRarity.COMMON: self.colors.common,
            ItemRarity.UNCOMMON: self.colors.uncommon,
            ItemRarity.RARE: self.colors.rare,
            ItemRarity.LEGENDARY: self.colors.legendary,
        }
        try:
            return mapping[rarity]
        except KeyError:
            raise ValueError(f"unknown item rarity: {rarity!r}") from None

    def on_drag_detected(self) -> ItemDragDropOperation:
        """Lift the item off its grid and return the drag operation."""
        grid = self.item.owning_grid
        if grid is None:
            raise RuntimeError(f"{self.item!r} is not in a grid")
        operation = ItemDragDropOperation(self.item, ItemDragWidget(self.item))
        grid.start_dragging_item(self.item)
        return operation