"""Game items that can live in grids, equipment slots or the world."""

from __future__ import annotations

import itertools
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional, Tuple

if TYPE_CHECKING:
    from hackslash.item_grid import ItemGrid

Point = Tuple[int, int]

_unique_ids = itertools.count(1)


class ItemDisposition(Enum):
    """Where an item currently is."""

    NONE = "None"
    GRID = "Grid"
    EQUIPMENT_SLOT = "EquipmentSlot"
    PICKUP_MESH = "PickupMesh"


class ItemRarity(Enum):
    COMMON = "Common"
    UNCOMMON = "Uncommon"
    RARE = "Rare"
    LEGENDARY = "Legendary"


class _LazyAsset:
    """An asset given either directly or as a zero-argument loader."""

    def __init__(self, source: Any) -> None:
        self._source = source
        self._pending = callable(source)
        self._loaded: Any = None if self._pending else source

    def get(self) -> Any:
        if self._pending:
            self._loaded = self._source()
            self._pending = False
        return self._loaded


class Item:
    """An item with a footprint of ``size`` cells (width, height).

    ``image`` and ``mesh`` may be given as values or as loaders called on
    first access.
    """

    def __init__(
        self,
        name: str = "",
        description: str = "",
        size: Point = (1, 1),
        *,
        image: Any = None,
        mesh: Any = None,
        max_quantity: int = 1,
        quantity: int = 1,
        price: int = 0,
        rarity: ItemRarity = ItemRarity.COMMON,
    ) -> None:
        if max_quantity < 1:
            raise ValueError("max_quantity must be at least 1")
        if quantity < 1:
            raise ValueError("quantity must be at least 1")
        if price < 0:
            raise ValueError("price must not be negative")
        self.name = name
        self.description = description
        self.size: Point = (int(size[0]), int(size[1]))
        self.max_quantity = max_quantity
        self.quantity = quantity
        self.price = price
        self.rarity = rarity
        self.unique_id = next(_unique_ids)
        self.disposition = ItemDisposition.NONE
        self.owning_grid: Optional[ItemGrid] = None
        self.grid_coordinates: Optional[Point] = None
        self._image = _LazyAsset(image)
        self._mesh = _LazyAsset(mesh)

    @property
    def image(self) -> Any:
        """The item's picture, loaded on first access."""
        return self._image.get()

    @property
    def mesh(self) -> Any:
        """The item's world mesh, loaded on first access."""
        return self._mesh.get()

    def __repr__(self) -> str:
        return f"Item({self.name!r}, size={self.size}, id={self.unique_id})"