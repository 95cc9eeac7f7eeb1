import pytest

from hackslash.item import Item, ItemRarity
from hackslash.item_grid import EMPTY_CELL, ItemGrid
from hackslash.item_widget import (
    CELL_SIZE,
    DRAG_OPACITY,
    ItemDragDropOperation,
    ItemDragWidget,
    ItemHintWidget,
    ItemWidget,
    RarityColors,
)

COLORS = RarityColors(
    common=(0.1, 0.1, 0.1, 1.0),
    uncommon=(0.2, 0.2, 0.2, 1.0),
    rare=(0.3, 0.3, 0.3, 1.0),
    legendary=(0.4, 0.4, 0.4, 1.0),
)


@pytest.mark.parametrize(
    "rarity,expected",
    [
        (ItemRarity.COMMON, COLORS.common),
        (ItemRarity.UNCOMMON, COLORS.uncommon),
        (ItemRarity.RARE, COLORS.rare),
        (ItemRarity.LEGENDARY, COLORS.legendary),
    ],
)
def test_background_follows_rarity(rarity, expected):
    widget = ItemWidget(Item("x", rarity=rarity), COLORS)
    assert widget.background_color == expected
    assert widget.color_from_rarity(rarity) == expected


def test_unknown_rarity_raises():
    widget = ItemWidget(Item("x"), COLORS)
    with pytest.raises(ValueError):
        widget.color_from_rarity("mythic")


def test_widget_loads_item_image():
    picture = object()
    widget = ItemWidget(Item("x", image=lambda: picture))
    assert widget.image is picture


def test_drag_widget_sizes_to_item():
    item = Item("sword", size=(1, 3), image="pic")
    drag = ItemDragWidget(item)
    assert drag.width == 1 * CELL_SIZE
    assert drag.height == 3 * CELL_SIZE
    assert drag.image == "pic"
    assert drag.opacity == DRAG_OPACITY


def test_drag_widget_without_item_is_blank():
    drag = ItemDragWidget(None)
    assert drag.width is None
    assert drag.image is None


def test_hint_size_and_color():
    hint = ItemHintWidget()
    hint.set_size((2, 4))
    hint.set_color((0.0, 1.0, 0.0, 0.5))
    assert hint.width == 2 * CELL_SIZE
    assert hint.height == 4 * CELL_SIZE
    assert hint.color == (0.0, 1.0, 0.0, 0.5)


def test_drag_detected_lifts_item_from_grid():
    grid = ItemGrid((4, 4))
    item = Item("shield", size=(2, 2))
    assert grid.add_item(item)
    widget = ItemWidget(item, COLORS)
    operation = widget.on_drag_detected()
    assert isinstance(operation, ItemDragDropOperation)
    assert operation.item is item
    assert operation.default_drag_visual.width == 2 * CELL_SIZE
    assert grid.dragging_item is item
    assert grid.cell(item.grid_coordinates) == EMPTY_CELL


def test_drag_without_grid_raises():
    widget = ItemWidget(Item("loose"))
    with pytest.raises(RuntimeError):
        widget.on_drag_detected()