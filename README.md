# hackslash

Game logic for a top-down hack-and-slash RPG. It does not depend on any
engine. The model is plain Python objects that you advance by calling
`tick(delta_time)`. Changes are reported through `hackslash.core.Event`
objects: `connect` a callback, and `emit` calls every connected callback in
the order they were connected.

## What is in it

Each entry below names a module and what it provides.

- **`hackslash.core`**
  - `Event` for notifications.
  - The enumerations `StatType`, `AttributeType`, `ResourceType` and `ItemStorage`. Each member has a CamelCase `display_name`, for example `MaxHealth`.
- **`hackslash.stat`**
  - `Stat`, a value clamped between `min_value` and `max_value`.
  - `set_value` and `set_initial_value` reset the value.
  - `add` and `remove` act on an unclamped `overflow_value`. This means that removing a bonus does not take away more than the bonus gave.
- **`hackslash.resource`**
  - `Resource`, used for health and mana. Its value is kept between 0 and `max_value`.
  - `on_change` fires when the value actually changes.
  - `on_deplete` fires whenever the value sits at the minimum.
  - `on_dependent_stat_change` lets the maximum follow a stat.
- **`hackslash.stat_collection`**
  - `StatCollection`, the default set of ten stats and two resources, each with its own limits.
  - `update_resources` ties health and mana to `MAX_HEALTH` and `MAX_MANA` and fills both.
- **`hackslash.player_attribute`**
  - `PlayerAttribute`, an integer attribute.
  - `set_value` notifies only when the value changes. `change_value` always notifies.
- **`hackslash.attributes`**
  - `Attributes` holds strength, agility, intelligence and vitality. They drive the stats:
    - strength × 0.01 gives the damage multiplier;
    - agility gives attack speed;
    - intelligence × 7 gives maximum mana;
    - vitality × 12 gives maximum health.
  - Health and mana are then filled to their maxima.
  - The `points` property fires `on_points_change` when it is set.
- **`hackslash.item`**
  - `Item` has a footprint `size` of (width, height) in cells, a rarity, a quantity, a price and a unique id.
  - `image` and `mesh` can be given as values or as loaders that are called on first access.
  - `ItemDisposition` and `ItemRarity` are the matching enumerations.
- **`hackslash.item_grid`**
  - `ItemGrid`, a cell grid.
  - Placing items: `add_item` uses the first free spot, scanning row by row. `add_item_at` places an item at given coordinates. `add_many_items` returns the items that did not fit.
  - `remove_item` takes an item out.
  - Checks: `is_area_empty`, `find_empty_area`, `can_add_item` and `can_add_item_at`.
  - Dragging: `start_dragging_item`, `cancel_dragging_item`, `move_dragging_item_in_same_grid` and `finish_dragging_item_out_of_grid`.
- **`hackslash.inventory`**
  - `Inventory` manages one or more grids.
  - `begin_play` creates the default 10×6 grid and adds the default items.
- **`hackslash.ability`**
  - `Ability` is aimed at either a target character or a target location.
  - `BasicAttack` has a range of 120 and walks to its target.
    - It cannot run without a target, while the attack is in cooldown, or while the owner is locked in an animation.
    - It cannot be queued while the owner is locked.
- **`hackslash.ability_component`**
  - `AbilityComponent` runs an ability at once if it is in range.
  - Otherwise it queues the ability and executes it on the first `tick` in range.
- **`hackslash.base_character`**
  - `Vector` and `Montage`.
  - `BaseCharacter` handles:
    - straight-line walking to a location or a character, at move speed × 3;
    - turning towards a point;
    - an attack cooldown of `1 - attack_speed * 0.01` seconds;
    - attack montages played at a rate stretched to the cooldown;
    - armor-based defense;
    - health and mana regeneration.
- **`hackslash.animation`**
  - `AttackLandNotify.notify` releases the animation lock and fires `on_attack_land`.
- **`hackslash.enemy_character`**
  - `EnemyCharacter` takes its starting values from `EnemyInitialValues`.
  - Its `current_*` values mirror its stats and resources.
  - `edit_property` pushes an edited value back into the stat or resource.
  - `on_mouse_enter` and `on_mouse_left` toggle its target marker.
- **`hackslash.player_character`**
  - `PlayerCharacter` has `attributes` and an `inventory`.
- **`hackslash.hud`**
  - `HudWidget` keeps health and mana `Bar`s in step with a character. Each bar has a percentage and a caption of the form `"70 / 100"`.
  - The health bar is also coloured with `red_to_green_color`.
- **`hackslash.item_widget`**
  - `ItemWidget` shows an item on a background coloured by `RarityColors`.
  - `ItemDragWidget`, `ItemHintWidget` and `ItemDragDropOperation` support dragging.
- **`hackslash.inventory_widget`**
  - `InventoryWidget` lays out a grid's items in 60-unit cells.
  - `on_drag_over` shows a green or red drop hint.
  - `on_drop` moves the item within the grid, or puts it back if it does not fit.
- **`hackslash.overview`**
  - The character overview consists of `AttributeLabel`, `AttributesWidget`, `EquipmentWidget`, `CharacterOverviewWidget` and `ShowCharacterOverviewWidget`.
- **`hackslash.controller`**
  - `PlayerController` turns what is under the cursor into movement or a basic attack.
  - It owns the HUD and opens and closes the character overview.

## Install

```
pip install .
pip install ".[test]"   # with test requirements
```

## Example

```python
from hackslash.core import ResourceType, StatType
from hackslash.item import Item
from hackslash.item_grid import ItemGrid
from hackslash.stat_collection import StatCollection

stats = StatCollection()
stats.resource(ResourceType.HEALTH).change_value(-30.0)
print(stats.resource(ResourceType.HEALTH).value)   # 70.0

grid = ItemGrid((10, 6))
sword = Item(name="Sword", size=(1, 3))
grid.add_item(sword)
print(sword.grid_coordinates)                      # (0, 0)
```

The next example shows a player fighting an enemy:

```python
from hackslash.animation import AttackLandNotify
from hackslash.base_character import Montage, Vector
from hackslash.controller import PlayerController
from hackslash.enemy_character import EnemyCharacter, EnemyInitialValues
from hackslash.player_character import PlayerCharacter

player = PlayerCharacter(attack_montages=[Montage("swing", 0.8)])
player.inventory.begin_play()
enemy = EnemyCharacter(
    location=Vector(500.0, 0.0, 0.0),
    initial=EnemyInitialValues(max_health=50.0, health=50.0, move_speed=100.0),
)

controller = PlayerController(player)
controller.set_destination()        # mouse button held
controller.tick(0.016, enemy)       # the cursor is over the enemy: pick it
controller.tick(0.016)              # out of range: walk there, attack queued

for _ in range(100):
    player.tick(0.016)              # walks, attacks once in range

AttackLandNotify().notify(player)   # the blow lands; the lock is released
```

## What it does not do

This package keeps game state only. It has:

- no window, rendering, sound or input devices;
- no command to run;
- no saving or loading.

How the game is shown is up to the caller:

- Cursor hits are handed to `PlayerController.tick` by the caller.
- Walking is a straight line with no pathfinding.
- Animation montages are only recorded, not played.

Some game rules are not there yet:

- Damage stats exist, but nothing applies damage.
- `EquipmentWidget` is an empty panel.
- The attribute labels only show or hide their add button. Spending points is left to the caller.

## Tests

```
pytest
```