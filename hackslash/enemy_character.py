"""Enemy characters whose stats start from designer-set values."""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Iterable, Optional

from hackslash.base_character import BaseCharacter, Montage, Vector
from hackslash.core import ResourceType, StatType

CAPSULE_RADIUS = 50.0
CAPSULE_HALF_HEIGHT = 88.0

_STAT_PROPERTIES: dict[str, StatType] = {
    "current_armor": StatType.ARMOR,
    "current_max_health": StatType.MAX_HEALTH,
    "current_max_mana": StatType.MAX_MANA,
    "current_max_damage": StatType.MAX_DAMAGE,
    "current_min_damage": StatType.MIN_DAMAGE,
    "current_damage_multiplier": StatType.DAMAGE_MULTIPLIER,
    "current_move_speed": StatType.MOVE_SPEED,
    "current_attack_speed": StatType.ATTACK_SPEED,
    "current_mana_regen": StatType.MANA_REGEN,
    "current_health_regen": StatType.HEALTH_REGEN,
}

_RESOURCE_PROPERTIES: dict[str, ResourceType] = {
    "current_health": ResourceType.HEALTH,
    "current_mana": ResourceType.MANA,
}

# The order in which initial values are applied to the stats.
_INITIAL_STAT_ORDER = (
    (StatType.ARMOR, "armor"),
    (StatType.MAX_MANA, "max_mana"),
    (StatType.ATTACK_SPEED, "attack_speed"),
    (StatType.DAMAGE_MULTIPLIER, "damage_multiplier"),
    (StatType.HEALTH_REGEN, "health_regen"),
    (StatType.MANA_REGEN, "mana_regen"),
    (StatType.MAX_DAMAGE, "max_damage"),
    (StatType.MIN_DAMAGE, "min_damage"),
    (StatType.MAX_HEALTH, "max_health"),
    (StatType.MOVE_SPEED, "move_speed"),
)


@dataclass
class EnemyInitialValues:
    """The values an enemy's stats and resources start from."""

    armor: float = 0.0
    max_health: float = 0.0
    max_mana: float = 0.0
    max_damage: float = 0.0
    min_damage: float = 0.0
    damage_multiplier: float = 0.0
    move_speed: float = 0.0
    attack_speed: float = 0.0
    mana_regen: float = 0.0
    health_regen: float = 0.0
    health: float = 0.0
    mana: float = 0.0


class EnemyCharacter(BaseCharacter):
    """An enemy that mirrors its stats into editable ``current_*`` values."""

    def __init__(
        self,
        location: Optional[Vector] = None,
        initial: Optional[EnemyInitialValues] = None,
        attack_montages: Iterable[Montage] = (),
    ) -> None:
        self.initial = initial if initial is not None else EnemyInitialValues()
        for name in (*_STAT_PROPERTIES, *_RESOURCE_PROPERTIES):
            setattr(self, name, 0.0)
        self.capsule_radius = CAPSULE_RADIUS
        self.capsule_half_height = CAPSULE_HALF_HEIGHT
        self.blocks_cursor = True
        self.target_decal_visible = False
        super().__init__(location, attack_montages)
        # Callbacks must be in place before the initial values are applied.
        self._configure_stat_callbacks()
        self._set_initial_values()

    def _configure_stat_callbacks(self) -> None:
        for name, stat_type in _STAT_PROPERTIES.items():
            self.stat(stat_type).on_change.connect(partial(setattr, self, name))
        for name, resource_type in _RESOURCE_PROPERTIES.items():
            self.resource(resource_type).on_change.connect(partial(setattr, self, name))

    def _set_initial_values(self) -> None:
        for stat_type, field in _INITIAL_STAT_ORDER:
            self.stat(stat_type).set_initial_value(getattr(self.initial, field))
        pairs = (
            (StatType.MAX_HEALTH, ResourceType.HEALTH, self.initial.max_health, self.initial.health),
            (StatType.MAX_MANA, ResourceType.MANA, self.initial.max_mana, self.initial.mana),
        )
        for stat_type, resource_type, maximum, value in pairs:
            resource = self.resource(resource_type)
            self.stat(stat_type).on_change.connect(resource.on_dependent_stat_change)
            resource.on_dependent_stat_change(maximum)
            resource.set_value(value)

    def on_mouse_enter(self) -> None:
        """Show the target marker while the cursor is over the enemy."""
        self.target_decal_visible = True

    def on_mouse_left(self) -> None:
        self.target_decal_visible = False

    def edit_property(self, name: str, value: float) -> None:
        """Set a ``current_*`` value and push it into the matching stat or resource."""
        if name in _STAT_PROPERTIES:
            setattr(self, name, value)
            self.stat(_STAT_PROPERTIES[name]).set_value(value)
        elif name in _RESOURCE_PROPERTIES:
            setattr(self, name, value)
            self.resource(_RESOURCE_PROPERTIES[name]).set_value(value)
        else:
            raise AttributeError(f"{name!r} is not an editable enemy property")