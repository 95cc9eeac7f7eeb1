"""The player's character: attributes, inventory and a top-down camera."""

from __future__ import annotations

from typing import Iterable, Optional

from hackslash.attributes import Attributes
from hackslash.base_character import BaseCharacter, Montage, Vector
from hackslash.core import AttributeType
from hackslash.inventory import Inventory
from hackslash.player_attribute import PlayerAttribute

CAMERA_ARM_LENGTH = 800.0
CAMERA_PITCH = -60.0
TURN_RATE = 1000.0


class PlayerCharacter(BaseCharacter):
    """The character the player controls."""

    def __init__(
        self,
        location: Optional[Vector] = None,
        attack_montages: Iterable[Montage] = (),
        strength: int = 10,
        agility: int = 10,
        intelligence: int = 10,
        vitality: int = 10,
        inventory: Optional[Inventory] = None,
    ) -> None:
        super().__init__(location, attack_montages)
        self.camera_arm_length = CAMERA_ARM_LENGTH
        self.camera_pitch = CAMERA_PITCH
        self.turn_rate = TURN_RATE
        self.orient_rotation_to_movement = True
        # The player never catches its own cursor.
        self.blocks_cursor = False
        self.inventory = inventory if inventory is not None else Inventory()
        self.attributes = Attributes(self.stats, strength, agility, intelligence, vitality)

    def attribute(self, attribute_type: AttributeType) -> PlayerAttribute:
        return self.attributes.attribute(attribute_type)