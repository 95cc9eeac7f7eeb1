"""Abilities a character can use on a target character or location."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from hackslash.base_character import Vector
from hackslash.core import Event

if TYPE_CHECKING:
    from hackslash.base_character import BaseCharacter

logger = logging.getLogger(__name__)

BASIC_ATTACK_RANGE = 120.0


class Ability:
    """Base ability aimed at either a character or a location, not both."""

    def __init__(self, owner: Optional[BaseCharacter] = None) -> None:
        self.owner = owner
        self.target_character: Optional[BaseCharacter] = None
        self.target_location = Vector()
        # Largest owner-to-target distance at which the ability may be used.
        self.min_range = 0.0
        # Whether the owner walks up to a target that is out of range.
        self.runs_to_target = False
        self.on_execute = Event()

    def _require_owner(self) -> BaseCharacter:
        if self.owner is None:
            raise RuntimeError(f"{type(self).__name__} has no owner")
        return self.owner

    def execute(self) -> None:
        """Use the ability and tell listeners it was used."""
        self.on_execute.emit(self)

    def can_execute(self) -> bool:
        return True

    def can_be_queued(self) -> bool:
        return True

    def distance_to_target(self) -> float:
        owner = self._require_owner()
        if self.target_character is not None:
            return owner.distance_to(self.target_character)
        return owner.location.distance(self.target_location)

    def has_acceptable_distance(self) -> bool:
        return self.distance_to_target() <= self.min_range

    def run_to_target(self) -> None:
        """Send the owner walking towards the target."""
        owner = self._require_owner()
        if self.target_character is not None:
            owner.destination = self.target_character
        else:
            owner.destination = self.target_location

    def stop_moving(self) -> None:
        self._require_owner().stop_moving()


class BasicAttack(Ability):
    """The standard melee attack."""

    def __init__(self, owner: Optional[BaseCharacter] = None) -> None:
        super().__init__(owner)
        self.runs_to_target = True
        self.min_range = BASIC_ATTACK_RANGE

    def execute(self) -> None:
        owner = self._require_owner()
        if self.target_character is None:
            raise RuntimeError("basic attack has no target character")
        owner.start_rotating(self.target_character.location)
        # The lock is released when the attack animation lands.
        owner.locked_in_animation = True
        owner.stop_moving()
        owner.start_attack_cooldown()
        owner.play_attack_montage()
        super().execute()

    def can_execute(self) -> bool:
        if self.target_character is None:
            logger.error("target character of a basic attack is not set")
            return False
        owner = self._require_owner()
        return not (owner.is_attack_in_cooldown or owner.locked_in_animation)

    def can_be_queued(self) -> bool:
        return not self._require_owner().locked_in_animation