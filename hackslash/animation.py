"""Animation notifications that feed back into character state."""

from __future__ import annotations

from typing import Any

from hackslash.base_character import BaseCharacter


class AttackLandNotify:
    """Fired by an attack animation at the moment the blow lands."""

    def notify(self, owner: Any) -> bool:
        """Unlock ``owner`` and announce the hit; False if it is not a character."""
        if not isinstance(owner, BaseCharacter):
            return False
        owner.locked_in_animation = False
        owner.on_attack_land.emit()
        return True