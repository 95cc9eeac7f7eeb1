"""Turns the player's clicks into movement and attacks."""

from __future__ import annotations

from typing import Any, Optional

from hackslash.ability import BasicAttack
from hackslash.base_character import BaseCharacter, Vector
from hackslash.enemy_character import EnemyCharacter
from hackslash.hud import HudWidget
from hackslash.item_widget import RarityColors
from hackslash.overview import ShowCharacterOverviewWidget
from hackslash.player_character import PlayerCharacter


class PlayerController:
    """Drives a player character from cursor input."""

    def __init__(
        self, character: PlayerCharacter, colors: Optional[RarityColors] = None
    ) -> None:
        self.character = character
        self.colors = colors
        self.show_mouse_cursor = True
        self.mouse_over_events = True
        self.ability_component = character.ability_component
        self.attack_ability = BasicAttack(character)
        self.enemy: Optional[BaseCharacter] = None
        # While set, the player follows the cursor or attacks the chosen enemy.
        self.destination_set = False
        self.opened_overview: Optional[ShowCharacterOverviewWidget] = None
        self.hud = HudWidget()
        self.hud.set_character_to_display(character)

    def set_destination(self) -> None:
        self.destination_set = True

    def unset_destination(self) -> None:
        self.destination_set = False
        self.unset_enemy()

    def set_enemy(self, enemy: Optional[BaseCharacter]) -> None:
        self.enemy = enemy

    def unset_enemy(self) -> None:
        self.enemy = None

    def toggle_character_overview(self) -> None:
        """Open the character overview, or close the open one."""
        if self.opened_overview is not None:
            self.opened_overview.close()
            self.opened_overview = None
        else:
            overview = ShowCharacterOverviewWidget(self.character, self.colors)
            overview.in_viewport = True
            self.opened_overview = overview

    def abort_move(self) -> None:
        """Stop the character's current walk."""
        self.character.stop_moving()

    def tick(self, delta_seconds: float, cursor_hit: Any = None) -> None:
        """Attack the chosen enemy, or act on what lies under the cursor.

        ``cursor_hit`` is an enemy, another character, a world location, or
        None when the cursor hits nothing.
        """
        if not self.destination_set:
            return
        if self.enemy is not None:
            self.attack_ability.target_character = self.enemy
            self.ability_component.execute_ability(self.attack_ability)
            return
        if cursor_hit is None:
            return
        if isinstance(cursor_hit, EnemyCharacter):
            self.enemy = cursor_hit
        elif isinstance(cursor_hit, BaseCharacter):
            self.character.move_to(cursor_hit.location)
        elif isinstance(cursor_hit, Vector):
            self.character.move_to(cursor_hit)
        else:
            raise TypeError(f"cannot act on cursor hit {cursor_hit!r}")