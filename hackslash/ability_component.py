"""Runs abilities now or once their owner has walked into range."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from hackslash.ability import Ability


class AbilityComponent:
    """Executes abilities, queueing those whose target is still out of reach."""

    def __init__(self) -> None:
        self.current_ability: Optional[Ability] = None
        self.queued = False

    def execute_ability(self, ability: Ability) -> None:
        """Execute ``ability`` if in range, else queue it if it runs to its target."""
        if ability.has_acceptable_distance():
            if ability.can_execute():
                ability.execute()
        elif ability.runs_to_target and ability.can_be_queued():
            self.queue_ability(ability)

    def queue_ability(self, ability: Ability) -> None:
        """Send the owner towards the target and execute on arrival."""
        self.current_ability = ability
        ability.run_to_target()
        self.queued = True

    def unqueue_current_ability(self) -> None:
        self.current_ability = None
        self.queued = False

    def tick(self, delta_time: float) -> None:
        """Execute the queued ability once it is in range, then drop it."""
        ability = self.current_ability
        if self.queued and ability is not None and ability.has_acceptable_distance():
            if ability.can_execute():
                ability.execute()
            self.unqueue_current_ability()