"""Player attributes and how they drive the stat collection."""

from __future__ import annotations

from hackslash.core import AttributeType, Event, ResourceType, StatType
from hackslash.player_attribute import PlayerAttribute
from hackslash.stat_collection import StatCollection


class Attributes:
    """Strength, agility, intelligence and vitality bound to a stat collection."""

    def __init__(
        self,
        stats: StatCollection,
        strength: int = 10,
        agility: int = 10,
        intelligence: int = 10,
        vitality: int = 10,
    ) -> None:
        self.stats = stats
        self.on_points_change = Event()
        self._points = 0
        handlers = {
            AttributeType.STRENGTH: (strength, self._on_strength_changed),
            AttributeType.AGILITY: (agility, self._on_agility_changed),
            AttributeType.INTELLIGENCE: (intelligence, self._on_intelligence_changed),
            AttributeType.VITALITY: (vitality, self._on_vitality_changed),
        }
        self.attributes: list[PlayerAttribute] = [
            PlayerAttribute(value, kind.display_name, kind, self)
            for kind, (value, _) in handlers.items()
        ]
        for attribute in self.attributes:
            handler = handlers[attribute.type][1]
            attribute.on_attribute_change.connect(handler)
            handler(attribute.value)

        stats.resource(ResourceType.HEALTH).set_value(stats.stat(StatType.MAX_HEALTH).value)
        stats.resource(ResourceType.MANA).set_value(stats.stat(StatType.MAX_MANA).value)

    def attribute(self, attribute_type: AttributeType) -> PlayerAttribute:
        return self.attributes[attribute_type]

    @property
    def points(self) -> int:
        """Points the player may still spend on attributes."""
        return self._points

    @points.setter
    def points(self, value: int) -> None:
        self._points = value
        self.on_points_change.emit(value)

    def _on_strength_changed(self, strength: int) -> None:
        self.stats.stat(StatType.DAMAGE_MULTIPLIER).set_value(strength * 0.01)

    def _on_agility_changed(self, agility: int) -> None:
        self.stats.stat(StatType.ATTACK_SPEED).set_value(agility)

    def _on_intelligence_changed(self, intelligence: int) -> None:
        self.stats.stat(StatType.MAX_MANA).set_value(intelligence * 7.0)

    def _on_vitality_changed(self, vitality: int) -> None:
        self.stats.stat(StatType.MAX_HEALTH).set_value(vitality * 12.0)