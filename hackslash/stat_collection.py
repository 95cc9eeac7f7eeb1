"""The standard set of stats and resources a character carries."""

from __future__ import annotations

from hackslash.core import ResourceType, StatType
from hackslash.resource import Resource
from hackslash.stat import Stat


class StatCollection:
    """Holds every stat and resource of a character."""

    def __init__(self) -> None:
        self.stats: dict[StatType, Stat] = {
            stat.type: stat
            for stat in (
                Stat(0.0, StatType.ARMOR, "Armor", 0.0, 85.0),
                Stat(100.0, StatType.MAX_HEALTH, "Maximum Health", 0.0),
                Stat(100.0, StatType.MAX_MANA, "Maximum Mana", 0.0),
                Stat(10.0, StatType.MIN_DAMAGE, "Minimum Damage", 0.0),
                Stat(10.0, StatType.MAX_DAMAGE, "Maximum Damage", 0.0),
                Stat(1.0, StatType.DAMAGE_MULTIPLIER, "Additional Damage Percent", 0.01),
                Stat(0.0, StatType.ATTACK_SPEED, "Additional Attack Speed Percent", -100.0, 75.0),
                Stat(100.0, StatType.MOVE_SPEED, "Movement Speed", 0.0, 200.0),
                Stat(0.0, StatType.HEALTH_REGEN, "Health Regeneration", 0.0),
                Stat(0.0, StatType.MANA_REGEN, "Mana Regeneration", 0.0),
            )
        }
        self.resources: dict[ResourceType, Resource] = {
            ResourceType.HEALTH: Resource(100.0, ResourceType.HEALTH, "Current Health"),
            ResourceType.MANA: Resource(100.0, ResourceType.MANA, "Current Mana"),
        }

    def stat(self, stat_type: StatType) -> Stat:
        return self.stats[stat_type]

    def resource(self, resource_type: ResourceType) -> Resource:
        return self.resources[resource_type]

    def update_resources(self) -> None:
        """Tie health and mana maxima to their stats and fill both."""
        pairs = (
            (StatType.MAX_HEALTH, ResourceType.HEALTH),
            (StatType.MAX_MANA, ResourceType.MANA),
        )
        for stat_type, resource_type in pairs:
            stat = self.stats[stat_type]
            resource = self.resources[resource_type]
            stat.on_change.connect(resource.on_dependent_stat_change)
            resource.value = stat.value