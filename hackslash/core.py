"""Event dispatch and the enumerations shared by the game model."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Callable


class Event:
    """A multicast notification: callbacks run in the order they connected."""

    def __init__(self) -> None:
        self._callbacks: list[Callable[..., Any]] = []

    def connect(self, callback: Callable[..., Any]) -> Callable[..., Any]:
        """Register ``callback`` and return it."""
        self._callbacks.append(callback)
        return callback

    def disconnect(self, callback: Callable[..., Any]) -> None:
        """Unregister ``callback``; raises ValueError if it was never connected."""
        self._callbacks.remove(callback)

    def emit(self, *args: Any) -> None:
        """Call every connected callback with ``args``."""
        for callback in list(self._callbacks):
            callback(*args)


class _DisplayEnum(IntEnum):
    @property
    def display_name(self) -> str:
        """The member name in CamelCase, e.g. ``MaxHealth``."""
        return "".join(part.capitalize() for part in self.name.split("_"))


class StatType(_DisplayEnum):
    ARMOR = 0
    MAX_HEALTH = 1
    MAX_MANA = 2
    MIN_DAMAGE = 3
    MAX_DAMAGE = 4
    DAMAGE_MULTIPLIER = 5
    ATTACK_SPEED = 6
    MOVE_SPEED = 7
    HEALTH_REGEN = 8
    MANA_REGEN = 9


class AttributeType(_DisplayEnum):
    STRENGTH = 0
    AGILITY = 1
    INTELLIGENCE = 2
    VITALITY = 3


class ResourceType(_DisplayEnum):
    HEALTH = 0
    MANA = 1


class ItemStorage(_DisplayEnum):
    GRID = 0
    EQUIPMENT_SLOT = 1