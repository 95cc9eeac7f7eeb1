"""Depletable resources such as health and mana."""

from __future__ import annotations

from hackslash.core import Event, ResourceType


def _clamp(value: float, low: float, high: float) -> float:
    if value < low:
        return low
    return value if value < high else high


class Resource:
    """A value kept between zero and a maximum, which may follow a stat."""

    def __init__(self, initial_value: float, resource_type: ResourceType, name: str) -> None:
        self.type = resource_type
        self.name = name
        self.min_value = 0.0
        self.max_value = initial_value
        self.initial_value = initial_value
        self.value = initial_value
        self.on_change = Event()
        self.on_deplete = Event()

    def _assign(self, value: float) -> None:
        before = self.value
        self.value = _clamp(value, self.min_value, self.max_value)
        if before != self.value:
            self.on_change.emit(self.value)
        if self.value == self.min_value:
            self.on_deplete.emit()

    def change_value(self, change: float) -> None:
        """Shift the value by ``change`` within the bounds."""
        self._assign(self.value + change)

    def set_value(self, value: float) -> None:
        """Set the value within the bounds."""
        self._assign(value)

    def on_dependent_stat_change(self, new_value: float) -> None:
        """Follow a maximum-defining stat."""
        self.max_value = new_value