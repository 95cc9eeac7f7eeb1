"""Clamped numeric character stats such as armor or damage."""

from __future__ import annotations

from hackslash.core import Event, StatType

FLOAT_MIN = 1.1754943508222875e-38
FLOAT_MAX = 3.4028234663852886e38


def _clamp(value: float, low: float, high: float) -> float:
    if value < low:
        return low
    return value if value < high else high


class Stat:
    """A stat whose visible value is clamped while modifiers may overflow it."""

    def __init__(
        self,
        initial_value: float,
        stat_type: StatType,
        name: str,
        min_value: float = FLOAT_MIN,
        max_value: float = FLOAT_MAX,
    ) -> None:
        self.type = stat_type
        self.name = name
        self.min_value = min_value
        self.max_value = max_value
        self.on_change = Event()
        self.initial_value = 0.0
        self._value = _clamp(0.0, min_value, max_value)
        self._overflow = self._value
        self.set_initial_value(initial_value)

    @property
    def value(self) -> float:
        """The clamped value."""
        return self._value

    @property
    def overflow_value(self) -> float:
        """The unclamped running total modifiers act on."""
        return self._overflow

    def set_initial_value(self, value: float) -> None:
        self.initial_value = value
        self.set_value(value)

    def set_value(self, value: float) -> None:
        self._value = _clamp(value, self.min_value, self.max_value)
        self._overflow = self._value
        self.on_change.emit(self._value)

    def add(self, amount: float) -> None:
        """Add to the overflow total; meant for modifiers."""
        self._overflow += amount
        self._value = _clamp(self._overflow, self.min_value, self.max_value)
        self.on_change.emit(self._value)

    def remove(self, amount: float) -> None:
        """Subtract from the overflow total; meant for modifiers."""
        self._overflow -= amount
        self._value = _clamp(self._overflow, self.min_value, self.max_value)
        self.on_change.emit(self._value)