"""A single spendable player attribute such as strength."""

from __future__ import annotations

from typing import Any

from hackslash.core import AttributeType, Event


class PlayerAttribute:
    """An integer attribute that notifies listeners when it changes."""

    def __init__(self, value: int, name: str, attribute_type: AttributeType, owner: Any) -> None:
        self.name = name
        self.type = attribute_type
        self.owner = owner
        self.on_attribute_change = Event()
        self._value = 10
        self.set_value(value)

    @property
    def value(self) -> int:
        return self._value

    def set_value(self, value: int) -> None:
        """Set the value, notifying only on an actual change."""
        before = self._value
        self._value = value
        if before != self._value:
            self.on_attribute_change.emit(self._value)

    def change_value(self, amount: int) -> None:
        """Add ``amount`` and always notify."""
        self._value += amount
        self.on_attribute_change.emit(self._value)