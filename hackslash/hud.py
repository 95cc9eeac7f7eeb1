"""The on-screen health and mana display."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Tuple

from hackslash.core import ResourceType, StatType
from hackslash.resource import Resource
from hackslash.stat import Stat

Color = Tuple[int, int, int, int]


class _Displayable(Protocol):
    def stat(self, stat_type: StatType) -> Stat: ...

    def resource(self, resource_type: ResourceType) -> Resource: ...


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def red_to_green_color(scalar: float) -> Color:
    """An opaque 8-bit colour: red at 0, yellow at 0.5, green at 1."""
    red = _clamp01((1.0 - scalar) / 0.5)
    green = _clamp01(scalar / 0.5)
    return (int(255 * red), int(255 * green), 0, 255)


@dataclass
class Bar:
    """A progress bar with its caption."""

    percent: float = 0.0
    fill_color: Optional[Color] = None
    text: str = ""


def _ratio(current: float, maximum: float) -> float:
    return current / maximum if maximum else 0.0


def _caption(current: float, maximum: float) -> str:
    return f"{int(current)} / {int(maximum)}"


class HudWidget:
    """Shows the displayed character's health and mana."""

    def __init__(self) -> None:
        self.current_health = 0.0
        self.current_max_health = 0.0
        self.current_mana = 0.0
        self.current_max_mana = 0.0
        self.health_bar = Bar()
        self.mana_bar = Bar()
        self.exp_bar = Bar()
        self.level_text = ""

    def set_character_to_display(self, character: _Displayable) -> None:
        """Follow ``character``'s health and mana from now on."""
        max_health = character.stat(StatType.MAX_HEALTH)
        max_mana = character.stat(StatType.MAX_MANA)
        health = character.resource(ResourceType.HEALTH)
        mana = character.resource(ResourceType.MANA)

        max_health.on_change.connect(self.on_max_health_change)
        max_mana.on_change.connect(self.on_max_mana_change)
        health.on_change.connect(self.on_health_change)
        mana.on_change.connect(self.on_mana_change)

        self.on_health_change(health.value)
        self.on_max_health_change(max_health.value)
        self.on_mana_change(mana.value)
        self.on_max_mana_change(max_mana.value)

    def _update_health_bar(self) -> None:
        percent = _ratio(self.current_health, self.current_max_health)
        self.health_bar.percent = percent
        self.health_bar.fill_color = red_to_green_color(percent)
        self.health_bar.text = _caption(self.current_health, self.current_max_health)

    def _update_mana_bar(self) -> None:
        self.mana_bar.percent = _ratio(self.current_mana, self.current_max_mana)
        self.mana_bar.text = _caption(self.current_mana, self.current_max_mana)

    def on_health_change(self, health: float) -> None:
        self.current_health = health
        self._update_health_bar()

    def on_mana_change(self, mana: float) -> None:
        self.current_mana = mana
        self._update_mana_bar()

    def on_max_health_change(self, max_health: float) -> None:
        self.current_max_health = max_health
        self._update_health_bar()

    def on_max_mana_change(self, max_mana: float) -> None:
        self.current_max_mana = max_mana
        self._update_mana_bar()