"""The character overview: attributes, equipment and inventory panels."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from hackslash.attributes import Attributes
from hackslash.core import AttributeType, Event
from hackslash.inventory_widget import InventoryWidget
from hackslash.item_widget import RarityColors
from hackslash.player_attribute import PlayerAttribute

if TYPE_CHECKING:
    from hackslash.player_character import PlayerCharacter

SHOW_ANIMATION_TIME = 0.5


class AttributeLabel:
    """One attribute's name and value, with a button shown while points remain."""

    def __init__(self, attribute: PlayerAttribute) -> None:
        self.attribute = attribute
        self.name_text = attribute.type.display_name
        self.number_text = str(attribute.value)
        self.add_button_visible = False
        owner = attribute.owner
        owner.on_points_change.connect(self.on_points_change)
        self.on_points_change(owner.points)

    def on_points_change(self, points: int) -> None:
        """Show the add button only while there are points to spend."""
        self.add_button_visible = points > 0


class AttributesWidget:
    """Labels for strength, agility, intelligence and vitality."""

    def __init__(self, attributes: Attributes) -> None:
        self.strength_label = AttributeLabel(attributes.attribute(AttributeType.STRENGTH))
        self.agility_label = AttributeLabel(attributes.attribute(AttributeType.AGILITY))
        self.intelligence_label = AttributeLabel(
            attributes.attribute(AttributeType.INTELLIGENCE)
        )
        self.vitality_label = AttributeLabel(attributes.attribute(AttributeType.VITALITY))


class EquipmentWidget:
    """The panel for equipped items."""


class CharacterOverviewWidget:
    """Attributes, equipment and the default inventory grid of a character."""

    def __init__(
        self, character: PlayerCharacter, colors: Optional[RarityColors] = None
    ) -> None:
        self.attributes = AttributesWidget(character.attributes)
        self.equipment = EquipmentWidget()
        self.inventory = InventoryWidget(character.inventory.default_grid, colors)


class ShowCharacterOverviewWidget:
    """Slides the character overview in, and out again when closed."""

    def __init__(
        self, character: PlayerCharacter, colors: Optional[RarityColors] = None
    ) -> None:
        self.widget_to_show = CharacterOverviewWidget(character, colors)
        self.anim_time = SHOW_ANIMATION_TIME
        self.in_viewport = False
        self.playing_reverse = False
        self.on_animation_finished = Event()
        self._closing = False

    def close(self) -> None:
        """Play the show animation backwards and remove the widget when it ends."""
        if not self._closing:
            self.on_animation_finished.connect(self.on_show_animation_end)
            self._closing = True
        self.playing_reverse = True

    def on_show_animation_end(self) -> None:
        self.in_viewport = False