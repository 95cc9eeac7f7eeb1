from hackslash.core import AttributeType
from hackslash.player_attribute import PlayerAttribute


def make(value=10, owner=None):
    return PlayerAttribute(value, "Strength", AttributeType.STRENGTH, owner)


def test_creation_stores_fields():
    owner = object()
    attr = PlayerAttribute(7, "Agility", AttributeType.AGILITY, owner)
    assert attr.value == 7
    assert attr.name == "Agility"
    assert attr.type is AttributeType.AGILITY
    assert attr.owner is owner


def test_set_value_notifies_only_on_change():
    attr = make(10)
    seen = []
    attr.on_attribute_change.connect(seen.append)
    attr.set_value(10)
    attr.set_value(15)
    attr.set_value(15)
    assert seen == [15]
    assert attr.value == 15


def test_change_value_always_notifies():
    attr = make(10)
    seen = []
    attr.on_attribute_change.connect(seen.append)
    attr.change_value(0)
    attr.change_value(5)
    assert seen == [10, 15]


def test_change_value_negative():
    attr = make(10)
    attr.change_value(-10)
    assert attr.value == 0