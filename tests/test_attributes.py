import pytest

from hackslash.attributes import Attributes
from hackslash.core import AttributeType, ResourceType, StatType
from hackslash.stat_collection import StatCollection


def make(**values):
    stats = StatCollection()
    stats.update_resources()
    return stats, Attributes(stats, **values)


def test_attributes_in_enum_order():
    _, attrs = make()
    assert [a.type for a in attrs.attributes] == list(AttributeType)
    assert attrs.attribute(AttributeType.VITALITY).name == "Vitality"
    assert attrs.attribute(AttributeType.STRENGTH).owner is attrs


def test_initial_values_drive_stats():
    stats, _ = make()
    assert stats.stat(StatType.MAX_HEALTH).value == 120.0
    assert stats.stat(StatType.MAX_MANA).value == 70.0
    assert stats.stat(StatType.DAMAGE_MULTIPLIER).value == pytest.approx(0.1)


def test_agility_sets_attack_speed():
    stats, _ = make(agility=25)
    assert stats.stat(StatType.ATTACK_SPEED).value == 25.0


def test_resources_are_full_after_init():
    stats, _ = make()
    assert stats.resource(ResourceType.HEALTH).value == stats.stat(StatType.MAX_HEALTH).value
    assert stats.resource(ResourceType.MANA).value == stats.stat(StatType.MAX_MANA).value


def test_changing_vitality_updates_max_health():
    stats, attrs = make(vitality=10)
    before = stats.stat(StatType.MAX_HEALTH).value
    attrs.attribute(AttributeType.VITALITY).set_value(20)
    assert stats.stat(StatType.MAX_HEALTH).value == 2 * before
    assert stats.resource(ResourceType.HEALTH).max_value == stats.stat(StatType.MAX_HEALTH).value


def test_health_capped_without_resource_link():
    stats = StatCollection()
    Attributes(stats, vitality=10)
    assert stats.resource(ResourceType.HEALTH).value == 100.0


def test_points_setter_notifies():
    _, attrs = make()
    seen = []
    attrs.on_points_change.connect(seen.append)
    assert attrs.points == 0
    attrs.points = 3
    assert attrs.points == 3
    assert seen == [3]