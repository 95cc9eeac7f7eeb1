from hackslash.core import ResourceType, StatType
from hackslash.stat_collection import StatCollection


def test_all_stats_and_resources_present():
    stats = StatCollection()
    assert set(stats.stats) == set(StatType)
    assert set(stats.resources) == set(ResourceType)


def test_defaults_from_source():
    stats = StatCollection()
    assert stats.stat(StatType.ARMOR).value == 0.0
    assert stats.stat(StatType.MAX_HEALTH).value == 100.0
    assert stats.stat(StatType.MIN_DAMAGE).value == 10.0
    assert stats.stat(StatType.DAMAGE_MULTIPLIER).value == 1.0
    assert stats.stat(StatType.MOVE_SPEED).value == 100.0
    assert stats.resource(ResourceType.MANA).value == 100.0


def test_names_from_source():
    stats = StatCollection()
    assert stats.stat(StatType.ATTACK_SPEED).name == "Additional Attack Speed Percent"
    assert stats.resource(ResourceType.HEALTH).name == "Current Health"


def test_bounds_from_source():
    stats = StatCollection()
    stats.stat(StatType.ARMOR).set_value(1000.0)
    stats.stat(StatType.ATTACK_SPEED).set_value(-500.0)
    stats.stat(StatType.MOVE_SPEED).set_value(999.0)
    stats.stat(StatType.DAMAGE_MULTIPLIER).set_value(0.0)
    assert stats.stat(StatType.ARMOR).value == 85.0
    assert stats.stat(StatType.ATTACK_SPEED).value == -100.0
    assert stats.stat(StatType.MOVE_SPEED).value == 200.0
    assert stats.stat(StatType.DAMAGE_MULTIPLIER).value == 0.01


def test_resources_ignore_stats_until_updated():
    stats = StatCollection()
    stats.stat(StatType.MAX_HEALTH).set_value(50.0)
    assert stats.resource(ResourceType.HEALTH).max_value == 100.0


def test_update_resources_links_max():
    stats = StatCollection()
    stats.update_resources()
    stats.stat(StatType.MAX_HEALTH).set_value(50.0)
    health = stats.resource(ResourceType.HEALTH)
    health.set_value(1000.0)
    assert health.max_value == 50.0
    assert health.value == 50.0


def test_update_resources_fills_from_stat():
    stats = StatCollection()
    stats.stat(StatType.MAX_MANA).set_value(40.0)
    stats.update_resources()
    assert stats.resource(ResourceType.MANA).value == stats.stat(StatType.MAX_MANA).value