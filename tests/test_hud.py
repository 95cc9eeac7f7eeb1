import pytest

from hackslash.base_character import BaseCharacter
from hackslash.core import ResourceType, StatType
from hackslash.hud import Bar, HudWidget, red_to_green_color
from hackslash.player_character import PlayerCharacter


def _hud_for(character):
    hud = HudWidget()
    hud.set_character_to_display(character)
    return hud


def test_red_to_green_extremes():
    low = red_to_green_color(0.0)
    high = red_to_green_color(1.0)
    assert low[0] == high[1]
    assert low[1] == high[0] == 0


def test_red_to_green_midpoint_is_balanced():
    r, g, b, a = red_to_green_color(0.5)
    assert r == g
    assert b == 0
    assert a == r


@pytest.mark.parametrize("lower,upper", [(0.0, 0.3), (0.5, 0.8), (0.6, 1.0)])
def test_red_to_green_is_monotonic(lower, upper):
    a = red_to_green_color(lower)
    b = red_to_green_color(upper)
    assert a[0] >= b[0]
    assert a[1] <= b[1]


def test_red_to_green_clamps_out_of_range():
    assert red_to_green_color(-1.0) == red_to_green_color(0.0)
    assert red_to_green_color(2.0) == red_to_green_color(1.0)


def test_full_character_shows_full_bars():
    character = PlayerCharacter(vitality=10, intelligence=10)
    hud = _hud_for(character)
    health = character.resource_value(ResourceType.HEALTH)
    max_health = character.stat_value(StatType.MAX_HEALTH)
    assert hud.health_bar.percent == 1.0
    assert hud.health_bar.text == f"{int(health)} / {int(max_health)}"
    assert hud.health_bar.fill_color == red_to_green_color(1.0)
    assert hud.mana_bar.percent == 1.0


def test_health_change_updates_bar():
    character = BaseCharacter()
    hud = _hud_for(character)
    character.resource(ResourceType.HEALTH).change_value(-25.0)
    health = character.resource_value(ResourceType.HEALTH)
    max_health = character.stat_value(StatType.MAX_HEALTH)
    assert hud.current_health == health
    assert hud.health_bar.percent == pytest.approx(health / max_health)
    assert hud.health_bar.text == f"{int(health)} / {int(max_health)}"
    assert hud.health_bar.fill_color == red_to_green_color(health / max_health)


def test_max_mana_change_updates_bar():
    character = BaseCharacter()
    hud = _hud_for(character)
    character.stat(StatType.MAX_MANA).set_value(400.0)
    mana = character.resource_value(ResourceType.MANA)
    assert hud.current_max_mana == 400.0
    assert hud.mana_bar.percent == pytest.approx(mana / 400.0)
    assert hud.mana_bar.text == f"{int(mana)} / 400"


def test_caption_truncates_fractions():
    hud = HudWidget()
    hud.on_max_mana_change(50.0)
    hud.on_mana_change(10.9)
    assert hud.mana_bar.text == "10 / 50"


def test_unused_bars_stay_default():
    hud = _hud_for(BaseCharacter())
    assert hud.exp_bar == Bar()