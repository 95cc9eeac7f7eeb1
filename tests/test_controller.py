import pytest

from hackslash.base_character import Montage, Vector
from hackslash.controller import PlayerController
from hackslash.core import ResourceType, StatType
from hackslash.enemy_character import EnemyCharacter
from hackslash.inventory import Inventory
from hackslash.player_character import PlayerCharacter


@pytest.fixture
def player():
    inventory = Inventory((4, 3))
    character = PlayerCharacter(Vector(), [Montage("swing", 1.0)], inventory=inventory)
    inventory.begin_play()
    return character


def test_hud_follows_character(player):
    controller = PlayerController(player)
    assert controller.hud.current_health == player.resource_value(ResourceType.HEALTH)
    assert controller.hud.current_max_mana == player.stat_value(StatType.MAX_MANA)


def test_tick_without_destination_does_nothing(player):
    controller = PlayerController(player)
    controller.tick(0.1, Vector(50.0, 0.0, 0.0))
    assert player.destination is None


def test_tick_moves_to_cursor_location(player):
    controller = PlayerController(player)
    controller.set_destination()
    target = Vector(50.0, 20.0, 0.0)
    controller.tick(0.1, target)
    assert player.destination == target


def test_abort_move(player):
    controller = PlayerController(player)
    player.move_to(Vector(5.0, 0.0, 0.0))
    controller.abort_move()
    assert player.destination is None


def test_attack_enemy_in_range(player):
    controller = PlayerController(player)
    enemy = EnemyCharacter(Vector(100.0, 0.0, 0.0))
    controller.set_destination()
    controller.tick(0.1, enemy)
    assert controller.enemy is enemy
    assert player.locked_in_animation is False
    controller.tick(0.1, None)
    assert controller.attack_ability.target_character is enemy
    assert player.locked_in_animation is True
    assert player.is_attack_in_cooldown is True


def test_far_enemy_is_queued_then_attacked(player):
    controller = PlayerController(player)
    enemy = EnemyCharacter(Vector(500.0, 0.0, 0.0))
    controller.set_destination()
    controller.tick(0.1, enemy)
    controller.tick(0.1, None)
    assert player.ability_component.queued is True
    assert player.destination is enemy
    for _ in range(3):
        player.tick(1.0)
    assert player.ability_component.queued is False
    assert player.location == enemy.location
    assert player.locked_in_animation is True


def test_unset_destination_clears_enemy(player):
    controller = PlayerController(player)
    controller.set_destination()
    controller.set_enemy(EnemyCharacter(Vector(1.0, 0.0, 0.0)))
    controller.unset_destination()
    assert controller.enemy is None
    assert controller.destination_set is False


def test_unknown_cursor_hit_raises(player):
    controller = PlayerController(player)
    controller.set_destination()
    with pytest.raises(TypeError):
        controller.tick(0.1, "nothing")


def test_toggle_character_overview(player):
    controller = PlayerController(player)
    controller.toggle_character_overview()
    overview = controller.opened_overview
    assert overview.in_viewport is True
    controller.toggle_character_overview()
    assert controller.opened_overview is None
    assert overview.playing_reverse is True
    overview.on_animation_finished.emit()
    assert overview.in_viewport is False