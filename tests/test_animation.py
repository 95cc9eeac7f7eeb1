from hackslash.animation import AttackLandNotify
from hackslash.base_character import BaseCharacter, Vector


def test_notify_unlocks_and_announces():
    character = BaseCharacter(Vector())
    character.locked_in_animation = True
    landed = []
    character.on_attack_land.connect(lambda: landed.append(True))

    assert AttackLandNotify().notify(character) is True
    assert character.locked_in_animation is False
    assert landed == [True]


def test_notify_ignores_non_characters():
    assert AttackLandNotify().notify(object()) is False


def test_notify_lets_character_move_again():
    character = BaseCharacter(Vector())
    character.locked_in_animation = True
    assert character.can_move() is False
    AttackLandNotify().notify(character)
    assert character.can_move() is True