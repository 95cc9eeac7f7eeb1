"""The character model shared by the player and enemies."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from hackslash.ability_component import AbilityComponent
from hackslash.core import Event, ResourceType, StatType
from hackslash.resource import Resource
from hackslash.stat import Stat
from hackslash.stat_collection import StatCollection

DEFAULT_ROTATION_SPEED = 650.0
_FACING_TOLERANCE = 0.001


@dataclass(frozen=True)
class Vector:
    """A point or offset in world space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> Vector:
        return Vector(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def length(self) -> float:
        return math.hypot(self.x, self.y, self.z)

    def distance(self, other: Vector) -> float:
        return (self - other).length()


@dataclass(frozen=True)
class Montage:
    """An attack animation of ``length`` seconds at normal rate."""

    name: str
    length: float


@dataclass
class _RotationState:
    target_yaw: float = 0.0
    end_when_face_target: bool = False
    speed: float = 0.0


def _normalize_axis(angle: float) -> float:
    angle = math.fmod(angle, 360.0)
    if angle > 180.0:
        angle -= 360.0
    elif angle <= -180.0:
        angle += 360.0
    return angle


def _interp_yaw_constant(current: float, target: float, delta_time: float, speed: float) -> float:
    if delta_time == 0.0 or current == target:
        return current
    if speed <= 0.0:
        return target
    step = speed * delta_time
    delta = _normalize_axis(target - current)
    return _normalize_axis(current + max(-step, min(step, delta)))


class BaseCharacter:
    """A character with stats, movement, facing and an attack cooldown."""

    def __init__(
        self,
        location: Optional[Vector] = None,
        attack_montages: Iterable[Montage] = (),
    ) -> None:
        self.location = location if location is not None else Vector()
        self.yaw = 0.0
        self.attack_montages = list(attack_montages)
        self.destination: Optional[Union[Vector, BaseCharacter]] = None
        self.max_walk_speed = 0.0
        # Incoming damage is multiplied by this.
        self.defense_multiplier = 1.0
        self.attack_cooldown = 1.0
        self.health_regen = 0.0
        self.mana_regen = 0.0
        # No other action may start while this is set.
        self.locked_in_animation = False
        self.current_montage: Optional[Montage] = None
        self.montage_rate: Optional[float] = None
        self.on_rotation_end = Event()
        self.on_attack_land = Event()
        self.ability_component = AbilityComponent()
        self._is_rotating = False
        self._rotation = _RotationState()
        self._attack_in_cooldown = False
        self._cooldown_remaining: Optional[float] = None
        self.stats = StatCollection()
        self._configure_stats()

    def _configure_stats(self) -> None:
        bindings = (
            (StatType.ARMOR, self.calculate_defense_from_armor),
            (StatType.ATTACK_SPEED, self.calculate_attack_cooldown_from_attack_speed),
            (StatType.MOVE_SPEED, self.on_move_speed_change),
            (StatType.HEALTH_REGEN, self.on_health_regen_change),
            (StatType.MANA_REGEN, self.on_mana_regen_change),
        )
        for stat_type, handler in bindings:
            stat = self.stats.stat(stat_type)
            stat.on_change.connect(handler)
            handler(stat.value)
        self.stats.update_resources()

    def stat(self, stat_type: StatType) -> Stat:
        return self.stats.stat(stat_type)

    def stat_value(self, stat_type: StatType) -> float:
        return self.stats.stat(stat_type).value

    def resource(self, resource_type: ResourceType) -> Resource:
        return self.stats.resource(resource_type)

    def resource_value(self, resource_type: ResourceType) -> float:
        return self.stats.resource(resource_type).value

    def distance_to(self, other: BaseCharacter) -> float:
        return self.location.distance(other.location)

    @property
    def is_rotating(self) -> bool:
        return self._is_rotating

    @property
    def rotation_target(self) -> float:
        """The yaw, in degrees, the character is turning towards."""
        return self._rotation.target_yaw

    @property
    def is_attack_in_cooldown(self) -> bool:
        return self._attack_in_cooldown

    def start_rotating(
        self,
        target: Vector,
        rotation_speed: float = DEFAULT_ROTATION_SPEED,
        stop_when_face_target: bool = True,
    ) -> None:
        """Turn to face ``target``; without stopping, keep facing it until stop_rotating."""
        diff = target - self.location
        yaw = math.degrees(math.atan2(diff.y, diff.x))
        self._is_rotating = True
        self._rotation = _RotationState(yaw, stop_when_face_target, rotation_speed)

    def stop_rotating(self) -> None:
        self._is_rotating = False
        self._rotation = _RotationState()
        self.on_rotation_end.emit()

    def start_attack_cooldown(self) -> None:
        self._attack_in_cooldown = True
        self._cooldown_remaining = self.attack_cooldown

    def _on_attack_cooldown_expired(self) -> None:
        self._attack_in_cooldown = False

    def play_attack_montage(self) -> None:
        """Play a random attack montage stretched to last one attack cooldown."""
        if not self.attack_montages:
            raise ValueError("character has no attack montages")
        montage = random.choice(self.attack_montages)
        self.current_montage = montage
        self.montage_rate = montage.length / self.attack_cooldown

    def can_move(self) -> bool:
        return not self.locked_in_animation

    def move_to(self, location: Vector) -> None:
        """Walk to ``location`` unless locked, cancelling any montage."""
        if self.can_move():
            self.destination = location
            self.current_montage = None
            self.montage_rate = None

    def stop_moving(self) -> None:
        self.destination = None

    def calculate_defense_from_armor(self, armor: float) -> None:
        self.defense_multiplier = 1.0 - armor * 0.01

    def calculate_attack_cooldown_from_attack_speed(self, attack_speed: float) -> None:
        self.attack_cooldown = 1.0 - attack_speed * 0.01

    def on_move_speed_change(self, move_speed: float) -> None:
        self.max_walk_speed = move_speed * 3.0

    def on_health_regen_change(self, health_regen: float) -> None:
        self.health_regen = health_regen

    def on_mana_regen_change(self, mana_regen: float) -> None:
        self.mana_regen = mana_regen

    def _tick_timers(self, delta_time: float) -> None:
        if self._cooldown_remaining is None:
            return
        self._cooldown_remaining -= delta_time
        if self._cooldown_remaining <= 0.0:
            self._cooldown_remaining = None
            self._on_attack_cooldown_expired()

    def _tick_rotation(self, delta_time: float) -> None:
        if not self._is_rotating:
            return
        state = self._rotation
        self.yaw = _interp_yaw_constant(self.yaw, state.target_yaw, delta_time, state.speed)
        facing = abs(_normalize_axis(self.yaw - state.target_yaw)) <= _FACING_TOLERANCE
        if state.end_when_face_target and facing:
            self.stop_rotating()

    def _tick_movement(self, delta_time: float) -> None:
        if self.destination is None:
            return
        goal = (
            self.destination.location
            if isinstance(self.destination, BaseCharacter)
            else self.destination
        )
        offset = goal - self.location
        remaining = offset.length()
        step = self.max_walk_speed * delta_time
        if remaining <= step:
            self.location = goal
            self.destination = None
        else:
            self.location = self.location + offset * (step / remaining)

    def tick(self, delta_time: float) -> None:
        """Advance timers, turning, walking, regeneration and queued abilities."""
        self._tick_timers(delta_time)
        self._tick_rotation(delta_time)
        self._tick_movement(delta_time)
        self.resource(ResourceType.HEALTH).change_value(self.health_regen * delta_time)
        self.resource(ResourceType.MANA).change_value(self.mana_regen * delta_time)
        self.ability_component.tick(delta_time)

    def end_play(self) -> None:
        """Cancel every pending timer."""
        self._cooldown_remaining = None