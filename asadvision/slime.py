"""Slime enemies: their jump attacks, fall recovery and death."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Hashable, Iterable

from asadvision.camera import Vec2, Vec3
from asadvision.collision_layers import (
    CollisionLayers,
    enemy_hit_boxes,
    enemy_hurt_boxes,
)
from asadvision.enemy_configs import (
    BLACK_HEALTH,
    BLACK_JUMP_ATTACK_COOLDOWN,
    BLACK_MAX_X_VELOCITY,
    JUMP_IMPULSE,
    MAX_SLOPE_ANGLE,
    MOVEMENT_DAMPING,
    RED_HEALTH,
    RED_JUMP_ATTACK_COOLDOWN,
    RED_MAX_X_VELOCITY,
)
from asadvision.health import Health, HitBox, HurtBox
from asadvision.physics import GRAVITY_ACCELERATION, CreaturePhysics

SLIME_SCALE = 0.5
SLIME_SIZE = Vec2(4500.0 / 30.0, 3127.0 / 30.0)
MIN_INITIAL_COOLDOWN = 0.75
FALL_LIMIT_Y = -1500.0
RESPAWN_POSITION = Vec2(300.0, 300.0)
RED_DAMAGE = 15.0
BLACK_DAMAGE = 8.0
HURT_IMMUNITY = 0.5


@dataclass
class SlimeController:
    """Jump-attack state for one slime."""

    max_x_velocity: float
    jump_attack_full_cooldown: float
    jump_attack_cooldown: float
    expected_time_until_jump_hits: float = 0.0

    def decide(
        self, position: Vec3, target: Vec3, velocity: Vec2, grounded: bool, delta: float
    ) -> Vec2:
        """Count cooldowns down and return the slime's new velocity."""
        self.jump_attack_cooldown -= delta
        self.expected_time_until_jump_hits -= delta
        target_length = target.x - position.x
        target_height = min(
            target.y - position.y, 0.5 * JUMP_IMPULSE**2 / GRAVITY_ACCELERATION
        )

        if grounded and self.jump_attack_cooldown <= 0.0:
            time_til_target = (
                JUMP_IMPULSE
                + math.sqrt(JUMP_IMPULSE**2 - 2.0 * GRAVITY_ACCELERATION * target_height)
            ) / GRAVITY_ACCELERATION
            x_speed = min(abs(target_length) / time_til_target, self.max_x_velocity)
            self.jump_attack_cooldown = self.jump_attack_full_cooldown + time_til_target / 2.0
            return Vec2(math.copysign(1.0, target_length) * x_speed, velocity.y + JUMP_IMPULSE)
        if grounded and self.jump_attack_cooldown < self.jump_attack_full_cooldown:
            return Vec2(0.0, velocity.y)
        return velocity


@dataclass
class Slime:
    """A freshly spawned slime with its body, boxes and controller."""

    translation: Vec3
    is_red: bool
    controller: SlimeController
    health: Health
    hurt_box: HurtBox
    hit_box: HitBox
    physics: CreaturePhysics = field(
        default_factory=lambda: CreaturePhysics(MOVEMENT_DAMPING, MAX_SLOPE_ANGLE)
    )
    hurt_layers: CollisionLayers = field(default_factory=enemy_hurt_boxes)
    hit_layers: CollisionLayers = field(default_factory=enemy_hit_boxes)
    velocity: Vec2 = field(default_factory=Vec2)
    scale: float = SLIME_SCALE
    size: Vec2 = SLIME_SIZE


def _initial_cooldown(full_cooldown: float, rng: random.Random) -> float:
    high = full_cooldown / 2.0
    if high <= MIN_INITIAL_COOLDOWN:
        raise ValueError("jump attack cooldown too short for a random start")
    return MIN_INITIAL_COOLDOWN + rng.random() * (high - MIN_INITIAL_COOLDOWN)


def slime(translation: Vec3, is_red: bool, rng: random.Random | None = None) -> Slime:
    """Spawn a red (fast, hard-hitting) or black (tough) slime."""
    rng = rng if rng is not None else random.Random()
    if is_red:
        max_x, cooldown, hp, damage = (
            RED_MAX_X_VELOCITY,
            RED_JUMP_ATTACK_COOLDOWN,
            RED_HEALTH,
            RED_DAMAGE,
        )
    else:
        max_x, cooldown, hp, damage = (
            BLACK_MAX_X_VELOCITY,
            BLACK_JUMP_ATTACK_COOLDOWN,
            BLACK_HEALTH,
            BLACK_DAMAGE,
        )
    controller = SlimeController(max_x, cooldown, _initial_cooldown(cooldown, rng))
    return Slime(
        translation=translation,
        is_red=is_red,
        controller=controller,
        health=Health(hp),
        hurt_box=HurtBox(HURT_IMMUNITY),
        hit_box=HitBox(0.0, damage),
    )


def slime_fall_recovery(position: Vec3, velocity: Vec2) -> tuple[Vec3, Vec2]:
    """Put a slime that fell off the world back into the arena."""
    if position.y < FALL_LIMIT_Y:
        return (
            Vec3(RESPAWN_POSITION.x, RESPAWN_POSITION.y, position.z),
            Vec2(velocity.x, 0.0),
        )
    return position, velocity


def kill_everything_that_dies(
    deaths: Iterable[Hashable], killable: Iterable[Hashable]
) -> list[Hashable]:
    """The dead entities that should be removed, each once, in death order."""
    killable_set = set(killable)
    return list(dict.fromkeys(entity for entity in deaths if entity in killable_set))