"""The boss: when it repositions, how it picks attacks, and the lazers it fires."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from statistics import NormalDist
from typing import Hashable, Mapping

from asadvision.camera import Vec2, Vec3
from asadvision.collision_layers import CollisionLayers, enemy_hurt_boxes
from asadvision.enemy_configs import (
    BEAM_ATTACK_DURATION,
    BEAM_LAZER_DURATION,
    BOSS_TIME_BETWEEN_ATTACKS,
    SKY_ATTACK_DURATION,
    SKY_ATTACK_START_TIME,
    SKY_LAZER_DURATION,
    SKY_LAZER_SPAWN_FREQUENCY,
    TIME_TO_REPOSITION,
    reposition_path,
)

BEAM_LASER_SCALE = Vec3(5.0, 1.0, 1.0)
RAINING_LASER_SCALE = Vec3(1.0, 1.0, 1.0)
LAZER_SIZE = Vec2(6035.0 / 10.0, 477.0 / 10.0)
LAZER_ANCHOR_X = 5820.0 / 6035.0 - 0.5
LAZER_HURT_IMMUNITY = 0.05
LAZER_Z = 7.0

LAZER_IMAGE = "images/LASER_BEAM.png"
GLINT_IMAGE = "images/GLINT.png"
LASER_LONG_SOUND = "audio/sound_effects/player/laser_long.ogg"
LASER_SHORT_SOUNDS = (
    "audio/sound_effects/player/laser_short_1.ogg",
    "audio/sound_effects/player/laser_short_2.ogg",
)

SKY_LAZER_HEIGHT = 1200.0
SKY_LAZER_SPREAD = 200.0
SKY_LAZER_GRAVITY_SCALE = 0.8
REPOSITION_RANGE = 600.0
BEAM_RANGE = 500.0

_NEG_X = Vec3(-1.0, 0.0, 0.0)


@dataclass
class Lazer:
    """A live lazer that disappears once its time runs out."""

    time_remaining: float

    def tick(self, delta: float) -> bool:
        """Count down by ``delta`` seconds; True once the lazer has expired."""
        self.time_remaining -= delta
        return self.time_remaining < 0.0


@dataclass(frozen=True)
class LazerSpawn:
    """A lazer the boss wants spawned this frame."""

    translation: Vec3
    direction: Vec3
    duration: float
    scale: Vec3
    with_glint: bool
    sound: str
    gravity_scale: float | None = None
    body_layers: CollisionLayers | None = None
    hurt_layers: CollisionLayers = field(default_factory=enemy_hurt_boxes)

    @property
    def rotation(self) -> float:
        """The sprite's rotation about z, in radians."""
        return self.direction.angle_between(_NEG_X)

    @property
    def hurt_box_size(self) -> Vec2:
        """Width and height of the lazer's damaging rectangle."""
        return Vec2(0.95 * LAZER_SIZE.x * self.scale.x, 0.2 * LAZER_SIZE.y)

    @property
    def hurt_box_offset(self) -> Vec2:
        """Where the damaging rectangle sits relative to the lazer."""
        return Vec2(-LAZER_ANCHOR_X * 0.95 * LAZER_SIZE.x, 0.0)

    def lazer(self) -> Lazer:
        """The live lazer this spawn turns into."""
        return Lazer(self.duration)


def _lazer(
    translation: Vec3,
    direction: Vec3,
    duration: float,
    scale: Vec3,
    with_glint: bool,
    rng: random.Random,
    **extra: object,
) -> LazerSpawn:
    sound = LASER_LONG_SOUND if with_glint else rng.choice(LASER_SHORT_SOUNDS)
    return LazerSpawn(translation, direction, duration, scale, with_glint, sound, **extra)


def _sky_lazer_x(mean: float, roll: float) -> float:
    if roll <= 0.0:
        return -math.inf
    if roll >= 1.0:
        return math.inf
    return NormalDist(mean, SKY_LAZER_SPREAD).inv_cdf(roll)


@dataclass
class BossController:
    """Attack timing and repositioning state for the boss."""

    unchained: bool = False
    time_until_next_attack: float = 0.0
    time_since_last_reposition_ended: float = 0.0
    sky_lazer_remaining_duration: float = 0.0
    beam_lazer_remaining_duration: float = 0.0
    repositioning_to_left: bool = True
    eye_red: bool = False

    def update(
        self,
        position: Vec3,
        target: Vec3,
        pupil: Vec3,
        delta: float,
        rng: random.Random | None = None,
    ) -> tuple[Vec3, list[LazerSpawn]]:
        """Run one frame of decision making.

        Returns the boss's new position and the lazers to spawn.
        """
        rng = rng if rng is not None else random.Random()
        self.time_until_next_attack -= delta
        self.time_since_last_reposition_ended += delta
        self.sky_lazer_remaining_duration -= delta
        self.beam_lazer_remaining_duration -= delta
        self.eye_red = False

        if self.time_since_last_reposition_ended - delta < 0.0:
            elapsed = min(self.time_since_last_reposition_ended, 0.0)
            if self.repositioning_to_left:
                current_t = TIME_TO_REPOSITION + elapsed
            else:
                current_t = -elapsed
            point = reposition_path(current_t)
            return Vec3(point.x, point.y, position.z), []

        spawns: list[LazerSpawn] = []
        sky = self.sky_lazer_remaining_duration
        if sky > 0.0:
            self.eye_red = True
            if sky + delta < SKY_ATTACK_START_TIME and sky >= SKY_ATTACK_START_TIME:
                spawns.append(
                    _lazer(
                        pupil.with_z(LAZER_Z),
                        Vec3(0.0, 1.0, 0.0),
                        sky,
                        RAINING_LASER_SCALE,
                        False,
                        rng,
                    )
                )
            if math.fmod(sky + delta, SKY_LAZER_SPAWN_FREQUENCY) < math.fmod(
                sky, SKY_LAZER_SPAWN_FREQUENCY
            ):
                roll = rng.random()
                spawns.append(
                    _lazer(
                        Vec3(_sky_lazer_x(target.x, roll), SKY_LAZER_HEIGHT, LAZER_Z),
                        Vec3(0.0, -1.0, 0.0),
                        SKY_LAZER_DURATION,
                        RAINING_LASER_SCALE,
                        False,
                        rng,
                        gravity_scale=SKY_LAZER_GRAVITY_SCALE,
                        body_layers=CollisionLayers(0b00010, 0b00000),
                    )
                )
                return position, spawns

        roll = rng.random()
        distance_squared = (target - position).length_squared()
        ready = self.time_until_next_attack <= 0.0

        exponent = math.inf if delta == 0 else 1.0 / delta
        eagerness = 1.0 - 1.0 / (
            1.0 + math.exp(-0.7 * (self.time_since_last_reposition_ended - 15.0))
        )
        if ready and distance_squared <= REPOSITION_RANGE**2 and roll**exponent > eagerness:
            self.time_until_next_attack = BOSS_TIME_BETWEEN_ATTACKS + TIME_TO_REPOSITION
            self.time_since_last_reposition_ended = -TIME_TO_REPOSITION
            self.repositioning_to_left = not self.repositioning_to_left
            return position, spawns

        if ready and distance_squared <= BEAM_RANGE**2:
            self.time_until_next_attack = BOSS_TIME_BETWEEN_ATTACKS + BEAM_ATTACK_DURATION
            self.beam_lazer_remaining_duration = BEAM_ATTACK_DURATION
            spawns.append(
                _lazer(
                    pupil.with_z(LAZER_Z),
                    target - pupil,
                    BEAM_LAZER_DURATION,
                    BEAM_LASER_SCALE,
                    True,
                    rng,
                )
            )
            return position, spawns

        if ready:
            self.sky_lazer_remaining_duration = SKY_ATTACK_DURATION
            self.time_until_next_attack = BOSS_TIME_BETWEEN_ATTACKS + SKY_ATTACK_DURATION
        return position, spawns


def tick_lazers(lazers: Mapping[Hashable, Lazer], delta: float) -> list[Hashable]:
    """Tick every lazer and return the ones to despawn."""
    return [entity for entity, lazer in lazers.items() if lazer.tick(delta)]