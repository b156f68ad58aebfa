"""Tuning values for the enemies and the boss's repositioning arc."""

from __future__ import annotations

import math

from asadvision.camera import Vec2

JUMP_IMPULSE = 1100.0
MOVEMENT_DAMPING = 0.0
MAX_SLOPE_ANGLE = math.radians(30.0)
BOSS_HEALTH = 5000.0
BOSS_TIME_BETWEEN_ATTACKS = 3.0
TIME_TO_REPOSITION = 3.5
POSITION_1 = Vec2(-1050.0, 175.0)
POSITION_2_X = -POSITION_1.x
MAX_REPOSITIONING_Y = 800.0
SKY_LAZER_DURATION = 2.0
SKY_LAZER_SPAWN_FREQUENCY = 0.3
SKY_ATTACK_DURATION = 5.0
SKY_ATTACK_START_TIME = 0.25
BEAM_LAZER_DURATION = 1.65
BEAM_ATTACK_DURATION = BEAM_LAZER_DURATION + 0.35

RED_HEALTH = 25.0
RED_JUMP_ATTACK_COOLDOWN = 2.0
RED_MAX_X_VELOCITY = 325.0
BLACK_HEALTH = 40.0
BLACK_JUMP_ATTACK_COOLDOWN = 3.5
BLACK_MAX_X_VELOCITY = 250.0


def reposition_path(t: float) -> Vec2:
    """The boss's position ``t`` seconds into a move from the right spot to the left.

    The path is an elliptical arc peaking at ``MAX_REPOSITIONING_Y``.
    """
    a = math.sqrt(2.0) * (POSITION_2_X - POSITION_1.x) / 2.0
    b = (MAX_REPOSITIONING_Y - POSITION_1.y) / (1.0 + 1.0 / math.sqrt(2.0))
    x_trans = (POSITION_2_X + POSITION_1.x) / 2.0
    y_trans = MAX_REPOSITIONING_Y - b
    progress = t / TIME_TO_REPOSITION
    angle = math.pi / 4.0 * (-(1.0 - progress) + 5.0 * progress)
    return Vec2(a * math.cos(angle) + x_trans, b * math.sin(angle) + y_trans)