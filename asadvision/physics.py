"""Creature physics: ground detection and horizontal damping."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from asadvision.camera import Vec2

GRAVITY_ACCELERATION = 1500.0
GROUND_CAST_DISTANCE = 10.0
CASTER_SCALE = 0.99

_UP = Vec2(0.0, 1.0)


def is_grounded(
    hit_normals: Iterable[Vec2], rotation: float, max_slope_angle: float | None
) -> bool:
    """True if any ground hit has a normal no steeper than ``max_slope_angle``."""
    for normal in hit_normals:
        if max_slope_angle is None:
            return True
        if abs((-normal).rotate(rotation).angle_to(_UP)) <= max_slope_angle:
            return True
    return False


@dataclass
class CreaturePhysics:
    """Damping and slope settings for a walking creature, plus its ground state."""

    damping: float
    max_slope_angle: float | None = None
    grounded: bool = False
    flying: bool = False

    def update_grounded(self, hit_normals: Iterable[Vec2], rotation: float) -> bool:
        """Refresh the grounded flag from the ground caster's hits; flyers are left alone."""
        if not self.flying:
            self.grounded = is_grounded(hit_normals, rotation, self.max_slope_angle)
        return self.grounded

    def apply_movement_damping(self, velocity_x: float, delta: float) -> float:
        """Horizontal velocity after damping over ``delta`` seconds."""
        if self.flying:
            return velocity_x
        return velocity_x * math.exp(-delta * self.damping)