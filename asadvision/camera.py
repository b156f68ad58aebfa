"""Vector maths and the camera that follows the player."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TypeVar

CAMERA_DECAY_RATE = 2.0
FLOOR_MIN_Y = -120.0
FLOOR_MAX_Y = 160.0
FLOOR_MAX_X = 290.0
FLOOR_MIN_X = -290.0
CAMERA_SCALE = 1.5
VIEWPORT_HEIGHT = 720.0


@dataclass(frozen=True)
class Vec2:
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize_or_zero(self) -> Vec2:
        """The unit vector in this direction, or zero if it has none."""
        length = self.length()
        if length > 0 and math.isfinite(length):
            return Vec2(self.x / length, self.y / length)
        return Vec2()

    def angle_to(self, other: Vec2) -> float:
        """Signed angle in radians rotating this vector onto ``other``."""
        return math.atan2(self.x * other.y - self.y * other.x, self.dot(other))

    def rotate(self, angle: float) -> Vec2:
        """This vector rotated counter-clockwise by ``angle`` radians."""
        cos, sin = math.cos(angle), math.sin(angle)
        return Vec2(self.x * cos - self.y * sin, self.x * sin + self.y * cos)

    def extend(self, z: float) -> Vec3:
        return Vec3(self.x, self.y, z)


@dataclass(frozen=True)
class Vec3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def angle_between(self, other: Vec3) -> float:
        """Unsigned angle in radians; NaN if either vector is zero."""
        denominator = math.sqrt(self.length_squared() * other.length_squared())
        if denominator == 0:
            return math.nan
        return math.acos(max(-1.0, min(1.0, self.dot(other) / denominator)))

    def truncate(self) -> Vec2:
        return Vec2(self.x, self.y)

    def with_z(self, z: float) -> Vec3:
        return Vec3(self.x, self.y, z)


T = TypeVar("T", float, Vec2, Vec3)


def smooth_nudge(current: T, target: T, decay_rate: float, delta: float) -> T:
    """Move ``current`` towards ``target`` with frame-rate independent decay."""
    t = 1.0 - math.exp(-decay_rate * delta)
    return current + (target - current) * t


def camera_target(player: Vec3, camera_z: float) -> Vec3:
    """Where the camera wants to be: the player, kept within the floor bounds."""
    return Vec3(
        min(max(player.x, FLOOR_MIN_X), FLOOR_MAX_X),
        min(max(player.y, FLOOR_MIN_Y), FLOOR_MAX_Y),
        camera_z,
    )


def update_camera(camera: Vec3, player: Vec3 | None, delta: float) -> Vec3:
    """The camera's next position; it stays put when there is no player."""
    if player is None:
        return camera
    return smooth_nudge(camera, camera_target(player, camera.z), CAMERA_DECAY_RATE, delta)