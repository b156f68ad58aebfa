"""The boss eye's wing animation, roaming pupil and rocking ring."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from asadvision.animation import Timer, reversible_animation
from asadvision.camera import Vec2, Vec3, smooth_nudge

NUM_FRAMES = 30
FRAME_SECONDS = 0.05
PUPIL_REACH = 50.0
PUPIL_DECAY_RATE = 1.2
RING_DECAY_RATE = 0.4
RING_SWAP_THRESHOLD = 0.1


def _frame_timer() -> Timer:
    return Timer(FRAME_SECONDS, repeating=True)


@dataclass
class EyeAnimation:
    """Frame state for the wings and the rotation the ring rocks towards."""

    timer: Timer = field(default_factory=_frame_timer)
    frame: int = 0
    reverse: bool = False
    target: float = math.pi / 2.0 / 3.0

    def update_target(self) -> None:
        """Swing the ring's target to the other side."""
        self.target = -self.target

    def update_frame(self, delta: float) -> None:
        """Advance the clock and step the wing frame when it fires."""
        self.timer.tick(delta)
        if self.timer.just_finished:
            self.reverse, self.frame = reversible_animation(
                self.reverse, self.frame, NUM_FRAMES
            )


def pupil_target(player: Vec3, pupil_global: Vec3, sky_remaining: float) -> Vec3:
    """Where the pupil looks: straight up during a sky attack, else at the player."""
    if sky_remaining > 0.0:
        direction = Vec2(0.0, 1.0)
    else:
        direction = player.truncate() - pupil_global.truncate()
    return (direction.normalize_or_zero() * PUPIL_REACH).extend(1.0)


def update_pupil(
    pupil: Vec3,
    player: Vec3,
    pupil_global: Vec3,
    beam_remaining: float,
    sky_remaining: float,
    delta: float,
) -> Vec3:
    """The pupil's next local position; it is held still while a beam fires."""
    if beam_remaining > 0.0:
        return pupil
    target = pupil_target(player, pupil_global, sky_remaining)
    return smooth_nudge(pupil, target, PUPIL_DECAY_RATE, delta)


def _rotation_distance(a: float, b: float) -> float:
    # Length of the difference of two z-axis rotation quaternions.
    return 2.0 * abs(math.sin((a - b) / 4.0))


def update_ring(rotation: float, animation: EyeAnimation, delta: float) -> float:
    """The ring's next rotation; its target swaps sides once it gets close."""
    rotation = smooth_nudge(rotation, animation.target, RING_DECAY_RATE, delta)
    if _rotation_distance(rotation, animation.target) < RING_SWAP_THRESHOLD:
        animation.update_target()
    return rotation