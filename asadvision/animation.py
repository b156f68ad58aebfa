"""Frame timers and the ping-pong frame stepping used by sprite animations."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Timer:
    """A countdown that either finishes once or repeats forever."""

    duration: float
    repeating: bool = False
    elapsed: float = 0.0
    finished: bool = False
    times_finished_this_tick: int = 0

    def __post_init__(self) -> None:
        if self.duration < 0:
            raise ValueError("timer duration cannot be negative")

    @property
    def just_finished(self) -> bool:
        """True if the timer finished during the last tick."""
        return self.times_finished_this_tick > 0

    def tick(self, delta: float) -> Timer:
        """Advance the timer by ``delta`` seconds."""
        if delta < 0:
            raise ValueError("cannot tick a timer backwards")
        if not self.repeating and self.finished:
            self.times_finished_this_tick = 0
            return self

        self.elapsed += delta
        self.finished = self.elapsed >= self.duration
        if not self.finished:
            self.times_finished_this_tick = 0
        elif self.repeating:
            if self.duration > 0:
                self.times_finished_this_tick = int(self.elapsed // self.duration)
                self.elapsed %= self.duration
            else:
                self.times_finished_this_tick = 1
                self.elapsed = 0.0
        else:
            self.times_finished_this_tick = 1
            self.elapsed = self.duration
        return self

    def reset(self) -> None:
        """Restart the timer from zero."""
        self.elapsed = 0.0
        self.finished = False
        self.times_finished_this_tick = 0


def _frame_timer() -> Timer:
    return Timer(0.05, repeating=True)


def _fast_frame_timer() -> Timer:
    return Timer(0.025, repeating=True)


@dataclass
class Animation:
    """The shared animation clocks: a normal and a fast frame timer."""

    frame: Timer = field(default_factory=_frame_timer)
    fast_frame: Timer = field(default_factory=_fast_frame_timer)

    def tick(self, delta: float) -> None:
        """Advance both clocks by ``delta`` seconds."""
        self.frame.tick(delta)
        self.fast_frame.tick(delta)


def reversible_animation(reverse: bool, frame: int, num_frames: int) -> tuple[bool, int]:
    """Step a frame index back and forth between 0 and ``num_frames - 1``.

    Returns the new ``(reverse, frame)`` pair.
    """
    if num_frames < 1:
        raise ValueError("an animation needs at least one frame")
    last = num_frames - 1
    if reverse:
        if frame == 0:
            return False, frame
        frame -= 1
        if frame == 0:
            reverse = False
        return reverse, frame
    if frame == last:
        reverse = True
    frame += 1
    if frame == last:
        reverse = True
    return reverse, frame