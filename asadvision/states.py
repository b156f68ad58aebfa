"""Game-wide states, system ordering and top-level settings."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from asadvision.camera import Vec2
from asadvision.physics import GRAVITY_ACCELERATION

GAME_NAME = "Vision of Asad"
CLEAR_COLOR = (0.0, 4.0 / 256.0, 73.0 / 256.0)
GRAVITY = Vec2(0.0, -GRAVITY_ACCELERATION)


class AppSystems(enum.Enum):
    """High-level groupings of per-frame work, run in declaration order."""

    TICK_TIMERS = enum.auto()
    RECORD_INPUT = enum.auto()
    UPDATE = enum.auto()


def system_order() -> tuple[AppSystems, ...]:
    """The order in which the system groups run each frame."""
    return tuple(AppSystems)


@dataclass(frozen=True)
class Pause:
    """Whether or not the game is paused."""

    paused: bool = False

    def allows_pausable(self) -> bool:
        """True when systems that stop during a pause may run."""
        return not self.paused


class Menu(enum.Enum):
    """Which menu is open; ``NONE`` is the starting state."""

    NONE = "none"
    MAIN = "main"
    CREDITS = "credits"
    SETTINGS = "settings"
    PAUSE = "pause"
    RESULTS = "results"