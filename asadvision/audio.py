"""Audio categories and volume handling for running sounds."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Hashable, Iterable


class AudioCategory(enum.Enum):
    MUSIC = "music"
    SOUND_EFFECT = "sound_effect"


class PlaybackMode(enum.Enum):
    ONCE = "once"
    LOOP = "loop"
    DESPAWN = "despawn"


@dataclass
class AudioPlayer:
    """A sound to play; ``sink_volume`` is set once the sound is running."""

    handle: Hashable
    mode: PlaybackMode
    category: AudioCategory
    volume: float = 1.0
    sink_volume: float | None = None


def music(handle: Hashable) -> AudioPlayer:
    """A looping music track."""
    return AudioPlayer(handle, PlaybackMode.LOOP, AudioCategory.MUSIC)


def sound_effect(handle: Hashable) -> AudioPlayer:
    """A one-shot sound effect removed when it finishes."""
    return AudioPlayer(handle, PlaybackMode.DESPAWN, AudioCategory.SOUND_EFFECT)


def apply_global_volume(global_volume: float, players: Iterable[AudioPlayer]) -> None:
    """Push a changed global volume onto every sound that is already running."""
    for player in players:
        if player.sink_volume is not None:
            player.sink_volume = global_volume * player.volume