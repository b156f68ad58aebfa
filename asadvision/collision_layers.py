"""Physics collision layers and the hit/hurt box layer presets."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class GameLayer(enum.IntFlag):
    """One bit per physics layer."""

    DEFAULT = 1 << 0
    PLAYER = 1 << 1
    ENEMY = 1 << 2
    GROUND = 1 << 3


ALL_LAYERS = 0xFFFF_FFFF
NO_LAYERS = 0


@dataclass(frozen=True)
class CollisionLayers:
    """Which layers an object belongs to and which layers it can touch."""

    memberships: int = int(GameLayer.DEFAULT)
    filters: int = ALL_LAYERS

    def __post_init__(self) -> None:
        object.__setattr__(self, "memberships", int(self.memberships))
        object.__setattr__(self, "filters", int(self.filters))

    def interacts_with(self, other: CollisionLayers) -> bool:
        """True if both objects accept each other's memberships."""
        return bool(self.memberships & other.filters) and bool(
            other.memberships & self.filters
        )


def player_hit_boxes() -> CollisionLayers:
    return CollisionLayers(GameLayer.PLAYER, GameLayer.ENEMY)


def enemy_hit_boxes() -> CollisionLayers:
    return CollisionLayers(GameLayer.ENEMY, GameLayer.PLAYER)


def enemy_hurt_boxes() -> CollisionLayers:
    return CollisionLayers(GameLayer.ENEMY, GameLayer.PLAYER)


def player_hurt_boxes() -> CollisionLayers:
    return CollisionLayers(GameLayer.PLAYER, GameLayer.ENEMY)