"""The arena: its platforms and scenery assets."""

from __future__ import annotations

from dataclasses import dataclass, field

from asadvision.camera import Vec2, Vec3
from asadvision.collision_layers import ALL_LAYERS, CollisionLayers, GameLayer

LEVEL_ASSETS = {
    "background": "images/background.png",
    "fog": "images/fog.png",
    "light": "images/light.png",
    "platform_long": "images/platform_long.png",
    "platform_medium": "images/platform_medium.png",
    "platform_short": "images/platform_short.png",
    "music": "audio/music/boss.ogg",
    "dialogue": "images/ui/dialogue_box.png",
}


def _ground_layers() -> CollisionLayers:
    return CollisionLayers(GameLayer.GROUND, ALL_LAYERS)


@dataclass(frozen=True)
class Platform:
    """A static platform; ``shape`` is its collider outline relative to ``translation``."""

    name: str
    translation: Vec3
    image: str
    size: Vec2
    anchor: Vec2
    shape: tuple[Vec2, ...]
    layers: CollisionLayers = field(default_factory=_ground_layers)

    def surface_height(self, x: float) -> float | None:
        """World height of the platform's top at world ``x``, or None past its ends."""
        local_x = x - self.translation.x
        best: float | None = None
        for start, end in zip(self.shape, self.shape[1:] + self.shape[:1]):
            low, high = sorted((start.x, end.x))
            if not low <= local_x <= high:
                continue
            if start.x == end.x:
                y = max(start.y, end.y)
            else:
                t = (local_x - start.x) / (end.x - start.x)
                y = start.y + (end.y - start.y) * t
            best = y if best is None else max(best, y)
        return None if best is None else best + self.translation.y


def _rectangle(width: float, height: float) -> tuple[Vec2, ...]:
    w, h = width / 2.0, height / 2.0
    return (Vec2(-w, -h), Vec2(w, -h), Vec2(w, h), Vec2(-w, h))


def platform_small(name: str, translation: Vec3) -> Platform:
    """A short wedge-shaped platform."""
    return Platform(
        name=name,
        translation=translation,
        image=LEVEL_ASSETS["platform_short"],
        size=Vec2(300.0, 500.0),
        anchor=Vec2(0.0, 0.50),
        shape=(Vec2(-150.0, 0.0), Vec2(150.0, 0.0), Vec2(0.0, -120.0)),
    )


def platform_medium(name: str, translation: Vec3) -> Platform:
    """A medium wedge-shaped platform."""
    return Platform(
        name=name,
        translation=translation,
        image=LEVEL_ASSETS["platform_medium"],
        size=Vec2(500.0, 500.0),
        anchor=Vec2(0.0, 0.51),
        shape=(Vec2(-250.0, 0.0), Vec2(250.0, 0.0), Vec2(0.0, -130.0)),
    )


def arena_platforms() -> list[Platform]:
    """Every platform in the arena: the long floor and three floating ones."""
    floor = Platform(
        name="Platform",
        translation=Vec3(0.0, -600.0, 5.0),
        image=LEVEL_ASSETS["platform_long"],
        size=Vec2(1500.0, 500.0),
        anchor=Vec2(0.0, 0.35),
        shape=_rectangle(1500.0, 100.0),
    )
    return [
        floor,
        platform_medium("Platform Left", Vec3(-820.0, -205.0, 5.0)),
        platform_medium("Platform Right", Vec3(820.0, -205.0, 5.0)),
        platform_small("Platform Small", Vec3(0.0, 100.0, 5.0)),
    ]