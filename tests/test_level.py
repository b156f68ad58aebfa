import pytest

from asadvision.camera import Vec3
from asadvision.collision_layers import CollisionLayers, GameLayer
from asadvision.level import arena_platforms, platform_medium, platform_small


def test_arena_platform_names_in_order():
    names = [platform.name for platform in arena_platforms()]
    assert names == ["Platform", "Platform Left", "Platform Right", "Platform Small"]


def test_platforms_are_ground_that_touches_everything():
    for platform in arena_platforms():
        assert platform.layers.memberships == int(GameLayer.GROUND)
        assert platform.layers.interacts_with(CollisionLayers())


def test_small_platform_surface_at_translation_height():
    platform = platform_small("p", Vec3(0.0, 100.0, 5.0))
    assert platform.surface_height(0.0) == pytest.approx(100.0)
    assert platform.surface_height(150.0) == pytest.approx(100.0)
    assert platform.surface_height(151.0) is None


def test_medium_platforms_mirror_each_other():
    platforms = {p.name: p for p in arena_platforms()}
    left, right = platforms["Platform Left"], platforms["Platform Right"]
    for offset in (0.0, 100.0, 250.0):
        assert left.surface_height(-820.0 - offset) == right.surface_height(820.0 + offset)
    assert left.surface_height(-820.0) == pytest.approx(-205.0)
    assert left.surface_height(-820.0 + 251.0) is None


def test_floor_top_is_half_its_thickness_above_centre():
    floor = arena_platforms()[0]
    assert floor.surface_height(0.0) == pytest.approx(-600.0 + 50.0)
    assert floor.surface_height(750.0) == pytest.approx(-600.0 + 50.0)
    assert floor.surface_height(-760.0) is None


def test_medium_platform_uses_medium_image():
    platform = platform_medium("m", Vec3())
    assert platform.image == "images/platform_medium.png"
    assert platform.size.x == 500.0