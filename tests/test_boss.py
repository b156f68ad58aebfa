import math

import pytest

from asadvision.boss import (
    BEAM_LASER_SCALE,
    LASER_LONG_SOUND,
    LASER_SHORT_SOUNDS,
    RAINING_LASER_SCALE,
    BossController,
    Lazer,
    tick_lazers,
)
from asadvision.camera import Vec3
from asadvision.enemy_configs import (
    BEAM_ATTACK_DURATION,
    BEAM_LAZER_DURATION,
    BOSS_TIME_BETWEEN_ATTACKS,
    POSITION_1,
    POSITION_2_X,
    SKY_ATTACK_DURATION,
    SKY_LAZER_DURATION,
    TIME_TO_REPOSITION,
    reposition_path,
)


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value

    def choice(self, seq):
        return seq[-1]


def test_lazer_expires_only_below_zero():
    lazer = Lazer(1.0)
    assert lazer.tick(0.5) is False
    assert lazer.time_remaining == pytest.approx(0.5)
    assert lazer.tick(0.6) is True


def test_lazer_at_exactly_zero_survives():
    assert Lazer(0.5).tick(0.5) is False


def test_tick_lazers_returns_expired():
    lazers = {"a": Lazer(0.1), "b": Lazer(2.0), "c": Lazer(0.05)}
    assert tick_lazers(lazers, 0.2) == ["a", "c"]
    assert lazers["b"].time_remaining == pytest.approx(1.8)


def test_far_player_triggers_sky_attack():
    boss = BossController()
    position = Vec3(0.0, 0.0, 0.0)
    new_position, spawns = boss.update(
        position, Vec3(2000.0, 0.0, 0.0), Vec3(), 0.016, _FixedRng(0.5)
    )
    assert new_position == position
    assert spawns == []
    assert boss.sky_lazer_remaining_duration == SKY_ATTACK_DURATION
    assert boss.time_until_next_attack == BOSS_TIME_BETWEEN_ATTACKS + SKY_ATTACK_DURATION


def test_close_player_triggers_beam():
    boss = BossController()
    pupil = Vec3(10.0, 20.0, 1.0)
    target = Vec3(100.0, 0.0, 0.0)
    _, spawns = boss.update(Vec3(), target, pupil, 0.016, _FixedRng(0.5))
    assert len(spawns) == 1
    beam = spawns[0]
    assert beam.with_glint is True
    assert beam.sound == LASER_LONG_SOUND
    assert beam.scale == BEAM_LASER_SCALE
    assert beam.duration == BEAM_LAZER_DURATION
    assert beam.translation == pupil.with_z(7.0)
    assert beam.direction == target - pupil
    assert beam.lazer().time_remaining == BEAM_LAZER_DURATION
    assert boss.beam_lazer_remaining_duration == BEAM_ATTACK_DURATION


def test_reposition_then_arrives_at_right_position():
    boss = BossController()
    _, spawns = boss.update(Vec3(), Vec3(10.0, 0.0, 0.0), Vec3(), 1.0, _FixedRng(0.999999999))
    assert spawns == []
    assert boss.repositioning_to_left is False
    assert boss.time_since_last_reposition_ended == -TIME_TO_REPOSITION
    assert boss.time_until_next_attack == BOSS_TIME_BETWEEN_ATTACKS + TIME_TO_REPOSITION

    end, _ = boss.update(Vec3(0.0, 0.0, 3.0), Vec3(), Vec3(), TIME_TO_REPOSITION, _FixedRng(0.5))
    assert end.x == pytest.approx(POSITION_2_X)
    assert end.y == pytest.approx(POSITION_1.y)
    assert end.z == 3.0


def test_reposition_follows_path_midway():
    boss = BossController(time_since_last_reposition_ended=-TIME_TO_REPOSITION,
                          repositioning_to_left=False)
    position, spawns = boss.update(Vec3(), Vec3(), Vec3(), 0.5, _FixedRng(0.5))
    expected = reposition_path(TIME_TO_REPOSITION - 0.5)
    assert spawns == []
    assert position.x == pytest.approx(expected.x)
    assert position.y == pytest.approx(expected.y)


def test_sky_attack_rains_lazer_above_player():
    boss = BossController(time_until_next_attack=100.0,
                          time_since_last_reposition_ended=10.0,
                          sky_lazer_remaining_duration=1.0)
    target = Vec3(123.0, 0.0, 0.0)
    _, spawns = boss.update(Vec3(), target, Vec3(), 0.15, _FixedRng(0.5))
    assert boss.eye_red is True
    assert len(spawns) == 1
    rain = spawns[0]
    assert rain.translation.x == pytest.approx(target.x)
    assert rain.translation.y == 1200.0
    assert rain.direction == Vec3(0.0, -1.0, 0.0)
    assert rain.duration == SKY_LAZER_DURATION
    assert rain.scale == RAINING_LASER_SCALE
    assert rain.with_glint is False
    assert rain.sound in LASER_SHORT_SOUNDS
    assert rain.gravity_scale == 0.8
    assert rain.rotation == pytest.approx(math.pi / 2)


def test_sky_attack_between_spawns_is_quiet():
    boss = BossController(time_until_next_attack=100.0,
                          time_since_last_reposition_ended=10.0,
                          sky_lazer_remaining_duration=1.0)
    _, spawns = boss.update(Vec3(), Vec3(), Vec3(), 0.05, _FixedRng(0.5))
    assert spawns == []
    assert boss.eye_red is True


def test_horizontal_beam_has_no_rotation():
    boss = BossController()
    _, spawns = boss.update(Vec3(), Vec3(-100.0, 0.0, 0.0), Vec3(), 0.016, _FixedRng(0.5))
    assert spawns[0].rotation == pytest.approx(0.0)