import pytest

from difficulty import elapsed_since, next_speed_multiplier, ramp_speed, speed_step_due
from settings import DEFAULT_CONFIG, GameConfig
from world import new_world


def test_elapsed_clamps_backwards_clock():
    assert elapsed_since(500, 200) == 300
    assert elapsed_since(200, 500) == 0


def test_steps_are_capped():
    assert next_speed_multiplier(1.0, DEFAULT_CONFIG) == pytest.approx(1.2)
    assert next_speed_multiplier(2.4, DEFAULT_CONFIG) == pytest.approx(2.5)
    assert next_speed_multiplier(2.45, DEFAULT_CONFIG) == 2.5


def test_not_due_before_interval_or_at_cap():
    assert not speed_step_due(9_999, 0, 1.0, DEFAULT_CONFIG)
    assert speed_step_due(10_000, 0, 1.0, DEFAULT_CONFIG)
    assert not speed_step_due(60_000, 0, 2.5, DEFAULT_CONFIG)


def test_ramp_walks_up_to_the_cap():
    world = new_world()
    seen = [world.speed_multiplier]
    now = 0
    for _ in range(12):
        now += 10_000
        ramp_speed(world, now)
        seen.append(world.speed_multiplier)

    assert seen == sorted(seen)
    assert seen[-1] == 2.5
    assert seen[1] == pytest.approx(1.2)
    # 1.0 -> 2.4 takes 7 steps, the 8th clamps
    assert seen[8] == 2.5


def test_ramp_keeps_anchor_when_capped():
    world = new_world()
    world.speed_multiplier = 2.5
    world.last_speed_increase_at = 100

    assert not ramp_speed(world, 50_000)
    assert world.last_speed_increase_at == 100


def test_ramp_ignores_clock_going_backwards():
    world = new_world()
    world.last_speed_increase_at = 50_000

    assert not ramp_speed(world, 10_000)
    assert world.speed_multiplier == 1.0


def test_custom_interval():
    world = new_world(GameConfig(speed_increase_interval_ms=500, speed_increment=0.5))
    assert ramp_speed(world, 500)
    assert world.speed_multiplier == pytest.approx(1.5)
    assert world.last_speed_increase_at == 500
